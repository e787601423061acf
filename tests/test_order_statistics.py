from utils.data_structures.bst_node import BSTNode
from utils.data_structures.order_statistics import flatten_in_order, kth_smallest


def test_flatten_in_order_of_subtree(sample_tree) -> None:
    """
    Test that flattening a subtree yields only that subtree's values, ascending.
    """
    result = []
    # Z's subtree holds N, O, Q, X and Z
    flatten_in_order(sample_tree.root.right, result)
    assert result == ["N", "O", "Q", "X", "Z"]


def test_flatten_in_order_appends_to_existing_list() -> None:
    """
    Test that values are appended after whatever the list already holds.
    """
    result = ["start"]
    flatten_in_order(BSTNode(2, left=BSTNode(1), right=BSTNode(3)), result)
    assert result == ["start", 1, 2, 3]


def test_flatten_in_order_of_none() -> None:
    """
    Test that an absent subtree adds nothing.
    """
    result = []
    flatten_in_order(None, result)
    assert result == []


def test_kth_smallest_within_subtree(sample_tree) -> None:
    """
    Test that ranks are counted within the given subtree, not the whole tree.
    """
    right_subtree = sample_tree.root.right
    assert kth_smallest(right_subtree, 0) == "N"
    assert kth_smallest(right_subtree, 4) == "Z"
    assert kth_smallest(right_subtree, 5) is None


def test_kth_smallest_out_of_range() -> None:
    """
    Test that negative ranks, too-large ranks and empty subtrees give None.
    """
    node = BSTNode(1)
    assert kth_smallest(node, -1) is None
    assert kth_smallest(node, 1) is None
    assert kth_smallest(None, 0) is None
    assert kth_smallest(node, 0) == 1

"""
order_statistics.py

Rank-based queries over a binary search tree. The in-order flattening defined here
(left subtree, node, right subtree) is what "ascending rank" means for both the
k-th smallest query and the rebalancer.
"""
from typing import Any, List, Optional

from utils.data_structures.bst_node import BSTNode


def flatten_in_order(node: Optional[BSTNode], result: List[Any]) -> None:
    """
    Append the values of a subtree to result in in-order sequence.

    Args:
        node (Optional[BSTNode]): Root of the subtree to flatten.
        result (List[Any]): The list that receives the values.
    """
    stack: List[BSTNode] = []
    current_node = node
    while stack or current_node is not None:
        # Walk down the left spine, deferring each node until its left subtree is done
        while current_node is not None:
            stack.append(current_node)
            current_node = current_node.left
        current_node = stack.pop()
        result.append(current_node.value)
        current_node = current_node.right


def kth_smallest(node: Optional[BSTNode], k: int) -> Optional[Any]:
    """
    Return the value at 0-based ascending rank k within a subtree.

    Args:
        node (Optional[BSTNode]): Root of the subtree.
        k (int): The rank to look up.

    Returns:
        Optional[Any]: The value at rank k, or None if the subtree is empty or k is out of range.
    """
    if node is None or k < 0:
        return None
    if k > node.size() - 1:
        return None

    values: List[Any] = []
    flatten_in_order(node, values)
    return values[k]

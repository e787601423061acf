"""
rebalancer.py

Rebuilds a binary search tree so that the root of every subtree is the median (by
in-order rank) of that subtree's values. The new shape is produced with ordinary
insertion, so it satisfies the BST property whenever insertion does.
"""
from utils.data_structures.bst_node import BSTNode
from utils.data_structures.order_statistics import kth_smallest


def rebalance(old_root: BSTNode) -> BSTNode:
    """
    Re-root a subtree at its median value and recursively rebalance both halves.

    The value at rank size // 2 becomes the new root; every other value of the old
    subtree is re-inserted beneath it, then the left and right children are rebalanced
    the same way.

    Args:
        old_root (BSTNode): Root of the subtree to rebalance.

    Returns:
        BSTNode: Root of the rebalanced subtree.
    """
    # A single node is already balanced
    if old_root.is_leaf():
        return old_root

    median = kth_smallest(old_root, old_root.size() // 2)
    new_root = BSTNode(median)
    old_root.put_self_in_tree(new_root)

    if new_root.left is not None:
        new_root.left = rebalance(new_root.left)
    if new_root.right is not None:
        new_root.right = rebalance(new_root.right)
    return new_root

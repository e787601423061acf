"""
tree_queries.py

Structural queries over a binary search tree that do not rely on the ordering of
its values, only on its shape.

Key Functions:

- reaches(node, target) -> bool:
  Scans a whole subtree for a value by equality. No comparison-based pruning is done,
  so the scan also works on trees that violate the BST property.

- lowest_common_ancestor(root, a, b) -> Optional[Any]:
  Breadth-first descent from the root. Every dequeued node that reaches both values
  becomes the current candidate and its children are enqueued; the last candidate
  recorded is the deepest common ancestor.

- deepest_rightmost_leaf(root) -> Optional[Any]:
  Depth-first search visiting right children before left children. The result only
  changes when a leaf is found strictly deeper than the best so far, so the first leaf
  found at the maximum depth (the rightmost one) wins.

- level_of(root, value) -> int:
  1-based depth of the node holding value, found by an unpruned left-first scan.

- values_at_level(root, level) -> List[Any]:
  Values of all nodes at a given 1-based depth, from left to right.
"""
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from config.tree_config import get_logger
from utils.data_structures.bst_node import BSTNode

logger = get_logger(__name__)


def reaches(node: Optional[BSTNode], target: Any) -> bool:
    """
    Check whether target is stored anywhere in the subtree rooted at node.

    Args:
        node (Optional[BSTNode]): Root of the subtree to scan.
        target (Any): The value to look for.

    Returns:
        bool: True if some node in the subtree holds a value equal to target.
    """
    if node is None:
        return False

    stack: List[BSTNode] = [node]
    while stack:
        current_node = stack.pop()
        if current_node.value == target:
            return True
        stack.extend(current_node.children())
    return False


def lowest_common_ancestor(root: Optional[BSTNode], a: Any, b: Any) -> Optional[Any]:
    """
    Find the value of the deepest node whose subtree contains both a and b.

    Args:
        root (Optional[BSTNode]): Root of the tree.
        a (Any): First value.
        b (Any): Second value.

    Returns:
        Optional[Any]: The common ancestor's value, or None if the tree is empty or is missing
        either value.
    """
    if root is None:
        return None
    # Both values must be present; each is looked up independently
    if not root.contains(a) or not root.contains(b):
        logger.debug(f"Common ancestor of {a!r} and {b!r} requested but at least one is missing.")
        return None

    # Initialize the BFS queue with the root, which reaches both values
    queue: Deque[BSTNode] = deque([root])
    ancestor = root

    while queue:
        node = queue.popleft()
        if reaches(node, a) and reaches(node, b):
            # Deeper candidate found: narrow the search to its children
            ancestor = node
            for child in (node.left, node.right):
                if child is not None:
                    queue.append(child)

    logger.debug(f"Common ancestor of {a!r} and {b!r} is {ancestor.value!r}.")
    return ancestor.value


def deepest_rightmost_leaf(root: Optional[BSTNode]) -> Optional[Any]:
    """
    Among the leaves farthest from the root, return the value of the rightmost one.

    Args:
        root (Optional[BSTNode]): Root of the tree.

    Returns:
        Optional[Any]: The leaf's value, or None for an empty tree.
    """
    if root is None:
        return None

    best_level, best_value = 0, root.value
    # Depth-first, right child popped before left; the root is at level 0
    stack: List[Tuple[BSTNode, int]] = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            # Strictly deeper only, so an earlier (more rightward) leaf at equal depth is kept
            if level > best_level:
                best_level, best_value = level, node.value
            continue
        if node.left is not None:
            stack.append((node.left, level + 1))
        if node.right is not None:
            stack.append((node.right, level + 1))
    return best_value


def _left_first(root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
    """
    Yield (node, 1-based level) pairs in pre-order, left subtree before right.
    """
    stack: List[Tuple[BSTNode, int]] = [(root, 1)] if root is not None else []
    while stack:
        node, level = stack.pop()
        yield node, level
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))


def level_of(node: Optional[BSTNode], value: Any) -> int:
    """
    Return the 1-based depth of the node holding value.

    Args:
        node (Optional[BSTNode]): Root of the subtree to scan.
        value (Any): The value to look for.

    Returns:
        int: The depth of the matching node, or 0 if the value is not in the subtree.
    """
    for current_node, level in _left_first(node):
        if current_node.value == value:
            return level
    return 0


def values_at_level(root: Optional[BSTNode], level: int) -> List[Any]:
    """
    Collect the values of all nodes at a given depth, from left to right.

    Args:
        root (Optional[BSTNode]): Root of the tree.
        level (int): 1-based depth to collect, where the root is level 1.

    Returns:
        List[Any]: The values found at that depth (empty if the tree is shallower).
    """
    return [node.value for node, node_level in _left_first(root) if node_level == level]

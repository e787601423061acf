"""
binary_search_tree.py

This module provides the BinarySearchTree class, an unbalanced binary search tree over
any values that support comparison with `<` and `==`.

Key Classes and Functionality:

1. BinarySearchTree:
   - Owns the root BSTNode (None for an empty tree) and exposes the public API.
   - Handles the empty-tree cases itself and delegates everything else to the root node,
     which recurses into its children.
   - Duplicate values are ignored: adding a value equal to a stored one is a no-op.

Key Methods:

- add / contains / delete: insertion, membership and successor-splice deletion.
- size / depth / is_empty / is_valid: structural queries, all total on an empty tree.
- to_ordered_list / kth_smallest: in-order snapshot and order statistics.
- lowest_common_ancestor / deepest_rightmost_leaf / get_level: shape queries.
- balance: rebuilds the tree so every subtree is rooted at its median value.
- print_tree / print_level / render / str(): text output.

Notes on Error Handling:
- Range queries never raise; an out-of-range rank gives None.
- InvalidArgumentError is reserved for misuse such as a level index below 1 or a None value.
"""
import operator
import sys
from typing import Any, Iterator, List, Optional, TextIO

from config.tree_config import get_logger
from utils.data_structures.bst_node import BSTNode
from utils.data_structures.order_statistics import flatten_in_order, kth_smallest
from utils.data_structures.rebalancer import rebalance
from utils.data_structures.tree_queries import (
    deepest_rightmost_leaf,
    level_of,
    lowest_common_ancestor,
    values_at_level,
)
from utils.data_structures.tree_renderer import render_sideways, to_parenthesized
from utils.exceptions import InvalidArgumentError

logger = get_logger(__name__)


def _require_int(argument_name: str, argument_value: Any) -> int:
    """
    Return argument_value as an int, accepting any integer-like type (one that defines
    __index__) except bool.

    Raises:
        InvalidArgumentError: If argument_value is not integer-like.
    """
    try:
        if isinstance(argument_value, bool):
            raise TypeError("bool is not accepted as an integer")
        return operator.index(argument_value)
    except TypeError as e:
        logger.error(f"{argument_name} must be an integer, got {argument_value!r}.")
        raise InvalidArgumentError(argument_name, argument_value, "must be an integer") from e


class BinarySearchTree:
    """
    A binary search tree that stores distinct, mutually comparable values.
    For each node n, all nodes to the left hold values less than n.value and all nodes
    to the right hold values greater than n.value.
    """

    def __init__(self):
        """
        Initialize an empty binary search tree.
        """
        # The root of the tree, None while the tree is empty
        self.root: Optional[BSTNode] = None

    @classmethod
    def from_root(cls, root: Optional[BSTNode]) -> "BinarySearchTree":
        """
        Wrap an existing node structure in a tree without checking it.

        Args:
            root (Optional[BSTNode]): The node to use as root.

        Returns:
            BinarySearchTree: A tree owning root. Use is_valid() to check the structure.
        """
        tree = cls()
        tree.root = root
        return tree

    # ---------------- Mutations ----------------

    def add(self, value: Any) -> None:
        """
        Insert a value into the tree if no equal value is already stored.

        Args:
            value (Any): The value to be inserted.

        Raises:
            InvalidArgumentError: If value is None.
            TypeError: If value cannot be compared with the values already stored.
        """
        if value is None:
            logger.error("Attempted to add None to the tree.")
            raise InvalidArgumentError("value", value, "None cannot be stored")

        # If the tree is empty, the new value becomes the root
        if self.root is None:
            self.root = BSTNode(value)
            logger.debug(f"Value {value!r} added as root.")
            return

        try:
            added = self.root.add(value)
        except TypeError as e:
            logger.error(f"Value {value!r} is not comparable with the stored values: {e}")
            raise

        if added:
            logger.debug(f"Value {value!r} added.")
        else:
            logger.debug(f"Value {value!r} already present; ignored.")

    def delete(self, value: Any) -> None:
        """
        Remove the value from the tree if it is present.

        Args:
            value (Any): The value to remove.
        """
        if self.root is None or value is None:
            return
        self.root = self.root.delete(value)
        logger.debug(f"Delete of {value!r} processed.")

    def balance(self) -> None:
        """
        Restructure the tree so the root of every subtree is that subtree's median value.
        The set of stored values does not change.
        """
        if self.root is None:
            return
        self.root = rebalance(self.root)
        logger.debug(f"Tree balanced: size {self.size()}, depth {self.depth()}.")

    # ---------------- Queries ----------------

    def contains(self, value: Any) -> bool:
        """
        Check whether an equal value is stored in the tree.

        Args:
            value (Any): The value to search for.

        Returns:
            bool: True if the value is present, False otherwise.
        """
        if self.root is None or value is None:
            return False
        return self.root.contains(value)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def size(self) -> int:
        """
        Return the number of values in the tree, counted in O(n) time.

        Returns:
            int: The number of nodes in the tree.
        """
        if self.root is None:
            return 0
        return self.root.size()

    def __len__(self) -> int:
        return self.size()

    def depth(self) -> int:
        """
        Return the height of the tree.

        Returns:
            int: Number of nodes on the longest root-to-leaf path (0 for an empty tree).
        """
        if self.root is None:
            return 0
        return self.root.depth()

    def is_empty(self) -> bool:
        """
        Check whether the tree holds no values.

        Returns:
            bool: True if the tree is empty.
        """
        return self.root is None

    def is_valid(self) -> bool:
        """
        Check that every node's left subtree holds only smaller values and its right subtree
        only larger values, across the whole tree.

        Returns:
            bool: True if the BST property holds (always True for an empty tree).
        """
        if self.root is None:
            return True
        return self.root.is_valid()

    def find_min(self) -> Optional[Any]:
        """
        Find the minimum value in the tree.

        Returns:
            Optional[Any]: The minimum value, or None if the tree is empty.
        """
        if self.root is None:
            return None

        # The leftmost node holds the minimum value
        current_node = self.root
        while current_node.left is not None:
            current_node = current_node.left
        return current_node.value

    def find_max(self) -> Optional[Any]:
        """
        Find the maximum value in the tree.

        Returns:
            Optional[Any]: The maximum value, or None if the tree is empty.
        """
        if self.root is None:
            return None

        # The rightmost node holds the maximum value
        current_node = self.root
        while current_node.right is not None:
            current_node = current_node.right
        return current_node.value

    # ---------------- Traversals and order statistics ----------------

    def in_order_traversal(self) -> List[Any]:
        """
        Perform in-order traversal of the tree and return the values in a list.

        Returns:
            List[Any]: The stored values in ascending order.
        """
        result: List[Any] = []
        flatten_in_order(self.root, result)
        return result

    def to_ordered_list(self) -> List[Any]:
        """
        Return a snapshot of the stored values in ascending order.

        Returns:
            List[Any]: The in-order sequence of values.
        """
        return self.in_order_traversal()

    def __iter__(self) -> Iterator[Any]:
        # Iterate over a snapshot so mutations during iteration do not affect it
        return iter(self.in_order_traversal())

    def pre_order_traversal(self) -> List[Any]:
        """
        Perform pre-order traversal of the tree and return the values in a list.

        Returns:
            List[Any]: The values in node, left, right order.
        """
        result: List[Any] = []
        stack: List[BSTNode] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            # Right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order_traversal(self) -> List[Any]:
        """
        Perform post-order traversal of the tree and return the values in a list.

        Returns:
            List[Any]: The values in left, right, node order.
        """
        # Collect node, right, left order, which reversed is left, right, node
        result: List[Any] = []
        stack: List[BSTNode] = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            stack.extend(node.children())
        result.reverse()
        return result

    def kth_smallest(self, k: int) -> Optional[Any]:
        """
        Return the value at 0-based ascending rank k. The leftmost node has rank 0 and the
        rightmost node has rank size() - 1.

        Args:
            k (int): The rank to look up.

        Returns:
            Optional[Any]: The value, or None if k is negative or not less than size().

        Raises:
            InvalidArgumentError: If k is not an integer.
        """
        k = _require_int("k", k)
        return kth_smallest(self.root, k)

    # ---------------- Shape queries ----------------

    def lowest_common_ancestor(self, a: Any, b: Any) -> Optional[Any]:
        """
        Return the value of the deepest node that can reach both a and b.

        Args:
            a (Any): First value.
            b (Any): Second value.

        Returns:
            Optional[Any]: The ancestor's value, or None if the tree does not contain both values.
        """
        if a is None or b is None:
            return None
        return lowest_common_ancestor(self.root, a, b)

    def deepest_rightmost_leaf(self) -> Optional[Any]:
        """
        Among all nodes farthest from the root, return the value of the rightmost one.

        Returns:
            Optional[Any]: The leaf's value, or None if the tree is empty.
        """
        return deepest_rightmost_leaf(self.root)

    def get_level(self, value: Any) -> int:
        """
        Return the 1-based depth of the node holding value.

        Args:
            value (Any): The value to look for.

        Returns:
            int: The node's depth (1 for the root), or 0 if the value is not stored.
        """
        return level_of(self.root, value)

    # ---------------- Output ----------------

    def print_level(self, n: int, stream: Optional[TextIO] = None) -> None:
        """
        Print the values of all nodes at depth n, from left to right.

        Args:
            n (int): 1-based depth to print; the root is on level 1.
            stream (Optional[TextIO]): Where to write. Defaults to standard output.

        Raises:
            InvalidArgumentError: If n is not an integer or is less than 1.
        """
        n = _require_int("n", n)
        if n < 1:
            logger.error(f"print_level called with level {n}; levels start at 1.")
            raise InvalidArgumentError("n", n, "level must be at least 1")

        stream = stream if stream is not None else sys.stdout
        print(f"The data of nodes on level {n}", file=stream)
        for value in values_at_level(self.root, n):
            print(value, file=stream)

    def render(self) -> str:
        """
        Return a sideways drawing of the tree (rotate your head 90 degrees left to read it).

        Returns:
            str: One line per node, or an empty string for an empty tree.
        """
        return "\n".join(render_sideways(self.root))

    def print_tree(self, stream: Optional[TextIO] = None) -> None:
        """
        Print the sideways drawing of the tree. Nothing is printed for an empty tree.

        Args:
            stream (Optional[TextIO]): Where to write. Defaults to standard output.
        """
        if self.root is None:
            return
        print(self.render(), file=stream if stream is not None else sys.stdout)

    def __str__(self) -> str:
        return to_parenthesized(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={self.size()})"

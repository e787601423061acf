from typing import Any, List, Optional, Tuple


class BSTNode:
    """
    A class to represent a node in the binary search tree.

    Every value in the left subtree compares strictly less than this node's value and
    every value in the right subtree compares strictly greater. A node exclusively owns
    its children; there are no parent references.

    Attributes:
        value (Any): The value/data stored in the node.
        left (Optional[BSTNode]): The left child of the node.
        right (Optional[BSTNode]): The right child of the node.
    """

    def __init__(self, value: Any, left: Optional["BSTNode"] = None, right: Optional["BSTNode"] = None):
        """
        Initialize a BSTNode with a given value and optional children.

        Args:
            value (Any): The value/data stored in the node.
            left (Optional[BSTNode]): Left subtree, used when building a structure by hand.
            right (Optional[BSTNode]): Right subtree, used when building a structure by hand.
        """
        # The value of the current node
        self.value = value
        # Left child node, None when absent
        self.left: Optional[BSTNode] = left
        # Right child node, None when absent
        self.right: Optional[BSTNode] = right

    def __repr__(self) -> str:
        return f"BSTNode({self.value!r})"

    def is_leaf(self) -> bool:
        """
        Check whether the node has no children.

        Returns:
            bool: True if both children are absent.
        """
        return self.left is None and self.right is None

    def add(self, value: Any) -> bool:
        """
        Insert a value into the subtree rooted at this node.

        Args:
            value (Any): The value to be inserted.

        Returns:
            bool: True if a new node was created, False if an equal value was already present.
        """
        current_node = self
        while True:
            # An equal value is already stored, so there is nothing to insert
            if value == current_node.value:
                return False

            # If the value is less than the current node's value, go left
            if value < current_node.value:
                if current_node.left is None:
                    current_node.left = BSTNode(value)
                    return True
                current_node = current_node.left
            # Otherwise the value is greater, so go right
            else:
                if current_node.right is None:
                    current_node.right = BSTNode(value)
                    return True
                current_node = current_node.right

    def contains(self, value: Any) -> bool:
        """
        Check whether a value is stored in the subtree rooted at this node.

        Args:
            value (Any): The value to search for.

        Returns:
            bool: True if an equal value is found, False otherwise.
        """
        current_node: Optional[BSTNode] = self
        while current_node is not None:
            if value == current_node.value:
                return True
            # Follow the same left/right descent used for insertion
            current_node = current_node.left if value < current_node.value else current_node.right
        return False

    def delete(self, value: Any) -> Optional["BSTNode"]:
        """
        Delete the node holding value from the subtree rooted at this node, if present.

        The caller must rebind its link to the returned node, since removing this node can
        change the root of the subtree.

        Args:
            value (Any): The value to remove.

        Returns:
            Optional[BSTNode]: The new root of this subtree (None if the subtree became empty).
        """
        # Descend to the matching node, remembering the link that points at it
        parent: Optional[BSTNode] = None
        current_node: Optional[BSTNode] = self
        while current_node is not None and value != current_node.value:
            parent = current_node
            current_node = current_node.left if value < current_node.value else current_node.right

        # The value is not stored: the subtree is unchanged
        if current_node is None:
            return self

        replacement = current_node.delete_node()
        if parent is None:
            return replacement
        if parent.left is current_node:
            parent.left = replacement
        else:
            parent.right = replacement
        return self

    def delete_node(self) -> Optional["BSTNode"]:
        """
        Remove this node from its subtree using the in-order successor splice.

        With at most one child, that child replaces the node. With two children, the
        leftmost node of the right subtree is unlinked (its right child takes its place)
        and its value is copied into this node.

        Returns:
            Optional[BSTNode]: The new root of this subtree (None if this node was a leaf).
        """
        # Zero or one child: the remaining child (or None) takes this node's place
        if self.left is None:
            return self.right
        if self.right is None:
            return self.left

        successor = self.right
        if successor.left is None:
            # The right child is already the smallest value of the right subtree
            self.right = successor.right
        else:
            # Walk to the leftmost node of the right subtree, keeping track of its parent
            successor_parent = successor
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            # Splice the successor out; its right child fills the gap
            successor_parent.left = successor.right

        # Replace this node's value with the successor's value
        self.value = successor.value
        return self

    def children(self) -> List["BSTNode"]:
        """
        Return the present children of this node, left first.

        Returns:
            List[BSTNode]: Zero, one or two child nodes.
        """
        return [child for child in (self.left, self.right) if child is not None]

    def size(self) -> int:
        """
        Count the nodes of the subtree rooted at this node.

        Returns:
            int: The number of nodes, including this one.
        """
        total = 0
        stack: List[BSTNode] = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children())
        return total

    def depth(self) -> int:
        """
        Compute the height of the subtree rooted at this node.

        Returns:
            int: Number of nodes on the longest path from this node down to a leaf (1 for a leaf).
        """
        deepest = 0
        # Each entry pairs a node with its 1-based level below this node
        stack: List[Tuple[BSTNode, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in node.children():
                stack.append((child, level + 1))
        return deepest

    def is_valid(self, lower: Optional[Any] = None, upper: Optional[Any] = None) -> bool:
        """
        Check the BST property for the subtree rooted at this node.

        Every node is checked against an open interval narrowed by all of its ancestors,
        not only its parent.

        Args:
            lower (Optional[Any]): Exclusive lower bound, None when unbounded.
            upper (Optional[Any]): Exclusive upper bound, None when unbounded.

        Returns:
            bool: True if every value lies strictly inside its bounds.
        """
        stack: List[Tuple[BSTNode, Optional[Any], Optional[Any]]] = [(self, lower, upper)]
        while stack:
            node, node_lower, node_upper = stack.pop()
            # Value is less than or equal to the lower bound: too small
            if node_lower is not None and not node_lower < node.value:
                return False
            # Value is greater than or equal to the upper bound: too big
            if node_upper is not None and not node.value < node_upper:
                return False

            # Descending left narrows the upper bound, descending right narrows the lower bound
            if node.left is not None:
                stack.append((node.left, node_lower, node.value))
            if node.right is not None:
                stack.append((node.right, node.value, node_upper))
        return True

    def put_self_in_tree(self, target: "BSTNode") -> None:
        """
        Insert every value of the subtree rooted at this node into another subtree.

        Values are visited in pre-order (node, left, right). Values already present in
        target (such as its own root value) are skipped by the normal insertion rules.

        Args:
            target (BSTNode): Root of the subtree that receives the values.
        """
        stack: List[BSTNode] = [self]
        while stack:
            node = stack.pop()
            target.add(node.value)
            # Right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

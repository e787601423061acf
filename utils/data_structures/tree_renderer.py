"""
tree_renderer.py

Human-readable text forms of a binary search tree.
"""
from typing import List, Optional, Tuple, Union

from utils.data_structures.bst_node import BSTNode

# Spaces of indentation per level in the sideways dump
INDENT_WIDTH = 2


def render_sideways(node: Optional[BSTNode], indent: int = 0) -> List[str]:
    """
    Render a subtree rotated 90 degrees counter-clockwise.

    The right subtree is printed above the node and the left subtree below it, each
    level indented a little further, so the tree reads correctly when you tilt your
    head to the left.

    Args:
        node (Optional[BSTNode]): Root of the subtree to render.
        indent (int): Depth of node below the top of the rendering.

    Returns:
        List[str]: One line per node.
    """
    lines: List[str] = []
    # Reverse in-order walk (right, node, left) with an explicit stack
    stack: List[Tuple[BSTNode, int]] = []
    current_node, current_indent = node, indent
    while stack or current_node is not None:
        while current_node is not None:
            stack.append((current_node, current_indent))
            current_node, current_indent = current_node.right, current_indent + 1
        current_node, current_indent = stack.pop()
        lines.append(" " * (current_indent * INDENT_WIDTH) + str(current_node.value))
        current_node, current_indent = current_node.left, current_indent + 1
    return lines


def to_parenthesized(node: Optional[BSTNode]) -> str:
    """
    Render a subtree in a compact nested form.

    An absent subtree is "empty", a leaf is its value preceded by a space, and any other
    node is "(value left right)" with both children rendered the same way.

    Args:
        node (Optional[BSTNode]): Root of the subtree to render.

    Returns:
        str: The nested representation.
    """
    parts: List[str] = []
    # Pending work: literal text to emit, or a subtree (possibly absent) to expand
    stack: List[Union[str, Optional[BSTNode]]] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif item is None:
            parts.append("empty")
        elif item.is_leaf():
            parts.append(f" {item.value}")
        else:
            # Pushed in reverse so they are emitted as "(value", left, right, ")"
            stack.extend([")", item.right, item.left])
            parts.append(f"({item.value}")
    return "".join(parts)

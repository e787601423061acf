# tests/conftest.py
import pytest
import sys
import os

# Add the parent directory to the system path to ensure correct module import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from utils.data_structures.binary_search_tree import BinarySearchTree
from utils.data_structures.bst_node import BSTNode

# Insertion order used by the sample scenarios
SAMPLE_VALUES = ["M", "A", "Z", "N", "O", "Q", "X", "D"]


@pytest.fixture
def empty_tree() -> BinarySearchTree:
    """
    Fixture providing a tree with no values.
    """
    return BinarySearchTree()


@pytest.fixture
def sample_tree() -> BinarySearchTree:
    """
    Fixture providing the sample letter tree.

    Shape after inserting M, A, Z, N, O, Q, X, D in that order:

        M
        ├── A
        │   └── (right) D
        └── Z
            └── (left) N
                └── (right) O
                    └── (right) Q
                        └── (right) X
    """
    tree = BinarySearchTree()
    for value in SAMPLE_VALUES:
        tree.add(value)
    return tree


@pytest.fixture
def bad_tree() -> BinarySearchTree:
    """
    Fixture providing a hand-built tree that breaks the BST property.

    Z sits in M's left subtree (as D's right child) even though Z > M. Each node is
    correctly ordered against its immediate parent, so only a check that carries the
    bounds of all ancestors detects the problem.
    """
    root = BSTNode("M", left=BSTNode("D", right=BSTNode("Z")), right=BSTNode("R"))
    return BinarySearchTree.from_root(root)

import io

import pytest

from utils.data_structures.bst_node import BSTNode
from utils.data_structures.tree_renderer import render_sideways, to_parenthesized
from utils.exceptions import InvalidArgumentError

# Sideways drawing of the sample tree: right subtrees above, two spaces per level
SAMPLE_DRAWING = [
    "  Z",
    "          X",
    "        Q",
    "      O",
    "    N",
    "M",
    "    D",
    "  A",
]


def test_render_sideways(sample_tree) -> None:
    """
    Test the line-by-line sideways drawing of the sample tree.
    """
    assert render_sideways(sample_tree.root) == SAMPLE_DRAWING
    assert sample_tree.render() == "\n".join(SAMPLE_DRAWING)


def test_render_sideways_empty() -> None:
    """
    Test that an absent subtree renders no lines.
    """
    assert render_sideways(None) == []


def test_print_tree_to_stdout(sample_tree, capsys) -> None:
    """
    Test that print_tree() writes the drawing to standard output.
    """
    sample_tree.print_tree()
    captured = capsys.readouterr()
    assert captured.out == "\n".join(SAMPLE_DRAWING) + "\n"


def test_print_tree_empty_prints_nothing(empty_tree, capsys) -> None:
    """
    Test that an empty tree prints nothing.
    """
    empty_tree.print_tree()
    assert capsys.readouterr().out == ""


def test_print_tree_to_stream(sample_tree) -> None:
    """
    Test writing the drawing to a caller-supplied stream.
    """
    stream = io.StringIO()
    sample_tree.print_tree(stream)
    assert stream.getvalue().splitlines() == SAMPLE_DRAWING


def test_parenthesized_form(sample_tree, empty_tree) -> None:
    """
    Test the nested text form of the sample tree and of an empty tree.
    """
    assert str(sample_tree) == "(M(Aempty D)(Z(Nempty(Oempty(Qempty X)))empty))"
    assert str(empty_tree) == "empty"


def test_parenthesized_form_of_nodes() -> None:
    """
    Test the nested text form for a leaf and a full node.
    """
    assert to_parenthesized(BSTNode(1)) == " 1"
    assert to_parenthesized(BSTNode(2, left=BSTNode(1), right=BSTNode(3))) == "(2 1 3)"


# ---------------- print_level ----------------

def test_print_level(sample_tree, capsys) -> None:
    """
    Test printing the values on level 3 of the sample tree.
    """
    sample_tree.print_level(3)
    captured = capsys.readouterr()
    assert captured.out == "The data of nodes on level 3\nD\nN\n"


def test_print_level_root(sample_tree) -> None:
    """
    Test printing level 1 to a caller-supplied stream.
    """
    stream = io.StringIO()
    sample_tree.print_level(1, stream)
    assert stream.getvalue() == "The data of nodes on level 1\nM\n"


def test_print_level_below_tree(sample_tree, empty_tree, capsys) -> None:
    """
    Test that a level deeper than the tree, or any level of an empty tree, prints only the header.
    """
    sample_tree.print_level(10)
    empty_tree.print_level(1)
    captured = capsys.readouterr()
    assert captured.out == "The data of nodes on level 10\nThe data of nodes on level 1\n"


@pytest.mark.parametrize("level", [0, -1, -100])
def test_print_level_rejects_levels_below_one(sample_tree, level) -> None:
    """
    Test that levels below 1 raise InvalidArgumentError.
    """
    with pytest.raises(InvalidArgumentError) as exc_info:
        sample_tree.print_level(level)
    assert exc_info.value.argument_name == "n"
    assert exc_info.value.argument_value == level


def test_print_level_rejects_non_integer(sample_tree) -> None:
    """
    Test that a level that is not an integer raises InvalidArgumentError.
    """
    with pytest.raises(InvalidArgumentError):
        sample_tree.print_level("3")

# File: scripts/bst_demo.py
# Builds a small tree from the configured sample values and prints it sideways,
# followed by the values on the configured level.

import argparse
import logging
import sys
from typing import List, Optional

from config.logger_config import configure_logger
from config.tree_config import load_demo_settings
from utils.config_utils import ConfigLoaderError
from utils.data_structures.binary_search_tree import BinarySearchTree
from utils.exceptions import InvalidArgumentError

logger = configure_logger(name="bst_demo", level=logging.INFO, output="console")


def build_tree(values: List) -> BinarySearchTree:
    """
    Insert the values into a new tree, in the given order.

    Args:
        values (list): Values to insert.

    Returns:
        BinarySearchTree: The populated tree.
    """
    tree = BinarySearchTree()
    for value in values:
        tree.add(value)
    return tree


def run_demo(settings_path: Optional[str] = None) -> BinarySearchTree:
    """
    Run the demonstration: build the sample tree, print it, and print one level.

    Args:
        settings_path (Optional[str]): YAML settings file; defaults to config/bst_settings.yaml.

    Returns:
        BinarySearchTree: The tree that was printed.
    """
    settings = load_demo_settings(settings_path)
    tree = build_tree(settings["sample_values"])
    logger.info(f"Built tree with {tree.size()} values and depth {tree.depth()}.")

    tree.print_tree()
    tree.print_level(settings["print_level"])
    return tree


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print a sample binary search tree.")
    parser.add_argument("--settings", help="Path to a YAML settings file.", default=None)
    args = parser.parse_args(argv)

    try:
        run_demo(args.settings)
    except (ConfigLoaderError, InvalidArgumentError) as e:
        logger.error(f"Demo failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

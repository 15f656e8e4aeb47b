#!/usr/bin/env python3
"""
Basic usage example for balancedbst.

This example demonstrates:
- Building a balanced tree from unsorted values with duplicates
- Inserting until the tree leans, then rebalancing
- Depth-aware traversal through the functional API
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from balancedbst import Tree, collect_tree_data, get_tree_stats


def show(tree: Tree) -> None:
    """Print the tree sideways, one node per line, indented by depth."""
    for node, depth in collect_tree_data(tree, "in"):
        print(f"{'    ' * depth}{node.value}")


def main():
    values = [int(arg) for arg in sys.argv[1:]] or [50, 30, 70, 20, 40, 60, 80, 30]

    tree = Tree(values)
    print(f"Built from {values}")
    print("-" * 50)
    show(tree)

    for value in range(81, 88):
        tree.insert(value)

    stats = get_tree_stats(tree)
    print(f"\nAfter inserting 81..87: height {stats['height']}, balanced {stats['balanced']}")
    show(tree)

    tree.rebalance()
    stats = get_tree_stats(tree)
    print(f"\nAfter rebalancing: height {stats['height']}, balanced {stats['balanced']}")
    show(tree)

    print(f"\nNodes per depth: {stats['depths']}")


if __name__ == "__main__":
    main()

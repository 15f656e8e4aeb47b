"""High-level API for balancedbst.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree and traverser classes for ease
of use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import TraversalOrder
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser
from .core.tree import Tree


def build_tree(values: Iterable[Any]) -> Tree:
    """Build a balanced tree from arbitrary values.

    Example:
        >>> build_tree([3, 1, 2, 3]).inorder()
        [1, 2, 3]
    """
    return Tree(values)


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        order: Traversal order (level, in, pre, post or an alias)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in the requested order

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> [node.value for node in traverse_tree(tree, "pre")]
        [5, 3, 8]
    """
    for node, _ in collect_tree_data(tree, order, max_depth=max_depth, min_depth=min_depth):
        yield node


def collect_tree_data(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Tuple[Node, int]]:
    """Traverse a tree and yield each node together with its depth.

    Similar to traverse_tree but keeps the depth the traverser tracked.

    Args:
        tree: Tree to walk
        order: Traversal order (level, in, pre, post or an alias)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Tuples of (node, depth) with the root at depth 0
    """
    traverser = _traverser_for(order)
    yield from traverser.traverse(tree.root, max_depth=max_depth, min_depth=min_depth)


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        tree: Tree to summarize

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree(range(7)))
        >>> stats['total_nodes'], stats['height'], stats['balanced']
        (7, 2, True)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }

    for node, depth in collect_tree_data(tree, TraversalOrder.LEVEL_ORDER):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['height'] = tree.height()
    stats['balanced'] = tree.balanced()

    if tree.root is None:
        stats['min_value'] = None
        stats['max_value'] = None
    else:
        stats['min_value'] = tree.find_min().value
        stats['max_value'] = tree.find_max().value

    return stats


# Helper functions

def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
        'breadth_first': TraversalOrder.LEVEL_ORDER,
        'in': TraversalOrder.INORDER,
        'inorder': TraversalOrder.INORDER,
        'in_order': TraversalOrder.INORDER,
        'pre': TraversalOrder.PREORDER,
        'preorder': TraversalOrder.PREORDER,
        'pre_order': TraversalOrder.PREORDER,
        'post': TraversalOrder.POSTORDER,
        'postorder': TraversalOrder.POSTORDER,
        'post_order': TraversalOrder.POSTORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(f"Unknown traversal order: {order}")


def _traverser_for(order: Union[TraversalOrder, str]) -> TreeTraverser:
    return create_traverser(_parse_order(order).value)

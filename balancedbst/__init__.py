"""balancedbst - Binary search tree with explicit rebalancing.

balancedbst stores unique, orderable values in a binary search tree that
is built balanced, stays ordered through inserts and deletes, and can be
rebalanced on demand.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from balancedbst import Tree

    tree = Tree([5, 3, 8, 1, 4, 7, 9])
    tree.insert(10)
    tree.delete(5)
    if not tree.balanced():
        tree.rebalance()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Rebalancing never happens on its own: inserts and deletes only keep the
values ordered, so callers decide when the cost of a rebuild is worth it.
"""

__version__ = "0.1.0"

# Core components
from .core import (
    Node,
    Tree,
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

# Configuration and errors
from .config import TraversalOrder, DemoConfig
from .errors import BSTError, EmptyTreeError, ConfigurationError

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    collect_tree_data,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'Tree',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
    # Config
    'TraversalOrder',
    'DemoConfig',
    # Errors
    'BSTError',
    'EmptyTreeError',
    'ConfigurationError',
    # API
    'build_tree',
    'traverse_tree',
    'collect_tree_data',
    'get_tree_stats',
]

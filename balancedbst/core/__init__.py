"""Core components of balancedbst: the Node, the Tree and its traversers."""

from .node import Node
from .tree import Tree
from .traverser import (
    TreeTraverser,
    LevelOrderTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
)

__all__ = [
    'Node',
    'Tree',
    'TreeTraverser',
    'LevelOrderTraverser',
    'InOrderTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'create_traverser',
]

"""Node abstraction for balancedbst.

The Node is intentionally kept simple - it's purely a data container.
Ordering, navigation and mutation are all handled by the Tree, which
owns the hierarchy and is the only thing that rewires child links.
"""

from typing import Any, List, Optional


class Node:
    """A single element of a binary search tree.

    Each node holds one orderable value and owns at most two subtrees.
    Within a well-formed tree every value under ``left`` is strictly
    less than ``value`` and every value under ``right`` is strictly
    greater.

    Nodes compare by identity. Two nodes holding the same value in two
    different trees are different nodes.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        """Create a node.

        Args:
            value: Orderable scalar stored in this node
            left: Subtree of smaller values (None if absent)
            right: Subtree of larger values (None if absent)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> List["Node"]:
        """Return the present children, left before right."""
        return [child for child in (self.left, self.right) if child is not None]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

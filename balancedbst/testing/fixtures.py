"""Test fixtures for balancedbst consumers.

These helpers inspect a Tree's node hierarchy directly so test suites can
verify structure (ordering, shape, balance) without reaching into the
Tree's internals themselves.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..core.node import Node
from ..core.traverser import PostOrderTraverser
from ..core.tree import Tree

Shape = Optional[Tuple[Any, Any, Any]]


def assert_bst_invariant(tree: Tree) -> None:
    """Assert that every node sits strictly between its ancestors' bounds.

    Checks the full invariant (every value in a left subtree is smaller
    than the node, every value in a right subtree is larger), not just
    parent/child pairs.

    Raises:
        AssertionError: Naming the first offending value
    """
    # Entries are (node, exclusive lower bound, exclusive upper bound)
    stack: List[Tuple[Node, Optional[Node], Optional[Node]]] = []
    if tree.root is not None:
        stack.append((tree.root, None, None))

    while stack:
        node, lower, upper = stack.pop()
        if lower is not None and not lower.value < node.value:
            raise AssertionError(
                f"{node.value!r} is in the right subtree of {lower.value!r} but not greater"
            )
        if upper is not None and not node.value < upper.value:
            raise AssertionError(
                f"{node.value!r} is in the left subtree of {upper.value!r} but not smaller"
            )
        if node.left is not None:
            stack.append((node.left, lower, node))
        if node.right is not None:
            stack.append((node.right, node, upper))


def tree_shape(tree: Tree) -> Shape:
    """Snapshot a tree's structure as nested ``(value, left, right)`` tuples.

    Two trees with equal snapshots have the same values in the same
    positions. An empty tree snapshots to None.
    """
    shapes: Dict[Node, Shape] = {}
    for node, _ in PostOrderTraverser().traverse(tree.root):
        shapes[node] = (
            node.value,
            shapes.pop(node.left, None),
            shapes.pop(node.right, None),
        )
    return shapes.get(tree.root) if tree.root is not None else None


class TreeTestHelper:
    """Public test fixture for tree verification.

    Example:
        helper = TreeTestHelper(tree)

        summary = helper.get_summary()
        assert summary['balanced']
        assert helper.is_ordered()
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree under test.

        Args:
            tree: Tree to inspect
        """
        self._tree = tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of stored values
            - height: Height of the root (-1 when empty)
            - balanced: Whether the tree is height-balanced
            - is_empty: Whether the tree has no root
        """
        return {
            'size': len(self._tree),
            'height': self._tree.height(),
            'balanced': self._tree.balanced(),
            'is_empty': self._tree.root is None,
        }

    def is_ordered(self) -> bool:
        """Check the BST invariant without raising."""
        try:
            assert_bst_invariant(self._tree)
        except AssertionError:
            return False
        return True

    def has_minimal_height(self) -> bool:
        """Check that height is the smallest possible for the node count."""
        size = len(self._tree)
        # A tree of height h holds at most 2**(h+1) - 1 values
        return self._tree.height() == size.bit_length() - 1

    def was_value_stored(self, value: Any) -> bool:
        """Check if a value is currently stored in the tree."""
        return self._tree.find(value) is not None

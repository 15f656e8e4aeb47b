"""Binary search tree over unique ordered values.

The Tree owns a hierarchy of Nodes and is the only thing that mutates it.
Construction always produces a height-balanced tree; insert and delete
keep the ordering invariant but never rebalance on their own, so a tree
that has taken many mutations must be rebalanced explicitly.

Descent loops (insert, delete, find, depth) and the traversals are
iterative, so skewed trees thousands of levels deep are handled without
recursion. Only ``build`` recurses, and it only ever produces trees of
logarithmic height.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from .node import Node
from .traverser import (
    InOrderTraverser,
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
)
from ..errors import EmptyTreeError

logger = logging.getLogger(__name__)

# Default for methods whose node argument means "the root" when omitted.
# None can't be used for that because None is the empty subtree.
_ROOT: Any = object()


class Tree:
    """A binary search tree of unique, orderable values.

    Example:
        >>> tree = Tree([5, 3, 8, 1, 4, 7, 9])
        >>> tree.preorder()
        [5, 3, 1, 4, 8, 7, 9]
        >>> tree.insert(10)
        Node(10)
        >>> tree.balanced()
        True
    """

    def __init__(self, values: Iterable[Any] = ()):
        """Build a balanced tree from an arbitrary collection of values.

        Duplicates are dropped and the remaining values are sorted before
        the tree is built, so input order doesn't matter.

        Args:
            values: Orderable, hashable scalars (duplicates allowed)
        """
        self.root: Optional[Node] = self.build(values)

    # Construction

    @staticmethod
    def build(values: Iterable[Any]) -> Optional[Node]:
        """Build a height-balanced hierarchy and return its root.

        The middle element of each sorted slice becomes the subtree root;
        on even-length slices the upper of the two middle elements is
        picked (index ``len // 2``). This tie-break fixes the shape, and
        with it every traversal order, for a given set of values.

        Does not touch any Tree's ``root``.

        Args:
            values: Values to build from (need not be sorted or unique)

        Returns:
            Root of the new hierarchy, or None if values is empty
        """
        ordered = sorted(set(values))
        logger.debug("Building balanced tree from %d unique values", len(ordered))
        return Tree._build_sorted(ordered, 0, len(ordered))

    @staticmethod
    def _build_sorted(ordered: Sequence[Any], start: int, stop: int) -> Optional[Node]:
        """Build the subtree for ``ordered[start:stop]``."""
        if start >= stop:
            return None

        mid = start + (stop - start) // 2
        node = Node(ordered[mid])
        node.left = Tree._build_sorted(ordered, start, mid)
        node.right = Tree._build_sorted(ordered, mid + 1, stop)
        return node

    # Mutation

    def insert(self, value: Any) -> Node:
        """Insert a value at its ordered position.

        Inserting a value that is already present is a no-op. The tree is
        not rebalanced afterwards.

        Args:
            value: Value to insert

        Returns:
            The node holding value (newly created, or the existing one)
        """
        if self.root is None:
            self.root = Node(value)
            return self.root

        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value)
                    return current.right
                current = current.right
            else:
                logger.debug("Ignoring duplicate insert of %r", value)
                return current

    def delete(self, value: Any) -> Optional[Node]:
        """Remove a value from the tree.

        A node with one or no children is replaced by its child. A node
        with two children takes the value of its in-order successor (the
        minimum of its right subtree), and the successor's own node is
        unlinked from the right subtree instead. Deleting a missing value
        is a no-op.

        Args:
            value: Value to remove

        Returns:
            The node now occupying the affected slot (the value-copied node
            or the promoted child), or None if nothing took its place or
            the value was not found
        """
        parent: Optional[Node] = None
        current = self.root

        while current is not None:
            if value < current.value:
                parent, current = current, current.left
            elif value > current.value:
                parent, current = current, current.right
            else:
                break

        if current is None:
            logger.debug("Delete of %r ignored: value not in tree", value)
            return None

        if current.left is not None and current.right is not None:
            successor_parent, successor = current, current.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left

            current.value = successor.value
            # The successor has no left child, so its right child takes its slot
            self._replace_child(successor_parent, successor, successor.right)
            return current

        replacement = current.right if current.left is None else current.left
        self._replace_child(parent, current, replacement)
        return replacement

    def _replace_child(self, parent: Optional[Node], old: Node,
                       new: Optional[Node]) -> None:
        """Point whichever slot held ``old`` at ``new``."""
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    # Search

    def find(self, value: Any, node: Optional[Node] = _ROOT) -> Optional[Node]:
        """Return the node holding value, or None if it isn't present.

        Args:
            value: Value to look for
            node: Subtree to search (defaults to the whole tree)

        Returns:
            The matching node, or None if the subtree doesn't hold value
        """
        current = self.root if node is _ROOT else node
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return current
        return None

    def find_min(self, node: Optional[Node] = _ROOT) -> Node:
        """Return the leftmost node of a subtree.

        Args:
            node: Subtree to search (defaults to the whole tree)

        Returns:
            Node holding the smallest value in the subtree

        Raises:
            EmptyTreeError: If the subtree is empty
        """
        if node is _ROOT:
            node = self.root
        if node is None:
            raise EmptyTreeError("find_min called on an empty subtree")

        while node.left is not None:
            node = node.left
        return node

    def find_max(self, node: Optional[Node] = _ROOT) -> Node:
        """Return the rightmost node of a subtree.

        Raises:
            EmptyTreeError: If the subtree is empty
        """
        if node is _ROOT:
            node = self.root
        if node is None:
            raise EmptyTreeError("find_max called on an empty subtree")

        while node.right is not None:
            node = node.right
        return node

    # Traversals

    def level_order(self) -> List[Any]:
        """Values breadth-first, left to right within each depth."""
        return LevelOrderTraverser().values(self.root)

    def inorder(self) -> List[Any]:
        """Values in ascending order (left, self, right)."""
        return InOrderTraverser().values(self.root)

    def preorder(self) -> List[Any]:
        """Values in pre-order (self, left, right)."""
        return PreOrderTraverser().values(self.root)

    def postorder(self) -> List[Any]:
        """Values in post-order (left, right, self)."""
        return PostOrderTraverser().values(self.root)

    # Measures

    def height(self, node: Optional[Node] = _ROOT) -> int:
        """Return the number of edges on the longest path down to a leaf.

        An empty subtree has height -1, so a lone leaf has height 0.
        Recomputed on every call.

        Args:
            node: Subtree to measure (defaults to the whole tree)

        Returns:
            Height of the subtree
        """
        if node is _ROOT:
            node = self.root

        height = -1
        level = [node] if node is not None else []
        while level:
            height += 1
            level = [child for current in level for child in current.children()]
        return height

    def depth(self, target: Any) -> Optional[int]:
        """Return the number of edges from the root down to target.

        The descent compares values, not node identity: a Node argument
        is looked up by its current value. Callers should only pass nodes
        (or values) that are currently in this tree; a node that has
        since been deleted, or that belongs to another tree, is answered
        for whatever node now holds its value.

        Args:
            target: A Node of this tree, or a raw value

        Returns:
            Depth of the matching node (root = 0), or None if not found
        """
        value = target.value if isinstance(target, Node) else target

        current = self.root
        edges = 0
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return edges
            edges += 1
        return None

    def balanced(self, node: Optional[Node] = _ROOT) -> bool:
        """Check whether every subtree's left and right heights differ by <= 1.

        Heights are computed bottom-up in a single post-order pass rather
        than recomputed per node.

        Args:
            node: Subtree to check (defaults to the whole tree)

        Returns:
            True if the subtree is height-balanced (an empty one always is)
        """
        if node is _ROOT:
            node = self.root

        heights: Dict[Node, int] = {}
        for current, _ in PostOrderTraverser().traverse(node):
            left_height = heights.pop(current.left, -1)
            right_height = heights.pop(current.right, -1)
            if abs(left_height - right_height) > 1:
                return False
            heights[current] = 1 + max(left_height, right_height)
        return True

    def rebalance(self) -> "Tree":
        """Rebuild the tree from its in-order values as a balanced tree.

        Rebalancing an already rebalanced tree reproduces the same shape.

        Returns:
            self, for chaining
        """
        values = self.inorder()
        self.root = self.build(values)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebalanced tree of %d values to height %d",
                         len(values), self.height())
        return self

    # Container protocol

    def __len__(self) -> int:
        return sum(1 for _ in LevelOrderTraverser().traverse(self.root))

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate over values in ascending order."""
        for node, _ in InOrderTraverser().traverse(self.root):
            yield node.value

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inorder()!r})"

"""Tree traversal strategies for balancedbst.

Traversers implement the different orders for walking a Node hierarchy.
All of them are iterative (an explicit queue or stack instead of Python
recursion) so that long, skewed chains produced by repeated inserts can
be walked without hitting the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    A traverser walks the hierarchy below a starting node and yields
    ``(node, depth)`` pairs, where depth is relative to the start.
    Traversers hold no state between calls, so every call to
    ``traverse`` starts from scratch.
    """

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def values(self, root: Optional[Node]) -> List:
        """Collect the values of a full traversal into a fresh list."""
        return [node.value for node, _ in self.traverse(root)]

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded.

        Args:
            depth: Current depth
            min_depth: Minimum depth for yielding
            max_depth: Maximum depth for yielding

        Returns:
            True if node should be yielded
        """
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        # Queue stores (node, depth) tuples
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree.
    On a well-formed BST this yields values in ascending order.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        current, depth = root, 0

        while stack or current is not None:
            # Walk down the left spine, remembering the way back up
            while current is not None:
                stack.append((current, depth))
                current = current.left if self._should_explore(depth, max_depth) else None
                depth += 1

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            current = node.right if self._should_explore(depth, max_depth) else None
            depth += 1


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits the node before its children, left subtree first. Replaying
    the values of a pre-order walk through ``insert`` rebuilds the same
    shape, which makes this the natural order for copying a tree.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Right goes on first so left comes off first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits both subtrees before the node itself. Good for anything that
    aggregates over children, such as computing subtree heights.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return

        # Entries are (node, depth, children_done)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, children_done = stack.pop()

            if children_done or not self._should_explore(depth, max_depth):
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (level, in, pre, post or an alias)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
        'bfs': LevelOrderTraverser,
        'breadth_first': LevelOrderTraverser,
        'in': InOrderTraverser,
        'inorder': InOrderTraverser,
        'in_order': InOrderTraverser,
        'pre': PreOrderTraverser,
        'preorder': PreOrderTraverser,
        'pre_order': PreOrderTraverser,
        'dfs_pre': PreOrderTraverser,
        'post': PostOrderTraverser,
        'postorder': PostOrderTraverser,
        'post_order': PostOrderTraverser,
        'dfs_post': PostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()

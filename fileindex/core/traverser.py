"""Tree traversal strategies for FileIndex.

Traversers implement the algorithms for walking through a tree. They work
through a TreeAdapter and never touch the index directly.

All traversers are iterative (explicit queue or stack), so the depth of
the tree is not limited by the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple, Union

from ..config import TraversalStrategy
from .adapter import TreeAdapter
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        visited: Set[str] = set()

        while queue:
            node, depth = queue.popleft()

            node_id = node.identifier()
            if node_id in visited:
                continue
            visited.add(node_id)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a directory before its contents. Siblings are visited in
    listing order.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        visited: Set[str] = set()

        while stack:
            node, depth = stack.pop()

            node_id = node.identifier()
            if node_id in visited:
                continue
            visited.add(node_id)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                # Reversed so the first child is popped first
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits the contents of a directory before the directory itself.
    Good for deletion or aggregating sizes bottom-up.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        # (node, depth, children_pushed)
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        visited: Set[str] = set()

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            node_id = node.identifier()
            if node_id in visited:
                continue
            visited.add(node_id)

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


def create_traverser(strategy: Union[str, TraversalStrategy],
                     adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance for a strategy.

    Args:
        strategy: TraversalStrategy or its value (bfs, dfs_pre, dfs_post)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy is not recognized
    """
    strategies = {
        TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
        TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
        TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    }

    if not isinstance(strategy, TraversalStrategy):
        try:
            strategy = TraversalStrategy(str(strategy).lower())
        except ValueError:
            raise ValueError(
                f"Unknown traversal strategy: {strategy}. "
                f"Choose from: {', '.join(s.value for s in strategies)}"
            ) from None

    return strategies[strategy](adapter)

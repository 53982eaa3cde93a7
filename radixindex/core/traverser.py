"""Tree traversal strategies for RadixIndex.

Traversers implement different algorithms for walking through a subtree.
They work with any TreeAdapter. Every call to traverse() starts a fresh,
lazy walk, so the same traverser can be reused for any number of walks.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy, parse_strategy
from .adapter import TreeAdapter
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Sibling order is whatever the adapter produces and must not be relied
    upon by callers.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Uses an explicit stack so that deep
    trees built from long words never hit the recursion limit.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    stack.append((child, depth + 1))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, so a node is produced only after its
    entire subtree has been produced.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # (node, depth, children_pushed)
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    stack.append((child, depth + 1, False))


_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str],
                     adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (bfs, dfs_pre, dfs_post, ...)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)](adapter)

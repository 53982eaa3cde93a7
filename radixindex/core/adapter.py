"""TreeAdapter abstraction for RadixIndex.

The adapter provides the navigation logic for a tree structure, decoupling
the node representation from the traversal mechanism. Traversers and
collectors only ever move through the tree by asking an adapter.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import TreeNode, RadixNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure."""

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root
        """
        pass

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth


class RadixNodeAdapter(TreeAdapter):
    """Navigates RadixNode trees through their child maps and parent links."""

    def get_children(self, node: RadixNode) -> Iterator[RadixNode]:
        return node.children()

    def get_parent(self, node: RadixNode) -> Optional[RadixNode]:
        return node.parent

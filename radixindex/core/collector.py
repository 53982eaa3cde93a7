"""Data collection strategies for RadixIndex.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can count nodes, gather values, or rebuild
the words a subtree stores.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet

from .adapter import TreeAdapter
from .node import RadixNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: RadixNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects the values held by each node."""

    def collect(self, node: RadixNode, depth: int) -> FrozenSet[Any]:
        return node.values


class WordCollector(DataCollector):
    """Collects the full word each node spells.

    The word is rebuilt by walking parent links up to the tree root, so it
    is the same regardless of which node a traversal started from.
    """

    def collect(self, node: RadixNode, depth: int) -> str:
        return node.word()


class ChildCountCollector(DataCollector):
    """Collects nodes with child count information."""

    def collect(self, node: RadixNode, depth: int) -> Dict[str, Any]:
        child_count = 0
        if not node.is_leaf():
            for _ in self.adapter.get_children(node):
                child_count += 1

        return {
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }

"""Core abstractions for RadixIndex.

This package contains the node model and the traversal machinery the
RadixTree is built on.
"""

from .node import TreeNode, RadixNode
from .adapter import TreeAdapter, RadixNodeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    WordCollector,
    ChildCountCollector,
)

__all__ = [
    "TreeNode",
    "RadixNode",
    "TreeAdapter",
    "RadixNodeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "WordCollector",
    "ChildCountCollector",
]

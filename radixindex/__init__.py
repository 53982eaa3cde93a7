"""RadixIndex - compacting radix tree index for Python.

RadixIndex maps words to sets of values and answers exact and prefix
lookups. Removing a value prunes and merges the tree so that it always
stays as compact as the words it still stores allow.

    from radixindex import RadixTree

    tree = RadixTree()
    tree.insert("Patricia", 5)
    tree.find_by_prefix("pat")   # {5}
"""

__version__ = "0.1.0"

from .config import IndexConfig, CasePolicy, TraversalStrategy
from .errors import RadixIndexError, InvalidArgumentError
from .core import (
    TreeNode,
    RadixNode,
    TreeAdapter,
    RadixNodeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .value_index import ValueIndex
from .api import (
    traverse_subtree,
    count_nodes,
    collect_values,
    iter_words,
    get_tree_stats,
    TreeStats,
)
from .tree import RadixTree

__all__ = [
    "__version__",
    # Engine
    "RadixTree",
    "ValueIndex",
    # Core
    "TreeNode",
    "RadixNode",
    "TreeAdapter",
    "RadixNodeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    # Config
    "IndexConfig",
    "CasePolicy",
    "TraversalStrategy",
    # Errors
    "RadixIndexError",
    "InvalidArgumentError",
    # API
    "traverse_subtree",
    "count_nodes",
    "collect_values",
    "iter_words",
    "get_tree_stats",
    "TreeStats",
]

"""Functional helpers for walking RadixNode subtrees.

These functions wrap the traverser/collector machinery for the common
questions asked of a subtree: how many nodes it has, which values it holds,
which words it stores, and what it looks like overall. RadixTree uses them
internally; they work on any RadixNode, attached to a tree or not.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, Optional, Set, Tuple, Union

from .config import TraversalStrategy
from .core.adapter import RadixNodeAdapter, TreeAdapter
from .core.collector import ChildCountCollector, ValueCollector, WordCollector
from .core.node import RadixNode
from .core.traverser import create_traverser


def traverse_subtree(
    root: Optional[RadixNode],
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[RadixNode, int]]:
    """Lazily walk the subtree rooted at root.

    Each call starts a new walk. A None root yields nothing.

    Args:
        root: Subtree root
        adapter: Navigation adapter (defaults to RadixNodeAdapter)
        strategy: Traversal order
        max_depth: Maximum depth to traverse

    Yields:
        Tuples of (node, depth) where depth is relative to root
    """
    adapter = adapter or RadixNodeAdapter()
    traverser = create_traverser(strategy, adapter)
    yield from traverser.traverse(root, max_depth=max_depth)


def count_nodes(
    root: Optional[RadixNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> int:
    """Count the nodes in the subtree rooted at root (0 for None).

    Example:
        >>> count_nodes(tree.root)
        3
    """
    count = 0
    for _ in traverse_subtree(root, strategy=strategy):
        count += 1
    return count


def collect_values(
    root: Optional[RadixNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> Set[Any]:
    """Return the union of all values held anywhere in the subtree."""
    adapter = RadixNodeAdapter()
    collector = ValueCollector(adapter)
    values: Set[Any] = set()
    for node, depth in traverse_subtree(root, adapter, strategy):
        values.update(collector.collect(node, depth))
    return values


def iter_words(
    root: Optional[RadixNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> Iterator[Tuple[str, FrozenSet[Any]]]:
    """Yield (word, values) for every node in the subtree holding values.

    Words are spelled from the tree root, not from the subtree root, so
    they can be fed straight back into RadixTree.find().
    """
    adapter = RadixNodeAdapter()
    words = WordCollector(adapter)
    values = ValueCollector(adapter)
    for node, depth in traverse_subtree(root, adapter, strategy):
        held = values.collect(node, depth)
        if held:
            yield words.collect(node, depth), held


@dataclass
class TreeStats:
    """Shape summary of a subtree."""

    total_nodes: int = 0
    leaf_nodes: int = 0
    internal_nodes: int = 0
    max_depth: int = 0
    depths: Dict[int, int] = field(default_factory=dict)
    distinct_values: int = 0
    average_branching: float = 0.0


def get_tree_stats(
    root: Optional[RadixNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
) -> TreeStats:
    """Get statistics about the subtree rooted at root.

    Example:
        >>> stats = get_tree_stats(tree.root)
        >>> print(f"Total nodes: {stats.total_nodes}")
        >>> print(f"Leaf nodes: {stats.leaf_nodes}")
    """
    stats = TreeStats()
    adapter = RadixNodeAdapter()
    shape = ChildCountCollector(adapter)
    values = ValueCollector(adapter)
    seen: Set[Any] = set()
    edges = 0

    for node, depth in traverse_subtree(root, adapter, strategy):
        info = shape.collect(node, depth)
        stats.total_nodes += 1
        edges += info['child_count']
        if info['is_leaf']:
            stats.leaf_nodes += 1
        stats.max_depth = max(stats.max_depth, depth)
        stats.depths[depth] = stats.depths.get(depth, 0) + 1
        seen.update(values.collect(node, depth))

    stats.internal_nodes = stats.total_nodes - stats.leaf_nodes
    stats.distinct_values = len(seen)
    stats.average_branching = (
        edges / stats.internal_nodes if stats.internal_nodes > 0 else 0.0
    )
    return stats

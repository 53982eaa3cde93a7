"""Configuration system for RadixIndex.

This module defines how users tune a RadixTree: how words are folded to a
single case before they reach the tree, and which traversal order is used
when whole subtrees are enumerated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union


class CasePolicy(Enum):
    """How words are folded before insertion and lookup.

    Folding is applied unconditionally on every entry point, so two words
    differing only in case always share the same path in the tree.
    """
    LOWER = "lower"        # str.lower()
    CASEFOLD = "casefold"  # str.casefold(), aggressive Unicode folding

    def folder(self) -> Callable[[str], str]:
        """Return the string function implementing this policy."""
        if self is CasePolicy.CASEFOLD:
            return str.casefold
        return str.lower


class TraversalStrategy(Enum):
    """How to walk a subtree.

    The order only affects the sequence in which nodes are produced;
    counts and collected value sets are identical for every strategy.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


@dataclass
class IndexConfig:
    """Complete configuration for a RadixTree.

    Example:
        config = IndexConfig(
            case_policy=CasePolicy.CASEFOLD,
            traversal="bfs",
        )
    """

    case_policy: CasePolicy = CasePolicy.LOWER
    traversal: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE

    def __post_init__(self):
        self.traversal = parse_strategy(self.traversal)
        if not isinstance(self.case_policy, CasePolicy):
            self.case_policy = CasePolicy(self.case_policy)

    def fold(self, word: str) -> str:
        """Apply the configured case policy to a word."""
        return self.case_policy.folder()(word)

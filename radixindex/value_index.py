"""Reverse index from values to the nodes holding them.

The index lets RadixTree.remove() visit only the nodes that actually hold a
value instead of scanning the whole tree. Nodes are unhashable (their
equality is structural), so each value maps to a dict keyed by node
identity.
"""

from typing import Any, Dict, Iterator, List

from .core.node import RadixNode


class ValueIndex:
    """Mapping of value -> nodes currently holding that value.

    Every (value, node) pair in the index must also satisfy
    ``node.has_value(value)``, and every value held by a live node must be
    present here. RadixTree is responsible for keeping both sides in step.
    """

    def __init__(self):
        self._entries: Dict[Any, Dict[int, RadixNode]] = {}

    def add(self, value: Any, node: RadixNode) -> None:
        """Record that node holds value."""
        self._entries.setdefault(value, {})[id(node)] = node

    def nodes_for(self, value: Any) -> List[RadixNode]:
        """Snapshot of the nodes holding value (empty if unknown)."""
        return list(self._entries.get(value, {}).values())

    def pop(self, value: Any) -> List[RadixNode]:
        """Remove the entry for value and return its nodes."""
        return list(self._entries.pop(value, {}).values())

    def clear(self) -> None:
        self._entries = {}

    def values(self) -> Iterator[Any]:
        """Iterate over the distinct indexed values."""
        return iter(list(self._entries.keys()))

    def __contains__(self, value: Any) -> bool:
        return value in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(values={len(self._entries)})"

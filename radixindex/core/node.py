"""Node abstractions for RadixIndex.

TreeNode is the minimal contract every node exposes to traversers and
collectors. RadixNode is the compact trie node the RadixTree is built from:
an edge label fragment, a set of associated values, at most one child per
character, and a non-owning link back to its parent.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Iterator, List, Optional

from ..errors import InvalidArgumentError


class TreeNode(ABC):
    """Abstract base class for nodes that can be traversed.

    Navigation logic (how to get children, parents, etc.) is handled by the
    TreeAdapter, allowing traversers and collectors to stay independent of
    the concrete node class.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return an identifier for this node, unique within its tree.

        Returns:
            str: Identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children).

        Returns:
            bool: True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.identifier()!r})"


class RadixNode(TreeNode):
    """A node of a compacting radix tree.

    The word a node stands for is spelled by walking from the root down to
    it: each ancestor contributes its label followed by the edge character
    leading to the next node, and the node itself contributes its label.

    Setting a child always points the child's parent link at this node, and
    removing a child clears it, so both directions stay consistent. The
    parent link is a weak reference: the tree owns nodes only downwards.

    Equality is structural and recursive: two nodes are equal when their
    labels, value sets and edge-labelled children are equal. Parent links
    are ignored. Nodes are mutable and therefore unhashable.
    """

    __hash__ = None

    def __init__(self, label: str = ""):
        """Initialize a detached node.

        Args:
            label: Edge fragment owned by this node
        """
        self._label = ""
        self._values = set()
        self._children: Dict[str, "RadixNode"] = {}
        self._parent: Optional[weakref.ref] = None
        self._parent_edge_label: Optional[str] = None
        self.label = label

    @property
    def label(self) -> str:
        """The edge fragment owned by this node."""
        return self._label

    @label.setter
    def label(self, label: str) -> None:
        if label is None:
            raise InvalidArgumentError("Label cannot be None")
        if not isinstance(label, str):
            raise InvalidArgumentError(
                f"Label must be a string, got {type(label).__name__}"
            )
        self._label = label

    def set_label(self, label: str) -> None:
        """Replace this node's label."""
        self.label = label

    # Parent link

    @property
    def parent(self) -> Optional["RadixNode"]:
        """The parent node, or None for a root or detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def parent_edge_label(self) -> Optional[str]:
        """The character keying this node in its parent's child map."""
        if self.parent is None:
            return None
        return self._parent_edge_label

    def get_parent(self) -> Optional["RadixNode"]:
        return self.parent

    def get_parent_edge_label(self) -> Optional[str]:
        return self.parent_edge_label

    def has_parent(self) -> bool:
        return self.parent is not None

    def _set_parent(self, edge_label: Optional[str], parent: Optional["RadixNode"]) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None
        self._parent_edge_label = edge_label if parent is not None else None

    # Children

    def has_child(self, edge_label: str) -> bool:
        return edge_label in self._children

    def get_child(self, edge_label: str) -> Optional["RadixNode"]:
        """Return the child keyed by edge_label, or None."""
        return self._children.get(edge_label)

    def set_child(self, edge_label: str, child: "RadixNode") -> None:
        """Attach child under edge_label and make this node its parent.

        Any child previously stored under the same character is replaced.

        Args:
            edge_label: Single character labelling the edge
            child: Node to attach

        Raises:
            InvalidArgumentError: If child is None or edge_label is not a
                single character
        """
        if child is None:
            raise InvalidArgumentError("Child node cannot be None")
        if not isinstance(edge_label, str) or len(edge_label) != 1:
            raise InvalidArgumentError(
                f"Edge label must be a single character, got {edge_label!r}"
            )
        self._children[edge_label] = child
        child._set_parent(edge_label, self)

    def remove_child(self, edge_label: str) -> Optional["RadixNode"]:
        """Detach and return the child keyed by edge_label, if present."""
        child = self._children.pop(edge_label, None)
        if child is not None:
            child._set_parent(None, None)
        return child

    def edge_labels(self) -> List[str]:
        """Characters of all outgoing edges."""
        return list(self._children.keys())

    def children(self) -> Iterator["RadixNode"]:
        """Iterate over the direct children of this node."""
        return iter(list(self._children.values()))

    def child_count(self) -> int:
        return len(self._children)

    # Values

    def add_value(self, value: Any) -> None:
        """Associate value with this node (no-op if already present)."""
        if value is None:
            raise InvalidArgumentError("Cannot add None value")
        self._values.add(value)

    def remove_value(self, value: Any) -> None:
        """Drop value from this node if present."""
        if value is None:
            raise InvalidArgumentError("Cannot remove None value")
        self._values.discard(value)

    def has_value(self, value: Any) -> bool:
        return value in self._values

    @property
    def values(self) -> FrozenSet[Any]:
        """Snapshot of the values held by this node."""
        return frozenset(self._values)

    def get_values(self) -> FrozenSet[Any]:
        return self.values

    def value_count(self) -> int:
        return len(self._values)

    # TreeNode contract

    def word(self) -> str:
        """Return the full word spelled from the root down to this node."""
        parts = [self._label]
        node = self
        while True:
            parent = node.parent
            if parent is None:
                break
            parts.append(node._parent_edge_label)
            parts.append(parent._label)
            node = parent
        return "".join(reversed(parts))

    def identifier(self) -> str:
        """The full word this node stands for.

        Within one tree every node spells a distinct word, which makes the
        word a natural identifier, much like an absolute path.
        """
        return self.word()

    def is_leaf(self) -> bool:
        return not self._children

    def metadata(self) -> Dict[str, Any]:
        return {
            'label': self._label,
            'value_count': len(self._values),
            'child_count': len(self._children),
            'edge_labels': sorted(self._children),
        }

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RadixNode):
            return NotImplemented

        # Walk both subtrees in lockstep; deep trees must not recurse.
        pending = [(self, other)]
        while pending:
            mine, theirs = pending.pop()
            if mine is theirs:
                continue
            if mine._label != theirs._label or mine._values != theirs._values:
                return False
            if mine._children.keys() != theirs._children.keys():
                return False
            for edge, child in mine._children.items():
                pending.append((child, theirs._children[edge]))
        return True

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(label={self._label!r}, "
            f"values={len(self._values)}, children={self.edge_labels()!r})"
        )


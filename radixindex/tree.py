"""The compacting radix tree.

RadixTree maps words to sets of values. Words are folded to a single case
before they touch the tree. Inserting splits edges where a new word
diverges from an existing label; removing a value prunes and merges nodes
so that no valueless node is ever left with fewer than two children.

A RadixTree is a plain mutable object with no shared state. It performs
no locking: callers that share one across threads must serialize every
call themselves.
"""

import logging
from typing import Any, FrozenSet, Iterable, Iterator, Optional, Set, Tuple

from .api import collect_values, count_nodes, get_tree_stats, iter_words, TreeStats
from .config import IndexConfig
from .core.node import RadixNode
from .errors import InvalidArgumentError
from .value_index import ValueIndex

logger = logging.getLogger(__name__)


def _common_prefix_length(first: str, second: str) -> int:
    """Length of the longest common prefix of two strings."""
    limit = min(len(first), len(second))
    i = 0
    while i < limit and first[i] == second[i]:
        i += 1
    return i


def _require_text(text: Any, what: str) -> None:
    if text is None:
        raise InvalidArgumentError(f"{what} cannot be None")
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"{what} must be a string, got {type(text).__name__}"
        )
    if not text:
        raise InvalidArgumentError(f"{what} cannot be empty")


def _require_value(value: Any) -> None:
    if value is None:
        raise InvalidArgumentError("Value cannot be None")
    try:
        hash(value)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Value must be hashable, got {type(value).__name__}"
        ) from e


class RadixTree:
    """Index of words to sets of values with exact and prefix lookup.

    Example:
        tree = RadixTree()
        tree.insert("app", "doc-1")
        tree.insert("apple", "doc-2")
        tree.find("APP")            # {'doc-1'}
        tree.find_by_prefix("ap")   # {'doc-1', 'doc-2'}
        tree.remove("doc-1")
    """

    __hash__ = None

    def __init__(self, config: Optional[IndexConfig] = None):
        """Create an empty tree.

        Args:
            config: Case folding and traversal settings (defaults apply
                when None)
        """
        self.config = config or IndexConfig()
        self._root: Optional[RadixNode] = None
        self._index = ValueIndex()

    @property
    def root(self) -> Optional[RadixNode]:
        """The root node, or None when the tree is empty."""
        return self._root

    # Queries

    def size(self) -> int:
        """Number of distinct values stored in the tree."""
        return len(self._index)

    def __len__(self) -> int:
        return self.size()

    def node_count(self) -> int:
        """Number of nodes currently in the tree (0 when empty)."""
        return count_nodes(self._root, self.config.traversal)

    def find(self, word: str) -> Set[Any]:
        """Return the values associated with exactly this word.

        Args:
            word: Word to look up (case-folded before the lookup)

        Returns:
            New set of the associated values; empty if the word is unknown

        Raises:
            InvalidArgumentError: If word is None, not a string or empty
        """
        _require_text(word, "Word")
        node = self._find_node(self.config.fold(word))
        if node is None:
            return set()
        return set(node.values)

    def find_by_prefix(self, prefix: str) -> Set[Any]:
        """Return the values of every word beginning with prefix.

        Args:
            prefix: Prefix to look up (case-folded before the lookup)

        Returns:
            New set with the union of all matching words' values

        Raises:
            InvalidArgumentError: If prefix is None, not a string or empty
        """
        _require_text(prefix, "Prefix")
        node = self._root
        rest = self.config.fold(prefix)

        while node is not None:
            label = node.label
            common = _common_prefix_length(label, rest)

            # Every word below this node starts with the query prefix.
            if common == len(rest):
                return collect_values(node, self.config.traversal)

            if common < len(label):
                break

            rest = rest[common:]
            node = node.get_child(rest[0])
            rest = rest[1:]

        return set()

    def items(self) -> Iterator[Tuple[str, FrozenSet[Any]]]:
        """Lazily yield (word, values) for every stored word.

        Words are returned in their case-folded form. Order is unspecified.
        """
        return iter_words(self._root, self.config.traversal)

    def stats(self) -> TreeStats:
        """Shape summary of the whole tree."""
        return get_tree_stats(self._root, self.config.traversal)

    # Mutations

    def insert(self, word: str, value: Any) -> None:
        """Associate value with word.

        Inserting the same (word, value) pair twice has no further effect.

        Args:
            word: Non-empty word
            value: Hashable, non-None value

        Raises:
            InvalidArgumentError: If word is None, not a string or empty, or
                value is None or unhashable
        """
        _require_text(word, "Word")
        _require_value(value)
        self._insert(self.config.fold(word), value)

    def insert_many(self, words: Iterable[str], value: Any) -> None:
        """Associate one value with several words.

        All words are validated before the first insertion, so a rejected
        call leaves the tree unchanged.

        Raises:
            InvalidArgumentError: If any word or the value is invalid
        """
        if words is None or isinstance(words, str):
            raise InvalidArgumentError("Words must be an iterable of strings")
        words = list(words)
        for word in words:
            _require_text(word, "Word")
        _require_value(value)

        for word in words:
            self._insert(self.config.fold(word), value)

    def remove(self, value: Any) -> None:
        """Remove value from every word it is associated with.

        Words left without values disappear and the tree is compacted.
        Removing an unknown value does nothing.

        Raises:
            InvalidArgumentError: If value is None or unhashable
        """
        _require_value(value)
        if value not in self._index:
            return

        for node in self._index.nodes_for(value):
            node.remove_value(value)
            self._compact(node)

        self._index.pop(value)

    def clear(self) -> None:
        """Remove all words and values."""
        self._root = None
        self._index.clear()
        logger.debug("Cleared radix tree")

    # Lookup internals

    def _find_node(self, word: str) -> Optional[RadixNode]:
        node = self._root
        rest = word

        while node is not None:
            label = node.label
            if label == rest:
                return node

            common = _common_prefix_length(label, rest)
            if common < len(label):
                return None

            rest = rest[common:]
            node = node.get_child(rest[0])
            rest = rest[1:]

        return None

    # Insertion internals

    def _insert(self, word: str, value: Any) -> None:
        if self._root is None:
            self._root = RadixNode(word)
            self._attach(self._root, value)
            logger.debug("Created root %r", word)
            return

        node = self._root
        rest = word

        while True:
            label = node.label
            if label == rest:
                self._attach(node, value)
                return

            common = _common_prefix_length(label, rest)
            if common < len(label):
                self._split(node, common, rest[common:], value)
                return

            rest = rest[common:]
            child = node.get_child(rest[0])
            if child is None:
                leaf = RadixNode(rest[1:])
                node.set_child(rest[0], leaf)
                self._attach(leaf, value)
                return

            node = child
            rest = rest[1:]

    def _split(self, node: RadixNode, common: int, word_rest: str, value: Any) -> None:
        """Split node after `common` label characters.

        A new node carrying the shared part takes node's place; node keeps
        the remainder of its label past the first divergent character,
        which becomes the edge label between them.
        """
        label = node.label
        node_rest = label[common:]
        branch = RadixNode(label[:common])

        if node is self._root:
            self._root = branch
        else:
            node.parent.set_child(node.parent_edge_label, branch)

        node.label = node_rest[1:]
        branch.set_child(node_rest[0], node)

        if word_rest:
            leaf = RadixNode(word_rest[1:])
            branch.set_child(word_rest[0], leaf)
            self._attach(leaf, value)
        else:
            self._attach(branch, value)

        logger.debug("Split %r into %r + %r", label, branch.label, node_rest)

    def _attach(self, node: RadixNode, value: Any) -> None:
        node.add_value(value)
        self._index.add(value, node)

    # Removal internals

    def _compact(self, node: Optional[RadixNode]) -> None:
        """Repair the structure around node after it lost a value or child.

        Childless, valueless nodes are pruned and the check moves up to the
        parent. A valueless node with a single child is merged into that
        child, which ends the repair.
        """
        while node is not None:
            child_count = node.child_count()
            if child_count > 1 or node.value_count() > 0:
                return

            if child_count == 1:
                self._merge(node)
                return

            if node is self._root:
                self._root = None
                logger.debug("Pruned root, tree is empty")
                return

            parent = node.parent
            parent.remove_child(node.parent_edge_label)
            logger.debug("Pruned empty leaf %r", node.label)
            node = parent

    def _merge(self, node: RadixNode) -> None:
        """Fold a valueless single-child node into its child."""
        edge = node.edge_labels()[0]
        child = node.remove_child(edge)
        child.label = node.label + edge + child.label

        if node is self._root:
            self._root = child
        else:
            parent = node.parent
            parent_edge = node.parent_edge_label
            parent.remove_child(parent_edge)
            parent.set_child(parent_edge, child)

        logger.debug("Merged %r into child, now %r", node.label, child.label)

    # Comparison

    def __eq__(self, other: object) -> bool:
        """Trees are equal when their root subtrees are structurally equal."""
        if self is other:
            return True
        if not isinstance(other, RadixTree):
            return NotImplemented
        if self._root is None or other._root is None:
            return self._root is other._root
        return self._root == other._root

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={self.size()}, "
            f"nodes={self.node_count()})"
        )

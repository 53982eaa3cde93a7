"""Test fixtures for RadixIndex consumers.

These fixtures provide controlled access to internal state for testing purposes
without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..api import traverse_subtree
from ..config import IndexConfig
from ..core.node import RadixNode
from ..tree import RadixTree


class RadixTreeTestHelper:
    """Public test fixture for verifying tree structure.

    Example:
        tree = RadixTree()
        tree.insert("tree", 1)
        helper = RadixTreeTestHelper(tree)

        assert helper.check_invariants() == []
        assert helper.describe() == {'label': 'tree', 'values': {1}, 'children': {}}
    """

    def __init__(self, tree: RadixTree):
        """Initialize with the tree under test.

        Args:
            tree: The RadixTree to inspect
        """
        self._tree = tree

    def nodes(self) -> List[RadixNode]:
        """All live nodes of the tree."""
        return [node for node, _ in traverse_subtree(self._tree.root)]

    def node_for(self, word: str) -> Optional[RadixNode]:
        """Return the node spelling exactly this (already folded) word."""
        for node in self.nodes():
            if node.word() == word:
                return node
        return None

    def describe(self, node: Optional[RadixNode] = None) -> Optional[Dict[str, Any]]:
        """Nested dict snapshot of a subtree (the whole tree by default).

        Returns:
            Dictionary with 'label', 'values' and 'children' (keyed by edge
            character), or None for an empty tree
        """
        if node is None:
            node = self._tree.root
            if node is None:
                return None
        return {
            'label': node.label,
            'values': set(node.values),
            'children': {
                edge: self.describe(node.get_child(edge))
                for edge in sorted(node.edge_labels())
            },
        }

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - node_count: Number of live nodes
            - size: Number of distinct indexed values
            - words: Mapping of stored word -> set of values
            - root_label: Label of the root, or None when empty
        """
        root = self._tree.root
        return {
            'node_count': self._tree.node_count(),
            'size': self._tree.size(),
            'words': {word: set(values) for word, values in self._tree.items()},
            'root_label': root.label if root is not None else None,
        }

    def check_invariants(self) -> List[str]:
        """Return a list of violated structural invariants (empty if none).

        Checked:
        - every child's parent link points back at its parent under the
          same edge character, and the root has no parent
        - no non-root node is valueless with fewer than two children
        - the value index mirrors the value sets of all live nodes
        """
        problems: List[str] = []
        root = self._tree.root
        index = self._tree._index

        if root is None:
            if len(index):
                problems.append(f"empty tree but index holds {len(index)} values")
            return problems

        if root.parent is not None:
            problems.append("root has a parent link")

        held: Dict[Any, List[int]] = {}
        for node in self.nodes():
            for edge in node.edge_labels():
                child = node.get_child(edge)
                if child.parent is not node or child.parent_edge_label != edge:
                    problems.append(f"broken parent link under {node.word()!r} at {edge!r}")

            if node is not root and node.value_count() == 0:
                if node.child_count() == 0:
                    problems.append(f"empty leaf {node.word()!r}")
                elif node.child_count() == 1:
                    problems.append(f"mergeable node {node.word()!r}")

            for value in node.values:
                held.setdefault(value, []).append(id(node))

        if root.value_count() == 0 and root.child_count() < 2:
            problems.append(f"root {root.label!r} is valueless with {root.child_count()} children")

        indexed = set(index.values())
        if indexed != set(held):
            problems.append(f"index values {indexed!r} != held values {set(held)!r}")
        for value, node_ids in held.items():
            index_ids = {id(n) for n in index.nodes_for(value)}
            if index_ids != set(node_ids):
                problems.append(f"index nodes for {value!r} do not match holders")

        return problems


def build_tree(pairs: Iterable[Tuple[str, Any]], config: Optional[IndexConfig] = None) -> RadixTree:
    """Build a tree by inserting (word, value) pairs in order."""
    tree = RadixTree(config)
    for word, value in pairs:
        tree.insert(word, value)
    return tree

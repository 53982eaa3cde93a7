"""Tests for find_by_prefix."""

import pytest

from radixindex import IndexConfig, RadixTree
from radixindex.testing import build_tree


@pytest.fixture
def fruit_tree():
    return build_tree([
        ("app", 1),
        ("apple", 2),
        ("application", 3),
        ("banana", 4),
        ("band", 5),
    ])


class TestFindByPrefix:

    def test_prefix_ending_on_node_boundary(self, fruit_tree):
        assert fruit_tree.find_by_prefix("app") == {1, 2, 3}

    def test_prefix_ending_inside_label(self, fruit_tree):
        assert fruit_tree.find_by_prefix("appl") == {2, 3}
        assert fruit_tree.find_by_prefix("ba") == {4, 5}
        assert fruit_tree.find_by_prefix("bana") == {4}

    def test_single_character_prefix(self, fruit_tree):
        assert fruit_tree.find_by_prefix("a") == {1, 2, 3}
        assert fruit_tree.find_by_prefix("b") == {4, 5}

    def test_full_word_as_prefix(self, fruit_tree):
        assert fruit_tree.find_by_prefix("apple") == {2}
        assert fruit_tree.find_by_prefix("application") == {3}

    def test_prefix_longer_than_any_word(self, fruit_tree):
        assert fruit_tree.find_by_prefix("apples") == set()
        assert fruit_tree.find_by_prefix("applications") == set()

    def test_diverging_prefix(self, fruit_tree):
        assert fruit_tree.find_by_prefix("apr") == set()
        assert fruit_tree.find_by_prefix("cherry") == set()

    def test_case_insensitive(self, fruit_tree):
        assert fruit_tree.find_by_prefix("APP") == {1, 2, 3}
        assert fruit_tree.find_by_prefix("BaN") == {4, 5}

    def test_every_word_matches_its_own_prefixes(self):
        words = ["tree", "treehouse", "trie", "prefix", "patricia", "p"]
        tree = build_tree((word, word) for word in words)

        for word in words:
            for end in range(1, len(word) + 1):
                assert word in tree.find_by_prefix(word[:end])

    def test_prefix_on_root_with_empty_label(self):
        tree = build_tree([("tree", 1), ("prefix", 3), ("patricia", 5)])
        assert tree.find_by_prefix("p") == {3, 5}
        assert tree.find_by_prefix("t") == {1}

    def test_result_is_a_copy(self, fruit_tree):
        result = fruit_tree.find_by_prefix("app")
        result.clear()
        assert fruit_tree.find_by_prefix("app") == {1, 2, 3}

    @pytest.mark.parametrize("strategy", ["dfs_pre", "dfs_post", "bfs"])
    def test_strategy_does_not_change_results(self, strategy):
        tree = RadixTree(IndexConfig(traversal=strategy))
        for value, word in enumerate(["app", "apple", "application", "banana"]):
            tree.insert(word, value)

        assert tree.find_by_prefix("app") == {0, 1, 2}
        assert tree.node_count() == 6

"""Shared fixtures for the RadixIndex test suite."""

import pytest

from radixindex import RadixTree
from radixindex.testing import RadixTreeTestHelper


@pytest.fixture
def tree():
    """An empty RadixTree with default configuration."""
    return RadixTree()


@pytest.fixture
def helper(tree):
    """Inspection helper bound to the ``tree`` fixture."""
    return RadixTreeTestHelper(tree)


"""Testing utilities for RadixIndex consumers."""

from .fixtures import RadixTreeTestHelper, build_tree

__all__ = ['RadixTreeTestHelper', 'build_tree']

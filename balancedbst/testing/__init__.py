"""Testing utilities for balancedbst consumers."""

from .fixtures import TreeTestHelper, assert_bst_invariant, tree_shape

__all__ = ['TreeTestHelper', 'assert_bst_invariant', 'tree_shape']

"""Unit tests for height, depth, balance detection and rebalancing."""

import math
import random

import pytest

from balancedbst import EmptyTreeError, Node, Tree
from balancedbst.core.traverser import LevelOrderTraverser
from balancedbst.testing import TreeTestHelper, assert_bst_invariant, tree_shape


class TestHeight:
    """Test height of trees and subtrees."""

    def test_empty_tree_height(self):
        assert Tree().height() == -1

    def test_single_leaf_height(self):
        assert Tree([1]).height() == 0

    def test_absent_subtree_height(self, sample_tree):
        assert sample_tree.height(None) == -1

    def test_subtree_height(self, sample_tree):
        assert sample_tree.height(sample_tree.find(8)) == 1
        assert sample_tree.height(sample_tree.find(9)) == 0

    @pytest.mark.parametrize("size", [1, 2, 3, 7, 8, 100, 1023, 1024])
    def test_built_height_is_minimal(self, size):
        tree = Tree(range(size))

        assert tree.height() == math.floor(math.log2(size))
        assert tree.height() <= math.ceil(math.log2(size + 1)) - 1
        assert TreeTestHelper(tree).has_minimal_height()


class TestDepth:
    """Test depth lookups by node and by value."""

    def test_root_depth(self, sample_tree):
        assert sample_tree.depth(sample_tree.root) == 0

    def test_node_depths(self, sample_tree):
        assert sample_tree.depth(sample_tree.find(8)) == 1
        assert sample_tree.depth(sample_tree.find(9)) == 2

    def test_depth_by_value(self, sample_tree):
        assert sample_tree.depth(3) == 1

    def test_depth_of_missing_value(self, sample_tree):
        assert sample_tree.depth(100) is None
        assert sample_tree.depth(Node(6)) is None

    def test_depth_on_empty_tree(self):
        assert Tree().depth(1) is None

    def test_detached_node_is_looked_up_by_value(self, sample_tree):
        """Depth compares values, so a look-alike node answers for the real one."""
        assert sample_tree.depth(Node(8)) == 1

    def test_depth_plus_height_bounded_by_tree_height(self):
        rng = random.Random(3)
        tree = Tree()
        for _ in range(150):
            tree.insert(rng.randint(0, 1000))

        total_height = tree.height()
        for node, _ in LevelOrderTraverser().traverse(tree.root):
            assert tree.depth(node) + tree.height(node) <= total_height

    def test_depth_matches_traverser_depth(self, sample_tree):
        for node, depth in LevelOrderTraverser().traverse(sample_tree.root):
            assert sample_tree.depth(node) == depth


class TestBalanced:
    """Test balance detection."""

    def test_empty_tree_is_balanced(self):
        assert Tree().balanced() is True
        assert Tree([1]).balanced(None) is True

    def test_built_tree_is_balanced(self, sample_tree):
        assert sample_tree.balanced() is True

    def test_three_node_chain_is_unbalanced(self):
        tree = Tree()
        for value in (1, 2, 3):
            tree.insert(value)

        assert tree.balanced() is False
        # The lower part of the chain is still within tolerance
        assert tree.balanced(tree.find(2)) is True

    def test_imbalance_deep_in_tree(self, sample_tree):
        """An unbalanced subtree makes the whole tree unbalanced."""
        sample_tree.insert(10)
        sample_tree.insert(11)

        assert sample_tree.balanced(sample_tree.find(9)) is False
        assert sample_tree.balanced() is False

    def test_equal_subtree_heights_but_unbalanced_child(self):
        """Root heights match, but each child leans by two."""
        tree = Tree([50])
        for value in (40, 30, 20, 60, 70, 80):
            tree.insert(value)

        assert tree.height(tree.root.left) == tree.height(tree.root.right)
        assert tree.balanced() is False


class TestRebalance:
    """Test explicit rebalancing."""

    def test_rebalance_skewed_tree(self):
        tree = Tree()
        for value in range(1, 8):
            tree.insert(value)

        result = tree.rebalance()

        assert result is tree
        assert tree.height() == 2
        assert tree.balanced() is True
        assert tree.inorder() == list(range(1, 8))

    def test_rebalance_is_idempotent(self):
        rng = random.Random(5)
        tree = Tree(rng.sample(range(500), 40))
        for _ in range(30):
            tree.insert(rng.randint(500, 1000))

        tree.rebalance()
        first = tree_shape(tree)
        tree.rebalance()

        assert tree_shape(tree) == first

    def test_rebalance_matches_fresh_build(self, sample_tree):
        for value in (10, 11, 12, 13):
            sample_tree.insert(value)

        sample_tree.rebalance()

        assert tree_shape(sample_tree) == tree_shape(Tree(sample_tree.inorder()))

    def test_rebalance_after_deletes(self, sample_tree):
        for value in (1, 3, 4):
            sample_tree.delete(value)

        sample_tree.rebalance()

        assert sample_tree.balanced() is True
        assert sample_tree.inorder() == [5, 7, 8, 9]
        assert_bst_invariant(sample_tree)

    def test_rebalance_empty_tree(self):
        tree = Tree().rebalance()

        assert tree.root is None


class TestFindMin:
    """Test minimum/maximum lookup and its empty-subtree contract."""

    def test_find_in_subtree(self, sample_tree):
        right = sample_tree.root.right

        assert sample_tree.find(7, right) is sample_tree.root.right.left
        assert sample_tree.find(8, right) is right
        # 3 lives in the left subtree, so the right subtree doesn't hold it
        assert sample_tree.find(3, right) is None

    def test_find_in_absent_subtree(self, sample_tree):
        assert sample_tree.find(5, None) is None

    def test_find_defaults_to_whole_tree(self, sample_tree):
        assert sample_tree.find(3) is sample_tree.root.left

    def test_find_min_of_tree(self, sample_tree):
        assert sample_tree.find_min().value == 1

    def test_find_min_of_subtree(self, sample_tree):
        assert sample_tree.find_min(sample_tree.root.right).value == 7

    def test_find_max(self, sample_tree):
        assert sample_tree.find_max().value == 9
        assert sample_tree.find_max(sample_tree.root.left).value == 4

    def test_find_min_on_empty_tree_raises(self):
        with pytest.raises(EmptyTreeError):
            Tree().find_min()

    def test_find_min_on_absent_subtree_raises(self, sample_tree):
        with pytest.raises(ValueError):
            sample_tree.find_min(None)

    def test_find_max_on_empty_tree_raises(self):
        with pytest.raises(EmptyTreeError):
            Tree().find_max()

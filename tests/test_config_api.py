"""Tests for configuration objects and the functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from arborlib import (
    BinaryTree,
    ConfigurationError,
    DepthConfig,
    InvalidArgumentError,
    RenderConfig,
    TraversalConfig,
    TraversalStrategy,
    TreeInvariantError,
    UnorderedTree,
    build_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    traverse_tree,
)
from arborlib.testing import make_ordered_sample


@pytest.fixture
def root():
    return make_ordered_sample().root


class TestTraversalConfig:
    """Validation of traversal settings."""

    def test_defaults_are_valid(self):
        config = TraversalConfig()
        assert config.validate() == []
        assert config.strategy is TraversalStrategy.PRE_ORDER
        assert config.ensure_valid() is config

    def test_negative_depths(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=-1, max_depth=-2))
        errors = config.validate()
        assert "min_depth cannot be negative" in errors
        assert "max_depth cannot be negative" in errors

    def test_inverted_window(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        with pytest.raises(ConfigurationError):
            config.ensure_valid()

    def test_non_callable_filter(self):
        config = TraversalConfig(include_filter="nope")
        assert config.validate() == ["include_filter must be callable"]

    def test_depth_window(self):
        window = DepthConfig(min_depth=1, max_depth=2)
        assert not window.should_yield(0)
        assert window.should_yield(2)
        assert not window.should_yield(3)
        assert window.should_explore(1)
        assert not window.should_explore(2)


class TestRenderConfig:
    """Validation of rendering settings."""

    def test_defaults_are_valid(self):
        assert RenderConfig().validate() == []

    def test_non_string_connector(self):
        errors = RenderConfig(pipe=None).validate()
        assert errors == ["pipe must be a string"]

    def test_width_mismatch(self):
        with pytest.raises(ConfigurationError):
            RenderConfig(blank="  ").ensure_valid()


class TestBuildTree:
    """Building trees from nested tuples."""

    def test_ordered(self):
        tree = build_tree(("a", ["b", ("c", ["d", "e"])]))
        assert tree.traverse_pre_order() == ["a", "b", "c", "d", "e"]
        assert tree.VARIANT == "ordered"

    def test_variants(self):
        assert isinstance(build_tree((1, [2]), variant="unordered"), UnorderedTree)
        assert isinstance(build_tree((1, [2, 3]), variant="binary"), BinaryTree)

    def test_leaf_only(self):
        tree = build_tree("solo")
        assert tree.get_element() == "solo"
        assert tree.is_leaf()

    def test_unknown_variant(self):
        with pytest.raises(InvalidArgumentError):
            build_tree(1, variant="ternary")

    def test_binary_overflow(self):
        with pytest.raises(TreeInvariantError):
            build_tree((1, [2, 3, 4]), variant="binary")


class TestFunctionalApi:
    """Functional wrappers over the traversers."""

    def test_traverse_tree(self, root):
        elements = [n.get_element() for n in traverse_tree(root, strategy="level", max_depth=1)]
        assert elements == [1, 2, 3]

    def test_traverse_tree_rejects_bad_window(self, root):
        with pytest.raises(ConfigurationError):
            list(traverse_tree(root, min_depth=2, max_depth=1))

    def test_count_nodes(self, root):
        assert count_nodes(root) == 9
        assert count_nodes(root, max_depth=1) == 3
        assert count_nodes(root, min_depth=2) == 6

    def test_find_nodes(self, root):
        found = list(find_nodes(root, lambda n: n.get_element() > 10))
        assert [n.get_element() for n in found] == [11, 12]

    def test_get_tree_paths(self, root):
        assert list(get_tree_paths(root, max_depth=1)) == [[1], [1, 2], [1, 3]]
        paths = list(get_tree_paths(root))
        assert [1, 2, 4, 5] in paths

    def test_get_leaf_nodes(self, root):
        leaves = [n.get_element() for n in get_leaf_nodes(root)]
        assert leaves == root.get_yield()

    def test_collect_tree_data(self, root):
        data = dict(
            (node.get_element(), value)
            for node, value in collect_tree_data(root, lambda n, d: d, strategy="post")
        )
        assert data[5] == 3
        assert data[1] == 0

    def test_collect_tree_data_unknown_option(self, root):
        with pytest.raises(InvalidArgumentError):
            list(collect_tree_data(root, lambda n, d: d, colour="red"))

    def test_get_tree_stats(self, root):
        stats = get_tree_stats(root)
        assert stats['size'] == 9
        assert stats['leaves'] == 5
        assert stats['internal_nodes'] == 4
        assert stats['depths'] == {0: 1, 1: 2, 2: 5, 3: 1}
        assert stats['depth'] == 4
        assert stats['degree'] == 4
        assert stats['balanced'] is False
        assert stats['yield'] == [5, 6, 11, 12, 7]

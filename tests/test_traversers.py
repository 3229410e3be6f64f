"""Tests for the traversal strategies and their depth windows."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from arborlib import (
    ConfigurationError,
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    TraversalStrategy,
    UnorderedTree,
    create_traverser,
)
from arborlib.testing import make_ordered_sample


@pytest.fixture
def root():
    return make_ordered_sample().root


def _visit(traverser, root, **kwargs):
    return [(node.get_element(), depth) for node, depth in traverser.traverse(root, **kwargs)]


class TestTraversalOrders:
    """Node order and reported depths."""

    def test_pre_order_depths(self, root):
        assert _visit(PreOrderTraverser(), root) == [
            (1, 0), (2, 1), (4, 2), (5, 3), (6, 2), (11, 2), (12, 2), (3, 1), (7, 2),
        ]

    def test_post_order_depths(self, root):
        assert _visit(PostOrderTraverser(), root) == [
            (5, 3), (4, 2), (6, 2), (11, 2), (12, 2), (2, 1), (7, 2), (3, 1), (1, 0),
        ]

    def test_level_order_depths(self, root):
        visited = _visit(LevelOrderTraverser(), root)
        depths = [depth for _, depth in visited]
        assert depths == sorted(depths)
        assert [e for e, _ in visited] == [1, 2, 3, 4, 6, 11, 12, 7, 5]

    def test_helpers(self, root):
        assert PreOrderTraverser().elements(root)[:3] == [1, 2, 4]
        assert PostOrderTraverser().nodes(root)[-1] is root

    def test_deep_chain_does_not_recurse(self):
        chain = UnorderedTree(0)
        node = chain
        for i in range(1, 5000):
            node = node.add_child(i)
        assert len(PreOrderTraverser().nodes(chain)) == 5000
        assert PostOrderTraverser().elements(chain)[0] == 4999
        assert chain.depth() == 5000


class TestDepthWindow:
    """min_depth / max_depth handling."""

    def test_max_depth(self, root):
        assert _visit(PreOrderTraverser(), root, max_depth=1) == [(1, 0), (2, 1), (3, 1)]
        assert _visit(PostOrderTraverser(), root, max_depth=1) == [(2, 1), (3, 1), (1, 0)]

    def test_min_depth(self, root):
        elements = [e for e, _ in _visit(LevelOrderTraverser(), root, min_depth=3)]
        assert elements == [5]

    def test_exact_level(self, root):
        elements = [e for e, _ in _visit(PreOrderTraverser(), root, min_depth=2, max_depth=2)]
        assert elements == [4, 6, 11, 12, 7]

    def test_zero_max_depth(self, root):
        assert _visit(LevelOrderTraverser(), root, max_depth=0) == [(1, 0)]


class TestCreateTraverser:
    """Factory and strategy name parsing."""

    @pytest.mark.parametrize("name,expected", [
        ("pre", PreOrderTraverser),
        ("dfs", PreOrderTraverser),
        ("pre_order", PreOrderTraverser),
        ("post", PostOrderTraverser),
        ("dfs_post", PostOrderTraverser),
        ("level", LevelOrderTraverser),
        ("BFS", LevelOrderTraverser),
        (TraversalStrategy.LEVEL_ORDER, LevelOrderTraverser),
    ])
    def test_known_names(self, name, expected):
        assert isinstance(create_traverser(name), expected)

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError):
            create_traverser("sideways")

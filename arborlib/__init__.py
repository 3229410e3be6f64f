"""arborlib - In-memory generic trees.

arborlib provides three tree variants sharing one node contract:

    from arborlib import OrderedTree, UnorderedTree, BinaryTree

    root = OrderedTree(1)
    root.add_child(2).add_child(4)
    root.add_child(3)
    print(root)             # UNIX tree-style drawing
    root.binarize()         # left-child / right-sibling encoding

Every node is also the root of its own subtree, so whole-tree queries
(``size``, ``depth``, ``get_yield``, ...) can be asked of any node.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    InvalidArgumentError,
    ChildIndexError,
    ConfigurationError,
    TreeInvariantError,
    VariantMismatchError,
    MalformedTreeError,
)
from .config import DepthConfig, RenderConfig, TraversalConfig, TraversalStrategy
from .core import (
    MISSING,
    Tree,
    AbstractTree,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    render_newick,
    render_tree,
)
from .trees import BinaryTree, OrderedTree, UnorderedTree
from .api import (
    build_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    traverse_tree,
)

# Applications decide where library logs go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "InvalidArgumentError",
    "ChildIndexError",
    "ConfigurationError",
    "TreeInvariantError",
    "VariantMismatchError",
    "MalformedTreeError",
    # Configuration
    "DepthConfig",
    "RenderConfig",
    "TraversalConfig",
    "TraversalStrategy",
    # Core
    "MISSING",
    "Tree",
    "AbstractTree",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "render_newick",
    "render_tree",
    # Variants
    "OrderedTree",
    "UnorderedTree",
    "BinaryTree",
    # Functional API
    "build_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    "traverse_tree",
]

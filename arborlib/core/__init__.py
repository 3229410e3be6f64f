"""Core components of arborlib.

This internal package holds the node contract, the shared node logic, the
traversers and the renderers. Concrete variants live in ``arborlib.trees``.

Important: This package must NEVER import from ``arborlib.trees`` to avoid
circular dependencies.
"""

from .node import MISSING, Tree
from .base import AbstractTree
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .render import render_newick, render_tree

__all__ = [
    'MISSING',
    'Tree',
    'AbstractTree',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'render_newick',
    'render_tree',
]

"""Concrete tree variants.

- ``UnorderedTree``: children form a multiset, no positions.
- ``OrderedTree``: children form an index-addressable sequence.
- ``BinaryTree``: an ordered tree with a left and a right slot.
"""

from .ordered import OrderedTree
from .binary import BinaryTree
from .unordered import UnorderedTree

__all__ = [
    'OrderedTree',
    'BinaryTree',
    'UnorderedTree',
]

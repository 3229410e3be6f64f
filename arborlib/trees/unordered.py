"""Unordered trees: children kept as a multiset.

Children have no position. The same node object may be added to a parent
more than once, in which case it counts once per addition, and distinct
sibling nodes may hold equal elements. Nodes compare and hash by identity.
"""

import logging
from collections import Counter
from typing import Any, Iterator, List, Optional

from ..core.base import AbstractTree
from ..core.node import Tree

logger = logging.getLogger(__name__)


class UnorderedTree(AbstractTree):
    """A tree whose children form an unordered multiset.

    Whole-tree views (``get_nodes``, ``get_elements``, ``find``) come from a
    depth-first walk over an explicit stack with a visited set, so a node
    listed several times by its parent is still visited once. The order of
    that walk follows the multiset's iteration order and carries no meaning.
    """

    VARIANT = "unordered"

    def __init__(self, element: Any = None):
        super().__init__(element)
        self._children: Optional['Counter[UnorderedTree]'] = None

    # Child storage

    def _append_child(self, child: 'UnorderedTree') -> None:
        if self._children is None:
            self._children = Counter()
        self._children[child] += 1

    def _detach_child(self, child: 'UnorderedTree') -> None:
        # Re-parenting takes every occurrence along
        if self._children is not None:
            self._children.pop(child, None)

    def _attach(self, child: 'UnorderedTree') -> None:
        if child.get_parent() is self:
            # Already ours: count one more occurrence
            self._check_variant(child)
            self._append_child(child)
            return
        child.set_parent(self)

    def _clear_children(self) -> None:
        if self._children is not None:
            for child in self._children:
                if child.get_parent() is self:
                    child._clear_parent()
        self._children = None

    def iter_children(self) -> Iterator['UnorderedTree']:
        if self._children is None:
            return iter(())
        return self._children.elements()

    def get_children(self) -> 'Counter[UnorderedTree]':
        """Return a copy of the child multiset (node -> occurrence count)."""
        return Counter(self._children or {})

    def num_children(self) -> int:
        if self._children is None:
            return 0
        return sum(self._children.values())

    # Removal

    def remove_child(self, node_or_element: Any) -> None:
        """Remove one occurrence of a child node, or all children holding an element.

        An element argument rebuilds the multiset without any child whose
        element matches.
        """
        if self._children is None:
            return

        if isinstance(node_or_element, Tree):
            if node_or_element in self._children:
                self._children[node_or_element] -= 1
                if self._children[node_or_element] <= 0:
                    del self._children[node_or_element]
                    node_or_element._clear_parent()
            return

        kept: 'Counter[UnorderedTree]' = Counter()
        for child, count in self._children.items():
            if child.get_element() == node_or_element:
                if child.get_parent() is self:
                    child._clear_parent()
                continue
            kept[child] = count
        logger.debug("Dropped %d children holding %r from %r",
                     self.num_children() - sum(kept.values()), node_or_element, self)
        self._children = kept

    # Siblings

    def get_siblings(self) -> 'Counter[UnorderedTree]':
        siblings: 'Counter[UnorderedTree]' = Counter()
        parent = self.get_parent()
        if parent is None:
            return siblings
        for child, count in parent.get_children().items():
            if child is self:
                continue
            siblings[child] = count
        return siblings

    def get_sibling_elements(self) -> 'Counter[Any]':
        elements: 'Counter[Any]' = Counter()
        for node, count in self.get_siblings().items():
            elements[node.get_element()] += count
        return elements

    def num_siblings(self) -> int:
        return sum(self.get_siblings().values())

    # Whole-tree views

    def get_unordered_tree_nodes(self) -> List['UnorderedTree']:
        """Return every node of this (sub)tree in depth-first order."""
        return self.get_nodes()

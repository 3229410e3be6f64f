"""Binary trees: ordered trees with exactly two addressable slots.

Slot 0 is the left child and slot 1 the right child. Once a node has had a
child, its collection is a fixed two-slot list in which either slot may be
empty, so a node can hold a right child without a left one::

    >>> root = BinaryTree("a")
    >>> root.set_right_child("c")
    >>> root.get_left_child() is None
    True
    >>> root.num_children()
    1
"""

import logging
from typing import Any, Iterator, List, Optional

from ..core.node import MISSING, Tree
from ..errors import ChildIndexError, TreeInvariantError
from .ordered import OrderedTree

logger = logging.getLogger(__name__)

LEFT_CHILD_INDEX = 0
RIGHT_CHILD_INDEX = 1


class BinaryTree(OrderedTree):
    """A tree node with a left and a right slot.

    Adding children fills the left slot, then the right slot; a third child
    is an invariant violation. Removing a child empties its slot without
    shifting the other one.
    """

    VARIANT = "binary"

    # Child storage

    def _init_children(self) -> None:
        self._children = [None, None]

    def _append_child(self, child: 'BinaryTree') -> None:
        if self._children is None:
            self._init_children()
        for index in (LEFT_CHILD_INDEX, RIGHT_CHILD_INDEX):
            if self._children[index] is None:
                self._children[index] = child
                return
        logger.error("Binary node %r already has two children", self)
        raise TreeInvariantError("A binary tree node cannot add three or more children.")

    def _detach_child(self, child: 'BinaryTree') -> None:
        if self._children is None:
            return
        for index in (LEFT_CHILD_INDEX, RIGHT_CHILD_INDEX):
            if self._children[index] is child:
                self._children[index] = None
                return

    def _check_can_accept(self, child: 'BinaryTree') -> None:
        # A child already held here frees its own slot when it is re-added
        if child.get_parent() is not self and self.num_children() >= 2:
            logger.error("Binary node %r already has two children", self)
            raise TreeInvariantError("A binary tree node cannot add three or more children.")

    def _place(self, index: int, child: 'BinaryTree') -> None:
        """Put ``child`` in a slot, replacing whatever it held.

        Same contract as ``set_child_at``: the displaced node keeps its
        parent link.
        """
        self._check_variant(child)
        if self._children is None:
            self._init_children()

        displaced = self._children[index]
        if displaced is child:
            return
        child._set_parent(self, add_child=False)
        self._children[index] = child
        logger.debug("Placed %r in slot %d of %r (was %r)", child, index, self, displaced)

    def _check_index(self, index: int) -> None:
        if self._children is None or index not in (LEFT_CHILD_INDEX, RIGHT_CHILD_INDEX):
            raise ChildIndexError(index, self.num_children())

    def _child_slots(self) -> List[Optional['BinaryTree']]:
        if not self.has_child():
            return []
        return list(self._children)

    def iter_children(self) -> Iterator['BinaryTree']:
        if self._children is None:
            return iter(())
        return (child for child in self._children if child is not None)

    def num_children(self) -> int:
        """Count the occupied slots."""
        if self._children is None:
            return 0
        return sum(1 for child in self._children if child is not None)

    # Index-based access

    def get_child_at(self, index: int) -> Optional['BinaryTree']:
        """Return the child in slot ``index`` (0 or 1), possibly ``None``.

        Raises:
            ChildIndexError: If the index is not 0 or 1, or the node has never
                had children
        """
        self._check_index(index)
        return self._children[index]

    def set_child_at(self, index: int, child: 'BinaryTree') -> None:
        """Put ``child`` in slot ``index``, replacing the slot's content.

        Raises:
            ChildIndexError: If the index is not 0 or 1, or the node has never
                had children
        """
        self._check_index(index)
        self._place(index, child)

    def remove_child_at(self, index: int) -> Optional['BinaryTree']:
        """Empty slot ``index`` and return what it held.

        Raises:
            ChildIndexError: If the index is not 0 or 1, or the node has never
                had children
        """
        self._check_index(index)
        child = self._children[index]
        self._children[index] = None
        if child is not None and child.get_parent() is self:
            child._clear_parent()
        return child

    def get_first_child(self) -> 'BinaryTree':
        """Return the first occupied slot's child."""
        children = self.get_children()
        if not children:
            raise ChildIndexError(0, 0)
        return children[0]

    def get_last_child(self) -> 'BinaryTree':
        """Return the last occupied slot's child."""
        children = self.get_children()
        if not children:
            raise ChildIndexError(0, 0)
        return children[-1]

    def remove_child(self, node_or_element: Any) -> None:
        """Empty the slot holding a node, or every slot whose element matches."""
        if self._children is None:
            return

        for index in (LEFT_CHILD_INDEX, RIGHT_CHILD_INDEX):
            child = self._children[index]
            if child is None:
                continue
            if isinstance(node_or_element, Tree):
                matches = child is node_or_element
            else:
                matches = child.get_element() == node_or_element
            if matches:
                self.remove_child_at(index)

    # Left slot

    def get_left_child(self) -> Optional['BinaryTree']:
        if self._children is None:
            return None
        return self._children[LEFT_CHILD_INDEX]

    def has_left_child(self, node_or_element: Any = MISSING) -> bool:
        left = self.get_left_child()
        if left is None:
            return False
        if node_or_element is MISSING:
            return True
        if isinstance(node_or_element, Tree):
            return left is node_or_element
        return left.get_element() == node_or_element

    def set_left_child(self, node_or_element: Any) -> None:
        """Set the left child.

        An element rewrites the existing left child's element, or creates a
        new left child. A node replaces the left slot's content.
        """
        if not isinstance(node_or_element, Tree):
            left = self.get_left_child()
            if left is not None:
                left.set_element(node_or_element)
                return
            node_or_element = self._new_node(node_or_element)
        self._place(LEFT_CHILD_INDEX, node_or_element)

    def remove_left_child(self) -> None:
        if self.has_left_child():
            self.remove_child_at(LEFT_CHILD_INDEX)

    def get_deepest_left_leaf(self) -> 'BinaryTree':
        """Follow left links down from this node; return the last node reached."""
        node = self
        while node.has_left_child():
            node = node.get_left_child()
        return node

    # Right slot

    def get_right_child(self) -> Optional['BinaryTree']:
        if self._children is None:
            return None
        return self._children[RIGHT_CHILD_INDEX]

    def has_right_child(self, node_or_element: Any = MISSING) -> bool:
        right = self.get_right_child()
        if right is None:
            return False
        if node_or_element is MISSING:
            return True
        if isinstance(node_or_element, Tree):
            return right is node_or_element
        return right.get_element() == node_or_element

    def set_right_child(self, node_or_element: Any) -> None:
        """Set the right child.

        An element rewrites the existing right child's element, or creates a
        new right child. A node replaces the right slot's content. With no
        left child the left slot stays empty.
        """
        if not isinstance(node_or_element, Tree):
            right = self.get_right_child()
            if right is not None:
                right.set_element(node_or_element)
                return
            node_or_element = self._new_node(node_or_element)
        self._place(RIGHT_CHILD_INDEX, node_or_element)

    def remove_right_child(self) -> None:
        if self.has_right_child():
            self.remove_child_at(RIGHT_CHILD_INDEX)

    def get_deepest_right_leaf(self) -> 'BinaryTree':
        """Follow right links down from this node; return the last node reached.

        If this node has no right child, it is its own deepest right leaf.
        """
        node = self
        while node.has_right_child():
            node = node.get_right_child()
        return node

    # Lookup

    def find_child(self, element: Any) -> Optional['BinaryTree']:
        """Probe the left child, then the right child; one level only."""
        if self.has_left_child(element):
            return self.get_left_child()
        if self.has_right_child(element):
            return self.get_right_child()
        return None

    def get_binary_tree_nodes(self) -> List['BinaryTree']:
        """Return every node in pre-order."""
        return self.traverse_nodes_pre_order()

"""Ordered trees: children kept in an explicit, index-addressable sequence."""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from ..core.base import AbstractTree
from ..core.node import Tree
from ..core.traverser import (
    LevelOrderTraverser,
    PostOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)
from ..config import TraversalStrategy
from ..errors import ChildIndexError, TreeInvariantError

if TYPE_CHECKING:
    from .binary import BinaryTree

logger = logging.getLogger(__name__)


class OrderedTree(AbstractTree):
    """A tree whose children are ordered by position.

    Children are numbered 0..n-1 in insertion (or explicitly set) order.
    Two ordered trees are equal when their elements are equal and their
    children are equal position by position; the hash is derived from the
    level-order sequence of elements so that it agrees with equality.

    Example:
        >>> root = OrderedTree(1)
        >>> two = root.add_child(2)
        >>> root.add_child(3)
        OrderedTree(3)
        >>> two.add_child(4)
        OrderedTree(4)
        >>> root.traverse_pre_order()
        [1, 2, 4, 3]
    """

    VARIANT = "ordered"

    def __init__(self, element: Any = None):
        super().__init__(element)
        self._children: Optional[List[Optional['OrderedTree']]] = None

    # Child storage

    def _init_children(self) -> None:
        self._children = []

    def _append_child(self, child: 'OrderedTree') -> None:
        if self._children is None:
            self._init_children()
        self._children.append(child)

    def _detach_child(self, child: 'OrderedTree') -> None:
        if self._children is None:
            return
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                return

    def _clear_children(self) -> None:
        if self._children is not None:
            for child in self._children:
                if child is not None and child.get_parent() is self:
                    child._clear_parent()
        self._children = None

    def _check_index(self, index: int) -> None:
        if not self.has_child() or index < 0 or index >= self.num_children():
            raise ChildIndexError(index, self.num_children())

    def iter_children(self) -> Iterator['OrderedTree']:
        if self._children is None:
            return iter(())
        return (child for child in self._children if child is not None)

    def get_children(self) -> List['OrderedTree']:
        """Return a copy of the child list."""
        return list(self.iter_children())

    def num_children(self) -> int:
        if not self._children:
            return 0
        return len(self._children)

    # Index-based access

    def get_child_at(self, index: int) -> 'OrderedTree':
        """Return the child at ``index``.

        Raises:
            ChildIndexError: If the index is negative or past the last child
        """
        self._check_index(index)
        return self._children[index]

    def set_child_at(self, index: int, child: 'OrderedTree') -> None:
        """Replace the child at ``index`` with ``child``.

        ``child`` is detached from its former parent and linked to this node
        without being appended. The node previously held in the slot is not
        touched: it keeps its parent link, which now points at a parent that
        no longer lists it. Use ``remove_child_at`` first if that node must
        become a proper root.

        Raises:
            ChildIndexError: If the index is negative or past the last child
            VariantMismatchError: If ``child`` is of another variant
        """
        self._check_index(index)
        self._check_variant(child)

        displaced = self._children[index]
        if displaced is child:
            return

        if child.get_parent() is self:
            # Moving within this node: account for the slot it leaves
            current = next((i for i, c in enumerate(self._children) if c is child), None)
            if current is not None and current < index:
                index -= 1
        child._set_parent(self, add_child=False)
        self._children[index] = child
        logger.debug("Replaced child %r of %r at %d with %r", displaced, self, index, child)

    def remove_child_at(self, index: int) -> 'OrderedTree':
        """Remove and return the child at ``index``; later children shift left.

        Raises:
            ChildIndexError: If the index is negative or past the last child
        """
        self._check_index(index)
        child = self._children.pop(index)
        if child is not None and child.get_parent() is self:
            child._clear_parent()
        return child

    def get_first_child(self) -> 'OrderedTree':
        return self.get_child_at(0)

    def get_last_child(self) -> 'OrderedTree':
        return self.get_child_at(self.num_children() - 1)

    def is_first_child(self, node: 'OrderedTree') -> bool:
        return self.has_child() and self.get_first_child() is node

    def is_last_child(self, node: 'OrderedTree') -> bool:
        return self.has_child() and self.get_last_child() is node

    # Removal

    def remove_child(self, node_or_element: Any) -> None:
        """Remove a child node, or every child whose element matches.

        A node argument removes that exact node (compared by identity). An
        element argument rebuilds the child list without the matching
        children, dropping their whole subtrees.
        """
        if self._children is None:
            return

        if isinstance(node_or_element, Tree):
            if any(child is node_or_element for child in self._children):
                self._detach_child(node_or_element)
                node_or_element._clear_parent()
            return

        kept = []
        for child in self._children:
            if child is not None and child.get_element() == node_or_element:
                if child.get_parent() is self:
                    child._clear_parent()
                continue
            kept.append(child)
        self._children = kept

    # Siblings

    def get_siblings(self) -> List['OrderedTree']:
        parent = self.get_parent()
        if parent is None:
            return []
        return [child for child in parent.iter_children() if child is not self]

    # Traversal

    def get_nodes(self) -> List['OrderedTree']:
        return self.traverse_nodes_pre_order()

    def get_elements(self) -> List[Any]:
        return self.traverse_level_order()

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.LEVEL_ORDER) -> List[Any]:
        """Return the elements in the given order (level order by default)."""
        return create_traverser(strategy).elements(self)

    def traverse_nodes(self,
                       strategy: Union[TraversalStrategy, str] = TraversalStrategy.LEVEL_ORDER
                       ) -> List['OrderedTree']:
        """Return the nodes in the given order (level order by default)."""
        return create_traverser(strategy).nodes(self)

    def traverse_pre_order(self) -> List[Any]:
        return PreOrderTraverser().elements(self)

    def traverse_nodes_pre_order(self) -> List['OrderedTree']:
        return PreOrderTraverser().nodes(self)

    def traverse_post_order(self) -> List[Any]:
        return PostOrderTraverser().elements(self)

    def traverse_nodes_post_order(self) -> List['OrderedTree']:
        return PostOrderTraverser().nodes(self)

    def traverse_level_order(self) -> List[Any]:
        return LevelOrderTraverser().elements(self)

    def traverse_nodes_level_order(self) -> List['OrderedTree']:
        return LevelOrderTraverser().nodes(self)

    # Structural equality

    def _child_slots(self) -> List[Optional['OrderedTree']]:
        """Children as compared by ``__eq__``, empty slots included."""
        return list(self._children) if self._children else []

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, OrderedTree) or other.VARIANT != self.VARIANT:
            return NotImplemented

        pairs = [(self, other)]
        while pairs:
            left, right = pairs.pop()
            if left is right:
                continue
            if left is None or right is None:
                return False
            if left.get_element() != right.get_element():
                return False
            left_slots = left._child_slots()
            right_slots = right._child_slots()
            if len(left_slots) != len(right_slots):
                return False
            pairs.extend(zip(left_slots, right_slots))
        return True

    def __hash__(self) -> int:
        return hash(tuple(self.get_elements()))

    def subsumes(self, tree: 'OrderedTree') -> bool:
        """Check whether some node of this tree is structurally equal to ``tree``."""
        return any(node == tree for node in self.get_nodes())

    # Binarization

    def binarize(self) -> 'BinaryTree':
        """Encode this tree as a binary tree.

        The tree is walked in pre-order. The root's element becomes the
        binary root. A first child becomes the left child of its parent's
        image; any later child becomes the right child of the deepest right
        leaf below its parent's image, so later siblings form a right-leaning
        chain. The result shares no nodes with this tree.

        Raises:
            TreeInvariantError: If a node is visited before its parent's image
        """
        from .binary import BinaryTree

        binary_root = BinaryTree()
        images: Dict[int, BinaryTree] = {}

        for node in self.traverse_nodes_pre_order():
            element = node.get_element()
            if node is self:
                binary_root.set_element(element)
                images[id(node)] = binary_root
                continue

            parent = node.get_parent()
            binary_parent = images.get(id(parent)) if parent is not None else None
            if binary_parent is None:
                logger.error("No binary image for the parent of %r", node)
                raise TreeInvariantError("Unexpected error in binarizing an ordered tree.")

            if parent.is_first_child(node):
                binary_parent.set_left_child(element)
                images[id(node)] = binary_parent.get_left_child()
            else:
                deepest_right_leaf = binary_parent.get_deepest_right_leaf()
                deepest_right_leaf.set_right_child(element)
                images[id(node)] = deepest_right_leaf.get_right_child()

        logger.debug("Binarized %d nodes rooted at %r", len(images), self)
        return binary_root

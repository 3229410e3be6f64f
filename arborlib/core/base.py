"""Shared, variant-independent tree logic.

``AbstractTree`` implements everything in the ``Tree`` contract that can be
expressed through a handful of primitives (``iter_children``, ``get_nodes``,
``_append_child``, ``_detach_child``, ...). Variants only decide how
children are stored and in which order nodes are visited.

Ownership model: a parent owns its children; a child refers back to its
parent through a weak reference and never keeps it alive. Every attach goes
through ``_set_parent``, which detaches the node from its former parent
before linking it to the new one.
"""

import logging
import weakref
from abc import abstractmethod
from typing import Any, Collection, Iterator, List, Optional

from ..errors import (
    InvalidArgumentError,
    MalformedTreeError,
    VariantMismatchError,
)
from ..config import RenderConfig
from .node import MISSING, Tree
from .render import render_newick, render_tree
from .traverser import PreOrderTraverser

logger = logging.getLogger(__name__)


class AbstractTree(Tree):
    """Common implementation shared by every tree variant."""

    def __init__(self, element: Any = None):
        """Create a root node.

        Args:
            element: Element stored at the node (``None`` for an empty node)
        """
        self._element = element
        self._parent_ref: Optional[weakref.ref] = None

    # Primitives each variant supplies

    def _new_node(self, element: Any) -> 'AbstractTree':
        """Create a detached node of the same variant as this one."""
        return type(self)(element)

    @abstractmethod
    def _append_child(self, child: 'AbstractTree') -> None:
        """Store ``child`` in this node's collection (no parent bookkeeping)."""
        pass

    @abstractmethod
    def _detach_child(self, child: 'AbstractTree') -> None:
        """Drop ``child`` (by identity) from the collection."""
        pass

    @abstractmethod
    def _clear_children(self) -> None:
        """Drop every child, clearing the parent links that point here."""
        pass

    def _check_can_accept(self, child: 'AbstractTree') -> None:
        """Refuse a new child before anything is mutated.

        Variants with bounded capacity override this.
        """
        pass

    def _attach(self, child: 'AbstractTree') -> None:
        """Make ``child`` a child of this node."""
        child.set_parent(self)

    # Element

    def get_element(self) -> Any:
        return self._element

    def set_element(self, element: Any) -> None:
        self._element = element

    @property
    def element(self) -> Any:
        """Element stored at this node."""
        return self._element

    @element.setter
    def element(self, element: Any) -> None:
        self._element = element

    def has_element(self, element: Any = MISSING) -> bool:
        if element is MISSING:
            return self._element is not None
        return self._element == element

    def is_labeled(self) -> bool:
        return self.has_element()

    # Parent

    def get_parent(self) -> Optional['AbstractTree']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def set_parent(self, parent: Optional['AbstractTree']) -> None:
        """Re-parent this node, appending it to ``parent``'s children.

        The node is first detached from its current parent. Passing ``None``
        turns the node into a root.
        """
        self._set_parent(parent, add_child=True)

    def _set_parent(self, parent: Optional['AbstractTree'], add_child: bool = True) -> None:
        """Detach from the current parent, then link to ``parent``.

        With ``add_child=False`` only the parent link is written; the caller
        is responsible for placing this node in ``parent``'s collection.
        """
        if parent is not None:
            parent._check_variant(self)
            if add_child:
                parent._check_can_accept(self)

        old_parent = self.get_parent()
        if old_parent is not None:
            old_parent._detach_child(self)

        self._parent_ref = weakref.ref(parent) if parent is not None else None
        if parent is not None and add_child:
            parent._append_child(self)

        logger.debug("Re-parented %r from %r to %r", self, old_parent, parent)

    def _clear_parent(self) -> None:
        """Forget the parent link without touching any collection."""
        self._parent_ref = None

    def has_parent(self, node_or_element: Any = MISSING) -> bool:
        parent = self.get_parent()
        if node_or_element is MISSING:
            return parent is not None
        if isinstance(node_or_element, Tree):
            return parent is node_or_element
        if parent is None:
            return False
        return parent.get_element() == node_or_element

    def is_root(self) -> bool:
        return not self.has_parent()

    def get_root(self) -> 'AbstractTree':
        """Return the topmost ancestor (this node if it is a root)."""
        node = self
        parent = node.get_parent()
        while parent is not None:
            node = parent
            parent = node.get_parent()
        return node

    def get_ancestors(self) -> List['AbstractTree']:
        """Return all ancestors of this node, the root first."""
        ancestors = []
        node = self.get_parent()
        while node is not None:
            ancestors.append(node)
            node = node.get_parent()
        ancestors.reverse()
        return ancestors

    def get_ancestor_elements(self) -> List[Any]:
        return [node.get_element() for node in self.get_ancestors()]

    def has_ancestor(self, node_or_element: Any) -> bool:
        by_node = isinstance(node_or_element, Tree)
        node = self.get_parent()
        while node is not None:
            if by_node:
                if node is node_or_element:
                    return True
            elif node.get_element() == node_or_element:
                return True
            node = node.get_parent()
        return False

    def has_descendant(self, node_or_element: Any) -> bool:
        by_node = isinstance(node_or_element, Tree)
        for node in self.get_nodes():
            if node is self:
                continue
            if by_node:
                if node is node_or_element:
                    return True
            elif node.get_element() == node_or_element:
                return True
        return False

    # Children

    def _check_variant(self, node: Any) -> None:
        """Refuse to link a node of another variant into this tree."""
        if not isinstance(node, Tree) or node.VARIANT != self.VARIANT:
            logger.error("Cannot link %r into a %s tree", node, self.VARIANT)
            raise VariantMismatchError(
                f"Expected a node of the {self.VARIANT} variant, got {type(node).__name__}"
            )

    def has_child(self, node_or_element: Any = MISSING) -> bool:
        if node_or_element is MISSING:
            return self.num_children() > 0
        if isinstance(node_or_element, Tree):
            return any(child is node_or_element for child in self.iter_children())
        return any(child.has_element(node_or_element) for child in self.iter_children())

    def add_child(self, node_or_element: Any) -> 'AbstractTree':
        if isinstance(node_or_element, Tree):
            child = node_or_element
        else:
            child = self._new_node(node_or_element)
        self._attach(child)
        return child

    def add(self, node_or_element: Any) -> 'AbstractTree':
        """Alias of ``add_child``."""
        return self.add_child(node_or_element)

    def remove_children(self, elements: Optional[Collection[Any]] = None) -> None:
        if elements is None:
            self._clear_children()
            return
        for element in elements:
            self.remove_child(element)

    def find_child(self, element: Any) -> Optional['AbstractTree']:
        for child in self.iter_children():
            if child.get_element() == element:
                return child
        return None

    def find(self, element: Any) -> Optional['AbstractTree']:
        for node in self.get_nodes():
            if node.get_element() == element:
                return node
        return None

    def num_siblings(self) -> int:
        return len(self.get_siblings())

    def get_sibling_elements(self) -> Collection[Any]:
        return [node.get_element() for node in self.get_siblings()]

    def remove(self) -> None:
        parent = self.get_parent()
        if parent is not None:
            parent._detach_child(self)
            self._clear_parent()
        else:
            self.set_element(None)
            self.remove_children()

    # Whole-tree views

    def get_nodes(self) -> List['AbstractTree']:
        return PreOrderTraverser().nodes(self)

    def get_elements(self) -> List[Any]:
        return [node.get_element() for node in self.get_nodes()]

    def get_subtrees(self) -> List['AbstractTree']:
        """Return every node below this one (this node excluded)."""
        return [node for node in self.get_nodes() if node is not self]

    def get_leaves(self) -> List['AbstractTree']:
        """Return the leaf nodes in canonical traversal order."""
        return [node for node in self.get_nodes() if node.is_leaf()]

    def size(self) -> int:
        return len(self.get_nodes())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        # A node is never an empty collection; avoid a full walk for truth tests
        return True

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements of every node, in ``get_nodes()`` order."""
        return (node.get_element() for node in self.get_nodes())

    def __contains__(self, element: Any) -> bool:
        return any(e == element for e in self)

    # Structural queries

    def depth(self, node: Any = MISSING) -> int:
        if node is MISSING:
            if self.is_leaf():
                return 0
            max_depth = 0
            for _, node_depth in PreOrderTraverser().traverse(self):
                if node_depth > max_depth:
                    max_depth = node_depth
            return max_depth + 1

        if node is None:
            raise InvalidArgumentError("The node from which depth will be checked is not given.")

        steps = 0
        while node is not None:
            if node is self:
                return steps
            steps += 1
            node = node.get_parent()
        return -1

    def degree(self, node: Any = MISSING) -> int:
        if node is MISSING:
            return max(n.num_children() for n in self.get_nodes())
        if node is None:
            raise InvalidArgumentError("The node is not specified.")
        return node.num_children()

    def is_leaf(self) -> bool:
        return self.num_children() == 0

    def num_leaves(self) -> int:
        return len(self.get_leaves())

    def get_yield(self) -> List[Any]:
        return [node.get_element() for node in self.get_leaves()]

    def get_leaf_elements(self) -> List[Any]:
        """Alias of ``get_yield``."""
        return self.get_yield()

    def is_labeled_tree(self, alphabet: Collection[Any]) -> bool:
        if not alphabet:
            raise InvalidArgumentError("The given alphabet has no elements.")
        for node in self.get_nodes():
            if node.get_element() not in alphabet:
                return False
        return True

    def is_balanced(self) -> bool:
        leaves = self.get_leaves()
        if not leaves:
            logger.error("Balance check on %r found no leaves", self)
            raise MalformedTreeError("Invalid tree without any leaves")
        if len(leaves) == 1:
            return True

        first_depth = self.depth(leaves[0])
        return all(self.depth(leaf) == first_depth for leaf in leaves[1:])

    # Rendering

    def to_tree_string(self, config: Optional[RenderConfig] = None) -> str:
        """Draw this (sub)tree in UNIX ``tree`` style."""
        return render_tree(self, config)

    def to_newick(self, start_mark: str = "(", end_mark: str = ")") -> str:
        """Render this (sub)tree as nested ``(element children...)`` groups."""
        return render_newick(self, start_mark, end_mark)

    def __str__(self) -> str:
        return self.to_tree_string()

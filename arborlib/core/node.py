"""Tree abstraction for arborlib.

A ``Tree`` is both "a tree" and "a position within a tree": there is no
separate root or subtree type. Every variant (unordered, ordered, binary)
implements this contract, so algorithms written against it work on all of
them.

Arguments documented as ``node_or_element`` are dispatched on type: a
``Tree`` instance gets node semantics (compared by identity), anything else
is treated as an element (compared with ``==``).

Trees are not thread-safe. Callers sharing a tree between threads must
synchronise access themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Collection, Iterator, List, Optional


class _Missing:
    """Marker for omitted optional arguments, distinct from ``None``."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Tree(ABC):
    """Abstract base class for every tree variant.

    Subclasses provide child storage and the canonical traversal order; the
    shared logic (depth, degree, ancestry, leaves, balance, yield) lives in
    ``AbstractTree``.
    """

    #: Variant tag. Nodes with different tags cannot be linked together.
    VARIANT: str = "abstract"

    # Element

    @abstractmethod
    def get_element(self) -> Any:
        """Return the element stored at this node (``None`` if cleared)."""
        pass

    @abstractmethod
    def set_element(self, element: Any) -> None:
        """Replace the element stored at this node."""
        pass

    @abstractmethod
    def has_element(self, element: Any = MISSING) -> bool:
        """Without an argument, check that this node holds an element.

        With an argument, check that the held element equals it.
        """
        pass

    # Parent

    @abstractmethod
    def get_parent(self) -> Optional['Tree']:
        """Return the parent node, or ``None`` for a root."""
        pass

    @abstractmethod
    def has_parent(self, node_or_element: Any = MISSING) -> bool:
        """Check whether this node has a parent, or a specific one."""
        pass

    # Children

    @abstractmethod
    def iter_children(self) -> Iterator['Tree']:
        """Iterate over the present children in the variant's native order.

        Empty binary slots are skipped. Unordered trees yield a node once per
        occurrence in the multiset.
        """
        pass

    @abstractmethod
    def num_children(self) -> int:
        """Return the number of children of this node."""
        pass

    @abstractmethod
    def has_child(self, node_or_element: Any = MISSING) -> bool:
        """Check for any child, a child node, or a child holding an element."""
        pass

    @abstractmethod
    def add_child(self, node_or_element: Any) -> 'Tree':
        """Attach a child and return the attached node.

        An element is wrapped in a new node of the receiver's variant. An
        existing node is detached from its former parent first.
        """
        pass

    @abstractmethod
    def remove_child(self, node_or_element: Any) -> None:
        """Remove a child node, or the children holding an element."""
        pass

    @abstractmethod
    def remove_children(self, elements: Optional[Collection[Any]] = None) -> None:
        """Remove every child, or the children holding any of ``elements``."""
        pass

    @abstractmethod
    def get_siblings(self) -> Collection['Tree']:
        """Return the other children of this node's parent."""
        pass

    # Whole-tree views

    @abstractmethod
    def get_nodes(self) -> List['Tree']:
        """Return every node of this (sub)tree, this node included.

        The order is the variant's canonical traversal order: pre-order for
        ordered and binary trees, depth-first for unordered trees.
        """
        pass

    @abstractmethod
    def get_elements(self) -> List[Any]:
        """Return the elements of every node of this (sub)tree."""
        pass

    @abstractmethod
    def find(self, element: Any) -> Optional['Tree']:
        """Return the first node in this (sub)tree holding ``element``."""
        pass

    @abstractmethod
    def find_child(self, element: Any) -> Optional['Tree']:
        """Return the first direct child holding ``element``."""
        pass

    # Structural queries

    @abstractmethod
    def size(self) -> int:
        """Return the number of nodes in this (sub)tree."""
        pass

    @abstractmethod
    def depth(self, node: Any = MISSING) -> int:
        """Without an argument, return the depth of this (sub)tree.

        With a node, return how many parent steps separate ``node`` from this
        node, walking from ``node`` towards the root, or -1 when this node is
        not met on the way.

        Raises:
            InvalidArgumentError: If ``node`` is ``None``
        """
        pass

    @abstractmethod
    def degree(self, node: Any = MISSING) -> int:
        """Return the maximum child count in the tree, or that of ``node``."""
        pass

    @abstractmethod
    def is_root(self) -> bool:
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        pass

    @abstractmethod
    def num_leaves(self) -> int:
        pass

    @abstractmethod
    def get_ancestor_elements(self) -> List[Any]:
        """Return the ancestors' elements, root first."""
        pass

    @abstractmethod
    def has_ancestor(self, node_or_element: Any) -> bool:
        """Check strictly above this node (this node is not its own ancestor)."""
        pass

    @abstractmethod
    def has_descendant(self, node_or_element: Any) -> bool:
        """Check strictly below this node (this node is not its own descendant)."""
        pass

    @abstractmethod
    def get_yield(self) -> List[Any]:
        """Return the leaf elements in canonical traversal order."""
        pass

    @abstractmethod
    def is_labeled(self) -> bool:
        pass

    @abstractmethod
    def is_labeled_tree(self, alphabet: Collection[Any]) -> bool:
        """Check that every node holds an element drawn from ``alphabet``."""
        pass

    @abstractmethod
    def is_balanced(self) -> bool:
        """Check that every leaf lies at the same depth."""
        pass

    @abstractmethod
    def remove(self) -> None:
        """Detach this node from its parent, or clear it if it is the root."""
        pass

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.get_element()!r})"

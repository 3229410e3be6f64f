"""Tree traversal strategies for arborlib.

Traversers implement the algorithms for walking a tree in a given order.
They only rely on ``Tree.iter_children()``, so the same traverser works on
every variant.

All traversers use an explicit stack or queue instead of recursion, so very
deep trees do not hit the interpreter's recursion limit. Each one also keeps
a visited set keyed by node identity; a well-formed tree never revisits a
node, but unordered trees may list the same child twice.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple, Union

from ..config import DepthConfig, TraversalStrategy
from .node import Tree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def nodes(self, root: Tree) -> List[Tree]:
        """Return every node reachable from root, in traversal order."""
        return [node for node, _ in self.traverse(root)]

    def elements(self, root: Tree) -> List:
        """Return the element of every node reachable from root."""
        return [node.get_element() for node, _ in self.traverse(root)]


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in their native order.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        stack: List[Tuple[Tree, int]] = [(root, 0)]
        visited: Set[int] = set()

        while stack:
            node, depth = stack.pop()
            if id(node) in visited:
                continue
            visited.add(id(node))

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                # Reversed so that the first child is popped first
                children = list(node.iter_children())
                for child in reversed(children):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. A node is yielded only after its entire
    subtree has been yielded.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        # Entries are (node, depth, expanded)
        stack: List[Tuple[Tree, int, bool]] = [(root, 0, False)]
        visited: Set[int] = set()

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if window.should_yield(depth):
                    yield (node, depth)
                continue

            if id(node) in visited:
                continue
            visited.add(id(node))

            stack.append((node, depth, True))
            if window.should_explore(depth):
                children = list(node.iter_children())
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Tree,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Tree, int]]:
        window = DepthConfig(min_depth=min_depth, max_depth=max_depth)
        queue: Deque[Tuple[Tree, int]] = deque([(root, 0)])
        # Marked on enqueue
        visited: Set[int] = {id(root)}

        while queue:
            node, depth = queue.popleft()

            if window.should_yield(depth):
                yield (node, depth)

            if window.should_explore(depth):
                for child in node.iter_children():
                    if id(child) not in visited:
                        visited.add(id(child))
                        queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance for a strategy.

    Args:
        strategy: TraversalStrategy member or name (pre, post, level, bfs, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ConfigurationError: If strategy name is not recognized
    """
    return _TRAVERSERS[TraversalStrategy.parse(strategy)]()

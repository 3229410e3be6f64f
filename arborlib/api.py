"""High-level API for arborlib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import DepthConfig, TraversalConfig, TraversalStrategy
from .core.node import Tree
from .core.traverser import create_traverser
from .errors import InvalidArgumentError
from .trees import BinaryTree, OrderedTree, UnorderedTree

_VARIANTS = {
    "ordered": OrderedTree,
    "unordered": UnorderedTree,
    "binary": BinaryTree,
}


def traverse_tree(
    root: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Tree], bool]] = None,
) -> Iterator[Tree]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (pre, post, level)
        max_depth: Maximum depth to traverse, relative to root
        min_depth: Minimum depth before yielding nodes
        include_filter: Only nodes for which this returns True are yielded

    Yields:
        Tree nodes that match the criteria

    Raises:
        ConfigurationError: If the options are inconsistent

    Example:
        >>> root = build_tree((1, [(2, [4]), 3]))
        >>> [node.get_element() for node in traverse_tree(root, "level")]
        [1, 2, 3, 4]
    """
    config = TraversalConfig(
        strategy=TraversalStrategy.parse(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        include_filter=include_filter,
    ).ensure_valid()

    for node, _ in _walk(root, config):
        yield node


def collect_tree_data(
    root: Tree,
    collect: Callable[[Tree, int], Any],
    **kwargs
) -> Iterator[Tuple[Tree, Any]]:
    """Traverse a tree and collect data from each node.

    Args:
        root: Starting node for traversal
        collect: Called with (node, depth); its result is yielded with the node
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)
    """
    config = _build_config_from_kwargs(**kwargs)
    for node, depth in _walk(root, config):
        yield node, collect(node, depth)


def count_nodes(root: Tree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: Tree,
    predicate: Callable[[Tree], bool],
    **kwargs
) -> Iterator[Tree]:
    """Find nodes that match a predicate.

    Args:
        root: Starting node for traversal
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_tree_paths(root: Tree, **kwargs) -> Iterator[List[Any]]:
    """Get element paths from root to each node.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Lists of elements, ``root``'s element first
    """
    for node in traverse_tree(root, **kwargs):
        path = []
        current = node
        while current is not None:
            path.append(current.get_element())
            if current is root:
                break
            current = current.get_parent()
        path.reverse()
        yield path


def get_leaf_nodes(root: Tree, **kwargs) -> Iterator[Tree]:
    """Get all leaf nodes in a tree.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Leaf nodes (nodes with no children)
    """
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(root: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root of the (sub)tree to describe

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(build_tree((1, [2, 3])))
        >>> stats['size'], stats['depth'], stats['leaves']
        (3, 2, 2)
    """
    stats: Dict[str, Any] = {
        'size': 0,
        'leaves': 0,
        'depths': {},
    }

    for node, depth in create_traverser(TraversalStrategy.PRE_ORDER).traverse(root):
        stats['size'] += 1
        if node.is_leaf():
            stats['leaves'] += 1
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['size'] - stats['leaves']
    stats['depth'] = root.depth()
    stats['degree'] = root.degree()
    stats['balanced'] = root.is_balanced()
    stats['yield'] = root.get_yield()
    return stats


def build_tree(spec: Any, variant: str = "ordered") -> Tree:
    """Build a tree from nested ``(element, [children...])`` tuples.

    A bare value is a leaf. Children are attached in the order given.

    Args:
        spec: Nested description, e.g. ``("a", ["b", ("c", ["d"])])``
        variant: "ordered", "unordered" or "binary"

    Returns:
        Root node of the new tree

    Raises:
        InvalidArgumentError: If the variant is unknown
        TreeInvariantError: If a binary node is given more than two children
    """
    if variant not in _VARIANTS:
        raise InvalidArgumentError(
            f"Unknown tree variant: {variant}. Choose from: {', '.join(_VARIANTS)}"
        )
    tree_class = _VARIANTS[variant]

    element, children = _split_spec(spec)
    root = tree_class(element)
    pending: List[Tuple[Tree, Sequence[Any]]] = [(root, children)]

    while pending:
        parent, child_specs = pending.pop()
        for child_spec in child_specs:
            child_element, grandchildren = _split_spec(child_spec)
            child = parent.add_child(child_element)
            if grandchildren:
                pending.append((child, grandchildren))

    return root


# Helper functions

def _split_spec(spec: Any) -> Tuple[Any, Sequence[Any]]:
    if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], (list, tuple)):
        return spec[0], spec[1]
    return spec, ()


def _walk(root: Tree, config: TraversalConfig) -> Iterator[Tuple[Tree, int]]:
    traverser = create_traverser(config.strategy)
    for node, depth in traverser.traverse(
        root,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    ):
        if config.include_filter is None or config.include_filter(node):
            yield node, depth


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build a validated TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = TraversalStrategy.parse(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.include_filter = kwargs.pop('include_filter')

    if kwargs:
        raise InvalidArgumentError(f"Unknown traversal options: {', '.join(sorted(kwargs))}")

    return config.ensure_valid()

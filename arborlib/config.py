"""Configuration system for arborlib.

This module defines how callers pick a traversal order, limit traversal
depth, filter nodes, and customize the textual renderings of a tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .errors import ConfigurationError


class TraversalStrategy(Enum):
    """Order in which tree nodes are visited."""
    PRE_ORDER = "pre_order"       # Parent before children
    POST_ORDER = "post_order"     # Children before parent
    LEVEL_ORDER = "level_order"   # Level by level (breadth-first)

    @classmethod
    def parse(cls, value: Union['TraversalStrategy', str]) -> 'TraversalStrategy':
        """Convert a strategy name or alias into a TraversalStrategy.

        Args:
            value: Enum member, enum value or a short alias
                ("pre", "post", "level", "bfs", "dfs", "dfs_pre", "dfs_post")

        Returns:
            The matching TraversalStrategy

        Raises:
            ConfigurationError: If the name is unknown
        """
        if isinstance(value, cls):
            return value

        aliases = {
            "pre": cls.PRE_ORDER,
            "dfs": cls.PRE_ORDER,
            "dfs_pre": cls.PRE_ORDER,
            "post": cls.POST_ORDER,
            "dfs_post": cls.POST_ORDER,
            "level": cls.LEVEL_ORDER,
            "bfs": cls.LEVEL_ORDER,
        }
        name = str(value).lower()
        if name in aliases:
            return aliases[name]
        for member in cls:
            if member.value == name:
                return member
        raise ConfigurationError(f"Unknown traversal strategy: {value!r}")


@dataclass
class DepthConfig:
    """Depth window for traversal, relative to the traversal root."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for walking a tree through the high-level API."""

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Only nodes for which this returns True are yielded; pruning is not
    # applied, children of rejected nodes are still visited.
    include_filter: Optional[Callable[[Any], bool]] = None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors

    def ensure_valid(self) -> 'TraversalConfig':
        """Raise ConfigurationError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        return self


@dataclass
class RenderConfig:
    """Connector strings used by the tree-drawing and Newick renderers.

    The defaults reproduce the output of the UNIX ``tree`` command.
    """

    tee: str = "|-- "       # Nearest level, more siblings pending
    elbow: str = "`-- "     # Nearest level, no sibling pending
    pipe: str = "|   "      # Ancestor level, more siblings pending
    blank: str = "    "     # Ancestor level, no sibling pending

    start_mark: str = "("   # Newick subtree opener
    end_mark: str = ")"     # Newick subtree closer

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ("tee", "elbow", "pipe", "blank", "start_mark", "end_mark"):
            if not isinstance(getattr(self, name), str):
                errors.append(f"{name} must be a string")

        if not errors:
            widths = {len(self.tee), len(self.elbow), len(self.pipe), len(self.blank)}
            if len(widths) != 1:
                errors.append("tree connectors must all have the same width")

        return errors

    def ensure_valid(self) -> 'RenderConfig':
        """Raise ConfigurationError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid render configuration: {'; '.join(errors)}")
        return self


__all__ = [
    'TraversalStrategy',
    'DepthConfig',
    'TraversalConfig',
    'RenderConfig',
]

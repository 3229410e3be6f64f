"""Exception hierarchy for arborlib.

Every error raised by the library derives from ``TreeError`` and also from
the closest built-in exception, so callers can catch either.

Three families exist:

- Bad input the caller can fix (``InvalidArgumentError``, ``ChildIndexError``,
  ``ConfigurationError``).
- Invariant violations (``TreeInvariantError`` and subclasses). These are
  programmer errors: the tree was driven into a state it cannot represent.
"""


class TreeError(Exception):
    """Base class for all arborlib errors."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when a required argument is missing or unusable.

    Examples: ``depth(None)``, an empty alphabet for ``is_labeled_tree``.
    """
    pass


class ChildIndexError(TreeError, IndexError):
    """Raised by index-based child accessors when the index is out of range."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")


class ConfigurationError(TreeError, ValueError):
    """Raised when a configuration object fails validation."""
    pass


class TreeInvariantError(TreeError, RuntimeError):
    """Raised when a structural invariant is violated.

    Not recoverable: the operation that raised it was a programming error.
    """
    pass


class VariantMismatchError(TreeInvariantError):
    """Raised when nodes of different tree variants are mixed in one tree."""
    pass


class MalformedTreeError(TreeInvariantError):
    """Raised when a tree is found in a structurally impossible state."""
    pass


__all__ = [
    'TreeError',
    'InvalidArgumentError',
    'ChildIndexError',
    'ConfigurationError',
    'TreeInvariantError',
    'VariantMismatchError',
    'MalformedTreeError',
]

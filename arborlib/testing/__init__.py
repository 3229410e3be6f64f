"""Testing utilities for arborlib consumers."""

from .fixtures import (
    SampleTree,
    TreeTestHelper,
    make_binary_sample,
    make_ordered_sample,
    make_unordered_sample,
)

__all__ = [
    'SampleTree',
    'TreeTestHelper',
    'make_binary_sample',
    'make_ordered_sample',
    'make_unordered_sample',
]

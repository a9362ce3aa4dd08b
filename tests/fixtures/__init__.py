"""
Test fixtures package for commitment engine tests.

This package provides factory functions for creating test objects:
- common.py: Hashers, leaf commitments, trees and defaults

Usage:
    from fixtures import make_hasher, make_leaves

    def test_something():
        hasher = make_hasher()
        leaves = make_leaves(hasher, 5)
"""

from .common import (
    make_hasher,
    int_to_bits_be,
    make_leaf,
    make_leaves,
    make_tree,
    make_defaults,
    replace_range,
)

__all__ = [
    "make_hasher",
    "int_to_bits_be",
    "make_leaf",
    "make_leaves",
    "make_tree",
    "make_defaults",
    "replace_range",
]

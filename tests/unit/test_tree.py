"""
Full Tree Helper Unit Tests
Tests for shielded_core/merkle/tree.py

Tests:
- Empty-subtree defaults agree with empty trees
- Level shapes and padding of complete trees
- Path extraction and index validation
"""
import pytest

from shielded_core.crypto.personalization import TreeLevel
from shielded_core.field.element import FieldElement
from shielded_core.merkle.tree import (
    MAX_TREE_HEIGHT,
    build_tree_levels,
    compute_tree_root,
    empty_subtree_defaults,
    extract_path,
    sibling_hashes,
    tree_capacity,
)
from shielded_core.schemas.errors import BatchCapacityException, ConfigurationMismatchException

from fixtures import make_leaves


class TestEmptySubtreeDefaults:
    """Tests for empty_subtree_defaults()."""

    def test_first_entry_is_zero(self, hasher):
        assert empty_subtree_defaults(hasher, 1) == [FieldElement.zero()]

    def test_repeated_self_compression(self, hasher):
        defaults = empty_subtree_defaults(hasher, 4)

        assert defaults[1] == hasher.compress(defaults[0], defaults[0], TreeLevel(0))
        assert defaults[2] == hasher.compress(defaults[1], defaults[1], TreeLevel(1))
        assert defaults[3] == hasher.compress(defaults[2], defaults[2], TreeLevel(2))

    def test_matches_empty_tree_roots(self, hasher):
        defaults = empty_subtree_defaults(hasher, 5)

        for height in range(1, 6):
            assert defaults[height - 1] == compute_tree_root(hasher, [], height)

    def test_count_zero(self, hasher):
        assert empty_subtree_defaults(hasher, 0) == []

    def test_maximum_count(self, hasher):
        assert len(empty_subtree_defaults(hasher, MAX_TREE_HEIGHT)) == MAX_TREE_HEIGHT

    def test_count_past_maximum_rejected(self, hasher):
        with pytest.raises(ConfigurationMismatchException):
            empty_subtree_defaults(hasher, MAX_TREE_HEIGHT + 1)


class TestBuildTreeLevels:
    """Tests for build_tree_levels() and compute_tree_root()."""

    def test_level_sizes(self, hasher, leaves):
        levels = build_tree_levels(hasher, leaves, 4)

        assert [len(level) for level in levels] == [8, 4, 2, 1]

    def test_short_input_padded_with_zero(self, hasher):
        leaves = make_leaves(hasher, 3)
        levels = build_tree_levels(hasher, leaves, 3)

        assert levels[0] == leaves + [FieldElement.zero()]

    def test_manual_root(self, hasher):
        a, b, c = make_leaves(hasher, 3)
        zero = FieldElement.zero()

        ab = hasher.compress(a, b, TreeLevel(0))
        cz = hasher.compress(c, zero, TreeLevel(0))
        expected = hasher.compress(ab, cz, TreeLevel(1))

        assert compute_tree_root(hasher, [a, b, c], 3) == expected

    def test_input_not_mutated(self, hasher):
        leaves = make_leaves(hasher, 3)
        copy = list(leaves)

        build_tree_levels(hasher, leaves, 3)

        assert leaves == copy

    def test_too_many_leaves(self, hasher):
        with pytest.raises(BatchCapacityException) as exc_info:
            build_tree_levels(hasher, make_leaves(hasher, 5), 3)

        assert exc_info.value.details["capacity"] == 4

    def test_height_must_be_positive(self, hasher):
        with pytest.raises(ConfigurationMismatchException):
            build_tree_levels(hasher, [], 0)

    def test_height_past_maximum(self, hasher):
        with pytest.raises(ConfigurationMismatchException):
            build_tree_levels(hasher, [], MAX_TREE_HEIGHT + 1)

    def test_tree_capacity(self):
        assert tree_capacity(1) == 1
        assert tree_capacity(4) == 8
        with pytest.raises(ConfigurationMismatchException):
            tree_capacity(0)


class TestExtractPath:
    """Tests for extract_path() and sibling_hashes()."""

    def test_position_bits_follow_index(self, hasher, leaves):
        levels = build_tree_levels(hasher, leaves, 4)

        path = extract_path(levels, 5)  # 0b101

        assert [is_left for _, is_left in path] == [True, False, True]

    def test_siblings(self, hasher, leaves):
        levels = build_tree_levels(hasher, leaves, 4)

        path = extract_path(levels, 2)

        assert path[0] == (levels[0][3], False)
        assert path[1] == (levels[1][0], True)
        assert path[2] == (levels[2][1], False)

    def test_sibling_hashes_strip_bits(self, hasher, leaves):
        levels = build_tree_levels(hasher, leaves, 4)

        assert sibling_hashes(levels, 6) == [s for s, _ in extract_path(levels, 6)]

    def test_index_out_of_range(self, hasher, leaves):
        levels = build_tree_levels(hasher, leaves, 4)

        with pytest.raises(IndexError):
            extract_path(levels, 8)
        with pytest.raises(IndexError):
            extract_path(levels, -1)

    def test_empty_levels(self):
        with pytest.raises(ValueError, match="empty"):
            extract_path([], 0)

"""End-to-end properties of text extraction.

Covers the reading-order guarantees callers rely on: identity under the
original strategy, selection semantics, idempotence, word-wrap merging,
paragraph breaks, column layouts, and degenerate input.
"""

from __future__ import annotations

import pytest

from readorder.extraction import (
    extract_text,
    has_selection,
    order_fragments,
    selected_fragments,
    selected_indices,
)
from readorder.layout.ordering import OriginalSorter, SortStrategy


class TestSelection:
    """Tests for selection handling."""

    def test_selected_indices_skip_unusable(self, make_fragment):
        """Test only selected fragments with text are kept, in input order."""
        fragments = [
            make_fragment(0.1, 0.8, 0.5, 0.85, "a"),
            make_fragment(0.1, 0.7, 0.5, 0.75, "   "),
            make_fragment(0.1, 0.6, 0.5, 0.65, "c"),
            make_fragment(0.1, 0.5, 0.5, 0.55, "d"),
        ]
        assert selected_indices(fragments, [True, True, False, True]) == [0, 3]
        assert [f.text for f in selected_fragments(fragments, [True, True, False, True])] == ["a", "d"]

    def test_mask_length_mismatch(self, single_column_fragments):
        """Test a mask of the wrong length is rejected."""
        with pytest.raises(ValueError, match="does not match"):
            extract_text(single_column_fragments, [True])

    def test_has_selection(self, make_fragment):
        """Test has_selection is true iff a selected fragment has usable text."""
        fragments = [
            make_fragment(0.1, 0.8, 0.5, 0.85, "text"),
            make_fragment(0.1, 0.7, 0.5, 0.75, "  "),
        ]
        assert has_selection(fragments, [True, False])
        assert not has_selection(fragments, [False, True])
        assert not has_selection(fragments, [False, False])
        assert not has_selection([], [])


class TestOrdering:
    """Tests for order_fragments."""

    def test_original_is_identity(self, two_column_fragments, single_column_fragments):
        """Test the original strategy preserves input order."""
        fragments = [*two_column_fragments, *single_column_fragments]
        mask = [True] * len(fragments)
        assert order_fragments(fragments, mask, SortStrategy.ORIGINAL) == list(range(len(fragments)))

    def test_indices_refer_to_full_list(self, two_column_fragments):
        """Test returned indices point into the unfiltered fragment list."""
        order = order_fragments(two_column_fragments, [False, True, True, True], SortStrategy.XY)
        assert order == [1, 3, 2]

    def test_sorter_instance(self, single_column_fragments):
        """Test a Sorter instance can be passed instead of a name."""
        order = order_fragments(single_column_fragments, [True] * 3, OriginalSorter())
        assert order == [0, 1, 2]

    def test_empty_selection(self, single_column_fragments):
        """Test nothing selected yields no order."""
        assert order_fragments(single_column_fragments, [False] * 3) == []


class TestExtractText:
    """Tests for extract_text."""

    @pytest.mark.parametrize("strategy", SortStrategy.ALL)
    def test_empty_input(self, strategy):
        """Test empty input yields an empty string for every strategy."""
        assert extract_text([], [], strategy) == ""

    @pytest.mark.parametrize("strategy", SortStrategy.ALL)
    def test_idempotent(self, strategy, two_column_fragments, single_column_fragments):
        """Test identical calls give identical output."""
        fragments = [*single_column_fragments, *two_column_fragments]
        mask = [True] * len(fragments)
        assert extract_text(fragments, mask, strategy) == extract_text(fragments, mask, strategy)

    @pytest.mark.parametrize("strategy", SortStrategy.ALL)
    def test_hyphen_merge(self, strategy, make_fragment):
        """Test a word wrapped at the line end is rejoined without hyphen or space."""
        fragments = [
            make_fragment(0.1, 0.80, 0.9, 0.85, "An exam-"),
            make_fragment(0.1, 0.70, 0.5, 0.75, "ple"),
        ]
        assert extract_text(fragments, [True, True], strategy).startswith("An example")

    @pytest.mark.parametrize("strategy", SortStrategy.ALL)
    def test_hyphen_merge_same_row(self, strategy, make_fragment):
        """Test "exam-" touching "ple" on the same row reads "example" under every strategy."""
        fragments = [
            make_fragment(0.10, 0.50, 0.30, 0.55, "exam-"),
            make_fragment(0.30, 0.50, 0.40, 0.55, "ple"),
        ]
        assert extract_text(fragments, [True, True], strategy) == "example"

    def test_paragraph_break_after_sentence(self, make_fragment):
        """Test a short line ending in '.' is followed by a blank line."""
        fragments = [
            make_fragment(0.1, 0.80, 0.4, 0.85, "Done."),
            make_fragment(0.1, 0.70, 0.6, 0.75, "abcdefghij"),
        ]
        assert extract_text(fragments, [True, True], SortStrategy.XY) == "Done.\n\nabcdefghij"

    def test_two_columns(self, two_column_fragments):
        """Test the XY strategy reads the left column before the right one."""
        text = extract_text(two_column_fragments, [True] * 4, SortStrategy.XY)
        positions = [text.index(word) for word in ("left one", "left two", "right one", "right two")]
        assert positions == sorted(positions)

    def test_zero_length_fragment_excluded(self, make_fragment):
        """Test an empty fragment never reaches symbol-width computation."""
        fragments = [
            make_fragment(0.1, 0.80, 0.9, 0.85, ""),
            make_fragment(0.1, 0.70, 0.9, 0.75, "content"),
        ]
        assert extract_text(fragments, [True, True], SortStrategy.XY) == "content"
        assert extract_text(fragments, [True, False]) == ""

    def test_unselected_fragments_ignored(self, single_column_fragments):
        """Test unselected fragments contribute nothing."""
        text = extract_text(single_column_fragments, [True, False, True], SortStrategy.XY)
        assert "jumps" not in text
        assert text.startswith("The quick brown fox dog.")

    def test_bounds_follow_selection(self, make_fragment):
        """Test paragraph thresholds use the selected fragments only."""
        fragments = [
            make_fragment(0.1, 0.80, 0.4, 0.85, "Done."),
            make_fragment(0.1, 0.70, 0.4, 0.75, "Next"),
            make_fragment(0.1, 0.60, 0.9, 0.65, "a much wider unselected line"),
        ]
        assert extract_text(fragments, [True, True, False], SortStrategy.XY) == "Done. Next"
        assert extract_text(fragments, [True, True, True], SortStrategy.XY).startswith("Done.\n\nNext")

    def test_sorter_options(self, two_column_fragments):
        """Test strategy options reach the sorter."""
        text = extract_text(two_column_fragments, [True] * 4, SortStrategy.XY, column_gap_symbols=None)
        assert text.index("right one") < text.index("left two")

"""Tests for CompositeSorter and XYLinearSorter."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from readorder.layout.ordering import (
    CompositeSorter,
    GeometricRowColumnSorter,
    NearestNeighborChainSorter,
    OriginalSorter,
    XYLinearSorter,
)


def _reverse_sorter() -> Mock:
    sorter = Mock()
    sorter.name = "reverse"
    sorter.sort.side_effect = lambda fragments: list(range(len(fragments)))[::-1]
    return sorter


class TestCompositeSorter:
    """Tests for CompositeSorter."""

    def test_requires_stages(self):
        """Test that an empty stage list is rejected."""
        with pytest.raises(ValueError):
            CompositeSorter([])

    def test_composes_permutations(self, single_column_fragments):
        """Test each stage sees the previous stage's output."""
        reverse = _reverse_sorter()
        composite = CompositeSorter([reverse, OriginalSorter()])
        assert composite.sort(single_column_fragments) == [2, 1, 0]

        twice = CompositeSorter([_reverse_sorter(), _reverse_sorter()])
        assert twice.sort(single_column_fragments) == [0, 1, 2]

    def test_second_stage_receives_permuted_fragments(self, single_column_fragments):
        """Test the fragments handed to a later stage are in the earlier stage's order."""
        second = Mock()
        second.name = "spy"
        second.sort.side_effect = lambda fragments: list(range(len(fragments)))
        CompositeSorter([_reverse_sorter(), second]).sort(single_column_fragments)

        received = second.sort.call_args.args[0]
        assert received == single_column_fragments[::-1]

    def test_empty(self):
        """Test empty input."""
        assert CompositeSorter([OriginalSorter()]).sort([]) == []


class TestXYLinearSorter:
    """Tests for XYLinearSorter."""

    def test_name_and_stages(self):
        """Test strategy name and stage types."""
        sorter = XYLinearSorter()
        assert sorter.name == "xy-linear"
        assert isinstance(sorter.stages[0], GeometricRowColumnSorter)
        assert isinstance(sorter.stages[1], NearestNeighborChainSorter)

    def test_forwards_options(self):
        """Test XY options reach the geometric stage."""
        sorter = XYLinearSorter(row_overlap_threshold=0.3, column_gap_symbols=None)
        assert sorter.stages[0].row_overlap_threshold == 0.3
        assert sorter.stages[0].column_gap_symbols is None

    def test_single_column(self, single_column_fragments):
        """Test a stacked paragraph keeps top-to-bottom order."""
        shuffled = [single_column_fragments[2], single_column_fragments[0], single_column_fragments[1]]
        assert XYLinearSorter().sort(shuffled) == [1, 2, 0]

    def test_words_on_a_line(self, make_fragment):
        """Test words split by the OCR engine are joined left to right."""
        fragments = [
            make_fragment(0.40, 0.80, 0.60, 0.85, "brown"),
            make_fragment(0.10, 0.80, 0.35, 0.85, "quick"),
            make_fragment(0.10, 0.70, 0.40, 0.75, "fox"),
        ]
        assert XYLinearSorter().sort(fragments) == [1, 0, 2]

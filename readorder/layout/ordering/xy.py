"""Geometric row/column sorter.

XY Algorithm:
- Split the selection into columns at empty vertical corridors
- Within each column, sort with a pairwise row/column comparator:
  - horizontally overlapping boxes are stacked: higher box first
  - vertically overlapping boxes sharing more than a threshold of their
    height are on the same row: left box first
  - anything else: higher box first
- Columns are emitted left to right

The comparator is not transitive, so the order within a column is
best-effort on pathological inputs. Ties fall back to input position, which
keeps the output deterministic.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence

from readorder.constants import DEFAULT_COLUMN_GAP_SYMBOLS, ROW_OVERLAP_THRESHOLD
from readorder.layout.geometry import (
    LayoutBounds,
    column_groups,
    horizontal_band_overlaps,
    vertical_band_overlaps,
    vertical_overlap_fraction,
)
from readorder.types import BBox, Fragment, Sorter

logger = logging.getLogger(__name__)


class GeometricRowColumnSorter(Sorter):
    """Sorter ordering fragments by rows within columns.

    Example:
        >>> sorter = GeometricRowColumnSorter()
        >>> order = sorter.sort(fragments)
    """

    name = "xy"

    def __init__(
        self,
        row_overlap_threshold: float = ROW_OVERLAP_THRESHOLD,
        column_gap_symbols: float | None = DEFAULT_COLUMN_GAP_SYMBOLS,
    ) -> None:
        """Initialize XY sorter.

        Args:
            row_overlap_threshold: Vertical overlap fraction above which two
                side-by-side fragments are read as one row
            column_gap_symbols: Minimum gutter between columns, in multiples of
                the narrowest symbol width. None disables column splitting.
        """
        self.row_overlap_threshold = row_overlap_threshold
        self.column_gap_symbols = column_gap_symbols

    def sort(self, fragments: Sequence[Fragment]) -> list[int]:
        """Sort fragments column by column, rows top to bottom.

        Args:
            fragments: Selected fragments in input order

        Returns:
            Permutation of positions in reading order
        """
        if not fragments:
            return []

        result: list[int] = []
        for column in self._columns(fragments):
            key = functools.cmp_to_key(lambda i, j: self._compare(fragments, i, j))
            result.extend(sorted(column, key=key))

        logger.debug("XY sort ordered %d fragments", len(result))
        return result

    def _columns(self, fragments: Sequence[Fragment]) -> list[list[int]]:
        if self.column_gap_symbols is None:
            return [list(range(len(fragments)))]

        bounds = LayoutBounds.from_fragments(fragments)
        if bounds is None or bounds.min_symbol_width <= 0:
            return [list(range(len(fragments)))]

        return column_groups(fragments, bounds.min_symbol_width * self.column_gap_symbols)

    def is_before(self, left: BBox, right: BBox) -> bool:
        """Pairwise reading-order predicate: should ``left`` be read before ``right``?"""
        if horizontal_band_overlaps(left, right):
            return left.max_y > right.max_y

        if vertical_band_overlaps(left, right):
            if vertical_overlap_fraction(left, right) > self.row_overlap_threshold:
                return left.min_x < right.min_x
            return left.max_y > right.max_y

        return left.max_y > right.max_y

    def _compare(self, fragments: Sequence[Fragment], i: int, j: int) -> int:
        left, right = fragments[i].box, fragments[j].box
        if self.is_before(left, right):
            return -1
        if self.is_before(right, left):
            return 1
        return (i > j) - (i < j)

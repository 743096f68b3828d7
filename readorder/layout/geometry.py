"""Geometry utilities for normalized fragment boxes.

All helpers accept malformed boxes (min > max) and degrade to "no overlap"
style answers instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from readorder.types import BBox, Fragment

logger = logging.getLogger(__name__)

__all__ = [
    "LayoutBounds",
    "column_groups",
    "horizontal_band_overlaps",
    "horizontal_gap",
    "line_band_overlaps",
    "vertical_band_overlaps",
    "vertical_overlap_fraction",
]


def _band_overlaps(a_start: float, a_end: float, b_start: float, b_end: float) -> bool:
    # Starts are closed and ends open: identical bands overlap, touching bands don't.
    b_starts_inside_a = a_start <= b_start < a_end
    b_ends_inside_a = a_start < b_end <= a_end
    a_starts_inside_b = b_start <= a_start < b_end
    return b_starts_inside_a or b_ends_inside_a or a_starts_inside_b


def line_band_overlaps(observed: BBox, candidate: BBox) -> bool:
    """Check whether a candidate shares the visual line of an observed box.

    Stricter than vertical_band_overlaps: both ends are open, so bands that
    are identical or share an edge do not count. It holds when an edge of the
    observed box lies strictly inside the candidate band, or when the
    candidate starts strictly inside the observed band.

    Example:
        >>> line_band_overlaps(BBox(0.0, 0.50, 0.3, 0.55), BBox(0.3, 0.51, 0.5, 0.56))
        True
        >>> line_band_overlaps(BBox(0.0, 0.50, 0.3, 0.55), BBox(0.3, 0.50, 0.5, 0.55))
        False
    """
    o_min, o_max = observed.min_y, observed.max_y
    c_min, c_max = candidate.min_y, candidate.max_y
    return c_min < o_min < c_max or c_min < o_max < c_max or o_min < c_min < o_max


def vertical_band_overlaps(a: BBox, b: BBox) -> bool:
    """Check whether the vertical extents of two boxes overlap by a positive amount.

    Example:
        >>> vertical_band_overlaps(BBox(0.0, 0.1, 0.2, 0.2), BBox(0.5, 0.15, 0.7, 0.25))
        True
        >>> vertical_band_overlaps(BBox(0.0, 0.1, 0.2, 0.2), BBox(0.5, 0.2, 0.7, 0.3))
        False
    """
    return _band_overlaps(a.min_y, a.max_y, b.min_y, b.max_y)


def horizontal_band_overlaps(a: BBox, b: BBox) -> bool:
    """Check whether the horizontal extents of two boxes overlap by a positive amount."""
    return _band_overlaps(a.min_x, a.max_x, b.min_x, b.max_x)


def horizontal_gap(a: BBox, b: BBox) -> float:
    """Distance from the right edge of ``a`` to the left edge of ``b``.

    Negative when the boxes overlap horizontally.
    """
    return b.min_x - a.max_x


def vertical_overlap_fraction(a: BBox, b: BBox) -> float:
    """Intersection height of two boxes divided by the smaller of their heights.

    Returns:
        Fraction in [0, 1]; 0.0 when the bands don't intersect or the smaller
        height is not positive

    Example:
        >>> vertical_overlap_fraction(BBox(0, 0.0, 1, 0.1), BBox(0, 0.05, 1, 0.25))
        0.5
    """
    smaller = min(a.height, b.height)
    if smaller <= 0:
        return 0.0
    intersection = min(a.max_y, b.max_y) - max(a.min_y, b.min_y)
    if intersection <= 0:
        return 0.0
    return min(1.0, intersection / smaller)


@dataclass(frozen=True)
class LayoutBounds:
    """Global text edges of a selection, used as paragraph thresholds.

    Attributes:
        left_border: Leftmost min_x over the selection
        right_border: Rightmost max_x over the selection
        min_symbol_width: Narrowest average character width over the selection
    """

    left_border: float
    right_border: float
    min_symbol_width: float

    @classmethod
    def from_fragments(cls, fragments: Sequence[Fragment]) -> LayoutBounds | None:
        """Compute bounds over fragments with usable text.

        Fragments with zero characters are skipped so the symbol width never
        divides by zero.

        Returns:
            LayoutBounds, or None when no fragment has text
        """
        usable = [f for f in fragments if f.char_count > 0]
        if not usable:
            return None

        boxes = np.array([[f.box.min_x, f.box.max_x] for f in usable], dtype=float)
        counts = np.array([f.char_count for f in usable], dtype=float)
        symbol_widths = (boxes[:, 1] - boxes[:, 0]) / counts

        bounds = cls(
            left_border=float(boxes[:, 0].min()),
            right_border=float(boxes[:, 1].max()),
            min_symbol_width=float(symbol_widths.min()),
        )
        logger.debug(
            "Layout bounds: left=%.4f right=%.4f min_symbol_width=%.4f",
            bounds.left_border,
            bounds.right_border,
            bounds.min_symbol_width,
        )
        return bounds


def column_groups(fragments: Sequence[Fragment], min_gutter: float) -> list[list[int]]:
    """Split fragments into columns separated by empty vertical corridors.

    Projects every box onto the X axis and cuts wherever the union of the
    projections leaves a gap of at least ``min_gutter`` (and more than zero).

    Args:
        fragments: Fragments to group
        min_gutter: Minimum gap width (normalized) separating two columns

    Returns:
        Groups of positions into ``fragments``, ordered left to right. Each
        group keeps positions in input order.

    Example:
        >>> left = Fragment.create(BBox(0.0, 0.8, 0.4, 0.9), "left")
        >>> right = Fragment.create(BBox(0.6, 0.8, 1.0, 0.9), "right")
        >>> column_groups([right, left], min_gutter=0.1)
        [[1], [0]]
    """
    if not fragments:
        return []

    spans = np.array(
        [[min(f.box.min_x, f.box.max_x), max(f.box.min_x, f.box.max_x)] for f in fragments],
        dtype=float,
    )
    x_sorted_idx = np.argsort(spans[:, 0], kind="stable")

    groups: list[list[int]] = [[int(x_sorted_idx[0])]]
    running_end = spans[x_sorted_idx[0], 1]
    for idx in x_sorted_idx[1:]:
        start, end = spans[idx]
        gap = start - running_end
        if gap > 0 and gap >= min_gutter:
            groups.append([])
        groups[-1].append(int(idx))
        running_end = max(running_end, end)

    if len(groups) > 1:
        logger.debug("Detected %d columns (gutter >= %.4f)", len(groups), min_gutter)
    return [sorted(group) for group in groups]

"""Layout analysis: geometry, same-line adjacency, and reading order."""

from .adjacency import left_neighbor, right_neighbor
from .geometry import (
    LayoutBounds,
    column_groups,
    horizontal_band_overlaps,
    horizontal_gap,
    line_band_overlaps,
    vertical_band_overlaps,
    vertical_overlap_fraction,
)

__all__ = [
    "LayoutBounds",
    "column_groups",
    "horizontal_band_overlaps",
    "horizontal_gap",
    "line_band_overlaps",
    "vertical_band_overlaps",
    "vertical_overlap_fraction",
    "left_neighbor",
    "right_neighbor",
]

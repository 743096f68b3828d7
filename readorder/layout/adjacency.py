"""Same-line neighbor lookup over an ordered fragment sequence.

Bands that are identical or only touch do not make two fragments neighbors.
Neighbor detection is order-dependent: only the immediate predecessor or
successor in the given order can be a neighbor. Callers must query the same
ordered sequence they assemble text from.
"""

from __future__ import annotations

from collections.abc import Sequence

from readorder.types import Fragment

from .geometry import line_band_overlaps

__all__ = ["left_neighbor", "right_neighbor"]


def right_neighbor(ordered: Sequence[Fragment], index: int) -> Fragment | None:
    """Return the fragment continuing the same visual line to the right.

    Args:
        ordered: Fragments in reading order
        index: Position of the fragment of interest

    Returns:
        ``ordered[index + 1]`` when it starts at or after this fragment's
        right edge and strictly overlaps its vertical band, otherwise None
    """
    if index < 0 or index >= len(ordered) - 1:
        return None

    observed = ordered[index].box
    candidate = ordered[index + 1]
    box = candidate.box
    if box.min_x >= observed.max_x and line_band_overlaps(observed, box):
        return candidate
    return None


def left_neighbor(ordered: Sequence[Fragment], index: int) -> Fragment | None:
    """Return the fragment preceding this one on the same visual line.

    Args:
        ordered: Fragments in reading order
        index: Position of the fragment of interest

    Returns:
        ``ordered[index - 1]`` when it ends at or before this fragment's left
        edge and strictly overlaps its vertical band, otherwise None
    """
    if index <= 0 or index >= len(ordered):
        return None

    observed = ordered[index].box
    candidate = ordered[index - 1]
    box = candidate.box
    if box.max_x <= observed.min_x and line_band_overlaps(observed, box):
        return candidate
    return None

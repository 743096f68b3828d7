"""Selection helpers for picking fragments by pointing at them.

This module provides:
- select_all: All-true selection mask
- hit_test: Fragments under a normalized point
- ImageViewport: Mapping between normalized boxes and an aspect-fit view
- SelectionStroke: Drag-to-select state for one continuous gesture

These helpers produce the selection mask that the extraction functions
consume directly; they hold no UI state beyond a single stroke.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from readorder.types import BBox, Fragment

logger = logging.getLogger(__name__)

__all__ = ["ImageViewport", "SelectionStroke", "hit_test", "select_all"]


def select_all(count: int) -> list[bool]:
    """Selection mask with every fragment selected."""
    return [True] * count


def hit_test(fragments: Sequence[Fragment], x: float, y: float) -> list[int]:
    """Indices of fragments whose box contains a normalized point.

    Args:
        fragments: Fragments to test
        x: Normalized x coordinate
        y: Normalized y coordinate (bottom-left origin)

    Returns:
        Matching indices in input order
    """
    return [i for i, fragment in enumerate(fragments) if fragment.box.contains_point(x, y)]


@dataclass(frozen=True)
class ImageViewport:
    """An image drawn aspect-fit and centered inside a view.

    Attributes:
        view_width: View width in points
        view_height: View height in points
        image_width: Image width in pixels
        image_height: Image height in pixels

    Example:
        >>> viewport = ImageViewport(400, 400, 800, 400)
        >>> viewport.scaled_size
        (400.0, 200.0)
        >>> viewport.to_view_rect(BBox(0.0, 0.0, 1.0, 1.0))
        (0.0, 100.0, 400.0, 200.0)
    """

    view_width: float
    view_height: float
    image_width: float
    image_height: float

    @property
    def scaled_size(self) -> tuple[float, float]:
        """Size of the image once fitted into the view."""
        if min(self.view_width, self.view_height, self.image_width, self.image_height) <= 0:
            return (0.0, 0.0)

        view_ratio = self.view_width / self.view_height
        image_ratio = self.image_width / self.image_height
        if image_ratio < view_ratio:
            height = float(self.view_height)
            return (self.image_width * height / self.image_height, height)
        width = float(self.view_width)
        return (width, self.image_height * width / self.image_width)

    @property
    def padding(self) -> tuple[float, float]:
        """Empty margin on each side of the fitted image (x, y)."""
        width, height = self.scaled_size
        return ((self.view_width - width) / 2.0, (self.view_height - height) / 2.0)

    def to_view_rect(self, box: BBox) -> tuple[float, float, float, float]:
        """Convert a normalized box to a top-left-origin view rect (x, y, w, h)."""
        width, height = self.scaled_size
        pad_x, pad_y = self.padding
        return (
            box.min_x * width + pad_x,
            (1 - box.max_y) * height + pad_y,
            box.width * width,
            box.height * height,
        )

    def to_normalized(self, x: float, y: float) -> tuple[float, float] | None:
        """Convert a view point to normalized image coordinates.

        Returns:
            (x, y) with bottom-left origin, or None when the image has no size
        """
        width, height = self.scaled_size
        if width <= 0 or height <= 0:
            return None
        pad_x, pad_y = self.padding
        return ((x - pad_x) / width, 1 - (y - pad_y) / height)


class SelectionStroke:
    """Applies one drag gesture to a selection mask.

    The first fragment touched decides the target state: an unselected
    fragment starts a selecting stroke, a selected one starts a deselecting
    stroke. Every fragment touched afterwards is set to that state. Staying
    over the same fragments does nothing.

    Example:
        >>> stroke = SelectionStroke(fragments, [False] * len(fragments))
        >>> stroke.move_to(0.2, 0.85)
        True
        >>> stroke.end()
        >>> stroke.selected
        [True, False, False]
    """

    def __init__(self, fragments: Sequence[Fragment], selected: Sequence[bool]):
        if len(fragments) != len(selected):
            raise ValueError(
                f"Selection mask length ({len(selected)}) does not match fragment count ({len(fragments)})"
            )
        self.fragments = fragments
        self.selected = list(selected)
        self._last_hits: list[int] = []
        self._target_state: bool | None = None

    def move_to(self, x: float, y: float) -> bool:
        """Continue the stroke at a normalized point.

        Returns:
            True if the selection mask changed
        """
        hits = hit_test(self.fragments, x, y)
        if hits == self._last_hits or not hits:
            self._last_hits = hits
            return False

        if self._target_state is None:
            self._target_state = not self.selected[hits[0]]

        changed = False
        for index in hits:
            if self.selected[index] != self._target_state:
                self.selected[index] = self._target_state
                changed = True

        if changed:
            logger.debug("Stroke set %s to %s", hits, self._target_state)
        self._last_hits = hits
        return changed

    def end(self) -> None:
        """Finish the gesture; the next move starts a fresh stroke."""
        self._last_hits = []
        self._target_state = None

"""BBox class for normalized bounding box operations.

Internal format: (min_x, min_y, max_x, max_y) - normalized corners
Origin: bottom-left of the image, y grows upward
JSON output: [min_x, min_y, max_x, max_y]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

BBOX_COORDINATES = 4  # min_x, min_y, max_x, max_y


@dataclass(frozen=True)
class BBox:
    """Normalized bounding box of a recognized text fragment.

    Internal format: (min_x, min_y, max_x, max_y)
    Origin: Bottom-left corner of the image (0, 0), top-right is (1, 1)
    Coordinates: Floats in the unit square (not pixels)

    This matches the unit-square convention used by platform OCR engines
    such as Apple Vision. Malformed boxes (min > max) are accepted as-is;
    geometry helpers degrade instead of raising.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    # ==================== FROM Conversions (Format → BBox) ====================

    @classmethod
    def from_list(cls, coords: Sequence[float]) -> BBox:
        """Create from a [min_x, min_y, max_x, max_y] list.

        Args:
            coords: Coordinate list (at least 4 elements)

        Returns:
            BBox object with float coordinates

        Raises:
            ValueError: If fewer than four coordinates are given

        Example:
            >>> BBox.from_list([0.1, 0.2, 0.5, 0.3])
            BBox(min_x=0.1, min_y=0.2, max_x=0.5, max_y=0.3)
        """
        if len(coords) < BBOX_COORDINATES:
            raise ValueError(f"BBox needs {BBOX_COORDINATES} coordinates, got {len(coords)}")
        min_x, min_y, max_x, max_y = (float(c) for c in coords[:BBOX_COORDINATES])
        return cls(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)

    @classmethod
    def from_pixel_xyxy(
        cls,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        image_width: float,
        image_height: float,
    ) -> BBox:
        """Create from a pixel box with top-left origin (requires Y-axis flip).

        Format: [x0, y0, x1, y1] in pixels, origin top-left
        Used by: PaddleOCR, OpenCV

        Args:
            x0: Left x coordinate in pixels
            y0: Top y coordinate in pixels
            x1: Right x coordinate in pixels
            y1: Bottom y coordinate in pixels
            image_width: Image width in pixels
            image_height: Image height in pixels

        Returns:
            Normalized BBox with bottom-left origin

        Example:
            >>> BBox.from_pixel_xyxy(100, 50, 300, 150, 400, 200)
            BBox(min_x=0.25, min_y=0.25, max_x=0.75, max_y=0.75)
        """
        if image_width <= 0 or image_height <= 0:
            raise ValueError(f"Invalid image size: {image_width}x{image_height}")
        # Y-axis flip: top-left → bottom-left
        return cls(
            min_x=x0 / image_width,
            min_y=(image_height - y1) / image_height,
            max_x=x1 / image_width,
            max_y=(image_height - y0) / image_height,
        )

    # ==================== TO Conversions (BBox → Format) ====================

    def to_list(self) -> list[float]:
        """Convert to [min_x, min_y, max_x, max_y] list (for JSON serialization)."""
        return [self.min_x, self.min_y, self.max_x, self.max_y]

    # ==================== Properties ====================

    @property
    def width(self) -> float:
        """Get width (negative for malformed boxes)."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Get height (negative for malformed boxes)."""
        return self.max_y - self.min_y

    @property
    def is_valid(self) -> bool:
        """Check the min <= max invariant on both axes."""
        return self.min_x <= self.max_x and self.min_y <= self.max_y

    # ==================== Geometric Operations ====================

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a normalized point is inside the bbox.

        Args:
            x: X coordinate (normalized)
            y: Y coordinate (normalized, bottom-left origin)

        Returns:
            True if point is inside bbox
        """
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

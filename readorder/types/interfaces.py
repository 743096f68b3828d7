"""Component interface definitions for readorder.

This module defines Protocol interfaces for the pluggable components:
- Sorter: Reading order interface
- Recognizer: OCR adapter interface
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .fragment import Fragment


@runtime_checkable
class Sorter(Protocol):
    """Reading order sorting interface.

    Sorters are stateless: the same input always yields the same permutation,
    and no state survives between calls.

    Attributes:
        name: Sorter identifier (e.g., "xy", "linear")

    Example:
        >>> sorter = GeometricRowColumnSorter()
        >>> sorter.name
        'xy'
        >>> order = sorter.sort(fragments)
        >>> ordered = [fragments[i] for i in order]
    """

    name: str

    def sort(self, fragments: Sequence[Fragment]) -> list[int]:
        """Order fragments for reading.

        Args:
            fragments: Selected fragments with usable text, in input order

        Returns:
            Permutation of positions into ``fragments`` in reading order.
            An empty input yields an empty list.
        """
        ...


@runtime_checkable
class Recognizer(Protocol):
    """OCR adapter interface.

    Recognizers wrap an external OCR engine and return fragments with
    normalized boxes. Fragments without a usable candidate are dropped.

    Attributes:
        name: Recognizer identifier (e.g., "paddleocr")

    Example:
        >>> recognizer = PaddleOCRRecognizer(lang="en")
        >>> fragments = recognizer.recognize(image)
    """

    name: str

    def recognize(self, image: Any) -> list[Fragment]:
        """Recognize text fragments in an image.

        Args:
            image: Input image as numpy array (H, W, C)

        Returns:
            Fragments with usable text

        Raises:
            RecognitionTypeMismatchError: Engine returned an unexpected shape
            RecognitionFailureError: Engine raised
        """
        ...

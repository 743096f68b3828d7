"""OCR adapters producing fragments.

Recognition itself is delegated to external engines; adapters normalize
their boxes, validate their output shape, and drop observations without a
usable candidate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import BaseRecognizer
from .registry import RecognizerRegistry, recognizer_registry

if TYPE_CHECKING:
    import numpy as np

    from readorder.types import Fragment, Recognizer

__all__ = [
    "BaseRecognizer",
    "RecognizerRegistry",
    "recognizer_registry",
    "create_recognizer",
    "list_available_recognizers",
    "recognize",
]


def create_recognizer(name: str, **kwargs: Any) -> Recognizer:
    """Create a recognizer instance by name."""
    return recognizer_registry.create(name, **kwargs)


def list_available_recognizers() -> list[str]:
    """List available recognizer names."""
    return recognizer_registry.list_available()


def recognize(image: np.ndarray, recognizer: Recognizer | str) -> list[Fragment]:
    """Recognize fragments in an image with a recognizer instance or name.

    Raises:
        RecognitionTypeMismatchError: Engine returned an unexpected shape
        RecognitionFailureError: Engine raised
    """
    if isinstance(recognizer, str):
        recognizer = create_recognizer(recognizer)
    return recognizer.recognize(image)

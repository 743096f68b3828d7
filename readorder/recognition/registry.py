"""OCR adapter lookup by name.

Engines are heavy imports, so an adapter module is only imported when a
recognizer is actually created.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from readorder.constants import DEFAULT_RECOGNIZER
from readorder.registry import LazyRegistry

if TYPE_CHECKING:
    from readorder.types import Recognizer

__all__ = ["RecognizerRegistry", "recognizer_registry"]


class RecognizerRegistry(LazyRegistry):
    """Adapter name -> recognizer class.

    Example:
        >>> from readorder.recognition.registry import recognizer_registry
        >>> recognizer = recognizer_registry.create("paddleocr", lang="en")
    """

    kind = "recognizer"
    builtin = {
        DEFAULT_RECOGNIZER: ("readorder.recognition.paddleocr", "PaddleOCRRecognizer"),
    }
    aliases = {
        "paddle": DEFAULT_RECOGNIZER,
        "ocr": DEFAULT_RECOGNIZER,
    }

    def create(self, name: str, **kwargs: Any) -> Recognizer:
        """Instantiate the adapter registered under ``name``."""
        return super().create(name, **kwargs)


recognizer_registry = RecognizerRegistry()

"""Unified type definitions for readorder.

This module provides:
- BBox: Normalized bounding box (bottom-left origin)
- RecognizedText: Raw OCR observation
- Fragment: Recognized text box with its best candidate
- Sorter, Recognizer: Component interfaces
"""

from .bbox import BBOX_COORDINATES, BBox
from .fragment import Fragment, RecognizedText
from .interfaces import Recognizer, Sorter

__all__ = [
    # Constants
    "BBOX_COORDINATES",
    # Core data models
    "BBox",
    "RecognizedText",
    "Fragment",
    # Component interfaces
    "Sorter",
    "Recognizer",
]

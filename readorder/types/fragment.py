"""Fragment and RecognizedText dataclasses.

This module provides:
- RecognizedText: Raw OCR observation (box + ranked candidate strings)
- Fragment: Immutable text box with its best usable candidate
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .bbox import BBox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognizedText:
    """Raw text observation as returned by an OCR engine.

    Attributes:
        box: Normalized bounding box (bottom-left origin)
        candidates: Candidate strings, best first (may be empty)
        confidences: Optional confidence per candidate
    """

    box: BBox
    candidates: tuple[str, ...] = ()
    confidences: tuple[float, ...] = field(default=(), compare=False)

    @property
    def top_candidate(self) -> str | None:
        """Best candidate string, or None when the engine produced none."""
        return self.candidates[0] if self.candidates else None


@dataclass(frozen=True)
class Fragment:
    """One recognized text box with its trimmed best-candidate string.

    Fragments are immutable once produced; the set of fragments for one image
    is fixed for that image's session. Text is trimmed of surrounding
    whitespace and newlines on construction through the factory methods.

    Attributes:
        box: Normalized bounding box (bottom-left origin, y grows upward)
        text: Trimmed recognized text

    Example:
        >>> fragment = Fragment.create(BBox(0.1, 0.8, 0.5, 0.85), "  Hello  ")
        >>> fragment.text
        'Hello'
        >>> fragment.char_count
        5
    """

    box: BBox
    text: str

    @classmethod
    def create(cls, box: BBox, text: str) -> Fragment:
        """Create a fragment, trimming the text."""
        return cls(box=box, text=text.strip())

    @classmethod
    def from_recognized(cls, recognized: RecognizedText) -> Fragment | None:
        """Build a fragment from the best candidate of an OCR observation.

        Args:
            recognized: Raw OCR observation

        Returns:
            Fragment, or None when no usable candidate exists
        """
        candidate = recognized.top_candidate
        if candidate is None or not candidate.strip():
            logger.debug("Skipping observation without usable candidate at %s", recognized.box)
            return None
        return cls.create(recognized.box, candidate)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Fragment:
        """Create from a {"box": [...], "text": "..."} mapping.

        Raises:
            KeyError: If "box" or "text" is missing
            TypeError: If "text" is not a string
        """
        text = data["text"]
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        return cls.create(BBox.from_list(data["box"]), text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {"box": self.box.to_list(), "text": self.text}

    @property
    def char_count(self) -> int:
        """Number of characters in the text."""
        return len(self.text)

    @property
    def has_text(self) -> bool:
        """Whether the fragment carries usable (non-blank) text."""
        return bool(self.text.strip())

    @property
    def symbol_width(self) -> float:
        """Average normalized width of one character (0.0 for empty text)."""
        if self.char_count == 0:
            return 0.0
        return self.box.width / self.char_count

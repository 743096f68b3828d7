"""Base recognizer class and interface.

This module defines the abstract base class for OCR adapters, providing a
consistent interface, result validation, and error reporting.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from readorder.exceptions import (
    RecognitionError,
    RecognitionFailureError,
    RecognitionTypeMismatchError,
)
from readorder.types import Fragment, RecognizedText

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)

__all__ = ["BaseRecognizer"]


class BaseRecognizer(ABC):
    """Abstract base class for all OCR adapters.

    All recognizer implementations should inherit from this class and
    implement ``_recognize_impl``. This base class provides:

    - Consistent interface (recognize, arecognize)
    - Result shape validation (RecognitionTypeMismatchError)
    - Engine failure reporting (RecognitionFailureError)
    - Silent exclusion of observations without a usable candidate

    Failures are reported once and never retried.

    Attributes:
        name: Recognizer name (e.g., "paddleocr")

    Example:
        >>> class MyRecognizer(BaseRecognizer):
        ...     name = "my-recognizer"
        ...
        ...     def _recognize_impl(self, image):
        ...         return [RecognizedText(BBox(0.1, 0.8, 0.5, 0.9), ("Hello",))]
    """

    # Subclasses should override this
    name: str = "base-recognizer"

    @abstractmethod
    def _recognize_impl(self, image: np.ndarray) -> Any:
        """Run the OCR engine.

        Args:
            image: Input image as numpy array (H, W, C)

        Returns:
            List of RecognizedText observations. Anything else is reported as
            an unexpected result type.
        """

    def recognize(self, image: np.ndarray) -> list[Fragment]:
        """Recognize text fragments in an image.

        Args:
            image: Input image as numpy array (H, W, C)

        Returns:
            Fragments with usable text, in the engine's order

        Raises:
            ValueError: If image is None
            RecognitionTypeMismatchError: If the engine result has an unexpected shape
            RecognitionFailureError: If the engine raised
        """
        if image is None:
            raise ValueError("Image cannot be None")

        try:
            observations = self._recognize_impl(image)
        except RecognitionError:
            raise
        except Exception as e:
            logger.error("%s recognition failed: %s", self.name, e)
            raise RecognitionFailureError(str(e), cause=e) from e

        self._validate(observations)

        fragments = [f for f in (Fragment.from_recognized(o) for o in observations) if f is not None]
        skipped = len(observations) - len(fragments)
        logger.debug(
            "%s recognized %d fragments (%d without usable text)",
            self.name,
            len(fragments),
            skipped,
        )
        return fragments

    async def arecognize(self, image: np.ndarray) -> list[Fragment]:
        """Recognize text in a worker thread without blocking the event loop.

        Args:
            image: Input image as numpy array (H, W, C)

        Returns:
            Same as recognize()
        """
        return await asyncio.to_thread(self.recognize, image)

    def _validate(self, observations: Any) -> None:
        if not isinstance(observations, list):
            logger.error("%s returned %s instead of a list", self.name, type(observations).__name__)
            raise RecognitionTypeMismatchError(f"expected list, got {type(observations).__name__}")

        for observation in observations:
            if not isinstance(observation, RecognizedText):
                logger.error("%s returned an item of type %s", self.name, type(observation).__name__)
                raise RecognitionTypeMismatchError(
                    f"expected RecognizedText items, got {type(observation).__name__}"
                )

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(name={self.name!r})"

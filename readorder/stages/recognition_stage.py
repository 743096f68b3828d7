"""Recognition Stage: image to fragments."""

from __future__ import annotations

from typing import Any

import numpy as np

from readorder.types import Fragment, Recognizer

from .base import BaseStage


class RecognitionStage(BaseStage[np.ndarray, list[Fragment]]):
    """Run an OCR adapter over an image."""

    name = "recognition"

    def __init__(self, recognizer: Recognizer):
        """Initialize RecognitionStage.

        Args:
            recognizer: OCR adapter instance
        """
        self.recognizer = recognizer

    def _process_impl(self, input_data: np.ndarray, **context: Any) -> list[Fragment]:
        return self.recognizer.recognize(input_data)

    def _describe(self, output: list[Fragment]) -> dict[str, Any]:
        return {"recognizer": self.recognizer.name, "fragments": len(output)}

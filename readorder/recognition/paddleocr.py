"""PaddleOCR text recognition adapter.

PaddleOCR returns one result per image with recognized line texts, their
scores, and pixel boxes in top-left-origin coordinates. This adapter turns
each line into a RecognizedText with a normalized bottom-left-origin box.

Usage:
    >>> from readorder.recognition.paddleocr import PaddleOCRRecognizer
    >>> recognizer = PaddleOCRRecognizer(lang="en")
    >>> fragments = recognizer.recognize(image)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from readorder.constants import DEFAULT_PADDLEOCR_LANG
from readorder.exceptions import DependencyError, RecognitionTypeMismatchError
from readorder.types import BBOX_COORDINATES, BBox, RecognizedText

from .base import BaseRecognizer

logger = logging.getLogger(__name__)

__all__ = ["PaddleOCRRecognizer", "parse_paddleocr_result"]


def _box_from_polygon(points: Any) -> tuple[float, float, float, float]:
    coords = np.asarray(points, dtype=float).reshape(-1, 2)
    return (
        float(coords[:, 0].min()),
        float(coords[:, 1].min()),
        float(coords[:, 0].max()),
        float(coords[:, 1].max()),
    )


def parse_paddleocr_result(result: Any, image_width: int, image_height: int) -> list[RecognizedText]:
    """Convert one PaddleOCR ``predict`` result into observations.

    Args:
        result: Result mapping with "rec_texts" and "rec_boxes" (or "rec_polys")
        image_width: Image width in pixels
        image_height: Image height in pixels

    Returns:
        Observations in PaddleOCR's order

    Raises:
        RecognitionTypeMismatchError: If the result lacks the expected keys
    """
    if not isinstance(result, Mapping) and not hasattr(result, "get"):
        raise RecognitionTypeMismatchError(f"PaddleOCR result is {type(result).__name__}")

    texts = result.get("rec_texts")
    if texts is None:
        raise RecognitionTypeMismatchError("PaddleOCR result has no rec_texts")
    if len(texts) == 0:
        return []

    scores = result.get("rec_scores")
    boxes = result.get("rec_boxes")
    if boxes is None or len(boxes) == 0:
        boxes = result.get("rec_polys")
    if boxes is None:
        raise RecognitionTypeMismatchError("PaddleOCR result has no rec_boxes/rec_polys")
    if len(texts) != len(boxes):
        raise RecognitionTypeMismatchError(f"PaddleOCR returned {len(texts)} texts for {len(boxes)} boxes")

    observations: list[RecognizedText] = []
    for index, (text, raw_box) in enumerate(zip(texts, boxes, strict=True)):
        flat = np.asarray(raw_box, dtype=float).ravel()
        corners = flat if flat.size == BBOX_COORDINATES else _box_from_polygon(flat)
        x0, y0, x1, y1 = (float(c) for c in corners)
        box = BBox.from_pixel_xyxy(x0, y0, x1, y1, image_width, image_height)
        confidences = (float(scores[index]),) if scores is not None and index < len(scores) else ()
        candidates = (str(text),) if text is not None else ()
        observations.append(RecognizedText(box=box, candidates=candidates, confidences=confidences))

    return observations


class PaddleOCRRecognizer(BaseRecognizer):
    """Text recognizer using the PaddleOCR detection + recognition pipeline.

    Example:
        >>> recognizer = PaddleOCRRecognizer(lang="en")
        >>> fragments = recognizer.recognize(image)
    """

    name = "paddleocr"

    def __init__(
        self,
        lang: str = DEFAULT_PADDLEOCR_LANG,
        device: str | None = None,
        **kwargs: Any,
    ):
        """Initialize PaddleOCR recognizer.

        Args:
            lang: PaddleOCR language model (default: "en")
            device: Device to run on ("cpu", "gpu", "gpu:0"); PaddleOCR picks when None
            **kwargs: Additional arguments passed to PaddleOCR

        Raises:
            DependencyError: If paddleocr is not installed
        """
        # Lazy import to avoid loading PaddleOCR unless needed
        try:
            from paddleocr import PaddleOCR  # noqa: PLC0415  # type: ignore[import-untyped]
        except ImportError as e:
            raise DependencyError(
                "PaddleOCR is required for the paddleocr recognizer. Please install it: pip install paddleocr"
            ) from e

        self.lang = lang
        self.device = device

        init_kwargs: dict[str, Any] = {
            "lang": lang,
            "use_doc_orientation_classify": False,
            "use_doc_unwarping": False,
            "use_textline_orientation": False,
        }
        if device:
            init_kwargs["device"] = device
        init_kwargs.update(kwargs)

        logger.info("Initializing PaddleOCR (lang=%s, device=%s)", lang, device or "auto")
        self.model = PaddleOCR(**init_kwargs)

    def _recognize_impl(self, image: np.ndarray) -> list[RecognizedText]:
        """Run PaddleOCR on a single image."""
        height, width = image.shape[:2]
        raw_results = self.model.predict(image)

        if raw_results is None:
            raise RecognitionTypeMismatchError("PaddleOCR returned None")
        if not isinstance(raw_results, Sequence):
            raise RecognitionTypeMismatchError(f"PaddleOCR returned {type(raw_results).__name__}")
        if len(raw_results) == 0:
            logger.warning("PaddleOCR returned no results")
            return []

        observations = parse_paddleocr_result(raw_results[0], width, height)
        logger.debug("PaddleOCR recognized %d text lines", len(observations))
        return observations

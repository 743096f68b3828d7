"""Reading order reconstruction for OCR text fragments.

Turns an unordered set of recognized text fragments (normalized box + text)
and a selection mask into readable text: fragments are put in reading order,
then joined with spaces, word-wrap merges, and paragraph breaks.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .assembly import ParagraphRule, assemble_text
from .config import ReaderConfig
from .extraction import extract_text, has_selection, order_fragments, selected_fragments
from .layout.ordering import SortStrategy, create_sorter
from .stages import AssemblyStage, OrderingStage, RecognitionStage
from .types import BBox, Fragment, RecognizedText, Recognizer, Sorter

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)

__all__ = [
    "Reader",
    "ReaderConfig",
    "BBox",
    "Fragment",
    "RecognizedText",
    "Recognizer",
    "Sorter",
    "SortStrategy",
    "ParagraphRule",
    "assemble_text",
    "extract_text",
    "has_selection",
    "order_fragments",
    "selected_fragments",
]


class Reader:
    """Configured reading-order engine.

    Wires a sorter and, on first use, an OCR adapter from a ReaderConfig.
    The reader keeps no per-call state: every extraction recomputes order
    and layout bounds from its own inputs.

    Example:
        >>> reader = Reader(ReaderConfig(strategy="xy"))
        >>> reader.extract_text(fragments, [True] * len(fragments))
        'An example.\\n\\n'
    """

    def __init__(self, config: ReaderConfig | None = None, recognizer: Recognizer | None = None):
        """Initialize reader.

        Args:
            config: Reader configuration. If None, uses default configuration.
            recognizer: OCR adapter to use instead of the configured one

        Raises:
            InvalidConfigError: If the configuration is invalid
        """
        self.config = config or ReaderConfig()
        self.config.validate()

        self.sorter = create_sorter(self.config.strategy, **self.config.sorter_options())
        self._recognizer = recognizer

        self.ordering_stage = OrderingStage(self.sorter)
        self.assembly_stage = AssemblyStage(
            paragraph_rule=self.config.paragraph_rule,
            indent_symbols=self.config.indent_symbols,
        )
        logger.info(
            "Reader initialized: strategy=%s, paragraph_rule=%s",
            self.config.strategy,
            self.config.paragraph_rule,
        )

    @property
    def recognizer(self) -> Recognizer:
        """OCR adapter, created from configuration on first access."""
        if self._recognizer is None:
            from .recognition import create_recognizer

            self._recognizer = create_recognizer(self.config.recognizer, **self.config.recognizer_options)
        return self._recognizer

    def extract_text(self, fragments: Sequence[Fragment], selected: Sequence[bool] | None = None) -> str:
        """Reconstruct text from the selected fragments ("" when nothing is selected).

        Args:
            fragments: All fragments of the image
            selected: Selection mask; every fragment is selected when None
        """
        if selected is None:
            selected = [True] * len(fragments)
        return extract_text(
            fragments,
            selected,
            self.sorter,
            paragraph_rule=self.config.paragraph_rule,
            indent_symbols=self.config.indent_symbols,
        )

    def has_selection(self, fragments: Sequence[Fragment], selected: Sequence[bool]) -> bool:
        """Check whether some selected fragment has usable text."""
        return has_selection(fragments, selected)

    def order(self, fragments: Sequence[Fragment], selected: Sequence[bool] | None = None) -> list[int]:
        """Indices of the selected fragments in reading order."""
        if selected is None:
            selected = [True] * len(fragments)
        return order_fragments(fragments, selected, self.sorter)

    def recognize(self, image: np.ndarray) -> list[Fragment]:
        """Recognize fragments in an image with the configured OCR adapter.

        Raises:
            RecognitionTypeMismatchError: Engine returned an unexpected shape
            RecognitionFailureError: Engine raised
        """
        return self.recognizer.recognize(image)

    def read_image(self, image: np.ndarray | Path | str) -> str:
        """Recognize an image and return all of its text in reading order.

        Args:
            image: Image array (H, W, C) or path to an image file

        Raises:
            FileLoadError: If an image path cannot be loaded
            StageError: If a stage fails
        """
        if isinstance(image, (str, Path)):
            from .io import load_image

            image = load_image(Path(image))

        recognition = RecognitionStage(self.recognizer).process_with_result(image)
        ordering = self.ordering_stage.process_with_result(recognition.data)
        assembly = self.assembly_stage.process_with_result(ordering.data)

        logger.info(
            "Read %d fragments into %d characters (recognition %.1fms, ordering %.1fms, assembly %.1fms)",
            len(recognition.data),
            len(assembly.data),
            recognition.processing_time_ms,
            ordering.processing_time_ms,
            assembly.processing_time_ms,
        )
        return assembly.data

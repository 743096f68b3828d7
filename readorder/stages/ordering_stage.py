"""Ordering Stage: reading order of the selected fragments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from readorder.extraction import selected_indices
from readorder.types import Fragment, Sorter

from .base import BaseStage


class OrderingStage(BaseStage[Sequence[Fragment], list[Fragment]]):
    """Restrict fragments to the selection and put them in reading order.

    The selection mask is passed as the ``selected`` context value; every
    fragment is selected when it is omitted.
    """

    name = "ordering"

    def __init__(self, sorter: Sorter):
        """Initialize OrderingStage.

        Args:
            sorter: Layout sorter instance
        """
        self.sorter = sorter

    def _process_impl(self, input_data: Sequence[Fragment], **context: Any) -> list[Fragment]:
        """Sort selected fragments by reading order.

        Args:
            input_data: All fragments of the image
            **context: Optional 'selected' mask, same length as input_data

        Returns:
            Selected fragments with usable text, in reading order
        """
        selected = context.get("selected")
        if selected is None:
            selected = [True] * len(input_data)

        chosen = [input_data[i] for i in selected_indices(input_data, selected)]
        if not chosen:
            return []
        return [chosen[i] for i in self.sorter.sort(chosen)]

    def _describe(self, output: list[Fragment]) -> dict[str, Any]:
        return {"sorter": self.sorter.name, "fragments": len(output)}

"""Assembly Stage: ordered fragments to text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from readorder.assembly import ParagraphRule, assemble_text
from readorder.constants import DEFAULT_INDENT_SYMBOLS
from readorder.layout.geometry import LayoutBounds
from readorder.types import Fragment

from .base import BaseStage


class AssemblyStage(BaseStage[Sequence[Fragment], str]):
    """Join ordered fragments into text with paragraph and word-wrap handling."""

    name = "assembly"

    def __init__(
        self,
        paragraph_rule: str = ParagraphRule.STRICT,
        indent_symbols: float = DEFAULT_INDENT_SYMBOLS,
    ):
        self.paragraph_rule = paragraph_rule
        self.indent_symbols = indent_symbols

    def _process_impl(self, input_data: Sequence[Fragment], **context: Any) -> str:
        bounds = LayoutBounds.from_fragments(input_data)
        return assemble_text(
            input_data,
            bounds,
            paragraph_rule=self.paragraph_rule,
            indent_symbols=self.indent_symbols,
        )

    def _describe(self, output: str) -> dict[str, Any]:
        return {"paragraph_rule": self.paragraph_rule, "characters": len(output)}

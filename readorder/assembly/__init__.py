"""Text assembly from ordered fragments."""

from .text import ParagraphRule, assemble_text

__all__ = ["ParagraphRule", "assemble_text"]

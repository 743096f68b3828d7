"""Plaintext reconstruction from ordered fragments.

This module joins fragments in reading order and decides, between each
consecutive pair, whether to insert a space, a paragraph break, or nothing
(when a word-wrap hyphen was merged). Decisions rely on same-line adjacency
in the given order and on the global text edges of the selection.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from readorder.constants import (
    DEFAULT_INDENT_SYMBOLS,
    PARAGRAPH_BREAK,
    TERMINAL_PUNCTUATION,
    WORD_WRAP_HYPHEN,
)
from readorder.layout.adjacency import left_neighbor, right_neighbor
from readorder.layout.geometry import LayoutBounds
from readorder.types import Fragment

logger = logging.getLogger(__name__)

__all__ = ["ParagraphRule", "assemble_text"]


class ParagraphRule:
    """Paragraph break policies.

    SIMPLE breaks on geometry alone: a short line or an indented line starts
    a new paragraph. STRICT also requires the text to agree: the line before
    the break ends in terminal punctuation or the line after it starts with
    an uppercase letter.
    """

    SIMPLE = "simple"
    STRICT = "strict"

    ALL = (SIMPLE, STRICT)


@dataclass(frozen=True)
class _Accumulator:
    text: str = ""
    last_line_had_word_wrap: bool = False
    last_line: str = ""


def _ends_sentence(line: str) -> bool:
    return bool(line) and line.endswith(TERMINAL_PUNCTUATION)


def _starts_uppercase(line: str) -> bool:
    return bool(line) and line[0].isupper()


def _text_allows_break(rule: str, before: str, after: str) -> bool:
    if rule == ParagraphRule.SIMPLE:
        return True
    return _ends_sentence(before) or _starts_uppercase(after)


def assemble_text(
    ordered: Sequence[Fragment],
    bounds: LayoutBounds | None = None,
    paragraph_rule: str = ParagraphRule.STRICT,
    indent_symbols: float = DEFAULT_INDENT_SYMBOLS,
) -> str:
    """Join ordered fragments into human-readable text.

    For every fragment, in order:

    1. Trim surrounding whitespace; an empty line contributes nothing.
    2. Without a right neighbor, a trailing "-" is a word-wrap hyphen: it is
       removed and the next line is glued on without a space.
    3. Without a right neighbor, a line ending well short of the right text
       edge closes its paragraph.
    4. Without a left neighbor, a line starting well inside the left text edge
       opens a new paragraph; otherwise lines are joined with a space.

    Args:
        ordered: Fragments in reading order
        bounds: Global text edges; computed from ``ordered`` when omitted
        paragraph_rule: ParagraphRule.SIMPLE or ParagraphRule.STRICT
        indent_symbols: Short-line/indent threshold in symbol widths

    Returns:
        Reconstructed text ("" when there is nothing to join)

    Example:
        >>> fragments = [
        ...     Fragment.create(BBox(0.1, 0.80, 0.9, 0.85), "An exam-"),
        ...     Fragment.create(BBox(0.1, 0.70, 0.5, 0.75), "ple."),
        ... ]
        >>> assemble_text(fragments)
        'An example.\\n\\n'
    """
    if bounds is None:
        bounds = LayoutBounds.from_fragments(ordered)
    if bounds is None:
        return ""

    threshold = bounds.min_symbol_width * indent_symbols
    state = _Accumulator()
    for index, fragment in enumerate(ordered):
        state = _append_fragment(state, ordered, index, bounds, threshold, paragraph_rule)
        logger.debug("Assembled fragment %d: %r", index, fragment.text)

    return state.text


def _append_fragment(
    state: _Accumulator,
    ordered: Sequence[Fragment],
    index: int,
    bounds: LayoutBounds,
    threshold: float,
    paragraph_rule: str,
) -> _Accumulator:
    fragment = ordered[index]
    trimmed = fragment.text.strip()
    if not trimmed:
        return state

    box = fragment.box
    line = trimmed
    has_word_wrap = False

    if right_neighbor(ordered, index) is None:
        if line.endswith(WORD_WRAP_HYPHEN):
            has_word_wrap = True
            line = line[: -len(WORD_WRAP_HYPHEN)]

        next_line = ordered[index + 1].text.strip() if index + 1 < len(ordered) else ""
        if box.max_x < bounds.right_border - threshold and _text_allows_break(
            paragraph_rule, trimmed, next_line
        ):
            line += PARAGRAPH_BREAK

    text = state.text
    if text:
        if left_neighbor(ordered, index) is None:
            if not text.endswith("\n"):
                if box.min_x > bounds.left_border + threshold and _text_allows_break(
                    paragraph_rule, state.last_line, trimmed
                ):
                    text += PARAGRAPH_BREAK
                elif not state.last_line_had_word_wrap:
                    text += " "
        else:
            text += " "

    return _Accumulator(text=text + line, last_line_had_word_wrap=has_word_wrap, last_line=trimmed)

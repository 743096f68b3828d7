"""Text extraction entry points.

This module glues the layout sorter and the text assembler together:
fragment list + selection mask -> reading order -> reconstructed text.
Every call recomputes the order and the global bounds from its own inputs;
nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from readorder.assembly import ParagraphRule, assemble_text
from readorder.constants import DEFAULT_INDENT_SYMBOLS
from readorder.layout.geometry import LayoutBounds
from readorder.layout.ordering import SortStrategy, create_sorter
from readorder.types import Fragment, Sorter

logger = logging.getLogger(__name__)

__all__ = [
    "extract_text",
    "has_selection",
    "order_fragments",
    "selected_fragments",
    "selected_indices",
]


def selected_indices(fragments: Sequence[Fragment], selected: Sequence[bool]) -> list[int]:
    """Indices of selected fragments with usable text, in input order.

    Raises:
        ValueError: If the mask and fragment list differ in length
    """
    if len(fragments) != len(selected):
        raise ValueError(
            f"Selection mask length ({len(selected)}) does not match fragment count ({len(fragments)})"
        )
    return [
        i
        for i, (fragment, chosen) in enumerate(zip(fragments, selected, strict=True))
        if chosen and fragment.has_text
    ]


def selected_fragments(fragments: Sequence[Fragment], selected: Sequence[bool]) -> list[Fragment]:
    """Selected fragments with usable text, in input order."""
    return [fragments[i] for i in selected_indices(fragments, selected)]


def has_selection(fragments: Sequence[Fragment], selected: Sequence[bool]) -> bool:
    """Check whether extraction would have anything to work with."""
    return bool(selected_indices(fragments, selected))


def _resolve_sorter(strategy: str | Sorter, sorter_options: dict[str, Any]) -> Sorter:
    if isinstance(strategy, str):
        return create_sorter(strategy, **sorter_options)
    return strategy


def order_fragments(
    fragments: Sequence[Fragment],
    selected: Sequence[bool],
    strategy: str | Sorter = SortStrategy.XY_LINEAR,
    **sorter_options: Any,
) -> list[int]:
    """Reading order of the selected fragments.

    Args:
        fragments: All fragments of the image
        selected: Selection mask, same length as ``fragments``
        strategy: Strategy name (see SortStrategy) or a Sorter instance
        **sorter_options: Options for the strategy (e.g. row_overlap_threshold)

    Returns:
        Indices into ``fragments``, in reading order
    """
    indices = selected_indices(fragments, selected)
    if not indices:
        return []

    sorter = _resolve_sorter(strategy, sorter_options)
    order = sorter.sort([fragments[i] for i in indices])
    return [indices[i] for i in order]


def extract_text(
    fragments: Sequence[Fragment],
    selected: Sequence[bool],
    strategy: str | Sorter = SortStrategy.XY_LINEAR,
    *,
    paragraph_rule: str = ParagraphRule.STRICT,
    indent_symbols: float = DEFAULT_INDENT_SYMBOLS,
    **sorter_options: Any,
) -> str:
    """Reconstruct readable text from the selected fragments.

    Args:
        fragments: All fragments of the image
        selected: Selection mask, same length as ``fragments``
        strategy: Strategy name (see SortStrategy) or a Sorter instance
        paragraph_rule: ParagraphRule.SIMPLE or ParagraphRule.STRICT
        indent_symbols: Short-line/indent threshold in symbol widths
        **sorter_options: Options for the strategy

    Returns:
        Reconstructed text; "" when nothing usable is selected

    Example:
        >>> text = extract_text(fragments, [True] * len(fragments), SortStrategy.XY)
    """
    indices = selected_indices(fragments, selected)
    if not indices:
        logger.debug("Nothing selected, skipping extraction")
        return ""

    chosen = [fragments[i] for i in indices]
    bounds = LayoutBounds.from_fragments(chosen)

    sorter = _resolve_sorter(strategy, sorter_options)
    ordered = [chosen[i] for i in sorter.sort(chosen)]

    text = assemble_text(ordered, bounds, paragraph_rule=paragraph_rule, indent_symbols=indent_symbols)
    logger.debug("Extracted %d characters from %d fragments using '%s'", len(text), len(ordered), sorter.name)
    return text

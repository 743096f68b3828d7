"""Passthrough sorter keeping the OCR engine's native order."""

from __future__ import annotations

from collections.abc import Sequence

from readorder.types import Fragment, Sorter


class OriginalSorter(Sorter):
    """Sorter returning the identity permutation.

    Useful when the recognizer already emits text in reading order, and as a
    baseline for comparing the geometric strategies.
    """

    name = "original"

    def sort(self, fragments: Sequence[Fragment]) -> list[int]:
        """Return positions in input order."""
        return list(range(len(fragments)))

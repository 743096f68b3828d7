"""Nearest-neighbor chain sorter.

Linear Algorithm:
- Every fragment gets a "follows" edge to its nearest right-hand neighbor on
  the same visual line: minimum horizontal gap, gap no smaller than minus the
  wider symbol width of the pair, shared vertical band
- When several fragments point at the same successor, only the closest keeps
  the edge
- Output walks the input order: the first fragment not yet emitted is traced
  back to the start of its chain, then the chain is emitted left to right
  until it ends or reaches a fragment already emitted

Ties are broken by input position (first found wins), so the result is
deterministic for any input.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from readorder.layout.geometry import horizontal_gap, vertical_band_overlaps
from readorder.types import Fragment, Sorter

logger = logging.getLogger(__name__)


class NearestNeighborChainSorter(Sorter):
    """Sorter linking fragments into left-to-right line chains.

    Example:
        >>> sorter = NearestNeighborChainSorter()
        >>> order = sorter.sort(fragments)
    """

    name = "linear"

    def sort(self, fragments: Sequence[Fragment]) -> list[int]:
        """Order fragments by chaining same-line neighbors.

        Args:
            fragments: Selected fragments in input order (typically the
                output of another sorter)

        Returns:
            Permutation of positions in reading order
        """
        if not fragments:
            return []

        successors = self._link(fragments)
        predecessors = {succ: pred for pred, succ in successors.items()}

        emitted: set[int] = set()
        result: list[int] = []
        for start in range(len(fragments)):
            if start in emitted:
                continue

            current: int | None = self._chain_root(start, predecessors, emitted)
            while current is not None and current not in emitted:
                result.append(current)
                emitted.add(current)
                current = successors.get(current)

        logger.debug("Linear sort linked %d of %d fragments", len(successors), len(result))
        return result

    def nearest_right(self, fragments: Sequence[Fragment], index: int) -> tuple[int, float] | None:
        """Find the closest fragment continuing ``fragments[index]`` to the right.

        Returns:
            (position, gap) of the nearest qualifying fragment, or None
        """
        head = fragments[index]
        best: tuple[int, float] | None = None

        for position, candidate in enumerate(fragments):
            if position == index:
                continue
            gap = horizontal_gap(head.box, candidate.box)
            tolerance = max(head.symbol_width, candidate.symbol_width)
            if gap < -tolerance:
                continue
            if not vertical_band_overlaps(candidate.box, head.box):
                continue
            if best is None or gap < best[1]:
                best = (position, gap)

        return best

    def _link(self, fragments: Sequence[Fragment]) -> dict[int, int]:
        """Build follows-edges, keeping only the closest predecessor per successor."""
        claims: dict[int, tuple[int, float]] = {}
        for index in range(len(fragments)):
            nearest = self.nearest_right(fragments, index)
            if nearest is None:
                continue
            successor, gap = nearest
            claimed = claims.get(successor)
            if claimed is None or gap < claimed[1]:
                claims[successor] = (index, gap)

        return {pred: succ for succ, (pred, _) in claims.items()}

    @staticmethod
    def _chain_root(start: int, predecessors: dict[int, int], emitted: set[int]) -> int:
        root = start
        visited = {start}
        while True:
            pred = predecessors.get(root)
            if pred is None or pred in emitted or pred in visited:
                return root
            visited.add(pred)
            root = pred

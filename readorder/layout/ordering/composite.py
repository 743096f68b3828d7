"""Composite sorter chaining several strategies."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from readorder.types import Fragment, Sorter

from .linear import NearestNeighborChainSorter
from .xy import GeometricRowColumnSorter

logger = logging.getLogger(__name__)


class CompositeSorter(Sorter):
    """Sorter applying each stage to the previous stage's output.

    Every stage sees the fragments already permuted by the stages before it,
    so order-sensitive strategies (like the nearest-neighbor chain, which
    starts chains in input order) build on the earlier result.

    Example:
        >>> sorter = CompositeSorter([GeometricRowColumnSorter(), NearestNeighborChainSorter()])
        >>> order = sorter.sort(fragments)
    """

    name = "composite"

    def __init__(self, stages: Sequence[Sorter]) -> None:
        """Initialize composite sorter.

        Args:
            stages: Sorters to apply in sequence
        """
        if not stages:
            raise ValueError("CompositeSorter requires at least one stage")
        self.stages = list(stages)

    def sort(self, fragments: Sequence[Fragment]) -> list[int]:
        """Apply every stage in turn and compose the permutations."""
        order = list(range(len(fragments)))
        for stage in self.stages:
            current = [fragments[i] for i in order]
            order = [order[i] for i in stage.sort(current)]
            logger.debug("Composite stage '%s' applied", stage.name)
        return order


class XYLinearSorter(CompositeSorter):
    """Geometric row/column sort refined by nearest-neighbor chaining."""

    name = "xy-linear"

    def __init__(self, **xy_kwargs: float | None) -> None:
        """Initialize XY + Linear sorter.

        Args:
            **xy_kwargs: Options forwarded to GeometricRowColumnSorter
        """
        super().__init__([GeometricRowColumnSorter(**xy_kwargs), NearestNeighborChainSorter()])

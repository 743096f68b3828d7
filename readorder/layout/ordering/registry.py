"""Reading order strategy names and the lookup table behind create_sorter()."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from readorder.registry import LazyRegistry

if TYPE_CHECKING:
    from readorder.types import Sorter

__all__ = ["SortStrategy", "SorterRegistry", "sorter_registry"]


class SortStrategy:
    """Built-in reading order strategies."""

    ORIGINAL = "original"  # OCR engine's native order
    XY = "xy"  # Geometric row/column sort
    LINEAR = "linear"  # Nearest-neighbor chain linking
    XY_LINEAR = "xy-linear"  # XY, then nearest-neighbor chaining

    ALL = (ORIGINAL, XY, LINEAR, XY_LINEAR)


class SorterRegistry(LazyRegistry):
    """Strategy name -> sorter class.

    Example:
        >>> registry = SorterRegistry()
        >>> registry.create("xy", row_overlap_threshold=0.2)
        >>> registry.resolve_name("chain")
        'linear'
    """

    kind = "sorter"
    builtin = {
        SortStrategy.ORIGINAL: ("readorder.layout.ordering.original", "OriginalSorter"),
        SortStrategy.XY: ("readorder.layout.ordering.xy", "GeometricRowColumnSorter"),
        SortStrategy.LINEAR: ("readorder.layout.ordering.linear", "NearestNeighborChainSorter"),
        SortStrategy.XY_LINEAR: ("readorder.layout.ordering.composite", "XYLinearSorter"),
    }
    aliases = {
        "none": SortStrategy.ORIGINAL,
        "geometric": SortStrategy.XY,
        "chain": SortStrategy.LINEAR,
        "xy+linear": SortStrategy.XY_LINEAR,
    }

    def create(self, name: str, **kwargs: Any) -> Sorter:
        """Instantiate the sorter for a strategy."""
        return super().create(name, **kwargs)


sorter_registry = SorterRegistry()

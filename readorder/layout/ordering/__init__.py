"""Reading order module.

Sorters:
- original.py: OCR engine's native order
- xy.py: Geometric row/column sort with column splitting
- linear.py: Nearest-neighbor chain linking
- composite.py: Strategy chaining (XY then Linear)
"""

from __future__ import annotations

from typing import Any

from readorder.types import Sorter

from .composite import CompositeSorter, XYLinearSorter
from .linear import NearestNeighborChainSorter
from .original import OriginalSorter
from .registry import SorterRegistry, SortStrategy, sorter_registry
from .xy import GeometricRowColumnSorter

__all__ = [
    # Classes
    "OriginalSorter",
    "GeometricRowColumnSorter",
    "NearestNeighborChainSorter",
    "CompositeSorter",
    "XYLinearSorter",
    # Registry
    "SortStrategy",
    "SorterRegistry",
    "sorter_registry",
    # Functions
    "create_sorter",
    "list_available_sorters",
]

# Options understood by the geometric stage of each strategy
_XY_OPTIONS = ("row_overlap_threshold", "column_gap_symbols")
_STRATEGY_OPTIONS: dict[str, tuple[str, ...]] = {
    SortStrategy.ORIGINAL: (),
    SortStrategy.XY: _XY_OPTIONS,
    SortStrategy.LINEAR: (),
    SortStrategy.XY_LINEAR: _XY_OPTIONS,
}


def create_sorter(name: str, **kwargs: Any) -> Sorter:
    """Create a sorter instance.

    Options a built-in strategy doesn't understand are dropped, so one set of
    configuration values can be passed to any strategy.

    Args:
        name: Sorter name
        **kwargs: Arguments for sorter

    Returns:
        Sorter instance
    """
    name = sorter_registry.resolve_name(name)
    if name in _STRATEGY_OPTIONS:
        accepted = _STRATEGY_OPTIONS[name]
        kwargs = {key: value for key, value in kwargs.items() if key in accepted}
    return sorter_registry.create(name, **kwargs)


def list_available_sorters() -> list[str]:
    """List available sorter names."""
    return sorter_registry.list_available()

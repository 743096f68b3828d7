"""Reading stages.

Each stage performs one step and stages compose into a reader:
image -> RecognitionStage -> OrderingStage -> AssemblyStage -> text

Usage:
    >>> from readorder.stages import OrderingStage, AssemblyStage
    >>> ordered = OrderingStage(create_sorter("xy")).process(fragments, selected=mask)
    >>> text = AssemblyStage().process(ordered)
"""

from __future__ import annotations

from readorder.stages.assembly_stage import AssemblyStage
from readorder.stages.base import BaseStage, StageError, StageResult
from readorder.stages.ordering_stage import OrderingStage
from readorder.stages.recognition_stage import RecognitionStage

__all__ = [
    # Base classes
    "BaseStage",
    "StageError",
    "StageResult",
    # Stages
    "RecognitionStage",
    "OrderingStage",
    "AssemblyStage",
]

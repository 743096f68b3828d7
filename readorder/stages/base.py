"""Base stage class for reading stages.

Each stage turns the output of the previous one into its own output:
image -> fragments -> ordered fragments -> text. The base class adds timing,
debug logging, and StageError wrapping around the stage's own logic.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from readorder.exceptions import ReaderError

logger = logging.getLogger(__name__)

__all__ = ["BaseStage", "StageError", "StageResult"]

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class StageError(ReaderError):
    """Exception raised when a stage fails, tagged with the stage name."""

    def __init__(self, stage_name: str, message: str, cause: Exception | None = None):
        self.stage_name = stage_name
        self.cause = cause
        super().__init__(f"[{stage_name}] {message}")


@dataclass
class StageResult(Generic[OutputT]):
    """Stage output with timing information.

    Attributes:
        data: The output data from the stage
        stage_name: Name of the stage that produced this result
        processing_time_ms: Time taken to process in milliseconds
        metadata: Stage-specific details (e.g. fragment counts)
    """

    data: OutputT
    stage_name: str
    processing_time_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)


class BaseStage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for reading stages.

    Attributes:
        name: Stage name for logging and identification

    Example:
        >>> class UppercaseStage(BaseStage[str, str]):
        ...     name = "uppercase"
        ...
        ...     def _process_impl(self, input_data, **context):
        ...         return input_data.upper()
    """

    # Subclasses should override this
    name: str = "base-stage"

    @abstractmethod
    def _process_impl(self, input_data: InputT, **context: Any) -> OutputT:
        """Stage logic.

        Args:
            input_data: Output of the previous stage
            **context: Stage-specific extras (e.g. the selection mask)
        """

    def _describe(self, output: OutputT) -> dict[str, Any]:
        """Metadata recorded in StageResult; override to add details."""
        return {}

    def process(self, input_data: InputT, **context: Any) -> OutputT:
        """Run the stage.

        Raises:
            StageError: If processing fails
        """
        return self.process_with_result(input_data, **context).data

    def process_with_result(self, input_data: InputT, **context: Any) -> StageResult[OutputT]:
        """Run the stage and return its output with timing and metadata.

        Raises:
            StageError: If processing fails
        """
        start_time = time.perf_counter()

        try:
            output = self._process_impl(input_data, **context)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error("%s failed after %.2fms: %s", self.name, elapsed_ms, e)
            raise StageError(self.name, str(e), cause=e) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("%s completed in %.2fms", self.name, elapsed_ms)
        return StageResult(
            data=output,
            stage_name=self.name,
            processing_time_ms=elapsed_ms,
            metadata=self._describe(output),
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(name={self.name!r})"

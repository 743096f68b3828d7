"""Pytest configuration and shared fixtures for readorder tests.

This module provides:
- Fragment factories and small page layouts (single column, two columns)
- Mock fixtures for components (mock_recognizer)
- Test configuration and path setup
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import numpy as np
import pytest

# Register anyio pytest plugin for async test support
# This enables @pytest.mark.anyio decorator and anyio_backends config option
pytest_plugins = ("anyio",)

# Ensure project root is importable when running tests via uv or python -m pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from readorder.types import BBox, Fragment  # noqa: E402

FragmentFactory = Callable[[float, float, float, float, str], Fragment]


# ==================== Sample Data Fixtures ====================


@pytest.fixture
def anyio_backend() -> str:
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def make_fragment() -> FragmentFactory:
    """Factory building a fragment from normalized corners and text."""

    def _make(min_x: float, min_y: float, max_x: float, max_y: float, text: str) -> Fragment:
        return Fragment.create(BBox(min_x, min_y, max_x, max_y), text)

    return _make


@pytest.fixture
def single_column_fragments(make_fragment: FragmentFactory) -> list[Fragment]:
    """Three stacked lines of one paragraph, top to bottom.

    Returns:
        Fragments in visual order
    """
    return [
        make_fragment(0.10, 0.80, 0.90, 0.85, "The quick brown fox"),
        make_fragment(0.10, 0.70, 0.90, 0.75, "jumps over the lazy"),
        make_fragment(0.10, 0.60, 0.50, 0.65, "dog."),
    ]


@pytest.fixture
def two_column_fragments(make_fragment: FragmentFactory) -> list[Fragment]:
    """Two side-by-side columns of two lines, given in interleaved order.

    Returns:
        [right top, left top, right bottom, left bottom]
    """
    return [
        make_fragment(0.65, 0.80, 0.95, 0.85, "right one"),
        make_fragment(0.05, 0.80, 0.35, 0.85, "left one"),
        make_fragment(0.65, 0.70, 0.95, 0.75, "right two"),
        make_fragment(0.05, 0.70, 0.35, 0.75, "left two"),
    ]


@pytest.fixture
def sample_image() -> np.ndarray:
    """Create a sample test image (200x400 BGR).

    Returns:
        Numpy array representing a blank white image
    """
    return np.ones((200, 400, 3), dtype=np.uint8) * 255


# ==================== Mock Component Fixtures ====================


@pytest.fixture
def mock_recognizer(single_column_fragments: list[Fragment]) -> Mock:
    """Create a mock recognizer returning the single-column fragments.

    Returns:
        Mock recognizer object
    """
    recognizer = Mock()
    recognizer.name = "mock-recognizer"
    recognizer.recognize.return_value = list(single_column_fragments)
    return recognizer

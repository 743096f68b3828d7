"""Input/output helpers: images for recognition and fragment JSON files."""

from __future__ import annotations

from readorder.io.fragments import load_fragments, parse_fragments, save_fragments
from readorder.io.image import load_image

__all__ = ["load_fragments", "load_image", "parse_fragments", "save_fragments"]

"""Fragment file serialization.

A fragment file is JSON: either a list of fragment objects or a mapping with
a "fragments" list. Each object carries a normalized bottom-left-origin box
and its text, plus an optional selection flag::

    {"fragments": [
        {"box": [0.1, 0.80, 0.9, 0.85], "text": "An exam-", "selected": true},
        {"box": [0.1, 0.70, 0.5, 0.75], "text": "ple."}
    ]}

A missing "selected" key means selected.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from readorder.exceptions import FileFormatError, FileLoadError
from readorder.types import Fragment

logger = logging.getLogger(__name__)

__all__ = ["load_fragments", "parse_fragments", "save_fragments"]


def parse_fragments(data: Any) -> tuple[list[Fragment], list[bool]]:
    """Parse decoded fragment JSON.

    Args:
        data: Decoded JSON (list or {"fragments": [...]})

    Returns:
        (fragments, selection mask) in file order

    Raises:
        FileFormatError: If the structure or an entry is malformed
    """
    if isinstance(data, dict):
        data = data.get("fragments")
    if not isinstance(data, list):
        raise FileFormatError("Expected a list of fragments or an object with a 'fragments' list")

    fragments: list[Fragment] = []
    selected: list[bool] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise FileFormatError(f"Fragment {index} is not an object")
        try:
            fragment = Fragment.from_dict(entry)
        except (KeyError, TypeError, ValueError) as e:
            raise FileFormatError(f"Fragment {index} is malformed: {e}") from e
        if not fragment.box.is_valid:
            logger.warning("Fragment %d has an inverted box %s", index, fragment.box.to_list())
        chosen = entry.get("selected", True)
        if not isinstance(chosen, bool):
            raise FileFormatError(f"Fragment {index} has a non-boolean 'selected': {chosen!r}")
        fragments.append(fragment)
        selected.append(chosen)

    return fragments, selected


def load_fragments(path: Path) -> tuple[list[Fragment], list[bool]]:
    """Load fragments and their selection mask from a JSON file.

    Raises:
        FileLoadError: If the file cannot be read
        FileFormatError: If the file is not valid fragment JSON
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FileFormatError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadError(f"Could not read fragment file {path}: {e}") from e

    fragments, selected = parse_fragments(data)
    logger.info("Loaded %d fragments (%d selected) from %s", len(fragments), sum(selected), path)
    return fragments, selected


def save_fragments(
    fragments: Sequence[Fragment],
    output_file: Path,
    selected: Sequence[bool] | None = None,
) -> None:
    """Write fragments (and optionally their selection mask) as JSON."""
    if selected is not None and len(selected) != len(fragments):
        raise ValueError(
            f"Selection mask length ({len(selected)}) does not match fragment count ({len(fragments)})"
        )

    entries = []
    for index, fragment in enumerate(fragments):
        entry = fragment.to_dict()
        if selected is not None:
            entry["selected"] = bool(selected[index])
        entries.append(entry)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump({"fragments": entries}, f, indent=2, ensure_ascii=False)

    logger.debug("Saved %d fragments to %s", len(entries), output_file)

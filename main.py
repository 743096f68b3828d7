#!/usr/bin/env python3
"""
Main entry point for readorder
Provides command-line interface for reconstructing readable text from OCR fragments or images
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Note: readorder imports are moved to function-level
# to keep CLI startup fast (--help, argument validation, etc.)
if TYPE_CHECKING:
    from readorder import Reader


STRATEGY_CHOICES = ["original", "xy", "linear", "xy-linear"]
PARAGRAPH_RULE_CHOICES = ["simple", "strict"]


def parse_selection(select_arg: str | None, count: int) -> list[bool] | None:
    """Parse a comma-separated list of fragment indices into a selection mask.

    Args:
        select_arg: Indices like "0,2,5", "all", or None (keep the file's own selection)
        count: Number of fragments

    Returns:
        Selection mask, or None when select_arg is None

    Raises:
        ValueError: If an index is not an integer or is out of range

    Examples:
        >>> parse_selection("0,2", 4)
        [True, False, True, False]
        >>> parse_selection("all", 2)
        [True, True]
        >>> parse_selection(None, 3) is None
        True
    """
    if select_arg is None:
        return None

    if select_arg.strip().lower() == "all":
        return [True] * count

    selected = [False] * count
    for part in select_arg.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            index = int(part)
        except ValueError as e:
            raise ValueError(f"Invalid fragment index: '{part}'") from e
        if not 0 <= index < count:
            raise ValueError(f"Fragment index {index} out of range (0-{count - 1})")
        selected[index] = True
    return selected


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration with timestamped log files."""
    logs_dir = Path(".logs")
    logs_dir.mkdir(exist_ok=True)

    timestamp = datetime.now().astimezone().strftime("%Y-%m-%d_%H-%M-%S")
    log_filename = logs_dir / f"{timestamp}_readorder.log"

    # Text goes to stdout, so log records go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr), logging.FileHandler(log_filename, encoding="utf-8")],
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    return _execute_command(args, parser, logger)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="readorder - Reconstruct readable text from OCR fragments in reading order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              # Fragments recognized elsewhere (JSON with normalized boxes)
              python main.py --fragments page.json

              # Recognize an image first (requires paddleocr)
              python main.py --image photo.jpg

              # Strategy and paragraph options
              python main.py --fragments page.json --strategy xy
              python main.py --fragments page.json --paragraph-rule simple

              # Only some fragments, written to a file
              python main.py --fragments page.json --select 0,2,5 --output page.txt

              # Settings from YAML
              python main.py --fragments page.json --config settings/config.yaml
            """
        ),
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--fragments",
        "-f",
        type=str,
        help="Fragment JSON file: a list (or {\"fragments\": [...]}) of {box, text, selected}",
    )
    input_group.add_argument(
        "--image",
        "-i",
        type=str,
        help="Image file to recognize before ordering",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write text to this file instead of stdout",
    )
    parser.add_argument(
        "--save-fragments",
        type=str,
        help="Also save recognized fragments as JSON (only with --image)",
    )
    parser.add_argument(
        "--select",
        type=str,
        help="Comma-separated fragment indices to extract, or 'all' (default: the file's own selection)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="YAML configuration file; explicit options override it",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    # Reading Order
    ordering_group = parser.add_argument_group("Reading Order")
    ordering_group.add_argument(
        "--strategy",
        "-s",
        choices=STRATEGY_CHOICES,
        help="Reading order strategy (default: xy-linear)",
    )
    ordering_group.add_argument(
        "--row-overlap",
        type=float,
        help="Vertical overlap fraction above which two boxes share a row (default: 0.15)",
    )
    ordering_group.add_argument(
        "--column-gap",
        type=float,
        help="Minimum column gutter in symbol widths (default: 3)",
    )
    ordering_group.add_argument(
        "--no-columns",
        action="store_true",
        help="Disable column splitting before the row/column sort",
    )

    # Text Assembly
    assembly_group = parser.add_argument_group("Text Assembly")
    assembly_group.add_argument(
        "--paragraph-rule",
        "-p",
        choices=PARAGRAPH_RULE_CHOICES,
        help="Paragraph break policy (default: strict)",
    )
    assembly_group.add_argument(
        "--indent",
        type=float,
        help="Short-line and indentation threshold in symbol widths (default: 3)",
    )

    # Text Recognition
    recognition_group = parser.add_argument_group("Text Recognition")
    recognition_group.add_argument(
        "--recognizer",
        type=str,
        help="OCR adapter name (default: paddleocr)",
    )

    return parser


def _execute_command(args: argparse.Namespace, parser: argparse.ArgumentParser, logger: logging.Logger) -> int:
    if args.save_fragments and not args.image:
        parser.error("--save-fragments requires --image")
        return 1  # pragma: no cover - parser.error raises SystemExit

    try:
        # Lazy import: only load readorder when actually processing input
        from readorder import Reader, ReaderConfig  # noqa: PLC0415

        config = ReaderConfig.from_cli(args)
        reader = Reader(config)
        return _run_reader(reader, args, logger)
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 1
    except Exception as exc:  # noqa: BLE001 - retain broad logging for CLI
        logger.error("Error: %s", exc, exc_info=args.log_level == "DEBUG")
        return 1


def _run_reader(reader: Reader, args: argparse.Namespace, logger: logging.Logger) -> int:
    from readorder.io import load_fragments, load_image, save_fragments  # noqa: PLC0415

    logger.info("Strategy: %s, paragraph rule: %s", reader.config.strategy, reader.config.paragraph_rule)

    if args.fragments:
        fragments, selected = load_fragments(Path(args.fragments))
    else:
        image = load_image(Path(args.image))
        logger.info("Recognizer: %s", reader.config.recognizer)
        fragments = reader.recognize(image)
        selected = [True] * len(fragments)
        if args.save_fragments:
            save_fragments(fragments, Path(args.save_fragments), selected)
            logger.info("Fragments saved to: %s", args.save_fragments)

    override = parse_selection(args.select, len(fragments))
    if override is not None:
        selected = override

    if not reader.has_selection(fragments, selected):
        logger.warning("Nothing selected: no fragment with text to extract")

    text = reader.extract_text(fragments, selected)
    _write_text(text, args.output, logger)
    return 0


def _write_text(text: str, output: str | None, logger: logging.Logger) -> None:
    if output is None:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Text saved to: %s", output_path)


if __name__ == "__main__":
    sys.exit(main())

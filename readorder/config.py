"""Reader configuration module.

This module provides:
- ReaderConfig: Dataclass for ordering, assembly, and recognition options
- YAML configuration file loading
- Validation of strategy, paragraph rule, and threshold values
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from readorder.assembly import ParagraphRule
from readorder.constants import (
    DEFAULT_COLUMN_GAP_SYMBOLS,
    DEFAULT_INDENT_SYMBOLS,
    DEFAULT_RECOGNIZER,
    ROW_OVERLAP_THRESHOLD,
)
from readorder.exceptions import InvalidConfigError
from readorder.layout.ordering import SortStrategy, sorter_registry

logger = logging.getLogger(__name__)

__all__ = ["ReaderConfig"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML configuration file with error handling.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dict, or empty dict if file not found or invalid
    """
    try:
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                logger.warning("Config file %s is not a mapping, ignoring it", config_path)
                return {}
            return data
        logger.debug("Config file not found: %s", config_path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


@dataclass
class ReaderConfig:
    """Reader configuration with validation.

    Configuration Sources (in order of precedence):
    1. Constructor arguments (highest priority)
    2. CLI arguments via from_cli()
    3. YAML configuration files via from_yaml()
    4. Default values (lowest priority)

    Example:
        >>> config = ReaderConfig(strategy="xy", paragraph_rule="simple")
        >>> config.validate()

        >>> config = ReaderConfig.from_yaml(Path("settings/config.yaml"))
    """

    # ==================== Ordering ====================
    strategy: str = SortStrategy.XY_LINEAR
    row_overlap_threshold: float = ROW_OVERLAP_THRESHOLD
    column_gap_symbols: float | None = DEFAULT_COLUMN_GAP_SYMBOLS

    # ==================== Assembly ====================
    paragraph_rule: str = ParagraphRule.STRICT
    indent_symbols: float = DEFAULT_INDENT_SYMBOLS

    # ==================== Recognition ====================
    recognizer: str = DEFAULT_RECOGNIZER
    recognizer_options: dict[str, Any] = field(default_factory=dict)

    # ==================== Logging ====================
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, config_path: Path, **overrides: Any) -> ReaderConfig:
        """Load configuration from YAML file.

        Unknown keys are ignored with a warning. Nested "ordering",
        "assembly" and "recognition" sections are flattened first.

        Args:
            config_path: Path to YAML configuration file
            **overrides: Values to override from file

        Returns:
            ReaderConfig instance

        Example:
            >>> config = ReaderConfig.from_yaml(Path("settings/config.yaml"), strategy="linear")
        """
        yaml_config = _load_yaml_config(config_path)

        flat: dict[str, Any] = {}
        for key, value in yaml_config.items():
            if key in ("ordering", "assembly", "recognition") and isinstance(value, dict):
                flat.update(value)
            else:
                flat[key] = value

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in flat.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.warning("Ignoring unknown config key '%s' in %s", key, config_path)

        kwargs.update(overrides)
        return cls(**kwargs)

    @staticmethod
    def _get_arg(args: argparse.Namespace, name: str, default: Any = None) -> Any:
        """Safely get argument value from namespace."""
        return getattr(args, name, default)

    @classmethod
    def _extract_cli_kwargs(cls, args: argparse.Namespace) -> dict[str, Any]:
        """Extract configuration kwargs from CLI arguments.

        Returns:
            Dictionary of config kwargs for options given on the command line
        """
        # (cli_name, config_name)
        mappings: list[tuple[str, str]] = [
            ("strategy", "strategy"),
            ("row_overlap", "row_overlap_threshold"),
            ("column_gap", "column_gap_symbols"),
            ("paragraph_rule", "paragraph_rule"),
            ("indent", "indent_symbols"),
            ("recognizer", "recognizer"),
            ("log_level", "log_level"),
        ]

        kwargs: dict[str, Any] = {}
        for cli_name, config_name in mappings:
            value = cls._get_arg(args, cli_name)
            if value is not None:
                kwargs[config_name] = value

        if cls._get_arg(args, "no_columns"):
            kwargs["column_gap_symbols"] = None

        return kwargs

    @classmethod
    def from_cli(cls, args: argparse.Namespace) -> ReaderConfig:
        """Create configuration from CLI arguments.

        When ``args.config`` names a YAML file it is loaded first and the
        explicit CLI options override it.

        Args:
            args: Parsed CLI arguments from argparse

        Returns:
            ReaderConfig instance
        """
        kwargs = cls._extract_cli_kwargs(args)
        config_path = cls._get_arg(args, "config")
        if config_path:
            return cls.from_yaml(Path(config_path), **kwargs)
        return cls(**kwargs)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            InvalidConfigError: If any value is out of range or unknown
        """
        if not sorter_registry.is_available(self.strategy):
            available = ", ".join(sorter_registry.list_available())
            raise InvalidConfigError(f"Unknown sort strategy: '{self.strategy}'. Available: {available}")

        if self.paragraph_rule not in ParagraphRule.ALL:
            raise InvalidConfigError(
                f"Unknown paragraph rule: '{self.paragraph_rule}'. Available: {', '.join(ParagraphRule.ALL)}"
            )

        if not 0.0 <= self.row_overlap_threshold <= 1.0:
            raise InvalidConfigError(
                f"row_overlap_threshold must be within [0, 1], got {self.row_overlap_threshold}"
            )

        if self.column_gap_symbols is not None and self.column_gap_symbols <= 0:
            raise InvalidConfigError(f"column_gap_symbols must be positive, got {self.column_gap_symbols}")

        if self.indent_symbols < 0:
            raise InvalidConfigError(f"indent_symbols must not be negative, got {self.indent_symbols}")

        if not isinstance(self.recognizer_options, dict):
            raise InvalidConfigError("recognizer_options must be a mapping")

        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise InvalidConfigError(f"Unknown log level: '{self.log_level}'")

        logger.debug(
            "Configuration validated: strategy=%s, paragraph_rule=%s, recognizer=%s",
            self.strategy,
            self.paragraph_rule,
            self.recognizer,
        )

    def sorter_options(self) -> dict[str, Any]:
        """Keyword arguments for create_sorter()."""
        return {
            "row_overlap_threshold": self.row_overlap_threshold,
            "column_gap_symbols": self.column_gap_symbols,
        }

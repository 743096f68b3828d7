"""Tests for ReaderConfig."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from readorder.config import ReaderConfig, _load_yaml_config
from readorder.exceptions import InvalidConfigError


class TestReaderConfigDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Test default configuration validates."""
        config = ReaderConfig()
        assert config.strategy == "xy-linear"
        assert config.paragraph_rule == "strict"
        assert config.indent_symbols == 3.0
        assert config.row_overlap_threshold == 0.15
        assert config.recognizer == "paddleocr"
        config.validate()

    def test_sorter_options(self):
        """Test sorter options mirror the ordering fields."""
        config = ReaderConfig(row_overlap_threshold=0.3, column_gap_symbols=None)
        assert config.sorter_options() == {"row_overlap_threshold": 0.3, "column_gap_symbols": None}


class TestReaderConfigValidate:
    """Tests for ReaderConfig.validate."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"strategy": "zigzag"},
            {"paragraph_rule": "loose"},
            {"row_overlap_threshold": 1.5},
            {"column_gap_symbols": 0},
            {"indent_symbols": -1},
            {"recognizer_options": ["lang"]},
            {"log_level": "CHATTY"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test invalid values raise InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            ReaderConfig(**overrides).validate()

    def test_column_split_disabled(self):
        """Test None disables column splitting and is valid."""
        ReaderConfig(column_gap_symbols=None).validate()


class TestReaderConfigYaml:
    """Tests for YAML loading."""

    def test_from_yaml_sections(self, tmp_path: Path):
        """Test nested sections are flattened into fields."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "ordering:\n"
            "  strategy: xy\n"
            "  column_gap_symbols: null\n"
            "assembly:\n"
            "  paragraph_rule: simple\n"
            "recognition:\n"
            "  recognizer_options:\n"
            "    lang: de\n",
            encoding="utf-8",
        )
        config = ReaderConfig.from_yaml(config_file)
        assert config.strategy == "xy"
        assert config.column_gap_symbols is None
        assert config.paragraph_rule == "simple"
        assert config.recognizer_options == {"lang": "de"}

    def test_overrides_win(self, tmp_path: Path):
        """Test explicit overrides take precedence over the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("strategy: xy\nindent_symbols: 5\n", encoding="utf-8")
        config = ReaderConfig.from_yaml(config_file, strategy="linear")
        assert config.strategy == "linear"
        assert config.indent_symbols == 5

    def test_unknown_keys_ignored(self, tmp_path: Path):
        """Test unknown keys do not break loading."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("strategy: xy\nmystery: 1\n", encoding="utf-8")
        assert ReaderConfig.from_yaml(config_file).strategy == "xy"

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file yields defaults."""
        assert ReaderConfig.from_yaml(tmp_path / "absent.yaml") == ReaderConfig()

    def test_invalid_yaml(self, tmp_path: Path):
        """Test unparsable YAML is tolerated."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("strategy: [unclosed\n", encoding="utf-8")
        assert _load_yaml_config(config_file) == {}

    def test_non_mapping_yaml(self, tmp_path: Path):
        """Test a YAML list is ignored."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- xy\n- linear\n", encoding="utf-8")
        assert _load_yaml_config(config_file) == {}


class TestReaderConfigCli:
    """Tests for ReaderConfig.from_cli."""

    def test_from_cli(self):
        """Test CLI options map onto fields."""
        args = argparse.Namespace(
            strategy="xy",
            paragraph_rule="simple",
            row_overlap=0.2,
            column_gap=None,
            indent=4.0,
            recognizer=None,
            log_level="DEBUG",
            no_columns=False,
            config=None,
        )
        config = ReaderConfig.from_cli(args)
        assert config.strategy == "xy"
        assert config.paragraph_rule == "simple"
        assert config.row_overlap_threshold == 0.2
        assert config.indent_symbols == 4.0
        assert config.recognizer == "paddleocr"
        assert config.log_level == "DEBUG"

    def test_no_columns(self):
        """Test --no-columns disables column splitting."""
        args = argparse.Namespace(no_columns=True)
        assert ReaderConfig.from_cli(args).column_gap_symbols is None

    def test_cli_over_yaml(self, tmp_path: Path):
        """Test CLI options override the YAML file given by --config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("strategy: xy\nparagraph_rule: simple\n", encoding="utf-8")
        args = argparse.Namespace(strategy="linear", config=str(config_file))
        config = ReaderConfig.from_cli(args)
        assert config.strategy == "linear"
        assert config.paragraph_rule == "simple"

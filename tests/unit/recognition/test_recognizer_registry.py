"""Tests for RecognizerRegistry."""

from __future__ import annotations

from unittest.mock import Mock

import numpy as np
import pytest

from readorder.exceptions import InvalidConfigError
from readorder.recognition import create_recognizer, list_available_recognizers, recognize
from readorder.recognition.registry import RecognizerRegistry, recognizer_registry


class TestRecognizerRegistry:
    """Tests for RecognizerRegistry."""

    def test_init(self):
        """Test a fresh registry knows only the built-in adapters."""
        registry = RecognizerRegistry()
        assert registry.list_available() == ["paddleocr"]

    def test_global_instance(self):
        """Test global registry instance exists."""
        assert isinstance(recognizer_registry, RecognizerRegistry)

    def test_list_available(self):
        """Test built-in recognizers are listed."""
        assert "paddleocr" in list_available_recognizers()

    def test_aliases(self):
        """Test aliases resolve to canonical names."""
        registry = RecognizerRegistry()
        assert registry.resolve_name("paddle") == "paddleocr"
        assert registry.is_available("paddle")
        assert "ocr" in registry

    def test_unknown_recognizer(self):
        """Test unknown names raise InvalidConfigError."""
        registry = RecognizerRegistry()
        with pytest.raises(InvalidConfigError, match="Unknown recognizer"):
            registry.get_class("tesseract")
        assert not registry.is_available("tesseract")

    def test_register_custom(self):
        """Test registering and creating a custom recognizer."""
        registry = RecognizerRegistry()
        factory = Mock(return_value=Mock(name="custom"))
        registry.register("custom", factory)

        instance = registry.create("custom", lang="de")
        factory.assert_called_once_with(lang="de")
        assert instance is factory.return_value


class TestModuleFunctions:
    """Tests for the recognition package helpers."""

    def test_create_recognizer_unknown(self):
        """Test create_recognizer propagates unknown names."""
        with pytest.raises(InvalidConfigError):
            create_recognizer("tesseract")

    def test_recognize_with_instance(self, mock_recognizer):
        """Test recognize() delegates to a given recognizer instance."""
        image = np.zeros((10, 10, 3), dtype=np.uint8)
        fragments = recognize(image, mock_recognizer)
        mock_recognizer.recognize.assert_called_once_with(image)
        assert fragments == mock_recognizer.recognize.return_value

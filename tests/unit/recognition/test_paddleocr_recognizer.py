"""Tests for the PaddleOCR adapter (engine mocked)."""

from __future__ import annotations

import sys
from types import ModuleType
from unittest.mock import Mock, patch

import numpy as np
import pytest

from readorder.exceptions import DependencyError, RecognitionFailureError, RecognitionTypeMismatchError
from readorder.recognition.paddleocr import PaddleOCRRecognizer, parse_paddleocr_result
from readorder.types import BBox


@pytest.fixture
def fake_paddleocr():
    """Install a fake paddleocr module whose PaddleOCR returns a mock model."""
    model = Mock()
    module = ModuleType("paddleocr")
    module.PaddleOCR = Mock(return_value=model)  # type: ignore[attr-defined]
    with patch.dict(sys.modules, {"paddleocr": module}):
        yield module, model


class TestParsePaddleOCRResult:
    """Tests for parse_paddleocr_result."""

    def test_boxes_are_normalized(self):
        """Test pixel xyxy boxes become bottom-left normalized boxes."""
        result = {
            "rec_texts": ["Hello"],
            "rec_scores": [0.98],
            "rec_boxes": np.array([[100, 50, 300, 150]]),
        }
        observations = parse_paddleocr_result(result, 400, 200)
        assert len(observations) == 1
        assert observations[0].box == BBox(0.25, 0.25, 0.75, 0.75)
        assert observations[0].candidates == ("Hello",)
        assert observations[0].confidences == pytest.approx((0.98,))

    def test_polygons_fallback(self):
        """Test quadrilaterals are reduced to their bounding box."""
        result = {
            "rec_texts": ["Hi"],
            "rec_polys": [np.array([[100, 50], [300, 50], [300, 150], [100, 150]])],
        }
        observations = parse_paddleocr_result(result, 400, 200)
        assert observations[0].box == BBox(0.25, 0.25, 0.75, 0.75)
        assert observations[0].confidences == ()

    def test_empty_result(self):
        """Test a page without text."""
        assert parse_paddleocr_result({"rec_texts": [], "rec_boxes": np.zeros((0, 4))}, 10, 10) == []

    def test_missing_texts(self):
        """Test a result without recognized texts is a type mismatch."""
        with pytest.raises(RecognitionTypeMismatchError):
            parse_paddleocr_result({"rec_boxes": []}, 10, 10)

    def test_length_mismatch(self):
        """Test texts and boxes must pair up."""
        with pytest.raises(RecognitionTypeMismatchError):
            parse_paddleocr_result({"rec_texts": ["a", "b"], "rec_boxes": [[0, 0, 1, 1]]}, 10, 10)

    def test_not_a_mapping(self):
        """Test non-mapping results are a type mismatch."""
        with pytest.raises(RecognitionTypeMismatchError):
            parse_paddleocr_result(["Hello"], 10, 10)


class TestPaddleOCRRecognizer:
    """Tests for PaddleOCRRecognizer."""

    def test_init_options(self, fake_paddleocr):
        """Test constructor arguments reach PaddleOCR."""
        module, _ = fake_paddleocr
        recognizer = PaddleOCRRecognizer(lang="fr", device="cpu")
        assert recognizer.name == "paddleocr"
        kwargs = module.PaddleOCR.call_args.kwargs
        assert kwargs["lang"] == "fr"
        assert kwargs["device"] == "cpu"
        assert kwargs["use_textline_orientation"] is False

    def test_recognize(self, fake_paddleocr, sample_image):
        """Test end-to-end recognition through the mocked engine."""
        _, model = fake_paddleocr
        model.predict.return_value = [
            {
                "rec_texts": ["Hello", "  "],
                "rec_scores": [0.99, 0.10],
                "rec_boxes": np.array([[0, 0, 200, 20], [0, 40, 100, 60]]),
            }
        ]
        fragments = PaddleOCRRecognizer().recognize(sample_image)
        assert len(fragments) == 1
        assert fragments[0].text == "Hello"
        assert fragments[0].box.max_y == pytest.approx(1.0)
        assert fragments[0].box.max_x == pytest.approx(0.5)

    def test_no_results(self, fake_paddleocr, sample_image):
        """Test an empty prediction list yields no fragments."""
        _, model = fake_paddleocr
        model.predict.return_value = []
        assert PaddleOCRRecognizer().recognize(sample_image) == []

    def test_unexpected_result(self, fake_paddleocr, sample_image):
        """Test a non-sequence prediction is a type mismatch."""
        _, model = fake_paddleocr
        model.predict.return_value = None
        with pytest.raises(RecognitionTypeMismatchError):
            PaddleOCRRecognizer().recognize(sample_image)

    def test_engine_failure(self, fake_paddleocr, sample_image):
        """Test engine exceptions become RecognitionFailureError."""
        _, model = fake_paddleocr
        model.predict.side_effect = RuntimeError("out of memory")
        with pytest.raises(RecognitionFailureError, match="out of memory"):
            PaddleOCRRecognizer().recognize(sample_image)

    def test_missing_dependency(self):
        """Test a helpful error when paddleocr is not installed."""
        with patch.dict(sys.modules, {"paddleocr": None}):
            with pytest.raises(DependencyError, match="pip install paddleocr"):
                PaddleOCRRecognizer()

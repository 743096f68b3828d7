"""Custom exception classes for readorder.

This module defines a hierarchy of custom exceptions so callers can tell
configuration problems, recognizer failures, and file issues apart.

Exception Hierarchy:
    ReaderError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    ├── RecognitionError
    │   ├── RecognitionTypeMismatchError
    │   └── RecognitionFailureError
    ├── FileError
    │   ├── FileLoadError
    │   └── FileFormatError
    └── DependencyError

The ordering and assembly core never raises for malformed geometry. Empty
selections and fragments without a usable candidate are not errors either:
the former yields an empty string, the latter are dropped before ordering.

Usage:
    try:
        fragments = recognizer.recognize(image)
    except RecognitionTypeMismatchError as e:
        logger.error("Recognizer returned garbage: %s", e)
    except RecognitionError as e:
        logger.error("Recognition failed: %s", e)
"""

from __future__ import annotations


class ReaderError(Exception):
    """Base exception for all readorder errors."""


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(ReaderError):
    """Base exception for configuration-related errors."""


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid or malformed.

    Examples:
        - Unknown sort strategy or paragraph rule
        - Negative thresholds
        - Unknown recognizer name
    """


# ============================================================================
# Recognition Errors
# ============================================================================


class RecognitionError(ReaderError):
    """Base exception for OCR recognition errors.

    Recognition errors are fatal to a single recognition attempt and are
    reported to the caller as-is. They are never retried.
    """


class RecognitionTypeMismatchError(RecognitionError):
    """Raised when the OCR engine returns a result of an unexpected shape."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = "unexpected result type"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RecognitionFailureError(RecognitionError):
    """Raised when the underlying OCR engine itself fails."""

    def __init__(self, detail: str, cause: Exception | None = None):
        self.detail = detail
        self.cause = cause
        super().__init__(f"recognizer failure: {detail}")


# ============================================================================
# File Errors
# ============================================================================


class FileError(ReaderError):
    """Base exception for file operation errors."""


class FileLoadError(FileError):
    """Raised when loading an image or fragment file fails.

    Examples:
        - File not found
        - Permission denied
        - Undecodable image
    """


class FileFormatError(FileError):
    """Raised when a fragment file is malformed.

    Examples:
        - Invalid JSON
        - Missing "box" or "text" keys
        - Box with fewer than four coordinates
    """


# ============================================================================
# Dependency Errors
# ============================================================================


class DependencyError(ReaderError):
    """Raised when an optional dependency (e.g. PaddleOCR) is missing."""

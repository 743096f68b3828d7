"""Shared constants for readorder."""

# =============================================================================
# Layout Sorting
# =============================================================================
ROW_OVERLAP_THRESHOLD = 0.15
"""Vertical overlap fraction above which two side-by-side fragments share a row."""

DEFAULT_COLUMN_GAP_SYMBOLS = 3.0
"""Minimum empty horizontal corridor, in symbol widths, that separates columns."""

# =============================================================================
# Text Assembly
# =============================================================================
DEFAULT_INDENT_SYMBOLS = 3.0
"""Symbol widths a line must fall short of (or be indented from) the text edge to break a paragraph."""

WORD_WRAP_HYPHEN = "-"
"""Trailing character marking a word continued on the next line."""

TERMINAL_PUNCTUATION = (".", "?", "!")
"""Line endings that allow a paragraph break under the strict rule."""

PARAGRAPH_BREAK = "\n\n"
"""Separator inserted between paragraphs."""

# =============================================================================
# Recognition
# =============================================================================
DEFAULT_RECOGNIZER = "paddleocr"
"""Recognizer used by the Reader facade and the CLI when none is configured."""

DEFAULT_PADDLEOCR_LANG = "en"
"""Default PaddleOCR language model."""

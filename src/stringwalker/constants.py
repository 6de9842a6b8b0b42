"""Shared constants for stringwalker.

Centralized configuration values used by the walker, the position helpers
and the diagnostics package. Placing them here keeps a single source of truth
and avoids circular imports between submodules.

Constants are grouped by domain:
- Input decoding: how byte buffers become text
- Line endings: characters recognized during normalization
- Display: limits for reprs and diagnostic output
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input decoding
    "DEFAULT_ENCODING",
    # Line endings
    "LINE_FEED",
    "CARRIAGE_RETURN",
    "CRLF",
    # Display
    "REPR_CONTEXT",
    "MAX_DIAGNOSTIC_CONTENT",
]

# ============================================================================
# INPUT DECODING
# ============================================================================

# Byte input is decoded exactly once, at construction. Decoding is strict:
# malformed input raises UnicodeDecodeError instead of being replaced.
DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# LINE ENDINGS
# ============================================================================

LINE_FEED: str = "\n"
CARRIAGE_RETURN: str = "\r"
CRLF: str = "\r\n"

# ============================================================================
# DISPLAY
# ============================================================================

# Characters shown on each side of the cursor in StringWalker.__repr__().
REPR_CONTEXT: int = 10

# Default truncation length for DiagnosticFormatter(sanitize=True).
MAX_DIAGNOSTIC_CONTENT: int = 100

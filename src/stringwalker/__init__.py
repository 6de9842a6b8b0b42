"""stringwalker - cursor-based string navigation for hand-written lexers.

Wraps an immutable text buffer and a mutable position, with primitives to
inspect characters around the cursor, search forward for delimiters, skip
runs of characters and extract substrings.

Public API:
    StringWalker - The navigable text buffer
    LineOffsetCache - Repeated offset -> (line, column) lookups

Exceptions:
    StringWalkerError - Base exception class
    InvalidArgumentError - Search/consume target is not a single character
    OutOfRangeError - Move or extraction bound outside [0, length]
    InvalidRangeError - Extraction start greater than end

Submodules:
    stringwalker.diagnostics - Error codes, templates and formatting
    stringwalker.position - Line/column helpers
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    InvalidArgumentError,
    InvalidRangeError,
    OutOfRangeError,
    StringWalkerError,
)
from .position import LineOffsetCache
from .walker import StringWalker

try:
    __version__ = _get_version("stringwalker")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "InvalidArgumentError",
    "InvalidRangeError",
    "LineOffsetCache",
    "OutOfRangeError",
    "StringWalker",
    "StringWalkerError",
    "__version__",
]

"""Position utilities for walker buffers.

Converts character offsets to line/column positions for error reporting in
parsers built on StringWalker. Only LF (\\n) is treated as a line delimiter;
construct the walker with normalize_whitespace=True to get correct lines for
CRLF and CR-only input.
"""

from bisect import bisect_right

from .constants import LINE_FEED

__all__ = ["LineOffsetCache", "column_offset", "line_offset"]


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Raises:
        ValueError: If pos is negative

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
        >>> line_offset(source, 12)
        2
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    return source.count(LINE_FEED, 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Raises:
        ValueError: If pos is negative

    Example:
        >>> source = "hello\\nworld"
        >>> column_offset(source, 2)
        2
        >>> column_offset(source, 6)
        0
        >>> column_offset(source, 10)
        4
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind(LINE_FEED, 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


class LineOffsetCache:
    """Cached line offset computation for repeated position lookups.

    Precomputes line start offsets in a single O(n) pass, then answers
    lookups in O(log n). Prefer this over StringWalker.line_col() when
    reporting many positions in the same buffer.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)
        (2, 1)
        >>> cache.line_count
        3

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == LINE_FEED:
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines (a trailing newline starts an empty last line)."""
        return len(self._offsets)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 1-based (line, column) for pos, clamped to the source bounds.

        Args:
            pos: Character position in source (0-indexed)

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        pos = max(0, min(pos, self._source_len))

        index = bisect_right(self._offsets, pos) - 1
        return (index + 1, pos - self._offsets[index] + 1)

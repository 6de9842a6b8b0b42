"""Mutable cursor over an immutable text buffer.

StringWalker is the scanning primitive for hand-written lexers: it owns the
decoded text, a cached length and a single mutable position.

Design Philosophy:
    - The buffer is a Python str, immutable after construction
    - Lookups are queries: peek/behind/current/at/find_* return None on a miss
    - Moves and extraction are commands: they raise instead of clamping
    - 0 <= position <= length holds after every successful call
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Normalization:
    With normalize_whitespace=True every CRLF and every lone CR becomes LF.
    All occurrences are replaced in one pass over the text. Earlier releases
    of the walker replaced only the first occurrence of each sequence; that
    behavior is not reproduced.

Character Codes:
    The "code" accessors (current, at, peek, behind, next) return ord() of
    the character, the "_char" variants return the character itself. A
    character is one element of the decoded str, i.e. a Unicode code point.
"""

import logging
from collections.abc import Iterable
from typing import Self, TypeAlias

from .constants import CARRIAGE_RETURN, CRLF, DEFAULT_ENCODING, LINE_FEED, REPR_CONTEXT
from .diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    InvalidRangeError,
    OutOfRangeError,
)
from .position import column_offset, line_offset

__all__ = ["CharTarget", "StringWalker"]

logger = logging.getLogger(__name__)

CharTarget: TypeAlias = str | int

_MAX_CODE_POINT = 0x10FFFF


def _normalize_line_endings(text: str) -> str:
    """Collapse CRLF and lone CR into LF."""
    return text.replace(CRLF, LINE_FEED).replace(CARRIAGE_RETURN, LINE_FEED)


def _as_char(target: object, operation: str) -> str | None:
    """Validate a single search target and return it as a character.

    Integer codes outside the Unicode range are valid targets that can never
    match; they map to None.

    Raises:
        InvalidArgumentError: If target is not a one-character str or an int
    """
    if isinstance(target, str) and len(target) == 1:
        return target
    if isinstance(target, int) and not isinstance(target, bool):
        if 0 <= target <= _MAX_CODE_POINT:
            return chr(target)
        return None
    raise InvalidArgumentError(ErrorTemplate.invalid_target(operation, target))


def _as_char_set(
    targets: CharTarget | Iterable[CharTarget], operation: str
) -> frozenset[str]:
    """Validate a group of targets; a str counts as the set of its characters.

    Every element is checked before the set is returned, so callers can rely
    on failing before any side effect.
    """
    candidates: Iterable[object]
    if isinstance(targets, str):
        candidates = targets
    elif isinstance(targets, int) and not isinstance(targets, bool):
        candidates = (targets,)
    elif isinstance(targets, Iterable):
        candidates = targets
    else:
        raise InvalidArgumentError(ErrorTemplate.invalid_target(operation, targets))
    chars = [_as_char(t, operation) for t in candidates]
    return frozenset(c for c in chars if c is not None)


class StringWalker:
    """Navigable text buffer with a mutable cursor.

    Example:
        >>> s = StringWalker("lorem ipsum")
        >>> s.peek(), s.peek(2), s.peek(99)
        (111, 114, None)
        >>> s.find_next(" ")
        5
        >>> s.move_to(5).consume(" ").current_char()
        'i'
        >>> s.substring(0, 5)
        'lorem'

    Ownership:
        A walker has exactly one owner at a time. It performs no locking;
        hand it to another thread only by giving up your own reference.
    """

    __slots__ = ("_data", "_length", "_position")

    def __init__(
        self,
        data: str | bytes | bytearray | memoryview,
        normalize_whitespace: bool = False,
    ) -> None:
        """Create a walker positioned at offset 0.

        Args:
            data: Text to walk. Byte input is decoded as UTF-8 once, here.
            normalize_whitespace: If True, CRLF and CR line endings are
                rewritten to LF before the buffer is stored.

        Raises:
            TypeError: If data is neither text nor a bytes-like object
            UnicodeDecodeError: If byte input is not valid UTF-8
        """
        if isinstance(data, bytes | bytearray | memoryview):
            data = bytes(data).decode(DEFAULT_ENCODING)
        elif not isinstance(data, str):
            msg = f"StringWalker expects str or bytes, got {type(data).__name__}"
            raise TypeError(msg)

        if normalize_whitespace:
            normalized = _normalize_line_endings(data)
            logger.debug(
                "Normalized line endings: %d -> %d characters",
                len(data),
                len(normalized),
            )
            data = normalized

        self._data: str = data
        self._length: int = len(data)
        self._position: int = 0
        logger.debug("StringWalker created: length=%d", self._length)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        start = max(0, self._position - REPR_CONTEXT)
        before = self._data[start : self._position]
        after = self._data[self._position : self._position + REPR_CONTEXT]
        return (
            f"StringWalker(position={self._position}, length={self._length}, "
            f"near={before + '|' + after!r})"
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Current position within the buffer."""
        return self._position

    @property
    def length(self) -> int:
        """Length of the buffer, cached at construction."""
        return self._length

    @property
    def text(self) -> str:
        """The whole buffer. str is immutable, so this cannot alter the walker."""
        return self._data

    def is_eof(self) -> bool:
        """Check if the cursor is at the end of the buffer."""
        return self._position >= self._length

    def current(self) -> int | None:
        """Character code at the cursor, or None at the end of the buffer."""
        return self.at(self._position)

    def current_char(self) -> str | None:
        """Character at the cursor, or None at the end of the buffer."""
        return self.char_at(self._position)

    def at(self, pos: int) -> int | None:
        """Character code at an arbitrary position.

        Args:
            pos: Absolute offset. Negative offsets do not wrap around.

        Returns:
            ord() of the character, or None if pos is outside [0, length)
        """
        if 0 <= pos < self._length:
            return ord(self._data[pos])
        return None

    def char_at(self, pos: int) -> str | None:
        """Character at an arbitrary position, or None outside [0, length)."""
        if 0 <= pos < self._length:
            return self._data[pos]
        return None

    # ------------------------------------------------------------------
    # Relative lookups
    # ------------------------------------------------------------------

    def peek(self, n: int = 1) -> int | None:
        """Look n characters ahead of the cursor without moving it.

        Example:
            >>> s = StringWalker("lorem ipsum")
            >>> s.peek()
            111
            >>> s.peek(3)
            101
            >>> s.peek(99) is None
            True

        Args:
            n: Number of characters to look ahead (default 1)

        Returns:
            Character code at position + n, or None beyond the end
        """
        return self.at(self._position + n)

    def peek_char(self, n: int = 1) -> str | None:
        """Character form of peek()."""
        return self.char_at(self._position + n)

    def behind(self, n: int = 1) -> int | None:
        """Look n characters behind the cursor without moving it.

        Passing 0 is the same as passing 1, so behind(0) never returns the
        character under the cursor; use current() for that.

        Args:
            n: Number of characters to look behind (default 1)

        Returns:
            Character code at position - n, or None before the start
        """
        n = n or 1
        return self.at(self._position - n)

    def behind_char(self, n: int = 1) -> str | None:
        """Character form of behind(). 0 is treated as 1."""
        n = n or 1
        return self.char_at(self._position - n)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_next(self, target: CharTarget) -> int | None:
        """Find the next position of target after the cursor.

        The character under the cursor is never examined; the search starts
        at position + 1 and stops at the end without wrapping.

        Example:
            >>> StringWalker("lorem ipsum").find_next(" ")
            5

        Args:
            target: A one-character string or a character code

        Returns:
            Position of target, or None if it does not occur

        Raises:
            InvalidArgumentError: If target is not a single character or code
        """
        char = _as_char(target, "find_next")
        if char is None:
            return None
        index = self._data.find(char, self._position + 1)
        return index if index >= 0 else None

    def find_next_of(self, targets: Iterable[CharTarget]) -> int | None:
        """Find the next position of any of targets after the cursor.

        Example:
            >>> StringWalker("lorem ipsum").find_next_of(["s", "e"])
            3

        Args:
            targets: Characters and/or character codes to search for

        Returns:
            Position of the first match, or None if none occurs

        Raises:
            InvalidArgumentError: If any target is not a single character or code
        """
        wanted = _as_char_set(targets, "find_next_of")
        data = self._data
        for index in range(self._position + 1, self._length):
            if data[index] in wanted:
                return index
        return None

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move_by(self, steps: int) -> Self:
        """Move the cursor by steps positions (negative moves backward).

        Raises:
            OutOfRangeError: If the cursor would leave [0, length]. The
                position is left unchanged.
        """
        target = self._position + steps
        self._check_bounds(target, "move_by")
        self._position = target
        return self

    def move_to(self, target: int) -> Self:
        """Move the cursor to target.

        Raises:
            OutOfRangeError: If target is outside [0, length]. The position
                is left unchanged.
        """
        self._check_bounds(target, "move_to")
        self._position = target
        return self

    def rewind(self) -> Self:
        """Reset the cursor to position 0."""
        self._position = 0
        return self

    def next(self) -> int | None:
        """Advance one position and return the character code there.

        At the end of the buffer the cursor stays put and None is returned.
        Stepping onto the end position also returns None.
        """
        if self._position >= self._length:
            return None
        self._position += 1
        return self.current()

    def next_char(self) -> str | None:
        """Character form of next()."""
        if self._position >= self._length:
            return None
        self._position += 1
        return self.current_char()

    def consume(self, chars: CharTarget | Iterable[CharTarget]) -> Self:
        """Advance the cursor past consecutive characters found in chars.

        Example:
            >>> s = StringWalker("lorem \\t\\n ipsum")
            >>> s.move_to(s.find_next(" ")).consume([" ", "\\n", "\\t"]).position
            9

        Args:
            chars: A character, a character code, a string whose characters
                are all accepted, or an iterable of characters/codes

        Raises:
            InvalidArgumentError: If an element is not a single character or
                code. Raised before the cursor moves.
        """
        wanted = _as_char_set(chars, "consume")
        data = self._data
        position = self._position
        while position < self._length and data[position] in wanted:
            position += 1
        self._position = position
        return self

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------

    def substring(self, start: int, end: int | None = None) -> str:
        """Return the text in [start, end) without moving the cursor.

        Args:
            start: Start offset (inclusive)
            end: End offset (exclusive); defaults to the buffer length.
                0 is a real offset, not "to the end".

        Raises:
            InvalidRangeError: If start is greater than end
            OutOfRangeError: If start < 0 or end > length
        """
        if end is None:
            end = self._length
        if start > end:
            raise InvalidRangeError(ErrorTemplate.start_after_end(start, end))
        if start < 0:
            raise OutOfRangeError(ErrorTemplate.start_before_zero("substring", start))
        if end > self._length:
            raise OutOfRangeError(
                ErrorTemplate.end_after_length("substring", end, self._length)
            )
        return self._data[start:end]

    def line_col(self, pos: int | None = None) -> tuple[int, int]:
        """Compute 1-based (line, column) for pos (default: the cursor).

        O(n) in pos; meant for error reporting. Use LineOffsetCache for
        many lookups.

        Example:
            >>> StringWalker("line1\\nline2").move_to(8).line_col()
            (2, 3)
        """
        if pos is None:
            pos = self._position
        return (line_offset(self._data, pos) + 1, column_offset(self._data, pos) + 1)

    def _check_bounds(self, pos: int, operation: str) -> None:
        if pos < 0:
            raise OutOfRangeError(ErrorTemplate.start_before_zero(operation, pos))
        if pos > self._length:
            raise OutOfRangeError(
                ErrorTemplate.end_after_length(operation, pos, self._length)
            )

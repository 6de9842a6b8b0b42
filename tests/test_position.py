"""Tests for stringwalker.position: line/column helpers and LineOffsetCache."""

from __future__ import annotations

import doctest

import pytest
from hypothesis import given
from hypothesis import strategies as st

import stringwalker.diagnostics.formatter
import stringwalker.position
import stringwalker.walker
from stringwalker import LineOffsetCache, StringWalker
from stringwalker.position import column_offset, line_offset


class TestOffsets:
    """line_offset() and column_offset()."""

    def test_line_offset(self) -> None:
        """Lines are 0-based."""
        source = "line1\nline2\nline3"

        assert line_offset(source, 0) == 0
        assert line_offset(source, 5) == 0
        assert line_offset(source, 6) == 1
        assert line_offset(source, 12) == 2

    def test_column_offset(self) -> None:
        """Columns are 0-based and reset after each newline."""
        source = "hello\nworld"

        assert column_offset(source, 0) == 0
        assert column_offset(source, 6) == 0
        assert column_offset(source, 10) == 4

    def test_past_end_clamps(self) -> None:
        """Offsets beyond the source clamp to its end."""
        assert line_offset("a\nb", 100) == 1
        assert column_offset("a\nb", 100) == 1

    @pytest.mark.parametrize("func", [line_offset, column_offset])
    def test_negative_raises(self, func: object) -> None:
        """Negative offsets are rejected."""
        with pytest.raises(ValueError, match="must be >= 0"):
            func("abc", -1)  # type: ignore[operator]


class TestLineOffsetCache:
    """Binary-search line lookups."""

    def test_lookups(self) -> None:
        """1-based line and column."""
        cache = LineOffsetCache("line1\nline2\nline3")

        assert cache.get_line_col(0) == (1, 1)
        assert cache.get_line_col(6) == (2, 1)
        assert cache.get_line_col(8) == (2, 3)
        assert cache.get_line_col(17) == (3, 6)

    def test_newline_belongs_to_its_line(self) -> None:
        """The LF itself is the last column of its line."""
        cache = LineOffsetCache("ab\ncd")

        assert cache.get_line_col(2) == (1, 3)

    def test_clamps(self) -> None:
        """Positions are clamped to [0, len]."""
        cache = LineOffsetCache("ab\ncd")

        assert cache.get_line_col(-5) == (1, 1)
        assert cache.get_line_col(99) == (2, 3)

    def test_line_count(self) -> None:
        """A trailing newline opens an empty last line."""
        assert LineOffsetCache("").line_count == 1
        assert LineOffsetCache("a\nb\n").line_count == 3

    @given(source=st.text(alphabet="ab\n", max_size=60), pos=st.integers(0, 60))
    def test_agrees_with_walker(self, source: str, pos: int) -> None:
        """PROPERTY: the cache and StringWalker.line_col() agree."""
        pos = min(pos, len(source))

        assert LineOffsetCache(source).get_line_col(pos) == StringWalker(source).line_col(pos)


@pytest.mark.parametrize(
    "module",
    [stringwalker.walker, stringwalker.position, stringwalker.diagnostics.formatter],
)
def test_docstring_examples(module: object) -> None:
    """Examples in docstrings stay accurate."""
    result = doctest.testmod(module, raise_on_error=False)  # type: ignore[arg-type]

    assert result.failed == 0

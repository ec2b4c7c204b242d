"""Bidirectional code point iteration over UTF-8 byte strings."""

from __future__ import annotations

from collections.abc import Iterator
from functools import total_ordering

from phonetext.unilib import is_trail_byte, one_char_len
from phonetext.utf8scan import codepoint_count, decode_at

_BytesLike = bytes | bytearray | memoryview


@total_ordering
class TextIterator:
    """A position inside UTF-8 data that moves one code point at a time.

    The position is a byte offset. It must be at the start of a character
    or at the end of the data.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: _BytesLike, offset: int = 0) -> None:
        raw = bytes(data)
        if not 0 <= offset <= len(raw):
            raise IndexError(f"offset {offset} out of range")
        if offset < len(raw) and is_trail_byte(raw[offset]):
            raise ValueError(f"offset {offset} is inside a character")
        self._data = raw
        self._offset = offset

    @property
    def data(self) -> bytes:
        """The UTF-8 data being iterated over."""
        return self._data

    @property
    def offset(self) -> int:
        """The byte offset of the current position."""
        return self._offset

    @property
    def at_end(self) -> bool:
        """True when the position is past the last character."""
        return self._offset >= len(self._data)

    def value(self) -> int:
        """Return the code point at the current position."""
        return decode_at(self._data, self._offset)

    def advance(self) -> TextIterator:
        """Move forward by one code point and return this iterator."""
        if self.at_end:
            raise IndexError("cannot advance past the end")
        step = one_char_len(self._data[self._offset])
        self._offset = min(self._offset + step, len(self._data))
        return self

    def retreat(self) -> TextIterator:
        """Move back by one code point and return this iterator."""
        if self._offset == 0:
            raise IndexError("cannot retreat before the beginning")
        pos = self._offset - 1
        while pos > 0 and is_trail_byte(self._data[pos]):
            pos -= 1
        self._offset = pos
        return self

    def get_utf8(self) -> bytes:
        """Return the UTF-8 bytes of the code point at the current position."""
        if self.at_end:
            raise IndexError("no character at the end position")
        lead = self._data[self._offset]
        width = 1 if lead < 0x80 else 2 if lead < 0xE0 else 3 if lead < 0xF0 else 4
        chunk = self._data[self._offset : self._offset + width]
        if len(chunk) < width:
            raise ValueError(f"truncated UTF-8 sequence at offset {self._offset}")
        return chunk

    def distance(self, other: TextIterator) -> int:
        """Return the number of code points from this position to ``other``.

        The result is negative when ``other`` lies before this position.
        """
        self._check_same(other)
        if other._offset >= self._offset:
            return codepoint_count(self._data[self._offset : other._offset])
        return -codepoint_count(self._data[other._offset : self._offset])

    def copy(self) -> TextIterator:
        """Return an independent iterator at the same position."""
        return TextIterator(self._data, self._offset)

    def _check_same(self, other: TextIterator) -> None:
        if self._data != other._data:
            raise ValueError("iterators over different data")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextIterator):
            return NotImplemented
        return self._data == other._data and self._offset == other._offset

    def __lt__(self, other: TextIterator) -> bool:
        if not isinstance(other, TextIterator):
            return NotImplemented
        self._check_same(other)
        return self._offset < other._offset

    def __hash__(self) -> int:
        return hash((self._data, self._offset))

    def __repr__(self) -> str:
        return f"TextIterator(offset={self._offset})"


def iter_codepoints(data: _BytesLike) -> Iterator[int]:
    """Yield the code points of UTF-8 ``data`` from first to last."""
    it = TextIterator(data, 0)
    while not it.at_end:
        yield it.value()
        it.advance()


def iter_codepoints_reversed(data: _BytesLike) -> Iterator[int]:
    """Yield the code points of UTF-8 ``data`` from last to first."""
    raw = bytes(data)
    it = TextIterator(raw, len(raw))
    while it.offset > 0:
        it.retreat()
        yield it.value()
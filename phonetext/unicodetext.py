"""A growable sequence of code points stored as interchange-valid UTF-8."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from phonetext.rune import encode_rune
from phonetext.textiter import TextIterator, iter_codepoints, iter_codepoints_reversed
from phonetext.unilib import (
    is_interchange_valid,
    is_trail_byte,
    is_valid_codepoint,
)
from phonetext.utf8scan import codepoint_count, coerce_to_interchange_valid

_log = logging.getLogger(__name__)

_BytesLike = bytes | bytearray | memoryview
_REPLACEMENT_UTF8 = b"\xef\xbf\xbd"


def _validated(data: _BytesLike | str) -> bytes:
    if isinstance(data, str):
        raw = data.encode("utf-8", "surrogatepass")
    else:
        raw = bytes(data)
    if not is_interchange_valid(raw):
        _log.warning("UTF-8 buffer is not interchange-valid.")
        raw = coerce_to_interchange_valid(raw)
    return raw


class UnicodeText:
    """Text held as UTF-8 that only ever contains interchange-valid code points.

    Invalid input is never rejected. Each structurally invalid byte, and each
    code point that is not valid for interchange, is replaced by one space.
    """

    __slots__ = ("_data",)

    def __init__(self, data: _BytesLike | str = b"") -> None:
        self._data = bytearray(_validated(data))

    @classmethod
    def from_utf8(cls, data: _BytesLike | str) -> UnicodeText:
        """Build a text from UTF-8 data, repairing invalid parts."""
        return cls(data)

    @classmethod
    def from_codepoints(cls, codepoints: Iterable[int]) -> UnicodeText:
        """Build a text from a sequence of code points."""
        text = cls()
        text.extend(codepoints)
        return text

    def append_codepoint(self, codepoint: int) -> None:
        """Add one code point at the end, or a space if it is not valid."""
        if is_valid_codepoint(codepoint):
            encoded = encode_rune(codepoint)
            if is_interchange_valid(encoded):
                self._data += encoded
                return
            _log.warning("Unicode value 0x%x is not valid for interchange", codepoint)
        else:
            _log.warning("Illegal Unicode value: 0x%x", codepoint)
        self._data += b" "

    def extend(self, codepoints: Iterable[int]) -> None:
        """Add each of ``codepoints`` at the end."""
        for codepoint in codepoints:
            self.append_codepoint(codepoint)

    def append(self, other: UnicodeText) -> None:
        """Add the whole of ``other`` at the end."""
        self._data += bytes(other._data)

    def clear(self) -> None:
        """Remove all content."""
        self._data.clear()

    def begin(self) -> TextIterator:
        """Return an iterator at the first code point."""
        return TextIterator(bytes(self._data), 0)

    def end(self) -> TextIterator:
        """Return an iterator past the last code point."""
        raw = bytes(self._data)
        return TextIterator(raw, len(raw))

    def find(self, look: UnicodeText, start: int | TextIterator = 0) -> TextIterator:
        """Return the position of the first ``look`` at or after ``start``.

        ``start`` is a byte offset or an iterator. When ``look`` does not
        occur, the end position is returned.
        """
        raw = bytes(self._data)
        offset = start.offset if isinstance(start, TextIterator) else start
        if not 0 <= offset <= len(raw):
            raise IndexError(f"start offset {offset} out of range")
        found = raw.find(bytes(look._data), offset)
        return TextIterator(raw, found if found >= 0 else len(raw))

    def has_replacement_char(self) -> bool:
        """Return True if the text contains U+FFFD."""
        return _REPLACEMENT_UTF8 in self._data

    def utf8(self) -> bytes:
        """Return the UTF-8 encoding of the text."""
        return bytes(self._data)

    def codepoint_offsets(self) -> list[int]:
        """Return the byte offset at which each code point starts."""
        return [i for i, byte in enumerate(self._data) if not is_trail_byte(byte)]

    def __len__(self) -> int:
        return codepoint_count(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter_codepoints(bytes(self._data))

    def __reversed__(self) -> Iterator[int]:
        return iter_codepoints_reversed(bytes(self._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnicodeText):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"UnicodeText({bytes(self._data)!r})"
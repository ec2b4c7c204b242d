"""A mutable Unicode string indexed by code point."""

from __future__ import annotations

from collections.abc import Iterator

from phonetext.unicodetext import UnicodeText
from phonetext.utf8scan import decode_at

_BytesLike = bytes | bytearray | memoryview


class UnicodeString:
    """A string of code points with in-place editing and random access.

    Content is always interchange-valid; invalid input turns into spaces.
    """

    __slots__ = ("_text", "_offsets")

    def __init__(self, text: str | _BytesLike = "") -> None:
        self._text = UnicodeText(text)
        self._offsets: list[int] | None = None

    @classmethod
    def from_codepoint(cls, codepoint: int) -> UnicodeString:
        """Build a string holding the single ``codepoint``."""
        result = cls()
        result.append_codepoint(codepoint)
        return result

    def _set_text(self, text: UnicodeText) -> None:
        self._text = text
        self._offsets = None

    def _cached_offsets(self) -> list[int]:
        if self._offsets is None:
            self._offsets = self._text.codepoint_offsets()
        return self._offsets

    def _byte_offset(self, index: int) -> int:
        offsets = self._cached_offsets()
        return offsets[index] if index < len(offsets) else len(self._text.utf8())

    def append(self, other: UnicodeString) -> None:
        """Add every code point of ``other`` at the end."""
        self._text.extend(list(other))
        self._offsets = None

    def append_codepoint(self, codepoint: int) -> None:
        """Add one code point at the end."""
        self._text.append_codepoint(codepoint)
        self._offsets = None

    def index_of(self, codepoint: int) -> int:
        """Return the index of the first ``codepoint``, or -1 if absent."""
        return next((i for i, c in enumerate(self) if c == codepoint), -1)

    def clear(self) -> None:
        """Remove all content."""
        self._text.clear()
        self._offsets = None

    def replace(self, start: int, length: int, src: UnicodeString) -> None:
        """Replace the ``length`` code points at ``start`` with ``src``."""
        size = len(self)
        if not 0 <= length <= size:
            raise ValueError(f"length {length} out of range")
        if not 0 <= start <= size - length:
            raise IndexError(f"start {start} out of range")
        data = self._text.utf8()
        replacement = src.to_utf8()
        begin = self._byte_offset(start)
        stop = self._byte_offset(start + length)
        self._set_text(UnicodeText(data[:begin] + replacement + data[stop:]))

    def set_char_at(self, pos: int, codepoint: int) -> None:
        """Replace the code point at ``pos`` with ``codepoint``."""
        if not 0 <= pos < len(self):
            raise IndexError(f"position {pos} out of range")
        data = self._text.utf8()
        encoded = UnicodeText.from_codepoints([codepoint]).utf8()
        begin = self._byte_offset(pos)
        stop = self._byte_offset(pos + 1)
        self._set_text(UnicodeText(data[:begin] + encoded + data[stop:]))

    def set_to(self, data: str | _BytesLike) -> None:
        """Replace the whole content with a copy of ``data``."""
        self._set_text(UnicodeText(data))

    def substring(self, start: int, length: int | None = None) -> UnicodeString:
        """Return ``length`` code points from ``start``, or the rest if omitted.

        An empty string is returned when the range does not fit.
        """
        size = len(self)
        if length is None:
            length = size - start
        if start < 0 or length < 0 or start > size or length > size:
            return UnicodeString()
        if start + length > size:
            return UnicodeString()
        data = self._text.utf8()
        begin = self._byte_offset(start)
        stop = self._byte_offset(start + length)
        return UnicodeString(data[begin:stop])

    def to_utf8(self) -> bytes:
        """Return the UTF-8 encoding of the string."""
        return self._text.utf8()

    def __str__(self) -> str:
        return self._text.utf8().decode("utf-8")

    def __len__(self) -> int:
        return len(self._cached_offsets())

    def __iter__(self) -> Iterator[int]:
        return iter(self._text)

    def __getitem__(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range")
        return decode_at(self._text.utf8(), self._byte_offset(index))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnicodeString):
            return NotImplemented
        return self._text == other._text

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UnicodeString({str(self)!r})"
"""Encoding and decoding of single runes (Unicode code points) as UTF-8.

The decoder follows the classic Plan 9 rules. Sequences of up to four bytes
are accepted. Overlong forms are rejected. Surrogates and values up to
0x1FFFFF decode without complaint.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

UTF_MAX = 4
"""Maximum number of bytes per rune."""
RUNE_SYNC = 0x80
"""Bytes below this value cannot be part of a multi-byte sequence."""
RUNE_SELF = 0x80
"""Runes below this value are encoded as themselves in one byte."""
RUNE_ERROR = 0xFFFD
"""Rune reported for decoding errors."""
RUNE_MAX = 0x10FFFF
"""Largest valid rune value."""

_BITX = 6
_TX = 0x80
_T2 = 0xC0
_T3 = 0xE0
_T4 = 0xF0
_T5 = 0xF8

_RUNE1 = 0x7F
_RUNE2 = 0x7FF
_RUNE3 = 0xFFFF
_RUNE4 = 0x1FFFFF

_MASKX = 0x3F
_TESTX = 0xC0


class DecodedRune(NamedTuple):
    """A decoded rune and the number of bytes it took."""

    rune: int
    consumed: int


class CheckedRune(NamedTuple):
    """A decoded rune together with whether the sequence was valid."""

    valid: bool
    rune: int
    consumed: int


def _head(data: bytes | bytearray | memoryview) -> bytes:
    return bytes(data[:UTF_MAX])


def decode_rune(data: bytes | bytearray | memoryview) -> DecodedRune:
    """Decode the first rune of ``data``, never reading past its end.

    A sequence that looks well formed but is cut short by the end of the
    data yields ``(RUNE_ERROR, 0)``. Any other malformed sequence yields
    ``(RUNE_ERROR, 1)``.
    """
    buf = _head(data)
    length = len(buf)
    bad_length = DecodedRune(RUNE_ERROR, 0)
    bad = DecodedRune(RUNE_ERROR, 1)

    if length == 0:
        return bad_length

    c = buf[0]
    if c < _TX:
        return DecodedRune(c, 1)

    if length <= 1:
        return bad_length

    c1 = buf[1] ^ _TX
    if c1 & _TESTX:
        return bad
    if c < _T3:
        if c < _T2:
            return bad
        value = ((c << _BITX) | c1) & _RUNE2
        if value <= _RUNE1:
            return bad
        return DecodedRune(value, 2)

    if length <= 2:
        return bad_length

    c2 = buf[2] ^ _TX
    if c2 & _TESTX:
        return bad
    if c < _T4:
        value = ((((c << _BITX) | c1) << _BITX) | c2) & _RUNE3
        if value <= _RUNE2:
            return bad
        return DecodedRune(value, 3)

    if length <= 3:
        return bad_length

    c3 = buf[3] ^ _TX
    if c3 & _TESTX:
        return bad
    if c < _T5:
        value = ((((((c << _BITX) | c1) << _BITX) | c2) << _BITX) | c3) & _RUNE4
        if value <= _RUNE3:
            return bad
        return DecodedRune(value, 4)

    return bad


def decode_rune_checked(data: bytes | bytearray | memoryview) -> CheckedRune:
    """Decode the first rune of ``data`` and report whether it was valid.

    A genuinely encoded U+FFFD counts as valid: it takes three bytes, while
    errors take zero or one.
    """
    rune, consumed = decode_rune(data)
    return CheckedRune(rune != RUNE_ERROR or consumed == 3, rune, consumed)


def encode_rune(rune: int) -> bytes:
    """Encode ``rune`` as UTF-8.

    Values outside ``0..RUNE_MAX`` are encoded as ``RUNE_ERROR``.
    """
    c = rune
    if 0 <= c <= _RUNE1:
        return bytes((c,))
    if 0 <= c <= _RUNE2:
        return bytes((_T2 | (c >> _BITX), _TX | (c & _MASKX)))
    if c < 0 or c > RUNE_MAX:
        c = RUNE_ERROR
    if c <= _RUNE3:
        return bytes(
            (
                _T3 | (c >> 2 * _BITX),
                _TX | ((c >> _BITX) & _MASKX),
                _TX | (c & _MASKX),
            )
        )
    return bytes(
        (
            _T4 | (c >> 3 * _BITX),
            _TX | ((c >> 2 * _BITX) & _MASKX),
            _TX | ((c >> _BITX) & _MASKX),
            _TX | (c & _MASKX),
        )
    )


def rune_len(rune: int) -> int:
    """Return the number of bytes ``encode_rune`` produces for ``rune``."""
    return len(encode_rune(rune))


def runes_len(runes: Iterable[int]) -> int:
    """Return the number of bytes needed to encode all of ``runes``.

    Each rune is sized by its value alone, without range checking.
    """

    def size(c: int) -> int:
        if c <= _RUNE1:
            return 1
        if c <= _RUNE2:
            return 2
        if c <= _RUNE3:
            return 3
        return 4

    return sum(size(c) for c in runes)


def full_rune(data: bytes | bytearray | memoryview) -> bool:
    """Return True if ``data`` is long enough to hold the rune it starts.

    This does not check that the bytes form a legal encoding.
    """
    buf = _head(data)
    n = len(buf)
    if n == 0:
        return False
    c = buf[0]
    if c < _TX:
        return True
    if n == 1:
        return False
    if c < _T3:
        return True
    if n == 2:
        return False
    return c < _T4 or n > 3
"""Low-level scanning helpers over UTF-8 byte strings."""

from __future__ import annotations

from phonetext.rune import decode_rune_checked
from phonetext.unilib import is_trail_byte, span_interchange_valid

_BytesLike = bytes | bytearray | memoryview


def codepoint_count(data: _BytesLike) -> int:
    """Return the number of code points in ``data``, counting every non-trail byte."""
    return sum(1 for b in bytes(data) if not is_trail_byte(b))


def coerce_to_interchange_valid(data: _BytesLike) -> bytes:
    """Return ``data`` with each invalid part replaced by a single space.

    A structurally invalid byte becomes one space. A well-formed character
    that is not valid for interchange also becomes one space, whatever its
    encoded length.
    """
    raw = bytes(data)
    out = bytearray()
    pos = 0
    end = len(raw)
    while pos < end:
        good = span_interchange_valid(raw[pos:])
        out += raw[pos : pos + good]
        pos += good
        if pos == end:
            break
        valid, _rune, consumed = decode_rune_checked(raw[pos:])
        pos += consumed if valid else 1
        out += b" "
    return bytes(out)


def decode_at(data: _BytesLike, offset: int) -> int:
    """Return the code point whose UTF-8 encoding starts at ``offset``.

    The data is assumed to be valid UTF-8. The bytes are not checked for
    being well formed. A sequence cut short by the end of ``data`` raises
    ValueError.
    """
    raw = bytes(data)
    if not 0 <= offset < len(raw):
        raise IndexError(f"offset {offset} out of range")
    byte1 = raw[offset]
    if byte1 < 0x80:
        return byte1
    width = 2 if byte1 < 0xE0 else 3 if byte1 < 0xF0 else 4
    seq = raw[offset : offset + width]
    if len(seq) < width:
        raise ValueError(f"truncated UTF-8 sequence at offset {offset}")
    if width == 2:
        return ((byte1 & 0x1F) << 6) | (seq[1] & 0x3F)
    if width == 3:
        return ((byte1 & 0x0F) << 12) | ((seq[1] & 0x3F) << 6) | (seq[2] & 0x3F)
    return (
        ((byte1 & 0x07) << 18)
        | ((seq[1] & 0x3F) << 12)
        | ((seq[2] & 0x3F) << 6)
        | (seq[3] & 0x3F)
    )
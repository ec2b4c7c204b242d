"""Code point classification and interchange-validity checks for UTF-8 data.

"Interchange valid" is stricter than structurally valid UTF-8. It excludes
the C0 controls other than HT, LF, FF and CR. It also excludes the C1
controls, surrogates and non-characters.
"""

from __future__ import annotations

from phonetext.rune import RUNE_ERROR, decode_rune

_BytesLike = bytes | bytearray | memoryview


def is_valid_codepoint(codepoint: int) -> bool:
    """Return True if ``codepoint`` is a Unicode scalar value (not a surrogate)."""
    return 0 <= codepoint < 0xD800 or 0xE000 <= codepoint <= 0x10FFFF


def is_interchange_valid_codepoint(codepoint: int) -> bool:
    """Return True if ``codepoint`` may be used for interchange."""
    c = codepoint
    return not (
        0x00 <= c <= 0x08
        or c == 0x0B
        or 0x0E <= c <= 0x1F
        or 0x7F <= c <= 0x9F
        or 0xD800 <= c <= 0xDFFF
        or 0xFDD0 <= c <= 0xFDEF
        or (c & 0xFFFE) == 0xFFFE
    )


def one_char_len(lead_byte: int) -> int:
    """Return the length of the UTF-8 character that starts with ``lead_byte``.

    Bytes that cannot start a multi-byte sequence count as one byte long.
    """
    if not 0 <= lead_byte <= 0xFF:
        raise ValueError(f"not a byte value: {lead_byte!r}")
    if lead_byte < 0xC0:
        return 1
    if lead_byte < 0xE0:
        return 2
    if lead_byte < 0xF0:
        return 3
    return 4


def is_trail_byte(byte: int) -> bool:
    """Return True if ``byte`` is a UTF-8 continuation byte (10xx xxxx)."""
    return 0x80 <= byte <= 0xBF


def span_interchange_valid(data: _BytesLike) -> int:
    """Return the length in bytes of the interchange-valid prefix of ``data``."""
    view = memoryview(bytes(data))
    end = len(view)
    pos = 0
    while pos < end:
        rune, consumed = decode_rune(view[pos:])
        # A real U+FFFD takes three bytes; decoding errors take zero or one.
        if (rune == RUNE_ERROR and consumed <= 1) or not is_interchange_valid_codepoint(
            rune
        ):
            break
        pos += consumed
    return pos


def is_interchange_valid(data: _BytesLike) -> bool:
    """Return True if all of ``data`` is interchange-valid UTF-8."""
    return span_interchange_valid(data) == len(data)
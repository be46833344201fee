"""Decoding of UTF-8 byte sequences into Unicode code points."""

from __future__ import annotations

from typing import Iterator, Union

INVALID_CODEPOINT = 0x20000000

_MAX_CODEPOINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)

# (lead mask, lead pattern, sequence length, smallest code point, payload mask)
_SEQUENCES = (
    (0x80, 0x00, 1, 0x0, 0x7F),
    (0xE0, 0xC0, 2, 0x80, 0x1F),
    (0xF0, 0xE0, 3, 0x800, 0x0F),
    (0xF8, 0xF0, 4, 0x10000, 0x07),
)


def utf8_codepoint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode the code point starting at ``offset``.

    Returns the code point and the offset of the next one. Malformed, overlong,
    surrogate or out of range sequences yield INVALID_CODEPOINT and advance one byte.
    """
    if isinstance(data, str):
        raise TypeError("data must be bytes, not str")
    if not 0 <= offset < len(data):
        raise IndexError(f"offset {offset} outside data of length {len(data)}")
    lead = data[offset]
    for mask, pattern, length, minimum, payload in _SEQUENCES:
        if lead & mask == pattern:
            break
    else:
        return INVALID_CODEPOINT, offset + 1

    end = offset + length
    if end > len(data):
        return INVALID_CODEPOINT, offset + 1
    codepoint = lead & payload
    for byte in data[offset + 1:end]:
        if byte & 0xC0 != 0x80:
            return INVALID_CODEPOINT, offset + 1
        codepoint = (codepoint << 6) | (byte & 0x3F)
    if codepoint < minimum or codepoint > _MAX_CODEPOINT or codepoint in _SURROGATES:
        return INVALID_CODEPOINT, offset + 1
    return codepoint, end


def iter_codepoints(data: Union[bytes, str]) -> Iterator[int]:
    """Yield the code points of UTF-8 ``data``; a str is encoded first."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    offset = 0
    while offset < len(raw):
        codepoint, offset = utf8_codepoint(raw, offset)
        yield codepoint
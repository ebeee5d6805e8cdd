"""Detection of UTF-8 encoded URL paths."""

from __future__ import annotations

__all__ = ["decode_utf8_unit", "is_utf8_url"]


def _is_trail_byte(value: int) -> bool:
    return (value & 0xC0) == 0x80


def decode_utf8_unit(lead: int, trail1: int, trail2: int) -> tuple[int, int] | None:
    """Decode a two- or three-byte UTF-8 sequence.

    Returns ``(code_point, byte_count)``, or ``None`` if the bytes do not
    form such a sequence.
    """
    if (lead & 0xF0) == 0xE0 and _is_trail_byte(trail1) and _is_trail_byte(trail2):
        code = ((lead & 0x0F) << 12) | ((trail1 & 0x3F) << 6) | (trail2 & 0x3F)
        return code, 3
    if (lead & 0xE0) == 0xC0 and _is_trail_byte(trail1):
        return ((lead & 0x1F) << 6) | (trail1 & 0x3F), 2
    return None


def is_utf8_url(
    path: bytes | bytearray,
    codepage: str = "cp1252",
    favor_dbcs: bool = False,
) -> bool:
    """Tell whether ``path`` should be treated as UTF-8.

    With ``favor_dbcs`` the path is UTF-8 only if it is not valid in
    ``codepage``.  Otherwise every non-ASCII sequence must be a two- or
    three-byte UTF-8 unit whose character maps to at most two bytes in
    ``codepage``.
    """
    data = bytes(path).split(b"\0", 1)[0]

    if favor_dbcs:
        try:
            data.decode(codepage)
        except UnicodeDecodeError:
            return True
        return False

    pos = 0
    while pos < len(data):
        lead = data[pos]
        pos += 1
        if not lead & 0x80:
            continue
        trail1 = data[pos] if pos < len(data) else 0
        trail2 = data[pos + 1] if trail1 and pos + 1 < len(data) else 0
        unit = decode_utf8_unit(lead, trail1, trail2)
        if unit is None:
            return False
        code, count = unit
        pos += count - 1
        try:
            encoded = chr(code).encode(codepage)
        except UnicodeEncodeError:
            return False
        if not encoded or len(encoded) > 2:
            return False
    return True
"""Percent-escaping and unescaping of byte strings used in URLs."""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "should_escape_url",
    "should_escape_utf8",
    "escape_bytes",
    "escape_url",
    "escape_utf8",
    "unescape_bytes",
]

_HEX_DIGITS = b"0123456789abcdefABCDEF"


def _terminated(data: bytes | bytearray | memoryview) -> bytes:
    """Return ``data`` up to its first NUL byte."""
    return bytes(data).split(b"\0", 1)[0]


def should_escape_url(byte: int) -> bool:
    """Tell whether ``byte`` must be escaped in a URL.

    High-bit bytes, controls, space and ``< > % ? #`` are escaped;
    CR and LF are left alone.
    """
    if byte in (0x0A, 0x0D):
        return False
    return byte >= 128 or byte <= 32 or byte in b"<>%?#"


def should_escape_utf8(byte: int) -> bool:
    """Tell whether ``byte`` has its high bit set."""
    return byte >= 128


def escape_bytes(
    data: bytes | bytearray | memoryview,
    predicate: Callable[[int], bool],
) -> bytes:
    """Replace every byte for which ``predicate`` holds with ``%XX``.

    The input ends at its first NUL byte.
    """
    out = bytearray()
    for byte in _terminated(data):
        if predicate(byte):
            out += b"%%%02X" % byte
        else:
            out.append(byte)
    return bytes(out)


def escape_url(data: bytes | bytearray | memoryview) -> bytes:
    """Escape ``data`` for use in a URL."""
    return escape_bytes(data, should_escape_url)


def escape_utf8(data: bytes | bytearray | memoryview) -> bytes:
    """Escape only the high-bit bytes of ``data``."""
    return escape_bytes(data, should_escape_utf8)


def _is_hex(data: bytes, start: int, count: int) -> bool:
    piece = data[start:start + count]
    return len(piece) == count and all(byte in _HEX_DIGITS for byte in piece)


def unescape_bytes(
    data: bytes | bytearray | memoryview,
    codepage: str = "cp1252",
) -> bytes:
    """Decode ``%XX`` and ``%uXXXX`` escapes in ``data``.

    ``%uXXXX`` becomes the character encoded in ``codepage``; characters
    that the code page cannot hold become ``?``. A ``%`` not followed by
    hex digits is kept. The result ends at its first NUL byte.
    """
    source = _terminated(data)
    out = bytearray()
    pos = 0
    while pos < len(source):
        percent = source.find(b"%", pos)
        if percent < 0:
            out += source[pos:]
            break
        out += source[pos:percent]
        if source[percent + 1:percent + 2] in (b"u", b"U") and _is_hex(source, percent + 2, 4):
            code = int(source[percent + 2:percent + 6], 16)
            out += chr(code).encode(codepage, errors="replace")
            pos = percent + 6
        elif _is_hex(source, percent + 1, 2):
            out.append(int(source[percent + 1:percent + 3], 16))
            pos = percent + 3
        else:
            out.append(source[percent])
            pos = percent + 1
    return _terminated(out)
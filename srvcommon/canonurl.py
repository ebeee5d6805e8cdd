"""Canonicalisation of URL paths: dot segments, repeated slashes and UTF-8."""

from __future__ import annotations

import codecs
from enum import Enum
from functools import lru_cache

from srvcommon.utf8url import is_utf8_url

__all__ = ["canon_url"]


class _Action(Enum):
    NOTHING = 0
    EMIT_CH = 1
    EMIT_DOT_CH = 2
    EMIT_DOT_DOT_CH = 3
    BACKUP = 4


# Rows are states 0-3, columns are character classes:
# other, ".", end of string, slash.
_STATE_TABLE = (
    0, 0, 4, 1,
    0, 2, 4, 1,
    0, 3, 4, 1,
    0, 0, 4, 1,
)

_ACTION_TABLE = (
    _Action.EMIT_CH, _Action.EMIT_CH, _Action.EMIT_CH, _Action.EMIT_CH,
    _Action.EMIT_CH, _Action.NOTHING, _Action.EMIT_CH, _Action.NOTHING,
    _Action.EMIT_DOT_CH, _Action.NOTHING, _Action.EMIT_CH, _Action.NOTHING,
    _Action.EMIT_DOT_DOT_CH, _Action.EMIT_DOT_DOT_CH, _Action.BACKUP, _Action.BACKUP,
)

_FINAL_STATE = 4
_CLASSES = 4


def _char_class(ch: int) -> int:
    if ch == 0:
        return 2
    if ch == 0x2E:
        return 1
    if ch in (0x2F, 0x5C):
        return 3
    return 0


@lru_cache(maxsize=None)
def _is_lead_byte(codepage: str, byte: int) -> bool:
    """Tell whether ``byte`` starts a multi-byte character in ``codepage``."""
    if byte < 0x80:
        return False
    decoder = codecs.getincrementaldecoder(codepage)()
    try:
        return decoder.decode(bytes([byte]), final=False) == ""
    except UnicodeDecodeError:
        return False


def _encode_unit(code: int, codepage: str) -> bytes:
    try:
        encoded = chr(code).encode(codepage)
    except UnicodeEncodeError:
        return b"?"
    if not encoded or len(encoded) > 2:
        return b"?"
    return encoded


def canon_url(
    path: bytes | bytearray,
    dbcs_locale: bool = False,
    codepage: str = "cp1252",
    favor_dbcs: bool = False,
) -> bytes:
    """Return the canonical form of the URL path ``path``.

    ``/./`` segments are removed, ``/../`` removes the previous segment,
    repeated slashes collapse, and a UTF-8 path is converted to
    ``codepage``.  In a DBCS locale the trail bytes of double-byte
    characters are never taken for separators.  The path ends at its
    first NUL byte.
    """
    if path is None:
        raise ValueError("path must not be None")
    source = bytes(path).split(b"\0", 1)[0]

    scan_utf8 = is_utf8_url(source, codepage, favor_dbcs)
    if dbcs_locale and scan_utf8:
        dbcs_locale = False

    def byte_at(position: int) -> int:
        return source[position] if position < len(source) else 0

    dest = bytearray()
    pos = 0
    index = 0
    in_dbcs = False
    converted = b""
    pending = 0
    action = _Action.NOTHING

    while True:
        index = _STATE_TABLE[index] * _CLASSES
        ch = byte_at(pos)
        pos += 1

        if not dbcs_locale:
            index += _char_class(ch)
        elif in_dbcs:
            # A trail byte counts as an ordinary character.
            if ch == 0:
                index += _char_class(ch)
            in_dbcs = False
        else:
            index += _char_class(ch)
            if _is_lead_byte(codepage, ch):
                in_dbcs = True

        if ch & 0x80 and scan_utf8:
            if pending < 2:
                trail1 = byte_at(pos)
                trail2 = byte_at(pos + 1) if trail1 else 0
                width = 0
                if (ch & 0xF0) == 0xE0:
                    code = ((ch & 0x0F) << 12) | ((trail1 & 0x3F) << 6) | (trail2 & 0x3F)
                    width = 3
                elif (ch & 0xE0) == 0xC0:
                    code = ((ch & 0x1F) << 6) | (trail1 & 0x3F)
                    width = 2
                if width:
                    converted = _encode_unit(code, codepage)
                    pending = len(converted)
                    ch = converted[0]
                    # With a two-byte result the next source byte is
                    # replaced by the second byte on the following pass.
                    pos += width - pending
                    index += _char_class(ch)
            else:
                ch = converted[1]
                pending = 0

        action = _ACTION_TABLE[index]
        if action is _Action.EMIT_DOT_DOT_CH:
            dest += b".."
            dest.append(ch)
        elif action is _Action.EMIT_DOT_CH:
            dest += b"."
            dest.append(ch)
        elif action is _Action.EMIT_CH:
            dest.append(ch)
        elif action is _Action.BACKUP:
            if len(dest) > 1 and dest[0] == 0x2F:
                del dest[-1]
                cut = dest.rfind(b"/")
                del dest[cut + 1:]

        if _STATE_TABLE[index] == _FINAL_STATE:
            break

    if action is _Action.EMIT_CH:
        # Drop the terminator emitted with the end of the string.
        del dest[-1]
    return bytes(dest)
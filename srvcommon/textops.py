"""String helpers shared by the byte and wide string types.

Every function accepts either ``str`` or ``bytes``-like values. Both
arguments of a call must be of the same kind.
"""

from __future__ import annotations

from typing import Any, Union

__all__ = [
    "DEFAULT_FORMAT_LIMIT",
    "trim_whitespace",
    "starts_with",
    "ends_with",
    "index_of",
    "last_index_of",
    "format_capped",
]

Text = Union[str, bytes, bytearray]

#: Longest result, in characters, that :func:`format_capped` will produce.
DEFAULT_FORMAT_LIMIT = 64 * 1024


def _normalise(value: Text) -> str | bytes:
    if isinstance(value, bytearray):
        return bytes(value)
    return value


def _fold(value: str | bytes) -> str | bytes:
    return value.lower()


def trim_whitespace(value: Text) -> str | bytes:
    """Remove leading and trailing whitespace.

    Byte strings use the ASCII whitespace set; text uses Unicode whitespace.
    """
    return _normalise(value).strip()


def starts_with(value: Text, prefix: Text | None, ignore_case: bool = False) -> bool:
    """Tell whether ``value`` begins with ``prefix``.

    A missing prefix never matches.
    """
    if prefix is None:
        return False
    value = _normalise(value)
    prefix = _normalise(prefix)
    if len(prefix) > len(value):
        return False
    head = value[: len(prefix)]
    if ignore_case:
        return _fold(head) == _fold(prefix)
    return head == prefix


def ends_with(value: Text, suffix: Text | None, ignore_case: bool = False) -> bool:
    """Tell whether ``value`` ends with ``suffix``.

    A missing suffix never matches.
    """
    if suffix is None:
        return False
    value = _normalise(value)
    suffix = _normalise(suffix)
    if len(suffix) > len(value):
        return False
    tail = value[len(value) - len(suffix):]
    if ignore_case:
        return _fold(tail) == _fold(suffix)
    return tail == suffix


def _check_start(start: int) -> None:
    if start < 0:
        raise ValueError("start must not be negative")


def index_of(value: Text, needle: Text | int | None, start: int = 0) -> int:
    """Return the first index of ``needle`` at or after ``start``, or -1.

    A ``start`` at or past the end of ``value`` finds nothing. For byte
    strings ``needle`` may also be a single byte value.
    """
    _check_start(start)
    value = _normalise(value)
    if needle is None or start >= len(value):
        return -1
    if not isinstance(needle, int):
        needle = _normalise(needle)
    return value.find(needle, start)


def last_index_of(value: Text, needle: Text | int | None, start: int = 0) -> int:
    """Return the last index of ``needle`` at or after ``start``, or -1.

    A ``start`` at or past the end of ``value`` finds nothing.
    """
    _check_start(start)
    value = _normalise(value)
    if needle is None or start >= len(value):
        return -1
    if not isinstance(needle, int):
        needle = _normalise(needle)
    return value.rfind(needle, start)


def format_capped(
    fmt: Text,
    args: tuple[Any, ...] | Any = (),
    limit: int = DEFAULT_FORMAT_LIMIT,
) -> str | bytes:
    """Apply printf-style formatting, refusing results longer than ``limit``.

    The result ends at its first NUL character, as a terminated string
    would. Raises ``ValueError`` when the formatted text is too long.
    """
    fmt = _normalise(fmt)
    if not isinstance(args, tuple):
        args = (args,)
    result = fmt % args
    if len(result) > limit:
        raise ValueError(
            f"formatted text of {len(result)} characters exceeds limit of {limit}"
        )
    terminator = b"\0" if isinstance(result, bytes) else "\0"
    return result.split(terminator, 1)[0]
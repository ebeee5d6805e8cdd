"""A mutable byte string with URL escaping and wide-text conversion."""

from __future__ import annotations

from typing import Any, Union

from srvcommon.textops import (
    ends_with,
    format_capped,
    index_of,
    last_index_of,
    starts_with,
    trim_whitespace,
)
from srvcommon.urlescape import escape_url, escape_utf8, unescape_bytes

__all__ = ["ByteString"]

BytesLike = Union[bytes, bytearray, memoryview, "ByteString"]


def _raw(value: BytesLike | None) -> bytes:
    if value is None:
        raise ValueError("value must not be None")
    if isinstance(value, ByteString):
        return value._data
    return bytes(value)


def _optional_raw(value: BytesLike | int | None) -> bytes | int | None:
    if value is None or isinstance(value, int):
        return value
    return _raw(value)


def _terminated(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


class ByteString:
    """A byte string that is edited in place.

    Comparisons, escaping and searching look at the bytes up to the first
    NUL, as a terminated string would.
    """

    def __init__(self, value: BytesLike = b"") -> None:
        self._data = _raw(value)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteString):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ByteString({self._data!r})"

    def is_empty(self) -> bool:
        """Tell whether the string holds no bytes."""
        return not self._data

    def equals(self, other: BytesLike, ignore_case: bool = False) -> bool:
        """Compare with ``other`` as terminated strings, optionally ignoring ASCII case."""
        mine = _terminated(self._data)
        theirs = _terminated(_raw(other))
        if ignore_case:
            return mine.lower() == theirs.lower()
        return mine == theirs

    def reset(self) -> None:
        """Make the string empty."""
        self._data = b""

    def copy(self, value: BytesLike) -> None:
        """Replace the contents with ``value``."""
        self._data = _raw(value)

    def append(self, value: BytesLike) -> None:
        """Add ``value`` to the end."""
        self._data += _raw(value)

    def copy_wide(self, text: str, codepage: str = "cp1252") -> None:
        """Replace the contents with ``text`` encoded in ``codepage``.

        Characters the code page cannot hold become ``?``.
        """
        if text is None:
            raise ValueError("text must not be None")
        self._data = text.encode(codepage, errors="replace")

    @staticmethod
    def _truncate(text: str) -> bytes:
        if text is None:
            raise ValueError("text must not be None")
        return bytes(ord(ch) & 0xFF for ch in text)

    def copy_wide_truncate(self, text: str) -> None:
        """Replace the contents with the low byte of each character of ``text``."""
        self._data = self._truncate(text)

    def append_wide_truncate(self, text: str) -> None:
        """Append the low byte of each character of ``text``."""
        self._data += self._truncate(text)

    def copy_wide_to_utf8(self, text: str) -> None:
        """Replace the contents with ``text`` encoded as UTF-8.

        Unpaired surrogates become U+FFFD; the result ends at the first NUL.
        """
        if text is None:
            raise ValueError("text must not be None")
        if not text:
            self.reset()
            return
        clean = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        self._data = _terminated(clean.encode("utf-8"))

    def copy_wide_to_utf8_escaped(self, text: str) -> None:
        """Replace the contents with ``text`` as UTF-8, then URL-escape it."""
        self.copy_wide_to_utf8(text)
        self.escape()

    def set_len(self, length: int, capacity: int | None = None) -> None:
        """Cut the string to ``length`` bytes.

        ``capacity`` is the size of the storage; it defaults to the current
        length plus the terminator. A length that does not fit below it
        raises ``ValueError``. Growing pads with NUL bytes.
        """
        if capacity is None:
            capacity = len(self._data) + 1
        if length < 0 or length >= capacity:
            raise ValueError(f"length {length} does not fit in {capacity} bytes")
        if length <= len(self._data):
            self._data = self._data[:length]
        else:
            self._data += b"\0" * (length - len(self._data))

    def format(self, fmt: BytesLike, *args: Any) -> None:
        """Replace the contents with ``fmt % args``.

        On failure the string is emptied and the error is raised.
        """
        try:
            self._data = format_capped(_raw(fmt), args)
        except (ValueError, TypeError):
            self.reset()
            raise

    def escape(self) -> None:
        """Percent-escape bytes that may not appear in a URL."""
        self._data = escape_url(self._data)

    def escape_utf8(self) -> None:
        """Percent-escape only the high-bit bytes."""
        self._data = escape_utf8(self._data)

    def unescape(self, codepage: str = "cp1252") -> None:
        """Decode ``%XX`` and ``%uXXXX`` escapes in place."""
        self._data = unescape_bytes(self._data, codepage)

    def trim(self) -> None:
        """Remove leading and trailing ASCII whitespace."""
        self._data = _terminated(trim_whitespace(self._data))

    def starts_with(self, prefix: BytesLike | None, ignore_case: bool = False) -> bool:
        """Tell whether the string begins with ``prefix``."""
        return starts_with(self._data, _optional_raw(prefix), ignore_case)

    def ends_with(self, suffix: BytesLike | None, ignore_case: bool = False) -> bool:
        """Tell whether the string ends with ``suffix``."""
        return ends_with(self._data, _optional_raw(suffix), ignore_case)

    def index_of(self, value: BytesLike | int | None, start: int = 0) -> int:
        """Return the first index of ``value`` at or after ``start``, or -1."""
        return index_of(_terminated(self._data), _optional_raw(value), start)

    def last_index_of(self, value: BytesLike | int | None, start: int = 0) -> int:
        """Return the last index of ``value`` at or after ``start``, or -1."""
        return last_index_of(_terminated(self._data), _optional_raw(value), start)

    def copy_to_buffer(self, capacity: int) -> bytes:
        """Return the contents with a NUL terminator if they fit in ``capacity`` bytes."""
        needed = len(self._data) + 1
        if capacity < needed:
            raise ValueError(f"buffer of {capacity} bytes is too small; {needed} needed")
        return self._data + b"\0"
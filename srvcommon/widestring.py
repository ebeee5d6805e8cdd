"""A mutable Unicode string with code page conversion helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from srvcommon.envexpand import expand_environment_variables
from srvcommon.textops import (
    ends_with,
    format_capped,
    index_of,
    last_index_of,
    starts_with,
    trim_whitespace,
)

__all__ = ["WideString"]

TextLike = Union[str, "WideString"]


def _text(value: TextLike | None) -> str:
    if value is None:
        raise ValueError("value must not be None")
    if isinstance(value, WideString):
        return value._text
    return str(value)


def _optional_text(value: TextLike | None) -> str | None:
    return None if value is None else _text(value)


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


class WideString:
    """A Unicode string that is edited in place."""

    def __init__(self, value: TextLike = "") -> None:
        self._text = _text(value)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WideString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WideString({self._text!r})"

    def is_empty(self) -> bool:
        """Tell whether the string holds no characters."""
        return not self._text

    def reset(self) -> None:
        """Make the string empty."""
        self._text = ""

    def copy(self, value: TextLike) -> None:
        """Replace the contents with ``value``."""
        self._text = _text(value)

    def append(self, value: TextLike) -> None:
        """Add ``value`` to the end."""
        self._text += _text(value)

    def append_many(self, *args: TextLike) -> None:
        """Append every argument in order; nothing is appended if one is None."""
        pieces = [_text(value) for value in args]
        self._text += "".join(pieces)

    @staticmethod
    def _decode(data: bytes | bytearray | memoryview, codepage: str) -> str:
        if data is None:
            raise ValueError("data must not be None")
        return bytes(data).decode(codepage)

    def copy_bytes(self, data: bytes | bytearray | memoryview, codepage: str = "utf-8") -> None:
        """Replace the contents with ``data`` decoded from ``codepage``.

        Invalid input raises ``UnicodeDecodeError``.
        """
        self._text = self._decode(data, codepage)

    def append_bytes(self, data: bytes | bytearray | memoryview, codepage: str = "utf-8") -> None:
        """Append ``data`` decoded from ``codepage``."""
        self._text += self._decode(data, codepage)

    def to_bytes(self, codepage: str = "cp1252") -> bytes:
        """Encode the string in ``codepage``; unmappable characters become ``?``."""
        return self._text.encode(codepage, errors="replace")

    def copy_to_buffer(self, capacity: int) -> bytes:
        """Return the UTF-16 contents with a terminator if they fit in ``capacity`` bytes."""
        encoded = self._text.encode("utf-16-le", "surrogatepass") + b"\0\0"
        if capacity < len(encoded):
            raise ValueError(
                f"buffer of {capacity} bytes is too small; {len(encoded)} needed"
            )
        return encoded

    def set_len(self, length: int, capacity: int | None = None) -> None:
        """Cut the string to ``length`` characters.

        ``capacity`` is the size of the storage in characters; it defaults
        to the current length plus the terminator. Growing pads with NULs.
        """
        if capacity is None:
            capacity = len(self._text) + 1
        if length < 0 or length >= capacity:
            raise ValueError(f"length {length} does not fit in {capacity} characters")
        if length <= len(self._text):
            self._text = self._text[:length]
        else:
            self._text += "\0" * (length - len(self._text))

    def format(self, fmt: TextLike, *args: Any) -> None:
        """Replace the contents with ``fmt % args``.

        On failure the string is emptied and the error is raised.
        """
        try:
            self._text = format_capped(_text(fmt), args)
        except (ValueError, TypeError):
            self.reset()
            raise

    def trim(self) -> None:
        """Remove leading and trailing Unicode whitespace."""
        self._text = _terminated(trim_whitespace(self._text))

    def starts_with(self, prefix: TextLike | None, ignore_case: bool = False) -> bool:
        """Tell whether the string begins with ``prefix``."""
        return starts_with(self._text, _optional_text(prefix), ignore_case)

    def ends_with(self, suffix: TextLike | None, ignore_case: bool = False) -> bool:
        """Tell whether the string ends with ``suffix``."""
        return ends_with(self._text, _optional_text(suffix), ignore_case)

    def index_of(self, value: TextLike | None, start: int = 0) -> int:
        """Return the first index of ``value`` at or after ``start``, or -1."""
        return index_of(_terminated(self._text), _optional_text(value), start)

    def last_index_of(self, value: TextLike | None, start: int = 0) -> int:
        """Return the last index of ``value`` at or after ``start``, or -1."""
        return last_index_of(_terminated(self._text), _optional_text(value), start)

    def copy_and_expand_environment_strings(
        self,
        source: TextLike,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Replace the contents with ``source`` after expanding ``%NAME%`` references."""
        self.reset()
        self._text = _terminated(expand_environment_variables(_text(source), environ))
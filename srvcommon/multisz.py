"""Ordered lists of strings stored in the double-NUL terminated layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["MultiSz", "split_comma_delimited_string"]

_WHITESPACE = " \t\r"


def _parse(buffer: str) -> list[str]:
    """Read NUL-terminated entries from ``buffer`` up to the first empty one."""
    strings: list[str] = []
    for entry in buffer.split("\0"):
        if not entry:
            break
        strings.append(entry)
    return strings


class MultiSz:
    """A sequence of non-empty strings laid out as ``a\\0b\\0\\0``.

    An empty entry ends the layout, so appending an empty string has no
    effect and a string holding a NUL contributes the parts before the
    first empty piece.
    """

    def __init__(self, strings: Iterable[str] | None = None) -> None:
        self._strings: list[str] = []
        for value in strings or ():
            self.append(value)

    @classmethod
    def from_buffer(cls, buffer: str | bytes | bytearray) -> MultiSz:
        """Build from a NUL-separated buffer; bytes are read as Latin-1."""
        if isinstance(buffer, (bytes, bytearray)):
            buffer = bytes(buffer).decode("latin-1")
        result = cls()
        result._strings = _parse(buffer)
        return result

    def to_buffer(self) -> str:
        """Return the double-NUL terminated layout."""
        return "".join(value + "\0" for value in self._strings) + "\0"

    def char_count(self) -> int:
        """Number of characters in the layout, terminators included."""
        return sum(len(value) + 1 for value in self._strings) + 1

    def find_string(self, value: str) -> bool:
        """Tell whether ``value`` is an entry, comparing exactly."""
        if not value:
            raise ValueError("value must be a non-empty string")
        return value in self._strings

    def find_string_no_case(self, value: str) -> bool:
        """Tell whether ``value`` is an entry, ignoring case."""
        if not value:
            raise ValueError("value must be a non-empty string")
        wanted = value.lower()
        return any(entry.lower() == wanted for entry in self._strings)

    def append(self, value: str) -> None:
        """Append ``value`` as a new entry."""
        if value is None:
            raise ValueError("value must not be None")
        self._strings.extend(_parse(value + "\0\0"))

    def reset(self) -> None:
        """Remove every entry."""
        self._strings.clear()

    def copy_to_buffer(self, capacity: int) -> str:
        """Return the layout if it fits in ``capacity`` characters.

        Raises ``ValueError`` when it does not; ``char_count()`` gives the
        size needed.
        """
        needed = self.char_count()
        if capacity < needed:
            raise ValueError(
                f"buffer of {capacity} characters is too small; {needed} needed"
            )
        return self.to_buffer()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiSz):
            return NotImplemented
        return self._strings == other._strings

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return f"MultiSz({self._strings!r})"


def split_comma_delimited_string(
    text: str,
    trim_entries: bool = False,
    remove_empty_entries: bool = False,
) -> MultiSz:
    """Split ``text`` on commas into a :class:`MultiSz`.

    Entries are optionally trimmed of spaces, tabs and carriage returns.
    Empty entries cannot be held in the layout and are always dropped.
    """
    if text is None:
        raise ValueError("text must not be None")
    result = MultiSz()
    for entry in text.split(","):
        if trim_entries:
            entry = entry.strip(_WHITESPACE)
        if entry or not remove_empty_entries:
            result.append(entry)
    return result
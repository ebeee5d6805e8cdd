"""Parsing of HTTP date strings into datetimes and FILETIME values."""

from __future__ import annotations

from datetime import datetime, timezone

__all__ = [
    "HttpDateError",
    "two_digit_atoi",
    "make_month",
    "parse_http_date",
    "to_filetime",
    "string_time_to_filetime",
]

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_C_SPACE = " \t\n\v\f\r"
_FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)
_MIN_YEAR = 1601
_MAX_YEAR = 30827


class HttpDateError(ValueError):
    """Raised when a string is not a valid HTTP date."""


def _as_text(text: str | bytes | bytearray) -> str:
    if text is None:
        raise HttpDateError("date text must not be None")
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    return text.split("\0", 1)[0]


def _ascii_upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def _ascii_lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def _atoi(text: str) -> int:
    """Read a leading decimal integer like C ``atoi``, truncated to 16 bits."""
    text = text.lstrip(_C_SPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - 48
    return (sign * value) & 0xFFFF


def two_digit_atoi(text: str | bytes) -> int:
    """Convert the first two characters of ``text`` to a number, or 0 if not digits."""
    text = _as_text(text)
    if len(text) < 2:
        return 0
    tens = ord(text[0]) - 48
    ones = ord(text[1]) - 48
    if 0 <= tens <= 9 and 0 <= ones <= 9:
        return tens * 10 + ones
    return 0


def make_month(text: str | bytes) -> int:
    """Return the month number (1-12) named by the first three characters, or 0.

    The first letter may be either case; the other two are matched
    without regard to case.
    """
    text = _as_text(text)
    if len(text) < 3:
        return 0
    key = _ascii_upper(text[0]) + _ascii_lower(text[1]) + _ascii_lower(text[2])
    try:
        return _MONTHS.index(key) + 1
    except ValueError:
        return 0


def parse_http_date(text: str | bytes) -> datetime:
    """Parse an RFC 1123, RFC 850 or asctime date as a UTC datetime.

    Two-digit years below 50 fall in the 2000s, the others in the 1900s.
    """
    text = _as_text(text)

    comma = text.find(",")
    if comma >= 0:
        s = text[comma + 1:].lstrip(" ")
        if len(s) < 18:
            raise HttpDateError(f"date too short: {text!r}")
        if s[2] == "-":
            day = _atoi(s)
            month = make_month(s[3:])
            year = _atoi(s[7:])
            hour = _atoi(s[10:])
            minute = _atoi(s[13:])
            second = _atoi(s[16:])
        else:
            if len(s) < 20:
                raise HttpDateError(f"date too short: {text!r}")
            day = two_digit_atoi(s)
            month = make_month(s[3:])
            year = two_digit_atoi(s[7:]) * 100 + two_digit_atoi(s[9:])
            hour = two_digit_atoi(s[12:])
            minute = two_digit_atoi(s[15:])
            second = two_digit_atoi(s[18:])
    else:
        s = text.lstrip(" ")
        if len(s) < 24:
            raise HttpDateError(f"date too short: {text!r}")
        day = _atoi(s[8:])
        month = make_month(s[4:])
        year = _atoi(s[20:])
        hour = _atoi(s[11:])
        minute = _atoi(s[14:])
        second = _atoi(s[17:])

    if year < 1000:
        year += 2000 if year < 50 else 1900

    if not _MIN_YEAR <= year <= _MAX_YEAR:
        raise HttpDateError(f"year {year} out of range in {text!r}")
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        raise HttpDateError(f"invalid date fields in {text!r}") from None


def to_filetime(moment: datetime) -> int:
    """Return ``moment`` as 100-nanosecond intervals since 1601-01-01 UTC.

    A naive datetime is taken to be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - _FILETIME_EPOCH
    if delta.days < 0:
        raise ValueError("moment is before 1601-01-01")
    return (delta.days * 86400 + delta.seconds) * 10_000_000 + delta.microseconds * 10


def string_time_to_filetime(text: str | bytes) -> int:
    """Parse an HTTP date and return it as a FILETIME value."""
    return to_filetime(parse_http_date(text))
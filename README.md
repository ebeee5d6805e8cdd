# srvcommon

Small building blocks for HTTP server code, using only the standard library.

## Modules

- `srvcommon.base64codec`: padded base64 with strict checks.
  `base64_encode(data)` returns text; `base64_decode(text)` returns bytes and
  raises `Base64Error` (a `ValueError`) when the length is not a non-zero
  multiple of 4 or a character is outside the alphabet.
  `encoded_length(n)` and `decoded_length(text)` give the sizes.
- `srvcommon.httpdate`: `parse_http_date(text)` reads RFC 1123
  (`Sun, 06 Nov 1994 08:49:37 GMT`), RFC 850 (`Sunday, 06-Nov-94 08:49:37 GMT`)
  and asctime (`Sun Nov  6 08:49:37 1994`) dates into a UTC `datetime`.
  Two-digit years below 50 fall in the 2000s, the rest in the 1900s.
  `to_filetime(moment)` counts 100-nanosecond intervals since 1601-01-01 UTC,
  and `string_time_to_filetime(text)` does both steps. Bad dates raise
  `HttpDateError`. `make_month` and `two_digit_atoi` are the field helpers.
- `srvcommon.multisz`: `MultiSz`, an ordered list of non-empty strings laid
  out as `a\0b\0\0` (`to_buffer`, `from_buffer`, `char_count`, `find_string`,
  `find_string_no_case`, `append`, `reset`, `copy_to_buffer`), and
  `split_comma_delimited_string(text, trim_entries, remove_empty_entries)`.
  Empty entries cannot be held in the layout and are always dropped.
- `srvcommon.urlescape`: `escape_url` and `escape_utf8` percent-escape bytes
  (`%XX`, upper-case hex); `escape_bytes` takes any predicate.
  `unescape_bytes(data, codepage)` decodes `%XX` and `%uXXXX`, the latter
  encoded into `codepage` (default `cp1252`, unmappable characters become `?`).
- `srvcommon.textops`: `trim_whitespace`, `starts_with`, `ends_with`,
  `index_of`, `last_index_of` for `str` or bytes, and `format_capped`, which
  applies `%`-formatting and raises `ValueError` past 64 Ki characters.
- `srvcommon.envexpand`: `expand_environment_variables(text, environ)` replaces
  `%NAME%` references, matching names without regard to case and leaving
  unknown references as they are. `environ` defaults to `os.environ`.
- `srvcommon.bytestring.ByteString` and `srvcommon.widestring.WideString`:
  mutable string buffers built on the helpers above, with copy, append,
  trim, search, escaping (bytes) and code page conversion.
- `srvcommon.utf8url`, `srvcommon.canonurl` and `srvcommon.normalize`:
  `is_utf8_url` decides whether a path is UTF-8; `canon_url` removes `.`
  segments, resolves `..`, collapses repeated slashes, treats `\` as a
  separator and converts UTF-8 to a code page; `normalize_url` strips the
  scheme and host, drops the query, unescapes and canonicalises.
  `NormalizeSettings.from_mapping` reads `EnableNonUTF8`, `EnableDBCS` and
  `FavorDBCS` integer flags from any mapping.

## Installation

```
pip install .
```

## Examples

```python
from srvcommon.base64codec import base64_encode, base64_decode

assert base64_encode(b"hello") == "aGVsbG8="
assert base64_decode("aGVsbG8=") == b"hello"
```

```python
from srvcommon.httpdate import parse_http_date, string_time_to_filetime

moment = parse_http_date("Sun, 06 Nov 1994 08:49:37 GMT")
ticks = string_time_to_filetime("Sunday, 06-Nov-94 08:49:37 GMT")
```

```python
from srvcommon.multisz import split_comma_delimited_string

entries = split_comma_delimited_string(" a, b ,,c ", True, True)
assert list(entries) == ["a", "b", "c"]
```

```python
from srvcommon.normalize import NormalizeSettings, normalize_url

settings = NormalizeSettings.from_mapping({}, False)
assert normalize_url("http://host.example.com/a/./b/../c?x=1", settings) == "/a/c"
```

## What it does not do

This is a library only. It has no command-line tool and no server, and it
does not read settings from the operating system: URL handling settings are
passed in through `NormalizeSettings`, and the code page is a Python codec
name chosen by the caller.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Normalisation of request URLs into canonical paths."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from srvcommon.canonurl import canon_url
from srvcommon.urlescape import unescape_bytes

__all__ = ["NormalizeSettings", "normalize_url"]


def _flag(values: Mapping[str, Any], name: str) -> bool | None:
    value = values.get(name)
    if isinstance(value, int):
        return bool(value)
    return None


@dataclass(frozen=True)
class NormalizeSettings:
    """How URLs are interpreted when normalised."""

    enable_non_utf8: bool = True
    enable_dbcs: bool = False
    favor_dbcs: bool = False
    system_dbcs: bool = False
    codepage: str = "cp1252"

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, Any],
        system_dbcs: bool = False,
    ) -> NormalizeSettings:
        """Build settings from ``EnableNonUTF8``, ``EnableDBCS`` and ``FavorDBCS``.

        Only integer values are taken into account.  DBCS handling requires
        non-UTF-8 URLs to be enabled, and favouring DBCS requires DBCS.
        """
        enable_non_utf8 = _flag(values, "EnableNonUTF8")
        if enable_non_utf8 is None:
            enable_non_utf8 = True

        enable_dbcs = False
        if enable_non_utf8:
            enable_dbcs = bool(_flag(values, "EnableDBCS"))

        favor_dbcs = False
        if enable_dbcs:
            favor_dbcs = bool(_flag(values, "FavorDBCS"))

        return cls(
            enable_non_utf8=enable_non_utf8,
            enable_dbcs=enable_dbcs,
            favor_dbcs=favor_dbcs,
            system_dbcs=bool(system_dbcs),
        )


def normalize_url(
    url: str | bytes | bytearray,
    settings: NormalizeSettings | None = None,
) -> str | bytes:
    """Return the canonical path of ``url``.

    The scheme and host of a fully qualified URL are dropped, the query is
    cut off, escapes are decoded and the path is canonicalised.  A ``str``
    argument gives a ``str`` result, read and written as Latin-1.
    """
    if url is None:
        raise ValueError("url must not be None")
    if settings is None:
        settings = NormalizeSettings()

    as_text = isinstance(url, str)
    data = url.encode("latin-1") if as_text else bytes(url)
    data = data.split(b"\0", 1)[0]
    input_length = len(data)

    if not data.startswith(b"/"):
        slash = data.find(b"/")
        if slash >= 0 and data[slash + 1:slash + 2] == b"/":
            path_start = data.find(b"/", slash + 2)
            data = data[path_start:] if path_start >= 0 else b""

    data = data.split(b"?", 1)[0]
    data = unescape_bytes(data, settings.codepage)[:input_length]

    result = canon_url(data, settings.system_dbcs, settings.codepage, settings.favor_dbcs)
    return result.decode("latin-1") if as_text else result
"""Expansion of ``%NAME%`` environment variable references."""

from __future__ import annotations

import os
from collections.abc import Mapping

__all__ = ["expand_environment_variables"]


def _lookup(environ: Mapping[str, str], name: str) -> str | None:
    if not name:
        return None
    if name in environ:
        return environ[name]
    wanted = name.casefold()
    for key, value in environ.items():
        if key.casefold() == wanted:
            return value
    return None


def expand_environment_variables(
    text: str,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Replace each ``%NAME%`` in ``text`` with the variable's value.

    Names are matched without regard to case. References to unknown
    variables and unmatched ``%`` signs are left as they are.
    """
    if text is None:
        raise ValueError("text must not be None")
    if environ is None:
        environ = os.environ

    pieces: list[str] = []
    pos = 0
    while pos < len(text):
        start = text.find("%", pos)
        if start < 0:
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:start])
        end = text.find("%", start + 1)
        if end < 0:
            pieces.append(text[start:])
            break
        value = _lookup(environ, text[start + 1:end])
        if value is None:
            # The closing '%' may open the next reference.
            pieces.append(text[start:end])
            pos = end
        else:
            pieces.append(value)
            pos = end + 1
    return "".join(pieces)
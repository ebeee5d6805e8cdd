"""Base64 encoding and decoding with strict length and alphabet checks."""

from __future__ import annotations

__all__ = [
    "Base64Error",
    "encoded_length",
    "decoded_length",
    "base64_encode",
    "base64_decode",
]

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# '=' decodes as zero; padding is accounted for by the decoded length.
_DECODE_TABLE: dict[str, int] = {ch: value for value, ch in enumerate(_ALPHABET)}
_DECODE_TABLE["="] = 0


class Base64Error(ValueError):
    """Raised when text is not valid base64."""


def _as_text(text: str | bytes | bytearray) -> str:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("latin-1")
    return text


def encoded_length(data_length: int) -> int:
    """Return the number of characters needed to encode ``data_length`` bytes."""
    if data_length < 0:
        raise ValueError("data_length must not be negative")
    return (data_length + 2) // 3 * 4


def decoded_length(text: str | bytes | bytearray) -> int:
    """Return the number of bytes that ``text`` decodes to.

    Only the overall length and the trailing padding are examined.
    """
    text = _as_text(text)
    if not text or len(text) % 4:
        raise Base64Error("encoded text length must be a non-zero multiple of 4")
    length = len(text) // 4 * 3
    if text[-1] == "=":
        length -= 2 if text[-2] == "=" else 1
    return length


def base64_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode ``data`` as padded base64 text."""
    data = bytes(data)
    pieces: list[str] = []
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        b0 = chunk[0]
        b1 = chunk[1] if len(chunk) > 1 else 0
        b2 = chunk[2] if len(chunk) > 2 else 0
        pieces.append(_ALPHABET[b0 >> 2])
        pieces.append(_ALPHABET[((b0 << 4) & 0x30) | ((b1 >> 4) & 0x0F)])
        pieces.append(_ALPHABET[((b1 << 2) & 0x3C) | ((b2 >> 6) & 0x03)])
        pieces.append(_ALPHABET[b2 & 0x3F])

    remainder = len(data) % 3
    if remainder == 1:
        pieces[-2] = "="
        pieces[-1] = "="
    elif remainder == 2:
        pieces[-1] = "="
    return "".join(pieces)


def base64_decode(text: str | bytes | bytearray) -> bytes:
    """Decode base64 ``text`` into bytes."""
    text = _as_text(text)
    length = decoded_length(text)
    out = bytearray()
    for start in range(0, len(text), 4):
        try:
            b0, b1, b2, b3 = (_DECODE_TABLE[ch] for ch in text[start:start + 4])
        except KeyError as exc:
            raise Base64Error(f"invalid base64 character {exc.args[0]!r}") from None
        out.append(((b0 << 2) | (b1 >> 4)) & 0xFF)
        out.append(((b1 << 4) | (b2 >> 2)) & 0xFF)
        out.append(((b2 << 6) | b3) & 0xFF)
    return bytes(out[:length])
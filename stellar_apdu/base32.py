"""Base32 (RFC 4648 alphabet, no padding) encoding and lenient decoding."""

from __future__ import annotations

import base64

MAX_ENCODE_LENGTH = 1 << 28

_SKIPPED = frozenset(" \t\r\n-")
_MISTYPED = {"0": "O", "1": "L", "8": "B"}


def base32_encode(data):
    """Encode ``data`` as unpadded upper-case base32 text."""
    data = bytes(data)
    if len(data) > MAX_ENCODE_LENGTH:
        raise ValueError(f"input of {len(data)} bytes is too long to encode")
    return base64.b32encode(data).decode("ascii").rstrip("=")


def _digit(ch: str) -> int:
    ch = _MISTYPED.get(ch, ch)
    if ch.isascii() and ch.isalpha():
        return ord(ch.upper()) - ord("A")
    if "2" <= ch <= "7":
        return ord(ch) - ord("2") + 26
    raise ValueError(f"invalid base32 character: {ch!r}")


def base32_decode(text):
    """Decode base32 ``text``.

    Whitespace and hyphens are ignored, letters are case-insensitive and the
    commonly mistyped digits 0, 1 and 8 are read as O, L and B. Trailing bits
    that do not make a whole byte are dropped.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    accumulator = 0
    bits_left = 0
    out = bytearray()
    for ch in text:
        if ch in _SKIPPED:
            continue
        accumulator = ((accumulator << 5) | _digit(ch)) & 0xFFFF
        bits_left += 5
        if bits_left >= 8:
            bits_left -= 8
            out.append((accumulator >> bits_left) & 0xFF)
    return bytes(out)
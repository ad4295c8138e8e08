"""Base58 encoding and decoding with the Bitcoin alphabet."""

from __future__ import annotations

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

MAX_DEC_INPUT_SIZE = 164
"""Longest text accepted by :func:`base58_decode`."""

MAX_ENC_INPUT_SIZE = 120
"""Longest byte string accepted by :func:`base58_encode`."""

_INDEX = {ch: value for value, ch in enumerate(ALPHABET)}


def base58_encode(data):
    """Encode ``data`` as base58 text; each leading zero byte becomes a ``1``."""
    data = bytes(data)
    if len(data) > MAX_ENC_INPUT_SIZE:
        raise ValueError(
            f"input of {len(data)} bytes exceeds the {MAX_ENC_INPUT_SIZE}-byte limit"
        )
    stripped = data.lstrip(b"\x00")
    zero_count = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * zero_count + "".join(reversed(digits))


def base58_decode(text):
    """Decode base58 ``text`` into bytes; each leading ``1`` becomes a zero byte."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    if not 2 <= len(text) <= MAX_DEC_INPUT_SIZE:
        raise ValueError(
            f"base58 text must be 2 to {MAX_DEC_INPUT_SIZE} characters long, got {len(text)}"
        )
    number = 0
    for ch in text:
        try:
            digit = _INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character: {ch!r}") from None
        number = number * 58 + digit
    zero_count = len(text) - len(text.lstrip(ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * zero_count + body
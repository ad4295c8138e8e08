"""Helpers for values handed over by an exchange application."""

from __future__ import annotations

U64_SIZE = 8


def swap_str_to_u64(data):
    """Read a big-endian unsigned integer of at most 8 bytes."""
    data = bytes(data)
    if len(data) > U64_SIZE:
        raise ValueError(f"amount of {len(data)} bytes does not fit in 64 bits")
    return int.from_bytes(data, "big")
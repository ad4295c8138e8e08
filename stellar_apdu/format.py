"""Rendering of integers, fixed-point amounts and bytes as text."""

from __future__ import annotations

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1
MAX_DECIMALS = 0xFF


def _check_u64(value: int) -> None:
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"value {value} is not a 64-bit unsigned integer")


def format_i64(value):
    """Format a signed 64-bit integer in decimal."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value {value} is not a 64-bit signed integer")
    return str(value)


def format_u64(value):
    """Format an unsigned 64-bit integer in decimal."""
    _check_u64(value)
    return str(value)


def format_fpu64(value, decimals):
    """Format ``value`` as a fixed-point number with ``decimals`` fractional digits.

    Trailing zeros are kept, so the result always has exactly ``decimals``
    digits after the decimal point.
    """
    _check_u64(value)
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")
    digits = format_u64(value)
    if len(digits) <= decimals:
        return "0." + digits.rjust(decimals, "0")
    shift = len(digits) - decimals
    return f"{digits[:shift]}.{digits[shift:]}"


def format_hex(data):
    """Format ``data`` as lower-case hexadecimal text."""
    return bytes(data).hex()
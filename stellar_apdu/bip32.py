"""Reading and formatting BIP32 derivation paths."""

from __future__ import annotations

from .binary import read_u32_be

MAX_BIP32_PATH = 10
"""Maximum number of components in a BIP32 path."""

HARDENED = 0x80000000


def _check_count(count: int) -> None:
    if not 1 <= count <= MAX_BIP32_PATH:
        raise ValueError(f"BIP32 path must have 1 to {MAX_BIP32_PATH} components, got {count}")


def read_bip32_path(data, count):
    """Read ``count`` big-endian 32-bit path components from ``data``."""
    _check_count(count)
    needed = 4 * count
    if len(data) < needed:
        raise ValueError(f"BIP32 path of {count} components needs {needed} bytes, got {len(data)}")
    return [read_u32_be(data, 4 * index) for index in range(count)]


def _component(value: int) -> str:
    text = str(value & ~HARDENED & 0xFFFFFFFF)
    return text + "'" if value & HARDENED else text


def format_bip32_path(path):
    """Format a path such as ``[0x8000002C, 0x80000094]`` as ``44'/148'``."""
    path = list(path)
    _check_count(len(path))
    return "/".join(_component(value) for value in path)
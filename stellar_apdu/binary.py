"""Fixed-width integer access and Bitcoin-style varints over byte buffers."""

from __future__ import annotations

from typing import Literal

_Order = Literal["big", "little"]

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF


def _read(data: bytes | bytearray | memoryview, offset: int, size: int, order: _Order) -> int:
    if offset < 0 or offset + size > len(data):
        raise ValueError(
            f"cannot read {size} bytes at offset {offset} from buffer of length {len(data)}"
        )
    return int.from_bytes(bytes(data[offset:offset + size]), order)


def _write(buf: bytearray, offset: int, size: int, value: int, order: _Order) -> None:
    if offset < 0 or offset + size > len(buf):
        raise ValueError(
            f"cannot write {size} bytes at offset {offset} into buffer of length {len(buf)}"
        )
    # Values wider than the field are truncated, as a narrowing cast would.
    value &= (1 << (8 * size)) - 1
    buf[offset:offset + size] = value.to_bytes(size, order)


def read_u16_be(data, offset=0):
    """Read a big-endian 16-bit unsigned integer at ``offset``."""
    return _read(data, offset, 2, "big")


def read_u32_be(data, offset=0):
    """Read a big-endian 32-bit unsigned integer at ``offset``."""
    return _read(data, offset, 4, "big")


def read_u64_be(data, offset=0):
    """Read a big-endian 64-bit unsigned integer at ``offset``."""
    return _read(data, offset, 8, "big")


def read_u16_le(data, offset=0):
    """Read a little-endian 16-bit unsigned integer at ``offset``."""
    return _read(data, offset, 2, "little")


def read_u32_le(data, offset=0):
    """Read a little-endian 32-bit unsigned integer at ``offset``."""
    return _read(data, offset, 4, "little")


def read_u64_le(data, offset=0):
    """Read a little-endian 64-bit unsigned integer at ``offset``."""
    return _read(data, offset, 8, "little")


def write_u16_be(buf, offset, value):
    """Write ``value`` as big-endian 16 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 2, value, "big")


def write_u32_be(buf, offset, value):
    """Write ``value`` as big-endian 32 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 4, value, "big")


def write_u64_be(buf, offset, value):
    """Write ``value`` as big-endian 64 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 8, value, "big")


def write_u16_le(buf, offset, value):
    """Write ``value`` as little-endian 16 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 2, value, "little")


def write_u32_le(buf, offset, value):
    """Write ``value`` as little-endian 32 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 4, value, "little")


def write_u64_le(buf, offset, value):
    """Write ``value`` as little-endian 64 bits into ``buf`` at ``offset``."""
    _write(buf, offset, 8, value, "little")


def _check_u64(value: int) -> None:
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"value {value} is not a 64-bit unsigned integer")


def varint_size(value):
    """Number of bytes (1, 3, 5 or 9) needed to encode ``value`` as a varint."""
    _check_u64(value)
    if value <= 0xFC:
        return 1
    if value <= UINT16_MAX:
        return 3
    if value <= UINT32_MAX:
        return 5
    return 9


_PREFIXES = {0xFD: (read_u16_le, 3), 0xFE: (read_u32_le, 5), 0xFF: (read_u64_le, 9)}


def varint_read(data):
    """Decode a varint at the start of ``data``; return ``(value, length)``."""
    if len(data) < 1:
        raise ValueError("empty buffer: no varint to read")
    prefix = data[0]
    if prefix in _PREFIXES:
        reader, length = _PREFIXES[prefix]
        if len(data) < length:
            raise ValueError(f"truncated varint: need {length} bytes, have {len(data)}")
        return reader(data, 1), length
    return prefix, 1


def varint_encode(value):
    """Encode ``value`` as a Bitcoin-style varint."""
    size = varint_size(value)
    if size == 1:
        return bytes([value])
    prefix = {3: 0xFD, 5: 0xFE, 9: 0xFF}[size]
    return bytes([prefix]) + value.to_bytes(size - 1, "little")
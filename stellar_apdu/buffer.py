"""A read cursor over a byte string."""

from __future__ import annotations

import enum

from .binary import (
    read_u16_be,
    read_u16_le,
    read_u32_be,
    read_u32_le,
    read_u64_be,
    read_u64_le,
    varint_read,
)
from .bip32 import read_bip32_path


class Endianness(enum.Enum):
    """Byte order of a multi-byte integer."""

    BE = "big"
    LE = "little"


_READERS = {
    2: {Endianness.BE: read_u16_be, Endianness.LE: read_u16_le},
    4: {Endianness.BE: read_u32_be, Endianness.LE: read_u32_le},
    8: {Endianness.BE: read_u64_be, Endianness.LE: read_u64_le},
}


class Buffer:
    """Immutable bytes with a movable read offset.

    Reads that would run past the end raise :class:`ValueError` and leave
    the offset where it was.
    """

    def __init__(self, data, offset=0):
        self.data = bytes(data)
        if not 0 <= offset <= len(self.data):
            raise ValueError(f"offset {offset} outside buffer of size {len(self.data)}")
        self.offset = offset

    @property
    def size(self):
        """Total number of bytes in the buffer."""
        return len(self.data)

    def __repr__(self):
        return f"Buffer(size={self.size}, offset={self.offset})"

    def remaining(self):
        """Number of bytes left after the offset."""
        return self.size - self.offset

    def can_read(self, n):
        """Whether ``n`` more bytes can be read."""
        return self.remaining() >= n

    def seek_set(self, offset):
        """Move the offset to an absolute position."""
        if not 0 <= offset <= self.size:
            raise ValueError(f"cannot seek to {offset} in buffer of size {self.size}")
        self.offset = offset

    def seek_cur(self, offset):
        """Move the offset forward by ``offset`` bytes."""
        if offset < 0 or self.offset + offset > self.size:
            raise ValueError(
                f"cannot advance {offset} bytes from {self.offset} in buffer of size {self.size}"
            )
        self.offset += offset

    def seek_end(self, offset):
        """Move the offset to ``offset`` bytes before the end."""
        if not 0 <= offset <= self.size:
            raise ValueError(f"cannot seek {offset} bytes before end of buffer of size {self.size}")
        self.offset = self.size - offset

    def _require(self, n: int) -> None:
        if not self.can_read(n):
            raise ValueError(f"need {n} bytes, only {self.remaining()} left")

    def read_u8(self):
        """Read one byte."""
        self._require(1)
        value = self.data[self.offset]
        self.offset += 1
        return value

    def _read_int(self, size: int, endianness) -> int:
        reader = _READERS[size][Endianness(endianness)]
        self._require(size)
        value = reader(self.data, self.offset)
        self.offset += size
        return value

    def read_u16(self, endianness=Endianness.BE):
        """Read a 16-bit unsigned integer."""
        return self._read_int(2, endianness)

    def read_u32(self, endianness=Endianness.BE):
        """Read a 32-bit unsigned integer."""
        return self._read_int(4, endianness)

    def read_u64(self, endianness=Endianness.BE):
        """Read a 64-bit unsigned integer."""
        return self._read_int(8, endianness)

    def read_varint(self):
        """Read a Bitcoin-style varint."""
        value, length = varint_read(self.data[self.offset:])
        self.offset += length
        return value

    def read_bip32_path(self, count):
        """Read a BIP32 path of ``count`` components."""
        path = read_bip32_path(self.data[self.offset:], count)
        self.offset += 4 * count
        return path

    def copy(self, limit=None):
        """Return the unread bytes without moving the offset.

        Raises :class:`ValueError` if more than ``limit`` bytes remain.
        """
        if limit is not None and self.remaining() > limit:
            raise ValueError(f"{self.remaining()} bytes remain, more than limit {limit}")
        return self.data[self.offset:]

    def move(self, limit=None):
        """Return the unread bytes and advance the offset by ``limit``.

        With no limit the offset moves to the end. If ``limit`` reaches past
        the end, the bytes are still returned but the offset stays put.
        """
        chunk = self.copy(limit)
        step = self.remaining() if limit is None else limit
        if self.can_read(step):
            self.offset += step
        return chunk
"""APDU command framing and the instruction set of the signing application."""

from __future__ import annotations

import enum
from dataclasses import dataclass

CLA = 0xE0
"""Instruction class of the application."""

APP_VERSION_SIZE = 3
APP_CONFIGURATION_SIZE = 1
DETAIL_CAPTION_MAX_LENGTH = 20
DETAIL_VALUE_MAX_LENGTH = 89
RAW_TX_MAX_SIZE = 5120
SIGNATURE_SIZE = 64

_OFFSET_CLA = 0
_OFFSET_INS = 1
_OFFSET_P1 = 2
_OFFSET_P2 = 3
_OFFSET_LC = 4
_OFFSET_CDATA = 5


class Instruction(enum.IntEnum):
    """Instruction codes understood by the application."""

    GET_PUBLIC_KEY = 0x02
    SIGN_TX = 0x04
    GET_APP_CONFIGURATION = 0x06
    SIGN_TX_HASH = 0x08


class ApduError(ValueError):
    """Raised when a byte string is not a well-formed APDU command."""


@dataclass(frozen=True)
class Command:
    """A parsed APDU command.

    ``data`` is ``None`` when the command carries no payload.
    """

    cla: int
    ins: int
    p1: int
    p2: int
    lc: int
    data: bytes | None = None

    @property
    def instruction(self):
        """The known :class:`Instruction` for ``ins``, or ``None``."""
        try:
            return Instruction(self.ins)
        except ValueError:
            return None


def parse_apdu(data):
    """Parse a raw APDU command (CLA, INS, P1, P2, Lc, data).

    Raises :class:`ApduError` if the frame is shorter than its header or its
    Lc byte does not match the length of the payload.
    """
    data = bytes(data)
    if len(data) < _OFFSET_CDATA:
        raise ApduError(f"APDU of {len(data)} bytes is shorter than its 5-byte header")
    lc = data[_OFFSET_LC]
    if len(data) - _OFFSET_CDATA != lc:
        raise ApduError(f"Lc is {lc} but {len(data) - _OFFSET_CDATA} data bytes follow")
    return Command(
        cla=data[_OFFSET_CLA],
        ins=data[_OFFSET_INS],
        p1=data[_OFFSET_P1],
        p2=data[_OFFSET_P2],
        lc=lc,
        data=data[_OFFSET_CDATA:] if lc > 0 else None,
    )
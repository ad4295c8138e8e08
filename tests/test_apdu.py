import pytest
from hypothesis import given, strategies as st

from stellar_apdu.apdu import CLA, ApduError, Command, Instruction, parse_apdu


def test_parse_get_public_key_command():
    frame = bytes([CLA, Instruction.GET_PUBLIC_KEY, 0x00, 0x01, 0x03, 0xAA, 0xBB, 0xCC])
    cmd = parse_apdu(frame)
    assert cmd == Command(cla=CLA, ins=0x02, p1=0x00, p2=0x01, lc=3, data=b"\xaa\xbb\xcc")
    assert cmd.instruction is Instruction.GET_PUBLIC_KEY


def test_parse_command_without_data():
    cmd = parse_apdu(bytes([CLA, 0x06, 0x00, 0x00, 0x00]))
    assert cmd.lc == 0
    assert cmd.data is None
    assert cmd.instruction is Instruction.GET_APP_CONFIGURATION


def test_unknown_instruction_is_kept():
    cmd = parse_apdu(bytes([CLA, 0x7F, 0x00, 0x00, 0x00]))
    assert cmd.ins == 0x7F
    assert cmd.instruction is None


@pytest.mark.parametrize("frame", [b"", b"\xe0", b"\xe0\x04\x00\x00"])
def test_too_short(frame):
    with pytest.raises(ApduError):
        parse_apdu(frame)


@pytest.mark.parametrize(
    "frame",
    [
        bytes([CLA, 0x04, 0x00, 0x00, 0x02, 0x01]),
        bytes([CLA, 0x04, 0x00, 0x00, 0x00, 0x01]),
        bytes([CLA, 0x04, 0x00, 0x00, 0x01, 0x01, 0x02]),
    ],
)
def test_lc_mismatch(frame):
    with pytest.raises(ApduError):
        parse_apdu(frame)


def test_apdu_error_is_value_error():
    with pytest.raises(ValueError):
        parse_apdu(b"\x00")


byte = st.integers(min_value=0, max_value=255)


@given(byte, byte, byte, byte, st.binary(max_size=255))
def test_round_trip(cla, ins, p1, p2, payload):
    cmd = parse_apdu(bytes([cla, ins, p1, p2, len(payload)]) + payload)
    assert (cmd.cla, cmd.ins, cmd.p1, cmd.p2, cmd.lc) == (cla, ins, p1, p2, len(payload))
    assert cmd.data == (payload or None)
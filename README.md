# stellar_apdu

Small, dependency-free building blocks for framing APDU commands for a
Stellar signing device and for turning the values it handles into text.

## Modules

- `stellar_apdu.binary`: `read_u16_be`, `read_u32_be`, `read_u64_be`,
  `read_u16_le`, `read_u32_le`, `read_u64_le` read unsigned integers at an
  offset; the matching `write_*` functions write them into a `bytearray`
  (values wider than the field are truncated). Bitcoin-style varints:
  `varint_size(value)` gives 1, 3, 5 or 9, `varint_read(data)` returns
  `(value, length)` and `varint_encode(value)` returns the bytes.
- `stellar_apdu.base32`: `base32_encode(data)` gives unpadded upper-case
  RFC 4648 base32; `base32_decode(text)` ignores whitespace and hyphens,
  accepts lower case, and reads the digits 0, 1 and 8 as O, L and B.
- `stellar_apdu.base58`: `base58_encode(data)` (at most 120 bytes) and
  `base58_decode(text)` (2 to 164 characters), Bitcoin alphabet.
- `stellar_apdu.bip32`: `read_bip32_path(data, count)` unpacks `count`
  big-endian 32-bit components (1 to 10); `format_bip32_path(path)` renders
  them as `44'/148'/0'`.
- `stellar_apdu.buffer`: `Buffer(data, offset=0)`, a read cursor with
  `remaining`, `can_read`, `seek_set`, `seek_cur`, `seek_end`, `read_u8`,
  `read_u16`, `read_u32`, `read_u64` (taking an `Endianness`, big-endian by
  default), `read_varint`, `read_bip32_path`, `copy` and `move`. A read that
  would run past the end raises `ValueError` and leaves the offset alone.
- `stellar_apdu.format`: `format_i64`, `format_u64`,
  `format_fpu64(value, decimals)` (fixed-point, trailing zeros kept) and
  `format_hex` (lower case).
- `stellar_apdu.apdu`: `parse_apdu(data)` returns a `Command` with `cla`,
  `ins`, `p1`, `p2`, `lc` and `data` (`None` when empty) and raises
  `ApduError` when the frame is shorter than its header or Lc does not
  match the payload. `Command.instruction` maps `ins` to an `Instruction`
  (`GET_PUBLIC_KEY`, `SIGN_TX`, `GET_APP_CONFIGURATION`, `SIGN_TX_HASH`) or
  gives `None`. The module also holds `CLA` and the size limits.
- `stellar_apdu.swap`: `swap_str_to_u64(data)` reads a big-endian amount of
  at most 8 bytes.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Example

    from stellar_apdu.apdu import parse_apdu
    from stellar_apdu.bip32 import format_bip32_path
    from stellar_apdu.buffer import Buffer

    cmd = parse_apdu(bytes.fromhex("e00200000d038000002c8000009480000000"))
    buf = Buffer(cmd.data)
    count = buf.read_u8()
    path = buf.read_bip32_path(count)
    print(format_bip32_path(path))   # 44'/148'/0'

Errors are raised as exceptions rather than returned as status codes, so a
short buffer, a bad base58 character or an oversized amount is reported at
the call that hit it.

## What it does not do

This package only frames and decodes bytes and formats values. It does not
talk to a device, derive keys, sign, parse or display Stellar transactions,
or dispatch commands to handlers.
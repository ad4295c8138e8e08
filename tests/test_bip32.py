import pytest

from stellar_apdu.bip32 import MAX_BIP32_PATH, format_bip32_path, read_bip32_path

ADDRESS_PARAMETERS = b"\x03\x80\x00\x00\x2c\x80\x00\x00\x94\x80\x00\x00\x00"


def test_swap_address_parameters_path():
    count = ADDRESS_PARAMETERS[0]
    assert count == 3
    path = read_bip32_path(ADDRESS_PARAMETERS[1:13], count)
    assert path == [0x8000002C, 0x80000094, 0x80000000]


def test_format_stellar_path():
    assert format_bip32_path([0x8000002C, 0x80000094, 0x80000000]) == "44'/148'/0'"


def test_format_unhardened_components():
    assert format_bip32_path([1, 2]) == "1/2"


def test_format_single_component():
    assert format_bip32_path([0x8000002C]) == "44'"


def test_read_ignores_trailing_bytes():
    assert read_bip32_path(ADDRESS_PARAMETERS[1:] + b"\xff\xff", 3) == [
        0x8000002C,
        0x80000094,
        0x80000000,
    ]


@pytest.mark.parametrize("count", [0, MAX_BIP32_PATH + 1])
def test_read_bad_count(count):
    with pytest.raises(ValueError):
        read_bip32_path(bytes(4 * MAX_BIP32_PATH + 4), count)


def test_read_too_short():
    with pytest.raises(ValueError):
        read_bip32_path(ADDRESS_PARAMETERS[1:10], 3)


def test_read_max_length():
    data = b"".join(i.to_bytes(4, "big") for i in range(MAX_BIP32_PATH))
    assert read_bip32_path(data, MAX_BIP32_PATH) == list(range(MAX_BIP32_PATH))


@pytest.mark.parametrize("path", [[], [0] * (MAX_BIP32_PATH + 1)])
def test_format_bad_length(path):
    with pytest.raises(ValueError):
        format_bip32_path(path)


def test_read_then_format():
    path = read_bip32_path(ADDRESS_PARAMETERS[1:], 3)
    assert format_bip32_path(path) == "44'/148'/0'"
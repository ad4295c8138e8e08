"""Binary codecs, APDU framing, BIP32 paths and value formatting for Stellar signing devices."""

__version__ = "5.0.3"

__all__ = ["apdu", "base32", "base58", "binary", "bip32", "buffer", "format", "swap"]
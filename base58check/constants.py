"""
Base58Check - Core Constants
==============================
Immutable protocol constants for Base58 / Base58Check.

Security Level: CRITICAL
Last Updated: 2026-10-18
Version: 1.0.0

These values define the wire format. Changing any of them produces
encodings that no other Base58Check implementation will accept.
"""

from typing import Final

# ============================================================================
# ALPHABET
# ============================================================================

# Bitcoin alphabet: digit 0, uppercase I and O, lowercase l are excluded
BITCOIN_ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

# Radix of the numeral system
BASE: Final[int] = 58

# ============================================================================
# CHECKSUM
# ============================================================================

# Hash applied twice over the versioned payload
HASH_ALGORITHM: Final[str] = "sha256"

# Bytes of the double hash appended to the versioned payload
CHECKSUM_LENGTH: Final[int] = 4

# ============================================================================
# VERSION PREFIX
# ============================================================================

# One-byte version prefix (Bitcoin addresses, WIF keys)
DEFAULT_PREFIX_LENGTH: Final[int] = 1

# Prefix length used by the four-byte framing (BIP32 extended keys)
EXTENDED_PREFIX_LENGTH: Final[int] = 4

# Well-known one-byte versions, for callers and tests
PUBKEY_ADDRESS_MAINNET: Final[bytes] = b'\x00'
SCRIPT_ADDRESS_MAINNET: Final[bytes] = b'\x05'
PUBKEY_ADDRESS_TESTNET: Final[bytes] = b'\x6f'
SCRIPT_ADDRESS_TESTNET: Final[bytes] = b'\xc4'
SECRET_KEY_MAINNET: Final[bytes] = b'\x80'


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "BITCOIN_ALPHABET",
    "BASE",
    "HASH_ALGORITHM",
    "CHECKSUM_LENGTH",
    "DEFAULT_PREFIX_LENGTH",
    "EXTENDED_PREFIX_LENGTH",
    "PUBKEY_ADDRESS_MAINNET",
    "SCRIPT_ADDRESS_MAINNET",
    "PUBKEY_ADDRESS_TESTNET",
    "SCRIPT_ADDRESS_TESTNET",
    "SECRET_KEY_MAINNET",
]

"""
Base58Check - Binary-to-Text Encoding with Checksum
=====================================================
Base58 and Base58Check encoding for addresses, keys and other payloads.

Version: 1.0.0
License: MIT
"""

from base58check.version import __version__

__author__ = "Base58Check Developers"
__license__ = "MIT"

# Codec
from base58check.codec import (
    Base58Check,
    DecodedCheck,
    get_codec,
    encode,
    decode,
    encode_int,
    decode_int,
    encode_check,
    encode_check_hex,
    decode_check,
)

# Core
from base58check.core import AlphabetTable, ChecksumEngine
from base58check.constants import BITCOIN_ALPHABET, CHECKSUM_LENGTH

# Config
from base58check.config import Base58Settings, get_settings

# Errors
from base58check.errors import (
    Base58CheckException,
    EncodingError,
    InvalidAlphabetError,
    InvalidCharacterError,
    MalformedInputError,
    ChecksumMismatchError,
)

__all__ = [
    # Version
    "__version__",

    # Codec
    "Base58Check",
    "DecodedCheck",
    "get_codec",
    "encode",
    "decode",
    "encode_int",
    "decode_int",
    "encode_check",
    "encode_check_hex",
    "decode_check",

    # Core
    "AlphabetTable",
    "ChecksumEngine",
    "BITCOIN_ALPHABET",
    "CHECKSUM_LENGTH",

    # Config
    "Base58Settings",
    "get_settings",

    # Errors
    "Base58CheckException",
    "EncodingError",
    "InvalidAlphabetError",
    "InvalidCharacterError",
    "MalformedInputError",
    "ChecksumMismatchError",
]

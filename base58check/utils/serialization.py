"""
Base58Check - Serialization Utilities
=======================================
Bytes and hex helpers shared by the codec and the CLI.
"""

import re
from typing import Union

from base58check.logging_setup import get_logger

logger = get_logger("utils.serialization")

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_RE = re.compile(r'^(?:0[xX])?(?:[0-9a-fA-F]{2})*$')


# ============================================================================
# BYTES NORMALIZATION
# ============================================================================

def ensure_bytes(data: BytesLike, name: str = "data") -> bytes:
    """
    Normalize a bytes-like object to immutable bytes.

    Raises:
        TypeError: If data is not bytes-like (str included)
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"{name} must be bytes-like, not {type(data).__name__}"
    )


# ============================================================================
# BYTES/HEX CONVERSION
# ============================================================================

def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to hex string.

    Examples:
        >>> bytes_to_hex(b"\\x00\\x01\\x02")
        '000102'
    """
    return data.hex()


def is_hex(text: str) -> bool:
    """
    True if text is an even-length hex string (optional 0x, any case).

    Examples:
        >>> is_hex('0x00ff')
        True
        >>> is_hex('abc')
        False
    """
    return isinstance(text, str) and bool(_HEX_RE.match(text))


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Accepts upper or lower case and an optional ``0x`` prefix.

    Raises:
        ValueError: If invalid hex string

    Examples:
        >>> hex_to_bytes('0x000102')
        b'\\x00\\x01\\x02'
    """
    if not is_hex(hex_str):
        logger.debug("Rejected hex input", extra_data={"type": type(hex_str).__name__})
        raise ValueError(f"Invalid hex string: {hex_str!r}")

    if hex_str[:2] in ('0x', '0X'):
        hex_str = hex_str[2:]
    return bytes.fromhex(hex_str)


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "BytesLike",
    "ensure_bytes",
    "bytes_to_hex",
    "is_hex",
    "hex_to_bytes",
]

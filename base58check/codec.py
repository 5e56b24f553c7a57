"""
Base58Check - Encoder / Decoder
=================================
Public facade: Base58 and Base58Check encoding (Bitcoin-style).

Security Level: HIGH
Last Updated: 2026-10-18
Version: 1.0.0

Format:
    Base58:       leading '1' per leading zero byte + base-58 digits of the rest
    Base58Check:  Base58(prefix || payload || checksum)
                  checksum = SHA256(SHA256(prefix || payload))[:4]

Example:
    >>> encode_check(b'\\x00', bytes.fromhex('62e907b15cbf27d5425399ebf6f0fb50ebb88f18'))
    '1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa'
"""

import threading
from typing import NamedTuple, Optional, Union

from base58check.constants import BITCOIN_ALPHABET, DEFAULT_PREFIX_LENGTH
from base58check.config import Base58Settings, get_settings
from base58check.core.alphabet import AlphabetTable, DEFAULT_ALPHABET_TABLE
from base58check.core.bigint import BigIntCodec, bytes_to_int, int_to_bytes
from base58check.core.checksum import ChecksumEngine
from base58check.core.leading_zeros import LeadingZeroPolicy
from base58check.errors import (
    ChecksumMismatchError,
    MalformedInputError,
)
from base58check.logging_setup import get_logger
from base58check.utils.serialization import BytesLike, ensure_bytes, hex_to_bytes
from base58check.utils.validators import validate_prefix_length

logger = get_logger("codec")

Prefix = Union[bytes, bytearray, memoryview, int]


class DecodedCheck(NamedTuple):
    """Result of decode_check; unpacks as (prefix, payload)"""
    prefix: bytes
    payload: bytes


# ============================================================================
# CODEC
# ============================================================================

class Base58Check:
    """
    Base58 / Base58Check codec.

    Instances hold only immutable state and are safe to share between
    threads.

    Args:
        alphabet: Alphabet string or AlphabetTable (Bitcoin alphabet by default)
        checksum_engine: Checksum implementation (double SHA-256, 4 bytes)
        prefix_length: Version prefix bytes split off by decode_check

    Example:
        >>> codec = Base58Check(prefix_length=4)
        >>> prefix, payload = codec.decode_check(text)
    """

    def __init__(
        self,
        alphabet: Union[str, AlphabetTable] = BITCOIN_ALPHABET,
        checksum_engine: Optional[ChecksumEngine] = None,
        prefix_length: int = DEFAULT_PREFIX_LENGTH,
    ):
        if isinstance(alphabet, AlphabetTable):
            table = alphabet
        elif alphabet == BITCOIN_ALPHABET:
            table = DEFAULT_ALPHABET_TABLE
        else:
            table = AlphabetTable(alphabet)

        self.table = table
        self.bigint = BigIntCodec(table)
        self.zeros = LeadingZeroPolicy(table.zero_char)
        self.checksum_engine = checksum_engine or ChecksumEngine()
        self.prefix_length = validate_prefix_length(prefix_length)

    @classmethod
    def from_settings(cls, settings: Optional[Base58Settings] = None) -> "Base58Check":
        """Build a codec from Base58Settings (cached settings by default)"""
        settings = settings or get_settings()
        return cls(
            alphabet=settings.alphabet,
            checksum_engine=ChecksumEngine(settings.hash_name, settings.checksum_length),
            prefix_length=settings.prefix_length,
        )

    # ========================================================================
    # BASE58
    # ========================================================================

    def encode(self, data: BytesLike) -> str:
        """
        Encode bytes to a Base58 string.

        Never fails for bytes input. Empty input encodes to empty text, so
        that it decodes back to empty bytes.

        Examples:
            >>> Base58Check().encode(b'hello')
            'Cn8eVZg'
            >>> Base58Check().encode(b'\\x00\\x00\\x05\\x09')
            '11PE'
        """
        data = ensure_bytes(data)
        count, remainder = self.zeros.strip(data)

        # An all-zero or empty input is fully represented by its leading symbols
        body = self.bigint.int_to_text(bytes_to_int(remainder)) if remainder else ''

        return self.zeros.pad(count, body)

    def decode(self, text: str) -> bytes:
        """
        Decode a Base58 string to bytes.

        Leading zero bytes are restored from the leading '1' symbols of
        text, independently of the numeric value.

        Raises:
            InvalidCharacterError: If text contains a symbol outside the alphabet
            TypeError: If text is not a str
        """
        if not isinstance(text, str):
            raise TypeError(f"Base58 text must be str, not {type(text).__name__}")

        if not text:
            return b''

        value = self.bigint.text_to_int(text)
        return self.zeros.restore(text, int_to_bytes(value))

    def encode_int(self, value: int) -> str:
        """
        Base-58 text of a non-negative integer (no byte framing).

        Examples:
            >>> Base58Check().encode_int(57)
            'z'
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, not {type(value).__name__}")
        return self.bigint.int_to_text(value)

    def decode_int(self, text: str) -> int:
        """Integer value of base-58 text (leading '1's contribute nothing)"""
        if not isinstance(text, str):
            raise TypeError(f"Base58 text must be str, not {type(text).__name__}")
        return self.bigint.text_to_int(text)

    # ========================================================================
    # BASE58CHECK
    # ========================================================================

    def encode_check(self, prefix: Prefix, payload: BytesLike) -> str:
        """
        Encode with Base58Check (appends checksum).

        Args:
            prefix: Version bytes, or a non-negative int (minimal big-endian)
            payload: Payload bytes

        Returns:
            str: Base58Check string
        """
        versioned = _coerce_prefix(prefix) + ensure_bytes(payload, "payload")
        checksum = self.checksum_engine.checksum(versioned)

        logger.debug(
            "Encoding Base58Check",
            extra_data={"versioned_length": len(versioned)}
        )

        return self.encode(versioned + checksum)

    def encode_check_hex(self, prefix: Prefix, hex_payload: str) -> str:
        """
        Encode with Base58Check, payload given as hex text.

        Raises:
            MalformedInputError: If hex_payload is not valid hex
        """
        try:
            payload = hex_to_bytes(hex_payload)
        except ValueError as e:
            raise MalformedInputError(
                "Payload is not valid hex",
                details={"reason": str(e)}
            ) from e

        return self.encode_check(prefix, payload)

    def decode_check(self, text: str, prefix_length: Optional[int] = None) -> DecodedCheck:
        """
        Decode Base58Check string and verify checksum.

        Args:
            text: Base58Check string
            prefix_length: Version bytes to split off (default: codec setting)

        Returns:
            DecodedCheck: (prefix, payload)

        Raises:
            InvalidCharacterError: If text contains a symbol outside the alphabet
            MalformedInputError: If too short for checksum + prefix
            ChecksumMismatchError: If checksum invalid
        """
        if prefix_length is None:
            prefix_length = self.prefix_length
        else:
            prefix_length = validate_prefix_length(prefix_length)

        checksum_length = self.checksum_engine.length
        blob = self.decode(text)

        minimum = checksum_length + prefix_length
        if len(blob) < minimum:
            logger.debug(
                "Base58Check input too short",
                extra_data={"length": len(blob), "minimum": minimum}
            )
            raise MalformedInputError(
                f"Decoded data too short for Base58Check: {len(blob)} < {minimum} bytes",
                details={"length": len(blob), "minimum": minimum}
            )

        versioned, checksum = blob[:-checksum_length], blob[-checksum_length:]

        if not self.checksum_engine.verify(versioned, checksum):
            expected = self.checksum_engine.checksum(versioned)
            logger.warning(
                "Base58Check checksum mismatch",
                extra_data={"expected": expected.hex(), "got": checksum.hex()}
            )
            raise ChecksumMismatchError(expected=expected, got=checksum)

        return DecodedCheck(versioned[:prefix_length], versioned[prefix_length:])

    def __repr__(self) -> str:
        return (
            f"Base58Check(alphabet={self.table.alphabet!r}, "
            f"checksum_engine={self.checksum_engine!r}, "
            f"prefix_length={self.prefix_length})"
        )


def _coerce_prefix(prefix: Prefix) -> bytes:
    if isinstance(prefix, bool):
        raise TypeError("prefix must be bytes-like or int, not bool")
    if isinstance(prefix, int):
        if prefix < 0:
            raise ValueError(f"Integer prefix must be non-negative: {prefix}")
        # 0 is a one-byte version, not an empty prefix
        return int_to_bytes(prefix) or b'\x00'
    return ensure_bytes(prefix, "prefix")


# ============================================================================
# DEFAULT INSTANCE
# ============================================================================

_default_lock = threading.Lock()
_default_state = (None, None)


def get_codec() -> Base58Check:
    """
    Shared codec built from the current settings.

    Rebuilt when reload_settings() hands out a new settings object.
    """
    global _default_state

    settings = get_settings()
    cached_settings, codec = _default_state
    if cached_settings is settings:
        return codec

    with _default_lock:
        cached_settings, codec = _default_state
        if cached_settings is not settings:
            codec = Base58Check.from_settings(settings)
            _default_state = (settings, codec)
        return codec


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def encode(data: BytesLike) -> str:
    """Encode bytes to a Base58 string"""
    return get_codec().encode(data)


def decode(text: str) -> bytes:
    """Decode a Base58 string to bytes"""
    return get_codec().decode(text)


def encode_int(value: int) -> str:
    return get_codec().encode_int(value)


def decode_int(text: str) -> int:
    return get_codec().decode_int(text)


def encode_check(prefix: Prefix, payload: BytesLike) -> str:
    """Encode prefix || payload with a Base58Check checksum"""
    return get_codec().encode_check(prefix, payload)


def encode_check_hex(prefix: Prefix, hex_payload: str) -> str:
    return get_codec().encode_check_hex(prefix, hex_payload)


def decode_check(text: str, prefix_length: Optional[int] = None) -> DecodedCheck:
    """Decode and verify a Base58Check string into (prefix, payload)"""
    return get_codec().decode_check(text, prefix_length)


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
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
]

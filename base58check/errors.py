"""
Base58Check - Custom Exceptions
=================================
Exception hierarchy for granular error handling.

Security Level: HIGH
Last Updated: 2026-10-18
Version: 1.0.0

Hierarchy:
    Base58CheckException
    ├── ConfigError
    │   └── InvalidAlphabetError
    └── EncodingError
        ├── InvalidCharacterError
        ├── MalformedInputError
        └── ChecksumMismatchError
"""

from typing import Optional


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class Base58CheckException(Exception):
    """
    Base exception for every error raised by the package.

    Attributes:
        message (str): Error message
        code (str): Error code (e.g. "CHECKSUM_MISMATCH")
        details (dict): Additional details
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Serialize exception for logging / CLI output"""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.details:
            return f"[{self.code}] {self.message} | Details: {self.details}"
        return f"[{self.code}] {self.message}"


# ============================================================================
# CONFIGURATION ERRORS
# ============================================================================

class ConfigError(Base58CheckException):
    """Invalid package configuration"""
    pass


class InvalidAlphabetError(ConfigError):
    """Alphabet is not made of exactly 58 distinct characters"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="INVALID_ALPHABET", details=details)


# ============================================================================
# ENCODING ERRORS
# ============================================================================

class EncodingError(Base58CheckException):
    """Encoding/decoding error (base)"""
    pass


class InvalidCharacterError(EncodingError):
    """
    Input text contains a character outside the alphabet.

    Attributes:
        character (str): Offending character
        position (int | None): Index in the input text, when known
    """

    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        self.position = position

        details = {"character": character}
        if position is not None:
            details["position"] = position
            message = f"Invalid Base58 character {character!r} at position {position}"
        else:
            message = f"Invalid Base58 character {character!r}"

        super().__init__(message, code="INVALID_CHARACTER", details=details)


class MalformedInputError(EncodingError):
    """Decoded data cannot hold a checksum plus the agreed prefix"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, code="MALFORMED_INPUT", details=details)


class ChecksumMismatchError(EncodingError):
    """
    Embedded checksum differs from the recomputed one.

    The text was corrupted or mistyped; it must not be used.
    """

    def __init__(self, expected: bytes, got: bytes):
        self.expected = expected
        self.got = got
        super().__init__(
            "Base58Check checksum verification failed",
            code="CHECKSUM_MISMATCH",
            details={
                "expected": expected.hex(),
                "got": got.hex(),
            }
        )


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "Base58CheckException",
    "ConfigError",
    "InvalidAlphabetError",
    "EncodingError",
    "InvalidCharacterError",
    "MalformedInputError",
    "ChecksumMismatchError",
]

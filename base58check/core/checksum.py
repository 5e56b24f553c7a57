"""
Base58Check - Checksum Engine
===============================
Double-hash checksum over the versioned payload.

Security Level: HIGH
Last Updated: 2026-10-18
Version: 1.0.0

Checksum = first 4 bytes of SHA256(SHA256(prefix || payload)).

The checksum detects accidental transcription errors (a random
corruption passes with probability ~2^-32). It is keyless and offers no
protection against deliberate forgery.
"""

import hashlib
import hmac

from base58check.constants import CHECKSUM_LENGTH, HASH_ALGORITHM


# ============================================================================
# HASH FUNCTIONS
# ============================================================================

def compute_sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash.

    Examples:
        >>> compute_sha256(b"").hex()
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    """
    return hashlib.sha256(data).digest()


def compute_double_sha256(data: bytes) -> bytes:
    """Compute SHA256(SHA256(data))"""
    return compute_sha256(compute_sha256(data))


def compute_checksum(versioned: bytes) -> bytes:
    """
    Base58Check checksum of a versioned payload.

    Args:
        versioned: prefix || payload

    Returns:
        bytes: 4-byte checksum
    """
    return compute_double_sha256(versioned)[:CHECKSUM_LENGTH]


# ============================================================================
# ENGINE
# ============================================================================

class ChecksumEngine:
    """
    Configurable checksum: hash applied twice, truncated to ``length`` bytes.

    The default instance reproduces the Bitcoin checksum; other hashes are
    available through hashlib for networks that need them.
    """

    def __init__(self, hash_name: str = HASH_ALGORITHM, length: int = CHECKSUM_LENGTH):
        # Fails early with ValueError for algorithms hashlib does not know
        digest_size = hashlib.new(hash_name).digest_size

        if not 1 <= length <= digest_size:
            raise ValueError(
                f"Checksum length {length} out of range for {hash_name} "
                f"(1..{digest_size})"
            )

        self.hash_name = hash_name
        self.length = length

    def double_hash(self, data: bytes) -> bytes:
        first = hashlib.new(self.hash_name, data).digest()
        return hashlib.new(self.hash_name, first).digest()

    def checksum(self, versioned: bytes) -> bytes:
        """First ``length`` bytes of the double hash"""
        return self.double_hash(versioned)[:self.length]

    def verify(self, versioned: bytes, checksum: bytes) -> bool:
        """True if checksum matches the one recomputed over versioned"""
        return hmac.compare_digest(self.checksum(versioned), checksum)

    def __repr__(self) -> str:
        return f"ChecksumEngine(hash_name={self.hash_name!r}, length={self.length})"


__all__ = [
    "ChecksumEngine",
    "compute_sha256",
    "compute_double_sha256",
    "compute_checksum",
]

"""
Base58Check - Core Package
============================
Alphabet table, big-integer conversion, leading-zero framing and checksum.
"""

from base58check.core.alphabet import (
    AlphabetTable,
    BITCOIN_ALPHABET,
    DEFAULT_ALPHABET_TABLE,
)
from base58check.core.bigint import BigIntCodec, bytes_to_int, int_to_bytes
from base58check.core.leading_zeros import (
    LeadingZeroPolicy,
    count_leading_zero_bytes,
    count_leading_symbols,
)
from base58check.core.checksum import (
    ChecksumEngine,
    compute_sha256,
    compute_double_sha256,
    compute_checksum,
)

__all__ = [
    # Alphabet
    "AlphabetTable",
    "BITCOIN_ALPHABET",
    "DEFAULT_ALPHABET_TABLE",

    # Big integers
    "BigIntCodec",
    "bytes_to_int",
    "int_to_bytes",

    # Leading zeros
    "LeadingZeroPolicy",
    "count_leading_zero_bytes",
    "count_leading_symbols",

    # Checksum
    "ChecksumEngine",
    "compute_sha256",
    "compute_double_sha256",
    "compute_checksum",
]

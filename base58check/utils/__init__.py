"""
Base58Check - Utilities Package
=================================
Common utility functions and helpers.
"""

from base58check.utils.serialization import (
    ensure_bytes,
    bytes_to_hex,
    hex_to_bytes,
    is_hex,
)
from base58check.utils.validators import (
    validate_prefix_length,
    validate_base58,
    validate_base58check,
)

__all__ = [
    # Serialization
    "ensure_bytes",
    "bytes_to_hex",
    "hex_to_bytes",
    "is_hex",

    # Validators
    "validate_prefix_length",
    "validate_base58",
    "validate_base58check",
]

"""
Base58Check - Input Validators
================================
Boolean checks for Base58 / Base58Check text and argument validation.
"""

from typing import Optional

from base58check.core.alphabet import AlphabetTable, DEFAULT_ALPHABET_TABLE
from base58check.errors import EncodingError
from base58check.logging_setup import get_logger

logger = get_logger("utils.validators")


# ============================================================================
# ARGUMENT VALIDATION
# ============================================================================

def validate_prefix_length(prefix_length: int) -> int:
    """
    Validate a version prefix length.

    Raises:
        TypeError: If not an int
        ValueError: If negative
    """
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise TypeError(
            f"prefix_length must be int, not {type(prefix_length).__name__}"
        )
    if prefix_length < 0:
        raise ValueError(f"prefix_length must be non-negative: {prefix_length}")
    return prefix_length


# ============================================================================
# TEXT VALIDATION
# ============================================================================

def validate_base58(text: str, table: AlphabetTable = DEFAULT_ALPHABET_TABLE) -> bool:
    """
    Check that text is non-empty and made only of alphabet symbols.

    Examples:
        >>> validate_base58("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
        True
        >>> validate_base58("0OIl")
        False
    """
    if not isinstance(text, str) or not text:
        return False
    return all(char in table for char in text)


def validate_base58check(text: str, prefix_length: Optional[int] = None) -> bool:
    """
    Check that text decodes with a valid checksum.

    Never raises for malformed text; returns False instead.

    Examples:
        >>> validate_base58check("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
        True
        >>> validate_base58check("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNb")
        False
    """
    from base58check.codec import decode_check

    if not validate_base58(text):
        return False

    try:
        decode_check(text, prefix_length)
    except EncodingError as e:
        logger.debug("Base58Check validation failed", extra_data={"error": e.code})
        return False

    return True


# ============================================================================
# EXPORT
# ============================================================================

__all__ = [
    "validate_prefix_length",
    "validate_base58",
    "validate_base58check",
]

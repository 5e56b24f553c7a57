"""
Base58Check - Big Integer Codec
=================================
Conversions between unsigned integers, big-endian bytes and base-58
digit sequences.

Python ints are arbitrary precision, so no width limit applies. Leading
zero bytes are NOT handled here: see leading_zeros.LeadingZeroPolicy.
"""

from typing import Iterable, List

from base58check.constants import BASE
from base58check.core.alphabet import AlphabetTable, DEFAULT_ALPHABET_TABLE


# ============================================================================
# BYTES <-> INTEGER
# ============================================================================

def bytes_to_int(data: bytes) -> int:
    """
    Interpret bytes as a big-endian unsigned integer.

    Examples:
        >>> bytes_to_int(b'')
        0
        >>> bytes_to_int(b'\\x01\\x00')
        256
    """
    return int.from_bytes(data, byteorder='big')


def int_to_bytes(n: int) -> bytes:
    """
    Minimal big-endian unsigned encoding of n (0 encodes to b'').

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Cannot encode negative integer: {n}")
    return n.to_bytes((n.bit_length() + 7) // 8, byteorder='big')


# ============================================================================
# INTEGER <-> BASE58 DIGITS
# ============================================================================

class BigIntCodec:
    """
    Integer <-> base-58 conversion bound to an alphabet.

    Examples:
        >>> codec = BigIntCodec()
        >>> codec.int_to_digits(58)
        [1, 0]
        >>> codec.int_to_text(0)
        '1'
    """

    def __init__(self, table: AlphabetTable = DEFAULT_ALPHABET_TABLE):
        self.table = table

    @staticmethod
    def int_to_digits(n: int) -> List[int]:
        """
        Base-58 digits of n, most significant first.

        n == 0 yields [0] so that every encoded value is non-empty.
        """
        if n < 0:
            raise ValueError(f"Cannot encode negative integer: {n}")
        if n == 0:
            return [0]

        digits = []
        while n > 0:
            n, remainder = divmod(n, BASE)
            digits.append(remainder)
        digits.reverse()
        return digits

    @staticmethod
    def digits_to_int(digits: Iterable[int]) -> int:
        """Fold digits (most significant first) into an integer"""
        acc = 0
        for digit in digits:
            if not 0 <= digit < BASE:
                raise ValueError(f"Digit value out of range: {digit}")
            acc = acc * BASE + digit
        return acc

    def int_to_text(self, n: int) -> str:
        return ''.join(self.table.char_of(d) for d in self.int_to_digits(n))

    def text_to_int(self, text: str) -> int:
        """
        Integer value of base-58 text.

        Raises:
            InvalidCharacterError: On the first character outside the alphabet
        """
        value_of = self.table.value_of
        acc = 0
        for position, char in enumerate(text):
            acc = acc * BASE + value_of(char, position)
        return acc


__all__ = [
    "BigIntCodec",
    "bytes_to_int",
    "int_to_bytes",
]

"""
Base58Check - Leading Zero Policy
===================================
Leading zero bytes carry no numeric value, so they are tracked
separately: each one becomes one leading zero symbol ('1') on encode,
and each leading '1' of the input text becomes one zero byte on decode.

The decode side counts symbols in the text itself. Converting
text -> integer -> bytes alone silently drops them.
"""

from typing import Tuple

from base58check.constants import BITCOIN_ALPHABET


def count_leading_zero_bytes(data: bytes) -> int:
    """
    Number of consecutive 0x00 bytes at the start of data.

    Examples:
        >>> count_leading_zero_bytes(b'\\x00\\x00\\x05')
        2
        >>> count_leading_zero_bytes(b'\\x00\\x00')
        2
    """
    return len(data) - len(data.lstrip(b'\x00'))


def count_leading_symbols(text: str, zero_char: str = BITCOIN_ALPHABET[0]) -> int:
    """Number of consecutive zero symbols at the start of text"""
    return len(text) - len(text.lstrip(zero_char))


class LeadingZeroPolicy:
    """
    Encode/decode framing of leading zero bytes.

    Encode:
        count, remainder = policy.strip(data)
        text = policy.pad(count, digits_of(remainder))   # digits '' if remainder is 0

    Decode:
        data = policy.restore(text, bytes_of(value))
    """

    def __init__(self, zero_char: str = BITCOIN_ALPHABET[0]):
        self.zero_char = zero_char

    @staticmethod
    def strip(data: bytes) -> Tuple[int, bytes]:
        """Split data into (leading zero count, remaining bytes)"""
        count = count_leading_zero_bytes(data)
        return count, data[count:]

    def pad(self, count: int, body: str) -> str:
        """
        Prepend one zero symbol per leading zero byte.

        body must be empty when the remainder has value zero, otherwise the
        zero value would be counted twice.
        """
        return self.zero_char * count + body

    def count(self, text: str) -> int:
        return count_leading_symbols(text, self.zero_char)

    def restore(self, text: str, body: bytes) -> bytes:
        """Prepend one zero byte per leading zero symbol of text"""
        return b'\x00' * self.count(text) + body


__all__ = [
    "LeadingZeroPolicy",
    "count_leading_zero_bytes",
    "count_leading_symbols",
]

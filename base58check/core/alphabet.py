"""
Base58Check - Alphabet Table
==============================
Bidirectional mapping between the 58 symbols and the digit values 0-57.
"""

from typing import Iterator, Optional

from base58check.constants import BITCOIN_ALPHABET, BASE
from base58check.errors import InvalidAlphabetError, InvalidCharacterError


class AlphabetTable:
    """
    Read-only lookup table built once from an alphabet string.

    Index in the alphabet = digit value. Construction fails fast if the
    alphabet is not made of exactly 58 distinct characters.

    Examples:
        >>> table = AlphabetTable()
        >>> table.value_of('z')
        57
        >>> table.char_of(0)
        '1'
    """

    __slots__ = ("_alphabet", "_values")

    def __init__(self, alphabet: str = BITCOIN_ALPHABET):
        if not isinstance(alphabet, str):
            raise InvalidAlphabetError(
                "Alphabet must be a string",
                details={"type": type(alphabet).__name__}
            )

        distinct = len(set(alphabet))
        if len(alphabet) != BASE or distinct != BASE:
            raise InvalidAlphabetError(
                f"Alphabet must contain exactly {BASE} distinct characters",
                details={"length": len(alphabet), "distinct": distinct}
            )

        self._alphabet = alphabet
        self._values = {char: value for value, char in enumerate(alphabet)}

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def zero_char(self) -> str:
        """Symbol of value 0, which also stands for one leading zero byte"""
        return self._alphabet[0]

    def value_of(self, char: str, position: Optional[int] = None) -> int:
        """
        Digit value of a symbol.

        Raises:
            InvalidCharacterError: If char is not in the alphabet
        """
        try:
            return self._values[char]
        except KeyError:
            raise InvalidCharacterError(char, position) from None

    def char_of(self, value: int) -> str:
        """Symbol of a digit value (0-57)"""
        if not 0 <= value < BASE:
            raise ValueError(f"Digit value out of range: {value}")
        return self._alphabet[value]

    def __contains__(self, char) -> bool:
        return char in self._values

    def __len__(self) -> int:
        return BASE

    def __iter__(self) -> Iterator[str]:
        return iter(self._alphabet)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AlphabetTable):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self) -> int:
        return hash(self._alphabet)

    def __repr__(self) -> str:
        return f"AlphabetTable({self._alphabet!r})"


# Shared table for the Bitcoin alphabet
DEFAULT_ALPHABET_TABLE = AlphabetTable(BITCOIN_ALPHABET)


__all__ = [
    "AlphabetTable",
    "BITCOIN_ALPHABET",
    "DEFAULT_ALPHABET_TABLE",
]

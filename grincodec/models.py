"""
models.py

The shared objects used in the grincodec.

Symbols are plain ints: 0..255 are literal bytes and EOF_SYMBOL (256) marks the
end of the coded payload.
"""


from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import InternalInvariantError
from .settings import EOF_SYMBOL
from .validators import validate_symbol, validate_type


def symbol_to_str(symbol: int) -> str:
    if symbol == EOF_SYMBOL:
        return "EOF"
    return f"0x{symbol:02X}"


class FrequencyTable:
    """
    Represents the number of occurrences of each symbol in the data.
    """
    def __init__(self, frequencies: Optional[Dict[int, int]] = None) -> None:
        self._frequencies: Dict[int, int] = {}
        if frequencies is not None:
            for symbol, count in frequencies.items():
                self.add(symbol, count)

    def add(self, symbol: int, count: int = 1) -> bool:
        """
        Add occurrences of a symbol to the table.

        Args:
            symbol (int): The symbol to count.
            count (int): Number of occurrences to add.

        Returns:
            bool: True if the symbol was already present; False if added.
        """
        validate_symbol(symbol)
        validate_type(count, "Count", int)
        if count < 0:
            raise ValueError("Count must be non-negative")
        present = symbol in self._frequencies
        self._frequencies[symbol] = self._frequencies.get(symbol, 0) + count
        return present

    def add_multiple(self, symbols: Iterable[int]) -> int:
        """
        Add one occurrence of each symbol.

        Args:
            symbols (Iterable[int]): Iterable of symbols to add.

        Returns:
            int: Count of symbols that were already present.
        """
        count = 0
        for symbol in symbols:
            if self.add(symbol):
                count += 1
        return count

    def set_frequency(self, symbol: int, count: int) -> None:
        """Overwrite the count of a symbol."""
        validate_symbol(symbol)
        validate_type(count, "Count", int)
        if count < 0:
            raise ValueError("Count must be non-negative")
        self._frequencies[symbol] = count

    def get_frequency(self, symbol: int) -> int:
        return self._frequencies.get(symbol, 0)

    def contains(self, symbol: int) -> bool:
        return symbol in self._frequencies

    def get_size(self) -> int:
        """
        Get the number of distinct symbols in the table.

        Returns:
            int: Number of symbols.
        """
        return len(self._frequencies)

    def total(self) -> int:
        return sum(self._frequencies.values())

    def get_sorted_symbols(self) -> List[int]:
        return sorted(self._frequencies)

    def items(self) -> List[Tuple[int, int]]:
        """
        Get (symbol, count) pairs in ascending symbol order.
        """
        return [(symbol, self._frequencies[symbol]) for symbol in self.get_sorted_symbols()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return self._frequencies == other._frequencies

    def __str__(self) -> str:
        return "{" + ", ".join(f"{symbol_to_str(s)}: {c}" for s, c in self.items()) + "}"

    def __repr__(self) -> str:
        return f"FrequencyTable({self})"


class CodeTable:
    """
    Represents the Huffman code of each symbol as a tuple of bits.
    """
    def __init__(self) -> None:
        self._codes: Dict[int, Tuple[int, ...]] = {}

    def add(self, symbol: int, code: Tuple[int, ...]) -> None:
        validate_symbol(symbol)
        if symbol in self._codes:
            raise InternalInvariantError(f"Symbol {symbol_to_str(symbol)} already has a code")
        if len(code) == 0:
            raise InternalInvariantError(f"Symbol {symbol_to_str(symbol)} cannot have an empty code")
        self._codes[symbol] = tuple(code)

    def get_code(self, symbol: int) -> Tuple[int, ...]:
        """
        Get the code of a symbol.

        Raises:
            InternalInvariantError: If the symbol has no code.
        """
        try:
            return self._codes[symbol]
        except KeyError:
            raise InternalInvariantError(f"No code for symbol {symbol_to_str(symbol)}") from None

    def contains(self, symbol: int) -> bool:
        return symbol in self._codes

    def get_size(self) -> int:
        return len(self._codes)

    def items(self) -> List[Tuple[int, Tuple[int, ...]]]:
        return sorted(self._codes.items())

    def code_lengths(self) -> Dict[int, int]:
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def to_strings(self) -> Dict[int, str]:
        return {symbol: "".join(str(bit) for bit in code) for symbol, code in self._codes.items()}

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.
        """
        # A prefix of a code sorts directly before the codes that extend it.
        codes = sorted(self.to_strings().values())
        for shorter, longer in zip(codes, codes[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._codes))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self._codes == other._codes

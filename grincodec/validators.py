"""
validators.py

Shared codes for input validation in grincodec.
"""


import os
from typing import Any

from .settings import EOF_SYMBOL


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File does not exist: {file_path}")


def validate_symbol(symbol: Any) -> None:
    """Validate that symbol is a literal byte value or the EOF sentinel."""
    if isinstance(symbol, bool) or not isinstance(symbol, int):
        raise ValueError("Symbol must be of type int")
    if not 0 <= symbol <= EOF_SYMBOL:
        raise ValueError(f"Symbol must be in range [0, {EOF_SYMBOL}], got {symbol}")


def validate_bit(bit: Any) -> None:
    """Validate that bit is 0 or 1."""
    if bit not in (0, 1):
        raise ValueError("Bit must be 0 or 1")


def validate_distinct_paths(input_path: str, output_path: str) -> None:
    """Validate that output_path does not name the same file as input_path."""
    if os.path.exists(output_path) and os.path.samefile(input_path, output_path):
        raise ValueError(f"Output file is the same as the input file: {output_path}")

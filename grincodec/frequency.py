"""
frequency.py

Frequency analysis of raw byte sources.
"""


import numpy as np
from io import BytesIO
from typing import IO, Optional

from .logger import Logger, FrequencyAnalysisLog
from .models import FrequencyTable
from .settings import CHUNK_SIZE, EOF_SYMBOL
from .validators import validate_type, validate_file_exists


def count_byte_histogram(source: IO[bytes], chunk_size: int = CHUNK_SIZE) -> np.ndarray:
    """
    Count every byte value of a binary source, reading it to exhaustion.

    Args:
        source (IO[bytes]): A readable binary stream.
        chunk_size (int): Number of bytes read at a time.

    Returns:
        np.ndarray: 256 counts indexed by byte value.
    """
    if chunk_size <= 0:
        raise ValueError("Chunk size must be positive")
    histogram = np.zeros(256, dtype=np.int64)
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        histogram += np.bincount(np.frombuffer(chunk, dtype=np.uint8), minlength=256)
    return histogram


def count_frequencies(source: IO[bytes], logger: Optional[Logger] = None) -> FrequencyTable:
    """
    Build the frequency table of a binary source.

    Every byte value that occurs gets its count, and EOF_SYMBOL is always added
    with a count of exactly one.

    Args:
        source (IO[bytes]): A readable binary stream.
        logger (Optional[Logger]): Logger for the analysis summary.

    Returns:
        FrequencyTable: The symbol counts.
    """
    histogram = count_byte_histogram(source)
    frequencies = FrequencyTable()
    for byte_value in np.flatnonzero(histogram):
        frequencies.add(int(byte_value), int(histogram[byte_value]))
    frequencies.set_frequency(EOF_SYMBOL, 1)

    if logger is not None:
        logger.log(FrequencyAnalysisLog(int(histogram.sum()), frequencies.get_size()))
    return frequencies


def frequencies_from_bytes(data: bytes, logger: Optional[Logger] = None) -> FrequencyTable:
    validate_type(data, "Data", bytes)
    return count_frequencies(BytesIO(data), logger)


def create_frequency_table(file_path: str, logger: Optional[Logger] = None) -> FrequencyTable:
    """
    Build the frequency table of the file at file_path.
    """
    validate_type(file_path, "File path", str)
    validate_file_exists(file_path)
    with open(file_path, "rb") as file:
        return count_frequencies(file, logger)

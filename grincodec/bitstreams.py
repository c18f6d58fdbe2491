"""
bitstreams.py

Bit-level adapters over binary byte streams. Bits are written and read most
significant bit first.
"""


from typing import IO

from .validators import validate_bit, validate_type

END_OF_STREAM = -1


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0
        self.bits_written: int = 0
        self.closed: bool = False

    def write_bit(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        validate_bit(bit)
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        self.bits_written += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_bits(self, value: int, num_bits: int) -> None:
        """
        Write the lowest num_bits of value, most significant bit first.

        Args:
            value (int): The value to write.
            num_bits (int): The width of the field.

        Raises:
            ValueError: If value does not fit in num_bits bits.
        """
        validate_type(value, "Value", int)
        validate_type(num_bits, "Number of bits", int)
        if num_bits < 0:
            raise ValueError("Number of bits must be non-negative")
        if value < 0 or value >> num_bits:
            raise ValueError(f"Value {value} does not fit in {num_bits} bits")
        for shift in range(num_bits - 1, -1, -1):
            self.write_bit((value >> shift) & 1)

    def write_code(self, code) -> None:
        """
        Write a sequence of bits.
        """
        for bit in code:
            self.write_bit(bit)

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        if self.closed:
            return
        self.closed = True
        self.finish()
        self.out.close()

    def __enter__(self) -> 'BitOutputStream':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self.closed:
            self.finish()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0
        self.bits_read: int = 0

    def _fill(self) -> bool:
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return False
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        return True

    def read_bit(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or END_OF_STREAM if no more bits are available.
        """
        if not self._fill():
            return END_OF_STREAM
        self.num_bits_remaining -= 1
        self.bits_read += 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def read_bits(self, num_bits: int) -> int:
        """
        Read a num_bits wide field, most significant bit first.

        Returns:
            int: The field value, or END_OF_STREAM if the stream ends before the field does.
        """
        validate_type(num_bits, "Number of bits", int)
        if num_bits < 0:
            raise ValueError("Number of bits must be non-negative")
        value = 0
        for _ in range(num_bits):
            bit = self.read_bit()
            if bit == END_OF_STREAM:
                return END_OF_STREAM
            value = (value << 1) | bit
        return value

    def has_more_bits(self) -> bool:
        """
        Check whether another bit (padding included) can be read.
        """
        return self._fill()

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()

"""
coders.py

Stream encoder and decoder that translate raw bytes to and from Huffman codes.

"""


import abc
from typing import IO, Optional

from .bitstreams import BitInputStream, BitOutputStream, END_OF_STREAM
from .errors import CorruptStreamError
from .huffman import HuffmanTree, Node
from .logger import Logger, CodingLog, EncodingProgressStep, DecodingProgressStep
from .models import CodeTable
from .settings import CHUNK_SIZE, EOF_SYMBOL
from .validators import validate_type


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @abc.abstractmethod
    def encode(self, source: IO[bytes], out: BitOutputStream) -> int:
        """
        Encode every byte of source followed by the EOF symbol.

        Args:
            source (IO[bytes]): The raw bytes to encode.
            out (BitOutputStream): The sink for the code bits. It is not closed.

        Returns:
            int: Number of bytes encoded.
        """
        pass

    @abc.abstractmethod
    def decode(self, inp: BitInputStream, sink: IO[bytes]) -> int:
        """
        Decode code bits into raw bytes until the EOF symbol.

        Args:
            inp (BitInputStream): The code bits.
            sink (IO[bytes]): The sink for decoded bytes.

        Returns:
            int: Number of bytes decoded.
        """
        pass

    def _log(self, log) -> None:
        if self.logger is not None:
            self.logger.log(log)


class HuffmanCoder(CoderBase):
    """
    Encodes with the code table of a Huffman tree and decodes by walking the tree.
    """

    def __init__(self, tree: HuffmanTree, logger: Optional[Logger] = None) -> None:
        super().__init__(logger)
        validate_type(tree, "Tree", HuffmanTree)
        self.tree: HuffmanTree = tree
        self.codes: CodeTable = tree.codes
        self.root: Node = tree.root

    def encode(self, source: IO[bytes], out: BitOutputStream) -> int:
        start = out.bits_written
        # Look codes up once per distinct byte; get_code raises on a missing symbol.
        lookup = {}
        byte_count = 0
        while True:
            chunk = source.read(CHUNK_SIZE)
            if not chunk:
                break
            for byte in chunk:
                code = lookup.get(byte)
                if code is None:
                    code = self.codes.get_code(byte)
                    lookup[byte] = code
                out.write_code(code)
            byte_count += len(chunk)
            self._log(EncodingProgressStep("Encoding chunk"))
        out.write_code(self.codes.get_code(EOF_SYMBOL))

        self._log(CodingLog(byte_count * 8, out.bits_written - start))
        return byte_count

    def decode(self, inp: BitInputStream, sink: IO[bytes]) -> int:
        start = inp.bits_read
        buffer = bytearray()
        byte_count = 0
        node = self.root
        while True:
            bit = inp.read_bit()
            if bit == END_OF_STREAM:
                sink.write(buffer)
                raise CorruptStreamError(f"Stream ended before the EOF symbol after {byte_count} bytes")
            if node.is_leaf():
                # Single leaf tree: its code is the one bit 0.
                if bit != 0:
                    raise CorruptStreamError("Unexpected 1 bit for a single leaf tree")
            else:
                node = node.left if bit == 0 else node.right
            if not node.is_leaf():
                continue
            if node.symbol == EOF_SYMBOL:
                break
            buffer.append(node.symbol)
            byte_count += 1
            node = self.root
            if len(buffer) >= CHUNK_SIZE:
                sink.write(buffer)
                buffer = bytearray()
                self._log(DecodingProgressStep("Decoding chunk"))
        sink.write(buffer)

        self._log(CodingLog(byte_count * 8, inp.bits_read - start))
        return byte_count

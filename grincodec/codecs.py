"""
codecs.py

The .grin container: a 32-bit magic number, the serialized Huffman tree, the
coded payload ending with the EOF code, and zero padding up to a byte boundary.
"""


from io import BytesIO
from typing import IO, Optional

from .bitstreams import BitInputStream, BitOutputStream, END_OF_STREAM
from .coders import HuffmanCoder
from .errors import FormatError
from .frequency import create_frequency_table, frequencies_from_bytes
from .huffman import HuffmanTree
from .logger import Logger
from .settings import MAGIC_BIT_WIDTH, MAGIC_NUMBER
from .tree_codec import deserialize_tree, serialize_tree
from .validators import validate_distinct_paths, validate_file_exists, validate_type


def write_container(tree: HuffmanTree, source: IO[bytes], out: BitOutputStream, logger: Optional[Logger] = None) -> int:
    """
    Write the magic number, the tree and the coded source to out.

    Args:
        tree (HuffmanTree): Tree built from the frequencies of source.
        source (IO[bytes]): The raw bytes to encode.
        out (BitOutputStream): The container sink. It is not finished or closed.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        int: Number of bytes encoded.
    """
    out.write_bits(MAGIC_NUMBER, MAGIC_BIT_WIDTH)
    serialize_tree(tree.root, out)
    return HuffmanCoder(tree, logger).encode(source, out)


def read_container_header(inp: BitInputStream, logger: Optional[Logger] = None) -> HuffmanTree:
    """
    Check the magic number and read back the tree, leaving inp at the payload.

    Raises:
        FormatError: If the magic number is missing or wrong.
        CorruptStreamError: If the tree is malformed.
    """
    magic = inp.read_bits(MAGIC_BIT_WIDTH)
    if magic == END_OF_STREAM:
        raise FormatError("Invalid .grin file: too short for a magic number")
    if magic != MAGIC_NUMBER:
        raise FormatError(f"Invalid .grin file: incorrect magic number 0x{magic:08X}")
    return HuffmanTree.from_root(deserialize_tree(inp), logger)


class GrinCodec:
    """Compresses and decompresses in memory."""

    def compress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            bytes: The .grin container.
        """
        validate_type(data, "Data", bytes)
        tree = HuffmanTree(frequencies_from_bytes(data, logger), logger)
        buffer = BytesIO()
        with BitOutputStream(buffer) as out:
            write_container(tree, BytesIO(data), out, logger)
        return buffer.getvalue()

    def decompress(self, data: bytes, logger: Optional[Logger] = None) -> bytes:
        """
        Decompress a .grin container.

        Args:
            data (bytes): The container.
            logger: Logger instance for logging.

        Returns:
            bytes: The original data.
        """
        validate_type(data, "Data", bytes)
        inp = BitInputStream(BytesIO(data))
        tree = read_container_header(inp, logger)
        sink = BytesIO()
        HuffmanCoder(tree, logger).decode(inp, sink)
        return sink.getvalue()


class GrinCodecFile(GrinCodec):
    """Compresses and decompresses files on disk."""

    def compress(self, input_path: str, output_path: str, logger: Optional[Logger] = None) -> None:
        """
        Compress the input file into a .grin file.

        The input is read twice: once for its frequencies and once to encode it.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)
        validate_distinct_paths(input_path, output_path)

        tree = HuffmanTree(create_frequency_table(input_path, logger), logger)
        with open(input_path, "rb") as source, open(output_path, "wb") as sink:
            with BitOutputStream(sink) as out:
                write_container(tree, source, out, logger)

    def decompress(self, compressed_file_path: str, output_file_path: str, logger: Optional[Logger] = None) -> None:
        """
        Decompress a .grin file.

        The output file is only created once the magic number and the tree
        have been read successfully.

        Args:
            compressed_file_path (str): Path to the compressed file.
            output_file_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(compressed_file_path, "Compressed file path", str)
        validate_type(output_file_path, "Output file path", str)
        validate_file_exists(compressed_file_path)
        validate_distinct_paths(compressed_file_path, output_file_path)

        with open(compressed_file_path, "rb") as file:
            inp = BitInputStream(file)
            tree = read_container_header(inp, logger)
            with open(output_file_path, "wb") as sink:
                HuffmanCoder(tree, logger).decode(inp, sink)


def encode(input_path: str, output_path: str, logger: Optional[Logger] = None) -> None:
    """Encode the file at input_path into the .grin file at output_path."""
    GrinCodecFile().compress(input_path, output_path, logger)


def decode(input_path: str, output_path: str, logger: Optional[Logger] = None) -> None:
    """Decode the .grin file at input_path into output_path."""
    GrinCodecFile().decompress(input_path, output_path, logger)

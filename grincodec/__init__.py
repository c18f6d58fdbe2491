"""
grincodec: A Python library for lossless Huffman compression of files into the .grin format.
"""

from .codecs import (
    GrinCodec,
    GrinCodecFile,
    write_container,
    read_container_header,
    encode,
    decode,
)

from .coders import (
    CoderBase,
    HuffmanCoder,
)

from .bitstreams import (
    BitOutputStream,
    BitInputStream,
    END_OF_STREAM,
)

from .models import (
    FrequencyTable,
    CodeTable,
)

from .frequency import (
    count_frequencies,
    frequencies_from_bytes,
    create_frequency_table,
)

from .huffman import (
    LeafNode,
    InternalNode,
    HuffmanTree,
    build_tree,
    generate_codes,
)

from .tree_codec import (
    serialize_tree,
    deserialize_tree,
)

from .errors import (
    GrinError,
    FormatError,
    CorruptStreamError,
    InternalInvariantError,
)

from .settings import MAGIC_NUMBER, EOF_SYMBOL

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyAnalysisLog,
    TreeConstructionLog,
    CodingLog,
    EncodingProgressStep,
    DecodingProgressStep,
)

__all__ = [

    "GrinCodec",
    "GrinCodecFile",
    "write_container",
    "read_container_header",
    "encode",
    "decode",

    "CoderBase",
    "HuffmanCoder",

    "BitOutputStream",
    "BitInputStream",
    "END_OF_STREAM",

    "FrequencyTable",
    "CodeTable",

    "count_frequencies",
    "frequencies_from_bytes",
    "create_frequency_table",

    "LeafNode",
    "InternalNode",
    "HuffmanTree",
    "build_tree",
    "generate_codes",

    "serialize_tree",
    "deserialize_tree",

    "GrinError",
    "FormatError",
    "CorruptStreamError",
    "InternalInvariantError",

    "MAGIC_NUMBER",
    "EOF_SYMBOL",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyAnalysisLog",
    "TreeConstructionLog",
    "CodingLog",
    "EncodingProgressStep",
    "DecodingProgressStep",
]

import unittest
from io import BytesIO

from grincodec.bitstreams import BitInputStream, BitOutputStream
from grincodec.errors import CorruptStreamError
from grincodec.frequency import frequencies_from_bytes
from grincodec.huffman import HuffmanTree, InternalNode, LeafNode, same_shape
from grincodec.models import FrequencyTable
from grincodec.settings import EOF_SYMBOL
from grincodec.tree_codec import serialize_tree, deserialize_tree, serialized_size


def serialize_to_bytes(root):
    buffer = BytesIO()
    with BitOutputStream(buffer) as out:
        serialize_tree(root, out)
    return buffer.getvalue()


def bits_to_stream(bits):
    buffer = BytesIO()
    with BitOutputStream(buffer) as out:
        out.write_code([int(bit) for bit in bits])
    return BitInputStream(BytesIO(buffer.getvalue()))


class TestSerializeTree(unittest.TestCase):
    def test_concrete_example(self):
        tree = HuffmanTree(FrequencyTable({0x41: 3, 0x42: 1, EOF_SYMBOL: 1}))
        # 0 0 1 001000010 1 100000000 1 001000001
        self.assertEqual(serialize_to_bytes(tree.root), bytes([0x24, 0x2C, 0x02, 0x41]))
        self.assertEqual(serialized_size(tree.root), 32)

    def test_single_leaf(self):
        self.assertEqual(serialize_to_bytes(LeafNode(EOF_SYMBOL)), bytes([0xC0, 0x00]))


class TestDeserializeTree(unittest.TestCase):
    def assert_round_trip(self, tree):
        data = serialize_to_bytes(tree.root)
        root = deserialize_tree(BitInputStream(BytesIO(data)))
        self.assertTrue(same_shape(tree.root, root))
        self.assertEqual(HuffmanTree.from_root(root).codes, tree.codes)

    def test_round_trip(self):
        self.assert_round_trip(HuffmanTree(frequencies_from_bytes(b"AAAB")))
        self.assert_round_trip(HuffmanTree(frequencies_from_bytes(b"")))
        self.assert_round_trip(HuffmanTree(frequencies_from_bytes(bytes(range(256)) * 2 + b"zzzz")))

    def test_weights_are_not_preserved(self):
        tree = HuffmanTree(frequencies_from_bytes(b"AAAB"))
        root = deserialize_tree(BitInputStream(BytesIO(serialize_to_bytes(tree.root))))
        self.assertEqual(root.weight, 0)

    def test_leaves_stream_at_payload(self):
        buffer = BytesIO()
        with BitOutputStream(buffer) as out:
            serialize_tree(InternalNode(LeafNode(EOF_SYMBOL), LeafNode(7)), out)
            out.write_bits(0b101, 3)
        inp = BitInputStream(BytesIO(buffer.getvalue()))
        deserialize_tree(inp)
        self.assertEqual(inp.read_bits(3), 0b101)

    def test_truncated_tree(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(BitInputStream(BytesIO(bytes([0x24, 0x2C]))))

    def test_empty_stream(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(BitInputStream(BytesIO(b"")))

    def test_symbol_out_of_range(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(bits_to_stream("1" + "100000001"))

    def test_duplicate_symbol(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(bits_to_stream("0" + "1100000000" + "1100000000"))

    def test_missing_eof_leaf(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(bits_to_stream("0" + "1001000001" + "1001000010"))

    def test_too_deep(self):
        with self.assertRaises(CorruptStreamError):
            deserialize_tree(BitInputStream(BytesIO(bytes(40))))


if __name__ == '__main__':
    unittest.main()

"""
tree_codec.py

Preorder bit serialization of Huffman trees.

    internal node:  0 <left subtree> <right subtree>
    leaf:           1 <symbol, 9 bits>

Weights are not stored; code derivation only needs the shape.
"""


from .bitstreams import BitInputStream, BitOutputStream, END_OF_STREAM
from .errors import CorruptStreamError
from .huffman import InternalNode, LeafNode, Node
from .settings import EOF_SYMBOL, MAX_TREE_DEPTH, SYMBOL_BIT_WIDTH

INTERNAL_TAG = 0
LEAF_TAG = 1


def serialize_tree(root: Node, out: BitOutputStream) -> None:
    """
    Write the tree rooted at root to out in preorder.
    """
    if root.is_leaf():
        out.write_bit(LEAF_TAG)
        out.write_bits(root.symbol, SYMBOL_BIT_WIDTH)
    else:
        out.write_bit(INTERNAL_TAG)
        serialize_tree(root.left, out)
        serialize_tree(root.right, out)


def serialized_size(root: Node) -> int:
    """
    Number of bits serialize_tree writes for this tree.
    """
    if root.is_leaf():
        return 1 + SYMBOL_BIT_WIDTH
    return 1 + serialized_size(root.left) + serialized_size(root.right)


class _TreeReader:
    def __init__(self, inp: BitInputStream) -> None:
        self.inp = inp
        self.seen = set()

    def read_node(self, depth: int) -> Node:
        if depth > MAX_TREE_DEPTH:
            raise CorruptStreamError(f"Serialized tree is deeper than {MAX_TREE_DEPTH} levels")
        tag = self.inp.read_bit()
        if tag == END_OF_STREAM:
            raise CorruptStreamError("Stream ended inside the serialized tree")
        if tag == LEAF_TAG:
            symbol = self.inp.read_bits(SYMBOL_BIT_WIDTH)
            if symbol == END_OF_STREAM:
                raise CorruptStreamError("Stream ended inside a leaf symbol")
            if symbol > EOF_SYMBOL:
                raise CorruptStreamError(f"Leaf symbol {symbol} is out of range")
            if symbol in self.seen:
                raise CorruptStreamError(f"Leaf symbol {symbol} appears more than once")
            self.seen.add(symbol)
            return LeafNode(symbol)
        left = self.read_node(depth + 1)
        right = self.read_node(depth + 1)
        return InternalNode(left, right)


def deserialize_tree(inp: BitInputStream) -> Node:
    """
    Read a tree written by serialize_tree.

    Raises:
        CorruptStreamError: If the bits do not describe a valid tree with an EOF leaf.
    """
    reader = _TreeReader(inp)
    root = reader.read_node(0)
    if EOF_SYMBOL not in reader.seen:
        raise CorruptStreamError("Serialized tree has no EOF leaf")
    return root

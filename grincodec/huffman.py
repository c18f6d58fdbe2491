"""
huffman.py

Huffman tree construction and code table derivation.

Ties between equal weights are broken by creation order: every node pushed
onto the queue gets the next sequence number, leaves are created in ascending
symbol order, and the first node popped becomes the left child. The same
frequency table therefore always yields the same tree and the same codes.

A table with a single symbol yields a bare leaf root, and that leaf gets the
one-bit code 0.
"""


import heapq
import itertools
from typing import List, Optional, Tuple, Union

from .errors import InternalInvariantError
from .logger import Logger, TreeConstructionLog
from .models import CodeTable, FrequencyTable, symbol_to_str
from .settings import EOF_SYMBOL
from .validators import validate_symbol, validate_type

SINGLE_LEAF_CODE = (0,)


class LeafNode:
    def __init__(self, symbol: int, weight: int = 0) -> None:
        validate_symbol(symbol)
        self.symbol = symbol
        self.weight = weight

    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"LeafNode({symbol_to_str(self.symbol)}, {self.weight})"


class InternalNode:
    def __init__(self, left: 'Node', right: 'Node') -> None:
        if left is None or right is None:
            raise ValueError("Internal node needs two children")
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"InternalNode({self.left!r}, {self.right!r})"


Node = Union[LeafNode, InternalNode]


def build_tree(frequencies: FrequencyTable) -> Node:
    """
    Build a Huffman tree by repeatedly merging the two lightest nodes.

    Args:
        frequencies (FrequencyTable): Non-empty symbol counts.

    Returns:
        Node: The root of the tree.
    """
    validate_type(frequencies, "Frequencies", FrequencyTable)
    if frequencies.get_size() == 0:
        raise ValueError("Cannot build a Huffman tree from an empty frequency table")

    sequence = itertools.count()
    queue: List[Tuple[int, int, Node]] = []
    for symbol, count in frequencies.items():
        heapq.heappush(queue, (count, next(sequence), LeafNode(symbol, count)))

    while len(queue) > 1:
        _, _, left = heapq.heappop(queue)
        _, _, right = heapq.heappop(queue)
        merged = InternalNode(left, right)
        heapq.heappush(queue, (merged.weight, next(sequence), merged))

    return queue[0][2]


def generate_codes(root: Node) -> CodeTable:
    """
    Walk the tree once and record the path to every leaf (left = 0, right = 1).
    """
    codes = CodeTable()
    if root.is_leaf():
        codes.add(root.symbol, SINGLE_LEAF_CODE)
        return codes

    stack: List[Tuple[Node, Tuple[int, ...]]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes.add(node.symbol, path)
        else:
            # right is pushed first so the left subtree is visited first
            stack.append((node.right, path + (1,)))
            stack.append((node.left, path + (0,)))
    return codes


def tree_depth(root: Node) -> int:
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            depth = max(depth, level)
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth


def preorder_leaves(root: Node) -> List[int]:
    symbols = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            symbols.append(node.symbol)
        else:
            stack.append(node.right)
            stack.append(node.left)
    return symbols


def same_shape(first: Node, second: Node) -> bool:
    """
    Compare two trees by shape and leaf symbols, ignoring weights.
    """
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a.is_leaf() != b.is_leaf():
            return False
        if a.is_leaf():
            if a.symbol != b.symbol:
                return False
        else:
            stack.append((a.left, b.left))
            stack.append((a.right, b.right))
    return True


class HuffmanTree:
    """
    A Huffman tree together with the code table derived from it.
    """

    def __init__(self, frequencies: FrequencyTable, logger: Optional[Logger] = None) -> None:
        self._set_root(build_tree(frequencies), logger)

    @classmethod
    def from_root(cls, root: Node, logger: Optional[Logger] = None) -> 'HuffmanTree':
        """
        Wrap an already built tree, e.g. one read back from a container.
        """
        if not isinstance(root, (LeafNode, InternalNode)):
            raise ValueError("Root must be a LeafNode or an InternalNode")
        tree = cls.__new__(cls)
        tree._set_root(root, logger)
        return tree

    def _set_root(self, root: Node, logger: Optional[Logger]) -> None:
        self._root = root
        self._codes = generate_codes(root)
        if not self._codes.contains(EOF_SYMBOL):
            raise InternalInvariantError("Huffman tree has no EOF leaf")
        if logger is not None:
            logger.log(TreeConstructionLog(self._codes.get_size(), self.depth()))

    @property
    def root(self) -> Node:
        return self._root

    @property
    def codes(self) -> CodeTable:
        return self._codes

    def get_code(self, symbol: int) -> Tuple[int, ...]:
        return self._codes.get_code(symbol)

    def depth(self) -> int:
        return tree_depth(self._root)

    def leaf_symbols(self) -> List[int]:
        return preorder_leaves(self._root)

    def weighted_path_length(self, frequencies: FrequencyTable) -> int:
        return sum(count * len(self._codes.get_code(symbol)) for symbol, count in frequencies.items())

    def same_shape(self, other: 'HuffmanTree') -> bool:
        return same_shape(self._root, other.root)

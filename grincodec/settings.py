#settings.py

# Container header
MAGIC_NUMBER = 0xFACEB00C
MAGIC_BIT_WIDTH = 32

# Alphabet
BYTE_BIT_WIDTH = 8
SYMBOL_BIT_WIDTH = 9
EOF_SYMBOL = 256
ALPHABET_SIZE = EOF_SYMBOL + 1

# A full tree with ALPHABET_SIZE leaves is at most this deep
MAX_TREE_DEPTH = ALPHABET_SIZE - 1

# Bytes read per chunk when scanning or encoding a source
CHUNK_SIZE = 64 * 1024

"""
Shared constants for the Huffman stream format.

The alphabet size is derived from the word width so the terminator value
and the width of a leaf field in the header stay consistent if the word
width ever changes.
"""

# Width of one raw input/output symbol
BITS_PER_WORD = 8

# Width of the magic number field
BITS_PER_INT = 32

# Number of distinct byte symbols
ALPH_SIZE = 1 << BITS_PER_WORD

# Terminator symbol, one past the last byte value
PSEUDO_EOF = ALPH_SIZE

# Leaf values must hold PSEUDO_EOF, so one bit wider than a word
LEAF_BITS = BITS_PER_WORD + 1

# Format family number and the tree-header magic written before the header
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

# Debug levels
DEBUG_LOW = 1
DEBUG_HIGH = 4

"""
Tree header serialization.

The header stores only the shape of the tree and its leaf values, in
pre-order:
- internal node: '0', then the left subtree, then the right subtree
- leaf: '1', then the leaf value as a LEAF_BITS-bit field

Weights are not stored; the decoder only needs shape and leaf identity.
"""

from huffcodec.bitreader import EOF
from huffcodec.constants import ALPH_SIZE, LEAF_BITS, PSEUDO_EOF
from huffcodec.errors import FormatError
from huffcodec.node import INTERNAL, HuffNode

# Import for type hints only
if False:  # noqa: SIM108
    from huffcodec.bitbuffer import BitBuffer
    from huffcodec.bitreader import BitReader

# A tree over ALPH_SIZE + 1 leaves has at most ALPH_SIZE internal levels
MAX_DEPTH = ALPH_SIZE


def write_header(root: HuffNode, output: "BitBuffer") -> int:
    """
    Serialize a tree in pre-order.

    Args:
        root: Root of the tree to write
        output: BitBuffer to append header bits to

    Returns:
        Number of header bits written
    """
    start = output.num_bits

    if root.is_leaf:
        output.write_bits(1, 1)
        output.write_bits(LEAF_BITS, root.value)
    else:
        output.write_bits(1, 0)
        write_header(root.left, output)
        write_header(root.right, output)

    return output.num_bits - start


def read_header(reader: "BitReader", depth: int = 0) -> HuffNode:
    """
    Rebuild a tree from its pre-order serialization.

    Args:
        reader: BitReader positioned at the first header bit
        depth: Nesting level of the node being read

    Returns:
        Root of the rebuilt tree (all weights are 0)

    Raises:
        FormatError: If the header is truncated, nests deeper than any
            valid tree, or holds a leaf value that is not a symbol
    """
    bit = reader.read_bit()
    if bit == EOF:
        raise FormatError("bad input, header truncated")

    if bit == 0:
        if depth >= MAX_DEPTH:
            raise FormatError(f"bad input, header tree deeper than {MAX_DEPTH}")
        left = read_header(reader, depth + 1)
        right = read_header(reader, depth + 1)
        return HuffNode(INTERNAL, 0, left, right)

    value = reader.read_bits(LEAF_BITS)
    if value == EOF:
        raise FormatError("bad input, header truncated inside a leaf")
    if value > PSEUDO_EOF:
        raise FormatError(f"bad input, leaf value {value} out of range")

    return HuffNode(value, 0)

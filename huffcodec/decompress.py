"""
Huffman decompression.

Inverse of compression:
- Check the magic number
- Rebuild the tree from the header
- Walk the tree one bit at a time, emitting a word at every leaf, until
  the terminator leaf is reached

Running out of bits before the terminator means the stream is truncated
or corrupt and raises FormatError.
"""

import logging

from huffcodec.bitreader import EOF
from huffcodec.constants import BITS_PER_INT, BITS_PER_WORD, DEBUG_LOW, HUFF_TREE, PSEUDO_EOF
from huffcodec.errors import FormatError

# Import for type hints only
if False:  # noqa: SIM108
    from huffcodec.bitbuffer import BitBuffer
    from huffcodec.bitreader import BitReader
    from huffcodec.node import HuffNode

logger = logging.getLogger(__name__)


class Decompressor:
    """Huffman decompressor configuration and per-call statistics."""

    def __init__(self, debug: int = 0) -> None:
        """
        Initialize decompressor.

        Args:
            debug: Debug level (0 = quiet, DEBUG_LOW = summary)
        """
        self.debug = debug
        self.reset()

    def reset(self) -> None:
        """Clear statistics from the previous call."""
        self.header_bits = 0
        self.symbols = 0

    def decompress(self, reader: "BitReader", output: "BitBuffer") -> bytes:
        """
        Decompress a stream from reader into output.

        Args:
            reader: BitReader positioned at the magic number
            output: BitBuffer receiving the original bytes; it is closed
                before returning

        Returns:
            Decompressed bytes

        Raises:
            FormatError: If the magic number is wrong or the stream is
                truncated or malformed
        """
        from huffcodec.header import read_header

        self.reset()

        magic = reader.read_bits(BITS_PER_INT)
        if magic != HUFF_TREE:
            if magic == EOF:
                raise FormatError("illegal header, stream shorter than the magic number")
            raise FormatError(f"illegal header starts with {magic:#010x}")

        start = reader.position
        root = read_header(reader)
        self.header_bits = reader.position - start

        self.symbols = read_compressed_bits(root, reader, output)
        data = output.close()

        if self.debug >= DEBUG_LOW:
            logger.debug(
                "decompressed %d symbols from %d leaves, %d header bits and %d body bits",
                self.symbols,
                len(root.leaves()),
                self.header_bits,
                reader.position - start - self.header_bits,
            )

        return data


def read_compressed_bits(root: "HuffNode", reader: "BitReader", output: "BitBuffer") -> int:
    """
    Decode the body by walking the tree until the terminator leaf.

    Args:
        root: Tree rebuilt from the header
        reader: BitReader positioned at the first body bit
        output: BitBuffer to append decoded words to

    Returns:
        Number of words written

    Raises:
        FormatError: If bits run out before the terminator or the tree
            has no internal root
    """
    if root.is_leaf:
        raise FormatError("bad input, tree has no internal nodes")

    count = 0
    current = root
    while True:
        bit = reader.read_bit()
        if bit == EOF:
            raise FormatError("bad input, no PSEUDO_EOF")

        current = current.left if bit == 0 else current.right

        if current.is_leaf:
            if current.value == PSEUDO_EOF:
                break
            output.write_bits(BITS_PER_WORD, current.value)
            count += 1
            current = root

    return count


def decompress(data: bytes, debug: int = 0) -> bytes:
    """
    Decompress data produced by compress().

    Args:
        data: Compressed input bytes
        debug: Debug level passed to the Decompressor

    Returns:
        Decompressed data bytes

    Raises:
        FormatError: If data is not a valid compressed stream
    """
    from huffcodec.bitbuffer import BitBuffer
    from huffcodec.bitreader import BitReader

    decomp = Decompressor(debug=debug)
    return decomp.decompress(BitReader(data), BitBuffer())

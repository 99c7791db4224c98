"""
Huffman compression.

Compression reads the input twice:
1. Count word frequencies and build the tree and code table
2. Write the magic number and the tree header, rewind the input, and
   write the code of every word followed by the terminator's code

Output layout: magic || header || body || zero padding.
"""

import logging

from huffcodec.bitreader import EOF
from huffcodec.constants import (
    BITS_PER_INT,
    BITS_PER_WORD,
    DEBUG_HIGH,
    DEBUG_LOW,
    HUFF_TREE,
    PSEUDO_EOF,
)
from huffcodec.errors import InvariantViolation

# Import for type hints only
if False:  # noqa: SIM108
    from huffcodec.bitbuffer import BitBuffer
    from huffcodec.bitreader import BitReader

logger = logging.getLogger(__name__)


class Compressor:
    """Huffman compressor configuration and per-call statistics."""

    def __init__(self, debug: int = 0) -> None:
        """
        Initialize compressor.

        Args:
            debug: Debug level (0 = quiet, DEBUG_LOW = summary,
                DEBUG_HIGH = per-symbol counts and codes)
        """
        self.debug = debug
        self.reset()

    def reset(self) -> None:
        """Clear statistics from the previous call."""
        self.bits_read = 0
        self.header_bits = 0
        self.body_bits = 0
        self.bits_written = 0

    def compress(self, reader: "BitReader", output: "BitBuffer") -> bytes:
        """
        Compress everything in reader into output.

        Args:
            reader: Restartable BitReader over the raw input
            output: BitBuffer receiving the compressed stream; it is closed
                before returning

        Returns:
            Compressed bytes
        """
        from huffcodec.header import write_header
        from huffcodec.tree import (
            make_codings_from_tree,
            make_tree_from_counts,
            read_for_counts,
        )

        self.reset()

        counts = read_for_counts(reader)
        self.bits_read = reader.position
        root = make_tree_from_counts(counts)
        codings = make_codings_from_tree(root)

        if self.debug >= DEBUG_HIGH:
            for value, count in enumerate(counts):
                if count > 0:
                    logger.debug("%d\t%d\t%s", value, count, codings[value])

        output.write_bits(BITS_PER_INT, HUFF_TREE)
        self.header_bits = write_header(root, output)

        reader.reset()
        self.body_bits = write_compressed_bits(codings, reader, output)

        data = output.close()
        self.bits_written = output.num_bits

        if self.debug >= DEBUG_LOW:
            logger.debug(
                "compressed %d bytes to %d bytes: %d leaves, "
                "%d header bits, %d body bits",
                self.bits_read // BITS_PER_WORD,
                len(data),
                len(root.leaves()),
                self.header_bits,
                self.body_bits,
            )

        return data


def write_compressed_bits(codings: list, reader: "BitReader", output: "BitBuffer") -> int:
    """
    Write the code of every input word, then the terminator's code.

    Args:
        codings: Code table from make_codings_from_tree
        reader: BitReader over the raw input; rewound before reading
        output: BitBuffer to append the body to

    Returns:
        Number of body bits written

    Raises:
        InvariantViolation: If a word read from the input has no code
    """
    start = output.num_bits

    reader.reset()
    value = reader.read_bits(BITS_PER_WORD)
    while value != EOF:
        code = codings[value]
        if code is None:
            raise InvariantViolation(f"no code for symbol {value}")
        output.write_bits(len(code), int(code, 2))
        value = reader.read_bits(BITS_PER_WORD)

    code_eof = codings[PSEUDO_EOF]
    if code_eof is None:
        raise InvariantViolation("no code for PSEUDO_EOF")
    output.write_bits(len(code_eof), int(code_eof, 2))

    return output.num_bits - start


def compress(data: bytes, debug: int = 0) -> bytes:
    """
    Compress data using Huffman coding.

    Args:
        data: Input data bytes (may be empty)
        debug: Debug level passed to the Compressor

    Returns:
        Compressed data bytes
    """
    from huffcodec.bitbuffer import BitBuffer
    from huffcodec.bitreader import BitReader

    comp = Compressor(debug=debug)
    return comp.compress(BitReader(data), BitBuffer())

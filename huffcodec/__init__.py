"""
Huffman Stream Codec

Lossless byte-stream compression with a static Huffman code. The tree
shape is stored in a compact header after a 32-bit magic number, so a
compressed stream decodes without any side information.
"""

__version__ = "1.0.0"

from huffcodec.compress import compress
from huffcodec.decompress import decompress
from huffcodec.errors import FormatError, HuffException, InvariantViolation

__all__ = [
    "compress",
    "decompress",
    "FormatError",
    "HuffException",
    "InvariantViolation",
    "__version__",
]

"""
Common utilities for test vector generation.
Provides shared functions for creating deterministic byte corpora.
"""
import hashlib
import numpy as np


def set_deterministic_seed(seed: int):
    """Set seed for reproducible random generation."""
    np.random.seed(seed)


def calculate_md5(data: bytes) -> str:
    """Calculate MD5 hash of data."""
    return hashlib.md5(data).hexdigest()


def generate_input_data(pattern: str, size: int, seed: int) -> bytes:
    """Generate size bytes of the given pattern."""
    set_deterministic_seed(seed)

    if pattern == "entropy":
        # Uniform noise, incompressible
        return bytes(np.random.randint(0, 256, size, dtype=np.uint8))

    if pattern == "skewed":
        # Geometric distribution, small byte values dominate
        values = np.minimum(np.random.geometric(0.3, size) - 1, 255)
        return bytes(values.astype(np.uint8))

    if pattern == "text":
        words = [b"the", b"of", b"and", b"to", b"in", b"huffman", b"tree",
                 b"code", b"bit", b"leaf", b"node", b"weight", b"stream"]
        data = bytearray()
        while len(data) < size:
            data.extend(words[np.random.randint(0, len(words))])
            data.append(0x0A if np.random.random() < 0.1 else 0x20)
        return bytes(data[:size])

    if pattern == "single":
        # One repeated byte: two-leaf tree, one-bit codes
        return bytes([0x41] * size)

    if pattern == "edge":
        # Every byte value, repeated
        return bytes(range(256)) * (size // 256) + bytes(range(size % 256))

    # Default: zeros
    return bytes(size)

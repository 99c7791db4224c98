"""
Sequential bit reader used as the input source of the codec.

This module provides sequential bit-level reading from bytes. It is used
both to scan raw input one word at a time (compression reads the input
twice, with a reset in between) and to parse compressed streams.

Bit Ordering:
Bits are read MSB-first within each byte (matching BitBuffer output):
- First bit read is bit position 7 (MSB)
- Last bit read is bit position 0 (LSB)

End of data is signalled by returning EOF rather than raising, since
running out of input is the normal way the counting and encoding passes
terminate.
"""

# Returned by read_bits/read_bit when not enough bits remain
EOF = -1


class BitReader:
    """Sequential, restartable bit reader from bytes."""

    def __init__(self, data: bytes) -> None:
        """
        Initialize a bit reader.

        Args:
            data: Bytes to read from
        """
        self._data = bytes(data)
        self._total_bits = len(self._data) * 8
        self.position = 0

    @classmethod
    def from_file(cls, stream) -> "BitReader":
        """
        Create a reader over the full contents of a binary stream.

        Args:
            stream: Readable binary file object

        Returns:
            BitReader positioned at the first bit
        """
        return cls(stream.read())

    @property
    def remaining(self) -> int:
        """Number of bits remaining to read."""
        return self._total_bits - self.position

    def reset(self) -> None:
        """Rewind to the first bit of the underlying data."""
        self.position = 0

    def read_bit(self) -> int:
        """
        Read and consume a single bit.

        Returns:
            Bit value (0 or 1), or EOF if no bits remain
        """
        if self.position >= self._total_bits:
            return EOF

        byte_index = self.position // 8
        bit_index = self.position % 8
        self.position += 1

        # MSB-first: bit 0 in stream is bit 7 of first byte
        return (self._data[byte_index] >> (7 - bit_index)) & 1

    def read_bits(self, num_bits: int) -> int:
        """
        Read and consume multiple bits as an integer.

        A short read consumes nothing: if fewer than num_bits remain the
        position is left unchanged and EOF is returned.

        Args:
            num_bits: Number of bits to read

        Returns:
            Integer value of bits (MSB-first), or EOF

        Raises:
            ValueError: If num_bits is negative
        """
        if num_bits < 0:
            raise ValueError(f"Cannot read {num_bits} bits")

        if num_bits == 0:
            return 0

        if self.position + num_bits > self._total_bits:
            return EOF

        # Whole-byte reads on a byte boundary are the common case for input
        if num_bits == 8 and self.position % 8 == 0:
            value = self._data[self.position // 8]
            self.position += 8
            return value

        result = 0
        for _ in range(num_bits):
            result = (result << 1) | self.read_bit()

        return result

"""
Variable-length bit buffer used as the output sink of the codec.

This module provides a dynamically-growing bit buffer for constructing
compressed (and decompressed) output streams. Values are appended as
right-aligned fields of a given width, most significant bit first.

Bit Ordering:
Bits are appended MSB-first within each byte:
- First bit appended goes to bit position 7
- Second bit goes to position 6, etc.

The last partial byte is zero-padded when the buffer is closed.
"""


class BitBuffer:
    """Variable-length bit buffer with an optional destination stream."""

    def __init__(self, stream=None) -> None:
        """
        Initialize an empty bit buffer.

        Args:
            stream: Optional writable binary file object that receives the
                bytes when the buffer is closed
        """
        self._data = bytearray()
        self._stream = stream
        self._closed = False
        self.num_bits = 0

    def append_bit(self, bit: int) -> None:
        """
        Append a single bit to the buffer.

        Args:
            bit: Bit value (0 or non-zero for 1)
        """
        byte_index = self.num_bits // 8
        bit_index = self.num_bits % 8

        # Extend buffer if needed
        if byte_index >= len(self._data):
            self._data.append(0)

        if bit:
            self._data[byte_index] |= 1 << (7 - bit_index)

        self.num_bits += 1

    def write_bits(self, num_bits: int, value: int) -> None:
        """
        Append the low-order bits of a value.

        Args:
            num_bits: Number of bits to append
            value: Non-negative integer; only its num_bits low-order bits
                are written, most significant first

        Raises:
            ValueError: If num_bits or value is negative
        """
        if num_bits < 0:
            raise ValueError(f"Cannot write {num_bits} bits")
        if value < 0:
            raise ValueError(f"Cannot write negative value {value}")

        # Byte-aligned full words go straight into the buffer
        if num_bits == 8 and self.num_bits % 8 == 0:
            self._data.append(value & 0xFF)
            self.num_bits += 8
            return

        for i in range(num_bits - 1, -1, -1):
            self.append_bit((value >> i) & 1)

    def to_bytes(self) -> bytes:
        """
        Convert buffer contents to bytes.

        Returns:
            Bytes representation of the buffer, last byte zero-padded
        """
        if self.num_bits == 0:
            return b""

        num_bytes = (self.num_bits + 7) // 8
        return bytes(self._data[:num_bytes])

    def close(self) -> bytes:
        """
        Pad to a byte boundary and flush.

        Writes the bytes to the destination stream on the first call only.

        Returns:
            The padded buffer contents
        """
        data = self.to_bytes()
        if self._stream is not None and not self._closed:
            self._stream.write(data)
            self._stream.flush()
        self._closed = True
        return data

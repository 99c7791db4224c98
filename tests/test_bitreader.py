"""Tests for BitReader class."""

import io

import pytest

from huffcodec.bitreader import EOF, BitReader


class TestBitReaderInit:
    """Test BitReader initialization."""

    def test_init(self) -> None:
        """Test creating a BitReader."""
        br = BitReader(bytes([0xFF, 0x00]))
        assert br.position == 0
        assert br.remaining == 16

    def test_init_empty(self) -> None:
        """Test creating a BitReader with empty data."""
        br = BitReader(b"")
        assert br.position == 0
        assert br.remaining == 0

    def test_from_file(self) -> None:
        """Test creating a BitReader from a binary stream."""
        br = BitReader.from_file(io.BytesIO(b"\xab\xcd"))
        assert br.remaining == 16
        assert br.read_bits(16) == 0xABCD


class TestBitReaderReadBit:
    """Test read_bit method."""

    def test_read_bits_msb_first(self) -> None:
        """Test that bits are read MSB-first."""
        br = BitReader(bytes([0b10110100]))
        bits = [br.read_bit() for _ in range(8)]
        assert bits == [1, 0, 1, 1, 0, 1, 0, 0]

    def test_read_across_byte_boundary(self) -> None:
        """Test reading across byte boundary."""
        br = BitReader(bytes([0xFF, 0x00]))
        assert [br.read_bit() for _ in range(8)] == [1] * 8
        assert [br.read_bit() for _ in range(8)] == [0] * 8

    def test_read_bit_past_end(self) -> None:
        """Test reading past end of data returns EOF."""
        br = BitReader(bytes([0xFF]))
        for _ in range(8):
            br.read_bit()

        assert br.read_bit() == EOF
        assert br.position == 8


class TestBitReaderReadBits:
    """Test read_bits method."""

    def test_read_bits_single_byte(self) -> None:
        """Test reading 8 bits as integer."""
        br = BitReader(bytes([0xAB]))
        assert br.read_bits(8) == 0xAB

    def test_read_bits_partial(self) -> None:
        """Test reading fewer than 8 bits."""
        br = BitReader(bytes([0b11110000]))
        assert br.read_bits(4) == 0b1111

    def test_read_bits_nine(self) -> None:
        """Test reading a 9-bit field spanning two bytes."""
        br = BitReader(bytes([0b10000000, 0b01000000]))
        assert br.read_bits(9) == 0b100000000
        assert br.read_bit() == 1

    def test_read_bits_unaligned_byte(self) -> None:
        """Test reading 8 bits that cross a byte boundary."""
        br = BitReader(bytes([0b11110000, 0b10101111]))
        br.read_bits(4)
        assert br.read_bits(8) == 0b00001010

    def test_read_bits_32(self) -> None:
        """Test reading a 32-bit field."""
        br = BitReader(bytes([0xFA, 0xCE, 0x82, 0x01]))
        assert br.read_bits(32) == 0xFACE8201

    def test_read_bits_zero(self) -> None:
        """Test reading zero bits."""
        br = BitReader(bytes([0xFF]))
        assert br.read_bits(0) == 0
        assert br.position == 0

    def test_read_bits_short_returns_eof(self) -> None:
        """Test reading more bits than available returns EOF."""
        br = BitReader(bytes([0xFF]))
        br.read_bits(3)
        assert br.read_bits(8) == EOF

    def test_short_read_consumes_nothing(self) -> None:
        """Test that a failed read leaves the position unchanged."""
        br = BitReader(bytes([0xFF]))
        br.read_bits(3)
        br.read_bits(8)
        assert br.position == 3
        assert br.read_bits(5) == 0b11111

    def test_read_bits_negative(self) -> None:
        """Test that a negative width is rejected."""
        br = BitReader(bytes([0xFF]))
        with pytest.raises(ValueError):
            br.read_bits(-1)

    def test_eof_is_not_a_value(self) -> None:
        """Test that EOF cannot be confused with a read value."""
        br = BitReader(bytes([0x00]))
        assert br.read_bits(8) == 0
        assert br.read_bits(8) == EOF
        assert EOF < 0


class TestBitReaderReset:
    """Test reset method."""

    def test_reset_rewinds(self) -> None:
        """Test that reset returns to the first bit."""
        br = BitReader(bytes([0x12, 0x34]))
        assert br.read_bits(16) == 0x1234
        assert br.read_bits(8) == EOF

        br.reset()
        assert br.position == 0
        assert br.remaining == 16
        assert br.read_bits(16) == 0x1234

    def test_remaining_after_read(self) -> None:
        """Test remaining updates after reading."""
        br = BitReader(bytes([0xFF, 0xFF]))
        br.read_bits(5)
        assert br.remaining == 11

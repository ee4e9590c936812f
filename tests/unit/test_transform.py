"""Unit tests for the fixed-block transform."""

from __future__ import annotations

import pytest

from mcoded7 import BlockSizeError, Mcoded7Error
from mcoded7.codec.transform import ENCODED_BLOCK_SIZE, RAW_BLOCK_SIZE, decode_block, encode_block


class TestEncodeBlock:
    """Test encode_block()."""

    def test_ascii_block(self, ascii_block: bytes) -> None:
        """Test a block without high bits gets a zero guard byte."""
        assert encode_block(ascii_block) == bytes([0x00]) + ascii_block

    def test_first_byte_high_bit(self) -> None:
        """Test raw byte 0's high bit lands on guard bit 6."""
        encoded = encode_block(bytes([0xC1, 0, 0, 0, 0, 0, 0]))

        assert encoded == bytes([0x40, 0x41, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00])

    def test_last_byte_high_bit(self) -> None:
        """Test raw byte 6's high bit lands on guard bit 0."""
        encoded = encode_block(bytes([0, 0, 0, 0, 0, 0, 0x80]))

        assert encoded[0] == 0x01
        assert encoded[7] == 0x00

    def test_all_high_bits(self) -> None:
        """Test all high bits set fills guard bits 6..0."""
        encoded = encode_block(bytes([0xFF] * 7))

        assert encoded[0] == 0x7F
        assert encoded[1:] == bytes([0x7F] * 7)

    def test_output_is_7bit_clean(self) -> None:
        """Test every output byte has bit 7 clear."""
        encoded = encode_block(bytes([0x80, 0x81, 0xFE, 0xFF, 0x00, 0x7F, 0xAA]))

        assert len(encoded) == ENCODED_BLOCK_SIZE
        assert all(b < 0x80 for b in encoded)

    def test_accepts_int_list(self) -> None:
        """Test a list of ints is accepted."""
        assert encode_block([0x80, 0, 0, 0, 0, 0, 0]) == bytes([0x40] + [0] * 7)

    def test_rejects_int(self) -> None:
        """Test an int is not mistaken for a run of zero bytes."""
        with pytest.raises(TypeError, match="got int"):
            encode_block(7)  # type: ignore[arg-type]

    @pytest.mark.parametrize("size", [0, 6, 8])
    def test_wrong_size(self, size: int) -> None:
        """Test wrong-sized blocks are rejected."""
        with pytest.raises(BlockSizeError, match="exactly 7 bytes"):
            encode_block(bytes(size))


class TestDecodeBlock:
    """Test decode_block()."""

    def test_inverse(self) -> None:
        """Test decode_block() undoes encode_block()."""
        raw = bytes([0x00, 0x7F, 0x80, 0xFF, 0x55, 0xAA, 0x12])

        assert decode_block(encode_block(raw)) == raw

    def test_guard_bits(self) -> None:
        """Test guard bit (6 - i) restores the high bit of raw byte i."""
        decoded = decode_block(bytes([0x40, 0x41, 0, 0, 0, 0, 0, 0x01]))

        assert decoded == bytes([0xC1, 0, 0, 0, 0, 0, 0x01])

    def test_reserved_bits_ignored(self) -> None:
        """Test reserved high bits in the input are discarded, not rejected."""
        clean = bytes([0x15, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])
        dirty = bytes([0x95, 0x81, 0x02, 0x83, 0x04, 0x85, 0x06, 0x87])

        assert decode_block(dirty) == decode_block(clean)

    def test_output_size(self) -> None:
        """Test decoding produces 7 bytes."""
        assert len(decode_block(bytes(8))) == RAW_BLOCK_SIZE

    def test_rejects_int(self) -> None:
        """Test an int is not mistaken for a run of zero bytes."""
        with pytest.raises(TypeError, match="got int"):
            decode_block(8)  # type: ignore[arg-type]

    @pytest.mark.parametrize("size", [0, 7, 9])
    def test_wrong_size(self, size: int) -> None:
        """Test wrong-sized blocks are rejected."""
        with pytest.raises(BlockSizeError, match="exactly 8 bytes"):
            decode_block(bytes(size))

    def test_error_is_library_error(self) -> None:
        """Test BlockSizeError can be caught as Mcoded7Error."""
        with pytest.raises(Mcoded7Error):
            decode_block(b"\x00")

"""Fixed-block Mcoded7 bit remapping.

Every 7 raw bytes become 8 encoded bytes. The first encoded byte (the guard
byte) collects the high bits of the raw bytes, bit 6 holding the high bit of
raw byte 0 down to bit 0 holding the high bit of raw byte 6. The remaining
seven bytes carry the low 7 bits of each raw byte.

Example:
    Raw:     [0xC1, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00]
    Encoded: [0x40, 0x41, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00]
"""

from __future__ import annotations

from typing import Iterable, Union

from ..exceptions import BlockSizeError

RAW_BLOCK_SIZE = 7
ENCODED_BLOCK_SIZE = 8

BlockLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_block(block: BlockLike, size: int, kind: str) -> bytes:
    # bytes(n) would silently build n zero bytes
    if isinstance(block, int):
        raise TypeError(f"{kind} must be a bytes-like object or sequence of ints, got int")
    data = bytes(block)
    if len(data) != size:
        raise BlockSizeError(f"{kind} must be exactly {size} bytes, got {len(data)}")
    return data


def encode_block(raw: BlockLike) -> bytes:
    """Encode one 7-byte raw block into an 8-byte 7-bit-clean block.

    Args:
        raw: Exactly 7 bytes of arbitrary 8-bit data

    Returns:
        8 bytes, each with bit 7 clear

    Raises:
        BlockSizeError: If raw is not exactly 7 bytes long

    Example:
        >>> encode_block(b"ABCDEFG").hex()
        '0041424344454647'
    """
    data = _as_block(raw, RAW_BLOCK_SIZE, "Raw block")

    result = bytearray(ENCODED_BLOCK_SIZE)
    guard = 0
    for i, byte in enumerate(data):
        # High bit of raw byte i lands on guard bit (6 - i)
        guard |= (byte & 0x80) >> (i + 1)
        result[i + 1] = byte & 0x7F
    result[0] = guard

    return bytes(result)


def decode_block(encoded: BlockLike) -> bytes:
    """Decode one 8-byte encoded block back into 7 raw bytes.

    Bit 7 of the guard byte and of every body byte is reserved; it is ignored
    rather than rejected.

    Args:
        encoded: Exactly 8 bytes produced by encode_block()

    Returns:
        7 raw bytes

    Raises:
        BlockSizeError: If encoded is not exactly 8 bytes long

    Example:
        >>> decode_block(bytes([0x40, 0x41, 0, 0, 0, 0, 0, 0]))[0]
        193
    """
    data = _as_block(encoded, ENCODED_BLOCK_SIZE, "Encoded block")

    guard = data[0]
    result = bytearray(RAW_BLOCK_SIZE)
    for i in range(RAW_BLOCK_SIZE):
        high_bit = (guard >> (6 - i)) & 0x01
        result[i] = (high_bit << 7) | (data[i + 1] & 0x7F)

    return bytes(result)

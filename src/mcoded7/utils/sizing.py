"""Payload size calculation utilities.

This module provides functions to calculate encoded and decoded sizes
without actually running a coder.
"""

from __future__ import annotations

from ..codec.transform import ENCODED_BLOCK_SIZE, RAW_BLOCK_SIZE


def _check(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")


def encoded_size(raw_size: int) -> int:
    """Calculate how many bytes encoding ``raw_size`` raw bytes produces.

    The trailing partial block is padded, so every started 7-byte block
    costs 8 bytes.

    Args:
        raw_size: Number of raw bytes

    Returns:
        Encoded size in bytes

    Example:
        >>> encoded_size(7)
        8
        >>> encoded_size(8)
        16
    """
    _check(raw_size)
    blocks = -(-raw_size // RAW_BLOCK_SIZE)
    return blocks * ENCODED_BLOCK_SIZE


def decoded_size(encoded_size: int) -> int:
    """Calculate how many bytes decoding ``encoded_size`` encoded bytes produces.

    A short trailing block of k bytes yields k - 1 bytes (the guard byte
    carries no payload of its own).

    Args:
        encoded_size: Number of encoded bytes

    Returns:
        Decoded size in bytes

    Example:
        >>> decoded_size(16)
        14
        >>> decoded_size(10)
        8
    """
    _check(encoded_size)
    blocks, tail = divmod(encoded_size, ENCODED_BLOCK_SIZE)
    return blocks * RAW_BLOCK_SIZE + max(tail - 1, 0)


def padding_size(raw_size: int) -> int:
    """Calculate how many zero bytes the encoder appends to ``raw_size`` raw bytes.

    Example:
        >>> padding_size(1)
        6
        >>> padding_size(14)
        0
    """
    _check(raw_size)
    return -raw_size % RAW_BLOCK_SIZE

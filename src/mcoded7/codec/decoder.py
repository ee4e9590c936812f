"""Streaming Mcoded7 decoder.

This module provides Mcoded7Decoder, the mirror of Mcoded7Encoder, and the
one-shot decode() helper built on it.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import DecodeError, Mcoded7Error
from ..utils.sizing import decoded_size
from .base import BlockCoder
from .buffers import ByteSink, ByteSource, BytesLike
from .status import Mcoded7Status
from .transform import ENCODED_BLOCK_SIZE, RAW_BLOCK_SIZE, decode_block


class Mcoded7Decoder(BlockCoder):
    """Resumable decoder from Mcoded7 blocks back to raw bytes.

    Full 8-byte blocks decode to 7 bytes. A short trailing block of k bytes
    (guard byte plus k - 1 body bytes) is zero-padded by ``finalize()`` and
    only its k - 1 body-backed bytes are emitted; bytes that would come purely
    from padding are dropped. Reserved high bits in the input are ignored.
    """

    input_block_size = ENCODED_BLOCK_SIZE
    output_block_size = RAW_BLOCK_SIZE
    direction = "decode"

    def decode(self) -> Mcoded7Status:
        """Decode as much of the bound input as the bound output can take.

        Returns:
            ALL_INPUT_CONSUMED, NEEDS_MORE_OUTPUT or ALREADY_FINALIZED
        """
        return self._run()

    def _transform(self, block: bytes) -> bytes:
        return decode_block(block)

    def _transform_trailing(self, block: bytes, count: int) -> bytes:
        # Byte i is backed by body byte i + 1; the rest is padding
        return decode_block(block)[: count - 1]


def decode(data: BytesLike, length: Optional[int] = None) -> bytes:
    """Decode a complete Mcoded7 payload in one call.

    The encoding does not carry the original length, so a payload that was
    padded decodes with trailing zero bytes. Pass the original length to
    strip them.

    Args:
        data: Encoded payload
        length: Original raw length, if known

    Returns:
        Decoded bytes, truncated to ``length`` when given

    Raises:
        ValueError: If length is negative
        DecodeError: If length exceeds the decoded size

    Example:
        >>> decode(bytes([0x40, 0x41, 0, 0, 0, 0, 0, 0]), length=1)
        b'\\xc1'
    """
    if length is not None and length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    source = ByteSource(data)
    sink = ByteSink.allocate(decoded_size(source.remaining))
    decoder = Mcoded7Decoder(source, sink)
    status = decoder.finalize()
    if status is not Mcoded7Status.FINISHED:
        raise Mcoded7Error(f"Decoder stopped early with status {status.name}")
    result = sink.getvalue()

    if length is None:
        return result

    if length > len(result):
        raise DecodeError(
            f"Requested length {length} exceeds decoded payload of {len(result)} bytes"
        )
    return result[:length]

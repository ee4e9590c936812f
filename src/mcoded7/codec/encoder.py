"""Streaming Mcoded7 encoder.

This module provides Mcoded7Encoder, which turns an 8-bit byte stream into a
7-bit-clean one incrementally, and the one-shot encode() helper built on it.
"""

from __future__ import annotations

from ..exceptions import Mcoded7Error
from ..utils.sizing import encoded_size
from .base import BlockCoder
from .buffers import ByteSink, ByteSource, BytesLike
from .status import Mcoded7Status
from .transform import ENCODED_BLOCK_SIZE, RAW_BLOCK_SIZE, encode_block


class Mcoded7Encoder(BlockCoder):
    """Resumable encoder from raw bytes to Mcoded7 blocks.

    Raw input is grouped into 7-byte blocks, each emitted as 8 encoded bytes.
    A trailing partial block is zero-padded by ``finalize()``; input that ends
    on a block boundary gets no extra block. The original length is not
    recorded in the output and must travel out of band.

    Example:
        ```python
        encoder = Mcoded7Encoder(ByteSource(payload), ByteSink.allocate(5))
        status = encoder.encode()
        while status is Mcoded7Status.NEEDS_MORE_OUTPUT:
            send(encoder.sink.getvalue())
            encoder.rebind_output(ByteSink.allocate(5))
            status = encoder.encode()
        ```
    """

    input_block_size = RAW_BLOCK_SIZE
    output_block_size = ENCODED_BLOCK_SIZE
    direction = "encode"

    def encode(self) -> Mcoded7Status:
        """Encode as much of the bound input as the bound output can take.

        A partial final block stays staged until more input arrives or
        ``finalize()`` is called.

        Returns:
            ALL_INPUT_CONSUMED, NEEDS_MORE_OUTPUT or ALREADY_FINALIZED
        """
        return self._run()

    def _transform(self, block: bytes) -> bytes:
        return encode_block(block)

    def _transform_trailing(self, block: bytes, count: int) -> bytes:
        return encode_block(block)


def encode(data: BytesLike) -> bytes:
    """Encode a complete payload to Mcoded7 in one call.

    Args:
        data: Raw payload

    Returns:
        7-bit-clean encoded bytes, ``encoded_size()`` of the payload's byte count

    Example:
        >>> encode(bytes([0xC1])).hex()
        '4041000000000000'
    """
    source = ByteSource(data)
    sink = ByteSink.allocate(encoded_size(source.remaining))
    encoder = Mcoded7Encoder(source, sink)
    status = encoder.finalize()
    if status is not Mcoded7Status.FINISHED:
        raise Mcoded7Error(f"Encoder stopped early with status {status.name}")
    return sink.getvalue()

"""mcoded7: Mcoded7 7-bit-clean transcoder

A Python library for carrying arbitrary 8-bit data over channels that reserve
the eighth bit, such as MIDI System Exclusive and MIDI Capability Inquiry
payloads. Every 7 raw bytes become 8 encoded bytes whose high bits are clear.

Key Features:
- Resumable streaming encoder/decoder with explicit backpressure status codes
- Works over arbitrarily fragmented input and output buffers
- Pure fixed-block transform for callers that manage blocks themselves
- One-shot helpers and a command line tool

Quick Start:
    >>> from mcoded7 import encode, decode
    >>> data = encode(b"\\xc1")
    >>> data.hex()
    '4041000000000000'
    >>> decode(data, length=1)
    b'\\xc1'

Streaming:
    >>> from mcoded7 import ByteSink, ByteSource, Mcoded7Encoder, Mcoded7Status
    >>> encoder = Mcoded7Encoder(ByteSource(b"ABCDEFG"), ByteSink.allocate(5))
    >>> encoder.encode()
    <Mcoded7Status.NEEDS_MORE_OUTPUT: 'needs_more_output'>
    >>> encoder.rebind_output(ByteSink.allocate(3))
    >>> encoder.finalize()
    <Mcoded7Status.FINISHED: 'finished'>
"""

from __future__ import annotations

from .codec import (
    ENCODED_BLOCK_SIZE,
    RAW_BLOCK_SIZE,
    BlockCoder,
    ByteSink,
    ByteSource,
    CoderState,
    Mcoded7Decoder,
    Mcoded7Encoder,
    Mcoded7Status,
    decode,
    decode_block,
    encode,
    encode_block,
)
from .config import StreamConfig
from .exceptions import BlockSizeError, CoderStateError, DecodeError, Mcoded7Error
from .models import CoderStats
from .streaming import transcode_stream
from .utils import decoded_size, encoded_size, padding_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "Mcoded7Encoder",
    "Mcoded7Decoder",
    "Mcoded7Status",
    "CoderState",
    "BlockCoder",
    # Views
    "ByteSource",
    "ByteSink",
    # Block transform
    "encode_block",
    "decode_block",
    "RAW_BLOCK_SIZE",
    "ENCODED_BLOCK_SIZE",
    # Exceptions
    "Mcoded7Error",
    "BlockSizeError",
    "DecodeError",
    "CoderStateError",
    # Streaming
    "transcode_stream",
    "StreamConfig",
    "CoderStats",
    # Sizing
    "encoded_size",
    "decoded_size",
    "padding_size",
    # Version
    "__version__",
]

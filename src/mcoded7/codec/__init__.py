"""Mcoded7 codec for mcoded7.

This module provides the fixed-block transform, the streaming encoder and
decoder state machines, the byte views they operate on, and one-shot helpers.
"""

from __future__ import annotations

from .base import BlockCoder
from .buffers import ByteSink, ByteSource
from .decoder import Mcoded7Decoder, decode
from .encoder import Mcoded7Encoder, encode
from .status import CoderState, Mcoded7Status
from .transform import ENCODED_BLOCK_SIZE, RAW_BLOCK_SIZE, decode_block, encode_block

__all__ = [
    "encode",
    "decode",
    "encode_block",
    "decode_block",
    "RAW_BLOCK_SIZE",
    "ENCODED_BLOCK_SIZE",
    "BlockCoder",
    "Mcoded7Encoder",
    "Mcoded7Decoder",
    "Mcoded7Status",
    "CoderState",
    "ByteSource",
    "ByteSink",
]

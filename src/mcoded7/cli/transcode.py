"""Encode/decode CLI commands."""

from __future__ import annotations

import io
import sys
from contextlib import ExitStack
from typing import BinaryIO, Optional

from ..codec.base import BlockCoder
from ..codec.decoder import Mcoded7Decoder
from ..codec.encoder import Mcoded7Encoder
from ..config import StreamConfig
from ..exceptions import DecodeError
from ..models.stats import CoderStats
from ..streaming import transcode_stream


def _open_input(stack: ExitStack, path: str) -> BinaryIO:
    if path == "-":
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def _open_output(stack: ExitStack, path: str) -> BinaryIO:
    if path == "-":
        return sys.stdout.buffer
    return stack.enter_context(open(path, "wb"))


def run_transcode(
    direction: str,
    input_path: str,
    output_path: str,
    config: StreamConfig,
    length: Optional[int] = None,
) -> CoderStats:
    """Transcode a file (or stdin) into a file (or stdout).

    Args:
        direction: "encode" or "decode"
        input_path: Input file path, or "-" for stdin
        output_path: Output file path, or "-" for stdout
        config: Buffer sizes
        length: Original raw length to truncate decoded output to (decode only)

    Returns:
        Stats of the coder after finalization

    Raises:
        DecodeError: If length exceeds the decoded size
        OSError: If a file cannot be opened
    """
    coder: BlockCoder = Mcoded7Encoder() if direction == "encode" else Mcoded7Decoder()

    with ExitStack() as stack:
        reader = _open_input(stack, input_path)

        if length is None:
            writer = _open_output(stack, output_path)
            stats = transcode_stream(coder, reader, writer, config)
        else:
            # The decoded size is only known at the end; buffer before truncating
            staging = io.BytesIO()
            stats = transcode_stream(coder, reader, staging, config)
            decoded = staging.getvalue()
            if length > len(decoded):
                raise DecodeError(
                    f"Requested length {length} exceeds decoded payload of {len(decoded)} bytes"
                )
            writer = _open_output(stack, output_path)
            writer.write(decoded[:length])

        writer.flush()

    return stats

"""Drive a streaming coder between binary file objects.

This module provides transcode_stream(), which feeds a coder from a reader in
fixed-size chunks and flushes bounded output windows to a writer.
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from .codec.base import BlockCoder
from .codec.buffers import ByteSink, ByteSource
from .codec.status import Mcoded7Status
from .config import StreamConfig
from .exceptions import CoderStateError
from .models.stats import CoderStats


def _pump(coder: BlockCoder, writer: BinaryIO, step: str, buffer: bytearray) -> None:
    """Call ``step`` until it stops asking for output, flushing every window."""
    while True:
        sink = ByteSink(buffer)
        coder.rebind_output(sink)
        status: Mcoded7Status = getattr(coder, step)()
        if sink.written:
            writer.write(sink.getvalue())
        if status is not Mcoded7Status.NEEDS_MORE_OUTPUT:
            return


def transcode_stream(
    coder: BlockCoder,
    reader: BinaryIO,
    writer: BinaryIO,
    config: Optional[StreamConfig] = None,
) -> CoderStats:
    """Run ``coder`` over everything ``reader`` yields and finalize it.

    Works with either direction: an Mcoded7Encoder is driven through
    ``encode()``, an Mcoded7Decoder through ``decode()``.

    Args:
        coder: A fresh or partially used coder that is not finalized
        reader: Blocking binary file object to read input from
        writer: Binary file object to write output to
        config: Buffer sizes. If None, uses default config.

    Returns:
        Stats of the coder after finalization

    Raises:
        CoderStateError: If the coder is already finalized
        ValueError: If reader is non-blocking and has no data ready

    Example:
        >>> import io
        >>> from mcoded7 import Mcoded7Encoder
        >>> src, dst = io.BytesIO(b"ABCDEFG"), io.BytesIO()
        >>> transcode_stream(Mcoded7Encoder(), src, dst).produced
        8
    """
    if coder.finalized:
        raise CoderStateError("Cannot transcode with a coder that is already finalized")

    config = config if config is not None else StreamConfig()
    step = coder.direction
    buffer = bytearray(config.output_buffer_size)

    while True:
        chunk = reader.read(config.read_chunk_size)
        if chunk is None:
            raise ValueError("Non-blocking reader returned no data; use a blocking reader")
        if chunk == b"":
            break
        coder.rebind_input(ByteSource(chunk))
        _pump(coder, writer, step, buffer)

    coder.rebind_input(ByteSource(b""))
    _pump(coder, writer, "finalize", buffer)

    return coder.stats()

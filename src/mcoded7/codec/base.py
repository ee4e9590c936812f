"""Streaming block coder shared by the Mcoded7 encoder and decoder.

Both directions run the same resumable state machine: stage input bytes into a
fixed-size block, transform full blocks, and drain the result into the output
view. Either view may run dry at any byte; the coder then returns a status and
picks up exactly where it stopped on the next call.

Design:
- The coder never blocks and never raises for flow control
- Views can be swapped between calls without losing staged data
- ``finalize()`` flushes a trailing partial block once, then the coder is inert
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Literal, Optional

from ..models.stats import CoderStats
from .buffers import ByteSink, ByteSource
from .status import CoderState, Mcoded7Status


class BlockCoder(ABC):
    """Abstract resumable block coder.

    Subclasses set the block sizes and provide the full-block and trailing-block
    transforms.

    Attributes:
        input_block_size: Bytes consumed per transform
        output_block_size: Bytes produced per full transform
        direction: Label used in stats
    """

    input_block_size: ClassVar[int]
    output_block_size: ClassVar[int]
    direction: ClassVar[Literal["encode", "decode"]]

    def __init__(self, source: Optional[ByteSource] = None, sink: Optional[ByteSink] = None) -> None:
        """Initialize a coder, optionally bound to views.

        Args:
            source: Input view. If None, an empty view is bound.
            sink: Output view. If None, a zero-capacity view is bound.
        """
        self._source = source if source is not None else ByteSource(b"")
        self._sink = sink if sink is not None else ByteSink.allocate(0)
        self._state = CoderState.STREAMING
        # Set once the padded trailing block exists; no more input is read after that
        self._flushing = False

        self._staged = bytearray(self.input_block_size)
        self._staged_count = 0
        self._pending = b""
        self._drained = 0

        self._consumed = 0
        self._produced = 0

    @abstractmethod
    def _transform(self, block: bytes) -> bytes:
        """Transform one full input block."""

    @abstractmethod
    def _transform_trailing(self, block: bytes, count: int) -> bytes:
        """Transform a partial block of ``count`` real bytes, zero-padded to full size."""

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @property
    def state(self) -> CoderState:
        return self._state

    @property
    def finalized(self) -> bool:
        return self._state is CoderState.FINALIZED

    @property
    def consumed(self) -> int:
        """Total bytes read from input views."""
        return self._consumed

    @property
    def produced(self) -> int:
        """Total bytes written to output views."""
        return self._produced

    @property
    def staged(self) -> int:
        """Bytes held in the partial input block."""
        return self._staged_count

    @property
    def undrained(self) -> int:
        """Bytes of the current transformed block still waiting for output space."""
        return len(self._pending) - self._drained

    def bind(self, source: ByteSource, sink: ByteSink) -> None:
        """Attach new input and output views. Staged data and counters are kept."""
        self._source = source
        self._sink = sink

    def rebind_input(self, source: ByteSource) -> None:
        self._source = source

    def rebind_output(self, sink: ByteSink) -> None:
        self._sink = sink

    def stats(self) -> CoderStats:
        """Return a snapshot of this coder's counters."""
        return CoderStats(
            direction=self.direction,
            state=self._state,
            consumed=self._consumed,
            produced=self._produced,
            staged=self._staged_count,
            undrained=self.undrained,
        )

    def finalize(self) -> Mcoded7Status:
        """Consume the remaining input, flush the trailing partial block and finish.

        Resumable: on NEEDS_MORE_OUTPUT supply more output capacity and call
        again. Block-aligned input produces no extra block. Once the trailing
        block has been padded, input bound on later calls is left unread.

        Returns:
            FINISHED once everything is flushed, NEEDS_MORE_OUTPUT if the sink
            filled first, ALREADY_FINALIZED on every call after FINISHED
        """
        status = self._run()
        if status is not Mcoded7Status.ALL_INPUT_CONSUMED:
            return status

        if self._staged_count and not self._flushing:
            padded = bytes(self._staged[: self._staged_count]).ljust(self.input_block_size, b"\x00")
            self._pending = self._transform_trailing(padded, self._staged_count)
            self._drained = 0
            self._staged_count = 0
            self._flushing = True
            if not self._drain():
                return Mcoded7Status.NEEDS_MORE_OUTPUT

        self._state = CoderState.FINALIZED
        return Mcoded7Status.FINISHED

    def _run(self) -> Mcoded7Status:
        if self._state is CoderState.FINALIZED:
            return Mcoded7Status.ALREADY_FINALIZED

        # Finish the block interrupted by a full sink on an earlier call
        if not self._drain():
            return Mcoded7Status.NEEDS_MORE_OUTPUT

        if self._flushing:
            return Mcoded7Status.ALL_INPUT_CONSUMED

        while self._fill():
            self._pending = self._transform(bytes(self._staged))
            self._drained = 0
            self._staged_count = 0
            if not self._drain():
                return Mcoded7Status.NEEDS_MORE_OUTPUT

        return Mcoded7Status.ALL_INPUT_CONSUMED

    def _fill(self) -> bool:
        """Stage input bytes. Returns True when a full block is assembled."""
        chunk = self._source.read(self.input_block_size - self._staged_count)
        if chunk:
            end = self._staged_count + len(chunk)
            self._staged[self._staged_count : end] = chunk
            self._staged_count = end
            self._consumed += len(chunk)
        return self._staged_count == self.input_block_size

    def _drain(self) -> bool:
        """Write pending bytes out. Returns True when nothing is left pending."""
        if self._drained < len(self._pending):
            written = self._sink.write(self._pending[self._drained :])
            self._drained += written
            self._produced += written
            if self._drained < len(self._pending):
                return False

        self._pending = b""
        self._drained = 0
        return True

"""Coder statistics model.

This module provides CoderStats, a Pydantic snapshot of a coder's counters.
It is returned by ``coder.stats()`` and ``transcode_stream()``, and can be
serialized with ``model_dump_json()`` for diagnostics.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..codec.status import CoderState


class CoderStats(BaseModel):
    """Point-in-time counters of a streaming coder.

    Example:
        >>> from mcoded7 import ByteSink, ByteSource, Mcoded7Encoder
        >>> encoder = Mcoded7Encoder(ByteSource(b"ABC"), ByteSink.allocate(8))
        >>> encoder.finalize()
        <Mcoded7Status.FINISHED: 'finished'>
        >>> encoder.stats().produced
        8

    Attributes:
        direction: "encode" or "decode"
        state: Lifecycle state at the time of the snapshot
        consumed: Total bytes read from input views
        produced: Total bytes written to output views
        staged: Bytes sitting in the partial input block
        undrained: Bytes of the transformed block not yet written out
    """

    model_config = ConfigDict(
        # Snapshots are immutable
        frozen=True,
        extra="forbid",
    )

    direction: Literal["encode", "decode"]
    state: CoderState
    consumed: int = Field(ge=0)
    produced: int = Field(ge=0)
    staged: int = Field(ge=0, le=8)
    undrained: int = Field(ge=0, le=8)

    @property
    def finalized(self) -> bool:
        return self.state is CoderState.FINALIZED

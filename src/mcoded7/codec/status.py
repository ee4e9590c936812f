"""Status codes and lifecycle states shared by the streaming coders."""

from __future__ import annotations

import enum


class Mcoded7Status(enum.Enum):
    """Result of every ``encode()``/``decode()``/``finalize()`` call.

    Attributes:
        ALL_INPUT_CONSUMED: The input view is exhausted; supply more input or finalize.
        NEEDS_MORE_OUTPUT: The output view filled up mid-block; supply more capacity
            and call again.
        ALREADY_FINALIZED: The coder already finished; nothing was done.
        FINISHED: The final block was flushed; the coder is now finalized.
    """

    ALL_INPUT_CONSUMED = "all_input_consumed"
    NEEDS_MORE_OUTPUT = "needs_more_output"
    ALREADY_FINALIZED = "already_finalized"
    FINISHED = "finished"


class CoderState(enum.Enum):
    """Lifecycle of a coder instance. The transition is one-way."""

    STREAMING = "streaming"
    FINALIZED = "finalized"

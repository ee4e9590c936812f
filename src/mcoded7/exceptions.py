"""Exception hierarchy for mcoded7.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Mcoded7Error for easy catching of any mcoded7-specific error.

Flow-control conditions of the streaming coders (output starvation, calls after
finalization) are reported through ``Mcoded7Status`` values, never through exceptions.
"""

from __future__ import annotations


class Mcoded7Error(Exception):
    """Base exception for all mcoded7 errors."""

    pass


class BlockSizeError(Mcoded7Error):
    """Raised when a block transform receives a block of the wrong size.

    Examples:
        - ``encode_block()`` called with fewer or more than 7 bytes
        - ``decode_block()`` called with fewer or more than 8 bytes
    """

    pass


class DecodeError(Mcoded7Error):
    """Raised when one-shot decoding cannot satisfy the caller's request.

    Examples:
        - Out-of-band length larger than the decoded payload
    """

    pass


class CoderStateError(Mcoded7Error):
    """Raised when a stream driver is handed a coder in the wrong state.

    Examples:
        - ``transcode_stream()`` called with a coder that is already finalized
    """

    pass

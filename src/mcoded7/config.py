"""Configuration for stream transcoding.

This module provides the configuration dataclass used by transcode_stream()
and the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StreamConfig:
    """Buffer sizes for driving a coder over file objects.

    Attributes:
        read_chunk_size: Bytes read from the input file per read() call (default 4096).
        output_buffer_size: Capacity of the output window handed to the coder
            (default 4096). Any positive size works, down to a single byte; the
            coder resumes mid-block when the window fills.

    Examples:
        ```python
        from mcoded7 import Mcoded7Encoder, StreamConfig, transcode_stream

        # Small SysEx-sized output windows
        config = StreamConfig(read_chunk_size=256, output_buffer_size=48)

        with open("firmware.bin", "rb") as src, open("firmware.m7", "wb") as dst:
            stats = transcode_stream(Mcoded7Encoder(), src, dst, config)
        ```
    """

    read_chunk_size: int = 4096  # bytes
    output_buffer_size: int = 4096  # bytes

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.read_chunk_size <= 0:
            raise ValueError(f"read_chunk_size must be > 0, got {self.read_chunk_size}")

        if self.output_buffer_size <= 0:
            raise ValueError(f"output_buffer_size must be > 0, got {self.output_buffer_size}")

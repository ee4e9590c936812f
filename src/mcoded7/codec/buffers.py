"""Bounded, position-tracked byte views used as coder input and output.

A coder never owns its buffers. Callers hand it a ``ByteSource`` to read from
and a ``ByteSink`` to write into, and may replace either between calls.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _window(length: int, start: int, end: Optional[int]) -> tuple[int, int]:
    if end is None:
        end = length
    if start < 0 or end > length or start > end:
        raise ValueError(f"Invalid window [{start}:{end}] over {length} bytes")
    return start, end


class ByteSource:
    """Read-only view over a window of a bytes-like object.

    Example:
        >>> source = ByteSource(b"abcdef", start=2)
        >>> source.read(3)
        b'cde'
        >>> source.remaining
        1
    """

    def __init__(self, data: BytesLike, start: int = 0, end: Optional[int] = None) -> None:
        """Initialize a source over ``data[start:end]``.

        Args:
            data: Bytes-like object to read from (not copied)
            start: First readable index
            end: One past the last readable index (default: end of data)

        Raises:
            ValueError: If the window falls outside data
        """
        self._data = memoryview(data).cast("B")
        self._start, self._end = _window(len(self._data), start, end)
        self._position = self._start

    @property
    def position(self) -> int:
        """Absolute index of the next byte to be read."""
        return self._position

    @property
    def consumed(self) -> int:
        """Number of bytes read from this view so far."""
        return self._position - self._start

    @property
    def remaining(self) -> int:
        """Number of bytes still readable."""
        return self._end - self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= self._end

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, fewer if the view runs out.

        Args:
            size: Maximum number of bytes to read (must be >= 0)

        Returns:
            The bytes read, empty when the view is exhausted
        """
        if size < 0:
            raise ValueError(f"read size must be non-negative, got {size}")

        stop = min(self._position + size, self._end)
        chunk = bytes(self._data[self._position : stop])
        self._position = stop
        return chunk


class ByteSink:
    """Writable view over a window of a bytearray or writable memoryview.

    Example:
        >>> sink = ByteSink.allocate(4)
        >>> sink.write(b"abcdef")
        4
        >>> sink.getvalue()
        b'abcd'
        >>> sink.full
        True
    """

    def __init__(
        self,
        buffer: Union[bytearray, memoryview],
        start: int = 0,
        end: Optional[int] = None,
    ) -> None:
        """Initialize a sink over ``buffer[start:end]``.

        Args:
            buffer: Writable buffer to fill (not copied)
            start: First writable index
            end: One past the last writable index (default: end of buffer)

        Raises:
            ValueError: If the window falls outside buffer
            TypeError: If buffer is read-only
        """
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise TypeError("ByteSink requires a writable buffer")

        self._buffer = view
        self._start, self._end = _window(len(view), start, end)
        self._position = self._start

    @classmethod
    def allocate(cls, capacity: int) -> ByteSink:
        """Create a sink over a fresh zero-filled bytearray of ``capacity`` bytes."""
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        return cls(bytearray(capacity))

    @property
    def position(self) -> int:
        """Absolute index of the next byte to be written."""
        return self._position

    @property
    def written(self) -> int:
        """Number of bytes written into this view so far."""
        return self._position - self._start

    @property
    def remaining(self) -> int:
        """Number of bytes of free capacity."""
        return self._end - self._position

    @property
    def full(self) -> bool:
        return self._position >= self._end

    def write(self, data: BytesLike) -> int:
        """Write as much of ``data`` as fits.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes accepted (0 when the sink is full)
        """
        count = min(len(data), self.remaining)
        if count:
            self._buffer[self._position : self._position + count] = bytes(data[:count])
            self._position += count
        return count

    def getvalue(self) -> bytes:
        """Return a copy of the bytes written into this view so far."""
        return bytes(self._buffer[self._start : self._position])

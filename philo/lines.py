"""Line-at-a-time reading from a stream, through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    The stream is read ``buffer_size`` characters (or bytes) at a time; any
    data past the returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted.

        A final line without a trailing newline is returned as it is.
        """
        while True:
            pending = self._pending
            if pending is not None:
                newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                index = pending.find(newline)
                if index >= 0:
                    line, rest = pending[: index + 1], pending[index + 1:]
                    self._pending = rest or None
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = None
                return pending
            self._pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line
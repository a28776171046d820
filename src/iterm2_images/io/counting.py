"""Byte-counting wrapper around output sinks."""

import errno
import io
from typing import Optional, Protocol


class Sink(Protocol):
    """Anything that accepts bytes, e.g. ``sys.stdout.buffer`` or ``io.BytesIO``.

    ``write`` returns the number of bytes accepted. ``None`` is read as a
    full write, except from an ``io.RawIOBase`` where it means a
    non-blocking stream accepted nothing.
    """

    def write(self, data: bytes, /) -> Optional[int]: ...


class ShortWriteError(OSError):
    """Raised when a sink accepts fewer bytes than it was given."""

    def __init__(self, offered: int, accepted: int):
        super().__init__(f"short write: sink accepted {accepted} of {offered} bytes")
        self.offered = offered
        self.accepted = accepted


class CountingWriter:
    """
    Forward writes to a sink and keep a running total of accepted bytes.

    Exceptions raised by the sink pass through untouched; ``written`` then
    holds the bytes accepted by every earlier write.
    """

    def __init__(self, sink: Sink):
        self.sink = sink
        self.written = 0

    def write(self, chunk: bytes) -> int:
        """Write a chunk, returning the number of bytes the sink accepted."""
        accepted = self.sink.write(chunk)
        if accepted is None:
            if isinstance(self.sink, io.RawIOBase):
                raise BlockingIOError(errno.EAGAIN, "raw sink would block", 0)
            # Buffered streams and some file-likes return None on full writes
            accepted = len(chunk)
        self.written += accepted
        if accepted < len(chunk):
            raise ShortWriteError(len(chunk), accepted)
        return accepted

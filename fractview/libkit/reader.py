"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

BUFFER_SIZE = 4096


class LineReader:
    """Split what a stream yields into lines, without their newlines.

    The stream may be text or binary; lines come back in the same type.
    Reading stops at the end of the stream, and a last line without a
    newline is still returned.
    """

    def __init__(self, stream, buffer_size=BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    @staticmethod
    def _newline(sample):
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"

    def _has_line(self):
        return self._pending is not None and self._newline(self._pending) in self._pending

    def read_line(self):
        """Return the next line, or None when the stream has nothing left."""
        while not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        line, _, rest = self._pending.partition(self._newline(self._pending))
        self._pending = rest
        return line

    def __iter__(self):
        """Yield lines until the stream is exhausted."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
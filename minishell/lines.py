"""Line-by-line reading from raw file descriptors."""

from __future__ import annotations

import codecs
import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 5


class _LineBuffer:
    """Text read from one descriptor but not yet handed out as a line."""

    def __init__(self) -> None:
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="surrogateescape")

    def clear(self) -> None:
        self._pending = ""
        self._decoder.reset()

    def _fill(self, fd: int, buffer_size: int) -> None:
        while True:
            try:
                chunk = os.read(fd, buffer_size)
            except OSError:
                self.clear()
                raise
            if not chunk:
                self._pending += self._decoder.decode(b"", final=True)
                return
            self._pending += self._decoder.decode(chunk)
            if "\n" in self._pending:
                return

    def next_line(self, fd: int, buffer_size: int) -> str | None:
        self._fill(fd, buffer_size)
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError("buffer size must be positive")


def _check_fd(fd: int) -> None:
    if fd < 0:
        raise ValueError("file descriptor must not be negative")


class LineReader:
    """Read one descriptor a line at a time.

    Each line keeps its trailing newline; the last line may have none.
    ``readline`` returns None once the descriptor is exhausted.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_fd(fd)
        _check_buffer_size(buffer_size)
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = _LineBuffer()

    def readline(self) -> str | None:
        """Return the next line, or None at end of input.

        A read error discards anything buffered and is raised.
        """
        return self._buffer.next_line(self.fd, self.buffer_size)

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


class LineReaderPool:
    """Read lines from several descriptors, keeping separate state for each."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self.buffer_size = buffer_size
        self._buffers: dict[int, _LineBuffer] = {}

    def readline(self, fd: int) -> str | None:
        """Return the next line from ``fd``, or None at end of its input."""
        _check_fd(fd)
        buffer = self._buffers.setdefault(fd, _LineBuffer())
        try:
            line = buffer.next_line(fd, self.buffer_size)
        except OSError:
            self._buffers.pop(fd, None)
            raise
        if line is None:
            self._buffers.pop(fd, None)
        return line

    def close(self, fd: int) -> None:
        """Forget anything buffered for ``fd``; the descriptor stays open."""
        self._buffers.pop(fd, None)
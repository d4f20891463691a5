"""Reading a file descriptor one line at a time.

Each descriptor keeps its own stash of bytes read past the last returned
line, so several descriptors can be read in turns without mixing their
contents.
"""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 10


class LineReader:
    """Reads lines from file descriptors in chunks of ``buffer_size`` bytes."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._stash: dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """The next line read from ``fd``, newline included, or None at the end.

        The last line of the input comes back without a newline if the
        input does not end with one. A failing read drops whatever was
        stashed for ``fd`` and raises OSError.
        """
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        chunks = [self._stash.pop(fd, b"")]
        found = b"\n" in chunks[0]
        while not found:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            found = b"\n" in chunk
        pending = b"".join(chunks)
        if not pending:
            return None
        end = pending.find(b"\n")
        cut = len(pending) if end < 0 else end + 1
        line, rest = pending[:cut], pending[cut:]
        if rest:
            self._stash[fd] = rest
        return line

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield every remaining line of ``fd`` until the end of input."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line of ``fd`` using a shared reader with the default buffer size."""
    return _default_reader.next_line(fd)
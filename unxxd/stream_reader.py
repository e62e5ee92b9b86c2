"""
Stream reading utilities for dumping and undoing.
"""

import sys
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .errors import ReadFailure


class ChunkReader:
    """Reads fixed-size chunks or lines from a binary stream."""

    def __init__(self, stream: BinaryIO, owned: bool = False):
        """
        Initialize chunk reader.

        Args:
            stream: Binary stream to read from
            owned: Close the stream on context manager exit
        """
        self.stream = stream
        self.owned = owned
        self.position = 0

    @classmethod
    def open(cls, file_path: Optional[Path] = None) -> 'ChunkReader':
        """Open a file for reading, or standard input if no path is given."""
        if file_path is None:
            return cls(sys.stdin.buffer)
        return cls(open(Path(file_path), 'rb'), owned=True)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.owned:
            self.stream.close()

    def _read(self, count: int) -> bytes:
        try:
            return self.stream.read(count)
        except OSError as e:
            raise ReadFailure(f"reading input failed: {e}") from e

    def read_chunk(self, count: int) -> bytes:
        """
        Read up to count bytes, retrying short reads.

        A single read on a pipe or socket may return fewer bytes than asked
        for. Keep reading until the chunk is full or the stream is exhausted;
        an empty result means end of stream.
        """
        buf = bytearray()
        while len(buf) < count:
            data = self._read(count - len(buf))
            if not data:
                break
            buf += data
        self.position += len(buf)
        return bytes(buf)

    def lines(self) -> Iterator[bytes]:
        """Yield lines, including their line terminators."""
        while True:
            try:
                line = self.stream.readline()
            except OSError as e:
                raise ReadFailure(f"reading input failed: {e}") from e
            if not line:
                return
            self.position += len(line)
            yield line

    def tell(self) -> int:
        """Get the number of bytes delivered so far."""
        return self.position

"""
Tests for the chunk reader.
"""

import io
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unxxd.errors import ReadFailure
from unxxd.stream_reader import ChunkReader


class TrickleStream(io.RawIOBase):
    """Returns at most one byte per read, like a slow pipe."""

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def readable(self):
        return True

    def read(self, size=-1):
        chunk = self.data[self.pos:self.pos + 1]
        self.pos += len(chunk)
        return chunk


class BrokenStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device not ready")

    def readline(self, size=-1):
        raise OSError("device not ready")


def test_chunk_reader_context_manager(tmp_path):
    """Test that ChunkReader opens and closes files."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01\x02\x03\x04')

    with ChunkReader.open(test_file) as reader:
        assert reader.read_chunk(3) == b'\x01\x02\x03'
        assert reader.read_chunk(3) == b'\x04'
        assert reader.read_chunk(3) == b''
    assert reader.stream.closed


def test_chunk_reader_leaves_foreign_stream_open():
    """Test that streams handed in by the caller stay open."""
    stream = io.BytesIO(b'abc')
    with ChunkReader(stream) as reader:
        reader.read_chunk(1)
    assert not stream.closed


def test_missing_file(tmp_path):
    """Test that opening a missing file fails."""
    with pytest.raises(FileNotFoundError):
        ChunkReader.open(tmp_path / "missing.bin")


def test_read_chunk_retries_short_reads():
    """Test that partial reads are retried until the chunk is full."""
    reader = ChunkReader(TrickleStream(b'0123456789'))
    assert reader.read_chunk(4) == b'0123'
    assert reader.read_chunk(4) == b'4567'
    assert reader.read_chunk(4) == b'89'
    assert reader.read_chunk(4) == b''
    assert reader.tell() == 10


def test_lines():
    """Test line iteration keeps terminators and counts bytes."""
    reader = ChunkReader(io.BytesIO(b'one\ntwo\r\nthree'))
    assert list(reader.lines()) == [b'one\n', b'two\r\n', b'three']
    assert reader.tell() == 14


def test_read_failure():
    """Test that OS errors surface as ReadFailure."""
    reader = ChunkReader(BrokenStream())
    with pytest.raises(ReadFailure) as excinfo:
        reader.read_chunk(16)
    assert isinstance(excinfo.value.__cause__, OSError)
    with pytest.raises(ReadFailure):
        list(reader.lines())


if __name__ == '__main__':
    pytest.main([__file__])

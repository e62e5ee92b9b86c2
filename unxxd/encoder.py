"""
Encoder producing hex dumps from binary data.

One driver reads the input in width-sized chunks; a renderer turns each
chunk into a line of text. Two renderers exist: the plain xxd-like dump,
which the decoder can read back, and a C-style byte array with comments.
"""

from typing import BinaryIO, TextIO

from .config import DEFAULT_WIDTH
from .errors import ConfigError, WriteFailure
from .stream_reader import ChunkReader


def ascii_column(chunk: bytes) -> str:
    """Printable graphic ASCII as itself, everything else as a dot."""
    return ''.join(chr(b) if 0x21 <= b <= 0x7e else '.' for b in chunk)


class PlainRenderer:
    """xxd style: `00000010: 4142 4344 ...  ABCD...`"""

    def __init__(self, numbers: bool = True, width: int = DEFAULT_WIDTH):
        self.numbers = numbers
        self.width = width

    def render(self, offset: int, chunk: bytes) -> str:
        parts = []
        if self.numbers:
            parts.append(f"{offset:08x}: ")
        for i in range(self.width):
            parts.append(f"{chunk[i]:02x}" if i < len(chunk) else '  ')
            if i % 2 == 1:
                parts.append(' ')
        parts.append(' ')
        if self.width % 2:
            parts.append(' ')
        parts.append(ascii_column(chunk))
        return ''.join(parts)


class CodeRenderer:
    """Byte array literal style: `/* 0010 */ 0x41, 0x42, ... // AB...`"""

    def __init__(self, numbers: bool = True, width: int = DEFAULT_WIDTH):
        self.numbers = numbers
        self.width = width

    def render(self, offset: int, chunk: bytes) -> str:
        parts = []
        if self.numbers:
            parts.append(f"/* {offset:04x} */ ")
        for i in range(self.width):
            parts.append(f"0x{chunk[i]:02x}, " if i < len(chunk) else ' ' * 6)
        parts.append('// ')
        parts.append(ascii_column(chunk))
        return ''.join(parts)


RENDERERS = {
    'plain': PlainRenderer,
    'code': CodeRenderer,
}


def make_renderer(style: str, numbers: bool = True, width: int = DEFAULT_WIDTH):
    try:
        renderer_class = RENDERERS[style]
    except KeyError:
        raise ConfigError(f"unknown style '{style}'") from None
    return renderer_class(numbers, width)


class HexEncoder:
    """Chunk loop shared by all renderers."""

    def __init__(self, sink: TextIO, renderer, width: int = DEFAULT_WIDTH):
        """
        Initialize encoder.

        Args:
            sink: Text stream receiving the dump lines
            renderer: Object with a render(offset, chunk) -> str method
            width: Bytes per line
        """
        if width < 1:
            raise ConfigError(f"width must be at least 1, got {width}")
        self.sink = sink
        self.renderer = renderer
        self.width = width
        self.offset = 0

    def encode(self, reader: ChunkReader) -> int:
        """Dump everything the reader yields. Returns the byte count."""
        while True:
            chunk = reader.read_chunk(self.width)
            if not chunk:
                break
            line = self.renderer.render(self.offset, chunk)
            try:
                self.sink.write(line + '\n')
            except OSError as e:
                raise WriteFailure(f"writing output failed: {e}") from e
            self.offset += len(chunk)
        return self.offset


def dump(stream: BinaryIO, sink: TextIO, numbers: bool = True,
         width: int = DEFAULT_WIDTH, style: str = 'plain') -> int:
    """
    Write a hex dump of stream to sink.

    Args:
        stream: Binary stream to dump
        sink: Text stream receiving the dump
        numbers: Prefix every line with its offset
        width: Bytes per line
        style: 'plain' or 'code'

    Returns:
        Number of bytes dumped
    """
    renderer = make_renderer(style, numbers, width)
    encoder = HexEncoder(sink, renderer, width)
    return encoder.encode(ChunkReader(stream))

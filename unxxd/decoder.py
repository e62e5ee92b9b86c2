"""
Decoder turning hex dumps back into binary data.

Lines are processed one at a time and the bytes of each line are written
out as soon as the line has been checked. Two pieces of state carry over
from one line to the next:

- the running offset, compared against the offset of every numbered line
- a pending nibble, when a byte's two hex digits straddle a line break
"""

from typing import BinaryIO, Iterable, Optional, Union

from .errors import (
    InvalidLine, InvalidOffsetEncoding, OffsetMismatch, InvalidCharacter,
    TruncatedStream, WriteFailure,
)
from .grammar import HEX_DIGITS, WHITESPACE, is_hex, split_line
from .stream_reader import ChunkReader


class HexDecoder:
    """Line state machine for undoing a hex dump."""

    def __init__(self, sink: BinaryIO, numbers: bool = True):
        """
        Initialize decoder.

        Args:
            sink: Binary stream receiving the decoded bytes
            numbers: Whether every line starts with an offset
        """
        self.sink = sink
        self.numbers = numbers
        self.offset = 0
        self.carry: Optional[int] = None
        self.line_no = -1
        self.last_line = ''

    def decode_line(self, line_no: int, line: str) -> bytes:
        """Check one dump line, write its bytes out and return them."""
        self.line_no = line_no
        self.last_line = line = line.rstrip('\r\n')

        parsed = split_line(line, self.numbers)
        if parsed is None:
            raise InvalidLine(line_no, line)

        if self.numbers:
            if not is_hex(parsed.offset_text):
                raise InvalidOffsetEncoding(line_no, line, parsed.offset_text)
            offset = int(parsed.offset_text, 16)
            if offset != self.offset:
                raise OffsetMismatch(line_no, line, self.offset, offset)

        data = bytearray()
        for c in parsed.payload:
            if c in HEX_DIGITS:
                nibble = int(c, 16)
                if self.carry is None:
                    self.carry = nibble
                else:
                    data.append(self.carry << 4 | nibble)
                    self.carry = None
            elif c not in WHITESPACE:
                raise InvalidCharacter(line_no, line, c)

        self._write(data)
        self.offset += len(data)
        return bytes(data)

    def finish(self):
        """End of input: a half byte still pending means the input was cut short."""
        if self.carry is not None:
            raise TruncatedStream(self.line_no, self.last_line)

    def decode(self, lines: Iterable[Union[str, bytes]]) -> int:
        """Decode every line, then run the end-of-input check. Returns the byte count."""
        for line_no, line in enumerate(lines):
            if isinstance(line, bytes):
                # latin-1 maps every byte, so stray bytes surface as invalid characters
                line = line.decode('latin-1')
            self.decode_line(line_no, line)
        self.finish()
        return self.offset

    def _write(self, data: bytes):
        if not data:
            return
        try:
            self.sink.write(data)
        except OSError as e:
            raise WriteFailure(f"writing output failed: {e}") from e


def undo(stream: BinaryIO, sink: BinaryIO, numbers: bool = True) -> int:
    """
    Turn a hex dump read from stream back into bytes written to sink.

    Args:
        stream: Binary stream holding the dump text
        sink: Binary stream receiving the bytes
        numbers: Whether lines carry offsets

    Returns:
        Number of bytes written
    """
    decoder = HexDecoder(sink, numbers)
    return decoder.decode(ChunkReader(stream).lines())

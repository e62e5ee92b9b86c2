"""
Exceptions raised while dumping and undoing hex dumps.
"""


class UnxxdError(Exception):
    """Base class for all unxxd errors."""


class ConfigError(UnxxdError):
    """Invalid run configuration."""


class DecodeError(UnxxdError):
    """
    A dump line could not be turned back into bytes.

    Attributes:
        line_no: Zero-based number of the offending line
        line: Raw text of the offending line
        reason: Human readable description of the problem
    """

    def __init__(self, line_no: int, line: str, reason: str):
        super().__init__(f"{reason} on line {line_no}: {line}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


class InvalidLine(DecodeError):
    def __init__(self, line_no: int, line: str):
        super().__init__(line_no, line, "invalid line")


class InvalidOffsetEncoding(DecodeError):
    def __init__(self, line_no: int, line: str, offset_text: str):
        super().__init__(line_no, line,
                         f"offset looked like hex, but was rejected: '{offset_text}'")
        self.offset_text = offset_text


class OffsetMismatch(DecodeError):
    def __init__(self, line_no: int, line: str, expected: int, actual: int):
        super().__init__(line_no, line,
                         f"invalid offset, expected {expected} but was {actual}")
        self.expected = expected
        self.actual = actual


class InvalidCharacter(DecodeError):
    def __init__(self, line_no: int, line: str, char: str):
        super().__init__(line_no, line, f"invalid character {char!r} in data")
        self.char = char


class TruncatedStream(DecodeError):
    """Input ended with half a byte still pending."""

    def __init__(self, line_no: int, line: str):
        super().__init__(line_no, line, "input ended in the middle of a byte")


class StreamError(UnxxdError):
    """I/O failure on the input or output stream."""


class ReadFailure(StreamError):
    pass


class WriteFailure(StreamError):
    pass

"""
unxxd - a less rage inducing xxd.

Converts binary data to hex dumps and hex dumps back to binary data.
"""

from .errors import (
    UnxxdError, ConfigError, DecodeError, InvalidLine, InvalidOffsetEncoding,
    OffsetMismatch, InvalidCharacter, TruncatedStream, StreamError,
    ReadFailure, WriteFailure,
)
from .decoder import HexDecoder, undo
from .encoder import HexEncoder, PlainRenderer, CodeRenderer, dump

__version__ = '0.1.0'

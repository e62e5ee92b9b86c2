"""
Line grammar for hex dumps.

A dump line is an optional offset followed by hex data:

    [(0x)?<offset>:] <hex> [<hex> ...]  [<ascii column>]

Whitespace of any length may separate hex runs. The encoder's ASCII column
is recognised as the single token after the last gap of two or more
whitespace characters, when it has one character per byte of data before
it. A column holding something other than hex digits is always taken as
ASCII; an all-hex one only when it is the line's only gap.
"""

import re
import string
from typing import NamedTuple, Optional

HEX_DIGITS = frozenset(string.hexdigits)
WHITESPACE = frozenset(string.whitespace)

OFFSET_RE = re.compile(r'^(?:0[xX])?([^:\s]+):(.*)$', re.ASCII)
GAP_RE = re.compile(r'\s{2,}', re.ASCII)


class ParsedLine(NamedTuple):
    offset_text: Optional[str]
    payload: str


def is_hex(text: str) -> bool:
    return bool(text) and all(c in HEX_DIGITS for c in text)


def strip_ascii_column(text: str) -> str:
    """Drop a trailing ASCII column from stripped dump data, if there is one."""
    gaps = list(GAP_RE.finditer(text))
    if not gaps:
        return text
    data, column = text[:gaps[-1].start()], text[gaps[-1].end():]
    if any(c in WHITESPACE for c in column):
        return text
    digits = sum(1 for c in data if c in HEX_DIGITS)
    if len(column) * 2 != digits:
        return text
    if is_hex(column) and len(gaps) > 1:
        return text
    return data


def split_line(line: str, numbers: bool) -> Optional[ParsedLine]:
    """
    Split a dump line into offset text and hex payload.

    Returns None when the line does not have the required shape: a missing
    offset prefix when numbers is set, or no data at all.
    """
    line = line.rstrip('\r\n')
    offset_text = None
    if numbers:
        m = OFFSET_RE.match(line)
        if not m:
            return None
        offset_text, line = m.group(1), m.group(2)
    payload = strip_ascii_column(line.strip(string.whitespace))
    if not payload:
        return None
    return ParsedLine(offset_text, payload)

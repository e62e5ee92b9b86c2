#!/usr/bin/env python3
"""
Command-line interface for unxxd.
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import DumpConfig, DEFAULT_WIDTH
from .decoder import undo
from .encoder import dump
from .errors import UnxxdError
from .output import debug, error, set_debug
from .stream_reader import ChunkReader


def positive_int(text: str) -> int:
    """argparse type for --width."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: '{text}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"width must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='unxxd', description='a less rage inducing xxd')
    parser.add_argument('input', type=Path, nargs='?', default=None,
                        help='Input file (default: standard input)')
    parser.add_argument('-r', '--reverse', action='store_true',
                        help='reverse operation: convert hexdump into binary')
    parser.add_argument('-n', '--no-addresses', dest='numbers', action='store_false',
                        help="don't produce (or require) addresses")
    parser.add_argument('-w', '--width', type=positive_int, default=DEFAULT_WIDTH,
                        help=f'Bytes per line (default: {DEFAULT_WIDTH})')
    parser.add_argument('--code', dest='style', action='store_const', const='code',
                        default='plain', help='dump as a commented byte array')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='print diagnostics to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(config: DumpConfig) -> int:
    """Run one dump or undo according to config. Returns the byte count."""
    with ChunkReader.open(config.input) as reader:
        if config.reverse:
            debug(f"Undoing dump from {config.input or '<stdin>'}, addresses={config.numbers}")
            count = undo(reader.stream, sys.stdout.buffer, config.numbers)
            sys.stdout.buffer.flush()
        else:
            debug(f"Dumping {config.input or '<stdin>'}, width={config.width}, "
                  f"style={config.style}, addresses={config.numbers}")
            count = dump(reader.stream, sys.stdout, config.numbers, config.width, config.style)
            sys.stdout.flush()
    debug(f"Processed {count} bytes")
    return count


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = DumpConfig(
        reverse=args.reverse,
        numbers=args.numbers,
        width=args.width,
        style=args.style,
        input=args.input,
        debug=args.debug,
    )
    try:
        config.validate()
    except UnxxdError as e:
        parser.error(str(e))
    set_debug(config.debug)

    if config.input is not None and not config.input.exists():
        error(f"File not found: {config.input}")
        return 1

    try:
        run(config)
    except (UnxxdError, OSError) as e:
        error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

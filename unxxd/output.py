"""
Diagnostic output. Everything goes to stderr; stdout carries the data.
"""

import sys

DEBUG = False


def set_debug(flag: bool):
    global DEBUG
    DEBUG = flag


def debug(msg: str):
    if DEBUG:
        print(msg, file=sys.stderr)


def error(msg: str):
    print(f"error: {msg}", file=sys.stderr)

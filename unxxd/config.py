"""
Run configuration for unxxd.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigError

STYLES = ('plain', 'code')
DEFAULT_WIDTH = 16


@dataclass
class DumpConfig:
    """Options collected from the command line."""
    reverse: bool = False
    numbers: bool = True
    width: int = DEFAULT_WIDTH
    style: str = 'plain'
    input: Optional[Path] = None
    debug: bool = False

    def validate(self) -> 'DumpConfig':
        """Check option combinations, raising ConfigError on the first problem."""
        if self.style not in STYLES:
            raise ConfigError(f"unknown style '{self.style}'")
        if self.reverse and self.style != 'plain':
            raise ConfigError("--code cannot be combined with --reverse")
        return self

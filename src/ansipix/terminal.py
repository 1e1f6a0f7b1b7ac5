import os
import sys

DEFAULT_SIZE = (80, 24)
MAX_WIDTH = 120
MIN_HEIGHT = 70
MAX_HEIGHT = 120
FALLBACK_HEIGHT = 100


def is_terminal() -> bool:
    return sys.stdout.isatty()


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty.

    An OSError from querying a real tty is not caught.
    """
    if not is_terminal():
        return DEFAULT_SIZE
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def clamp_terminal_size(width: int, height: int) -> tuple[int, int]:
    """Bound the character grid: width at most 120, height outside [70, 120] becomes 100."""
    if width > MAX_WIDTH:
        width = MAX_WIDTH
    if height < MIN_HEIGHT or height > MAX_HEIGHT:
        height = FALLBACK_HEIGHT
    return (width, height)


def grid_size() -> tuple[int, int]:
    return clamp_terminal_size(*get_terminal_size())

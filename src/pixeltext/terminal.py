import os
import sys

from pixeltext.settings import MAX_WIDTH, MIN_WIDTH

DEFAULT_COLUMNS = 80


def default_width() -> int:
    """Terminal columns clamped to the supported width range, or 80 if not a tty."""
    if not sys.stdout.isatty():
        return DEFAULT_COLUMNS
    columns = os.get_terminal_size().columns
    return max(MIN_WIDTH, min(columns, MAX_WIDTH))

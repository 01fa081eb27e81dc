"""ANSI escape handling and terminal row arithmetic."""

import re

from rich.cells import cell_len
from rich.control import Control
from rich.segment import ControlType

# CSI (ESC [ ... final), OSC (ESC ] ... BEL/ST) and 8-bit CSI sequences
ANSI_PATTERN = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x9b[0-?]*[ -/]*[@-~]"
)


def strip_ansi(text: str) -> str:
    """Return text with ANSI escape sequences removed.

    Repeats until nothing matches, since removing one sequence can join
    the pieces of another.
    """
    while True:
        stripped = ANSI_PATTERN.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def visual_line_count(text: str, columns: int) -> int:
    """Number of terminal rows text occupies when wrapped at columns.

    columns == 0 disables wrapping: one row per newline-delimited line.
    """
    lines = strip_ansi(text).split("\n")
    if columns <= 0:
        return len(lines)
    return sum(max(1, -(-cell_len(line) // columns)) for line in lines)


def clear_sequence(text: str, columns: int) -> str:
    """Escape sequence erasing the rows text occupies, bottom to top.

    The cursor must sit on the last row of text; it ends at column 0 of the
    first erased row.
    """
    rows = max(1, visual_line_count(text, columns))
    erase_line = str(Control((ControlType.ERASE_IN_LINE, 2)))
    up = str(Control.move(y=-1))
    return (erase_line + up) * (rows - 1) + erase_line + str(Control.move_to_column(0))

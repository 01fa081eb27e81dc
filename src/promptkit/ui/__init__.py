"""Terminal-facing helpers shared by prompt elements."""

from .ansi import clear_sequence, strip_ansi, visual_line_count
from .figures import Figures
from .keys import Key, KeyName, PromptAction, decide, parse_key
from .terminal import Terminal

__all__ = [
    "Figures",
    "Key",
    "KeyName",
    "PromptAction",
    "Terminal",
    "clear_sequence",
    "decide",
    "parse_key",
    "strip_ansi",
    "visual_line_count",
]

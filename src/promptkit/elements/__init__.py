"""Prompt element implementations."""

from .base import PromptIO
from .confirm import ConfirmPromptOptions, run_confirm
from .number import NumberPromptOptions, run_number
from .select import SelectPromptOptions, run_select
from .text import TextPromptOptions, run_text
from .toggle import TogglePromptOptions, run_toggle

__all__ = [
    "ConfirmPromptOptions",
    "NumberPromptOptions",
    "PromptIO",
    "SelectPromptOptions",
    "TextPromptOptions",
    "TogglePromptOptions",
    "run_confirm",
    "run_number",
    "run_select",
    "run_text",
    "run_toggle",
]

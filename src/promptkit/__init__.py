"""Interactive command-line prompts: text, confirm, number, select, toggle, list, password, invisible."""

from .elements import (
    ConfirmPromptOptions,
    NumberPromptOptions,
    SelectPromptOptions,
    TextPromptOptions,
    TogglePromptOptions,
    run_confirm,
    run_number,
    run_select,
    run_text,
    run_toggle,
)
from .errors import (
    InputClosedError,
    InvalidSelectionError,
    InvalidValueError,
    PromptAborted,
    PromptError,
    TerminalModeError,
    UnknownQuestionTypeError,
)
from .models import Choice, InputStyle, PromptValue, Question, QuestionType
from .sequence import prompt, run_prompt
from .ui import Figures, Terminal, clear_sequence, strip_ansi, visual_line_count

__all__ = [
    "Choice",
    "ConfirmPromptOptions",
    "Figures",
    "InputClosedError",
    "InputStyle",
    "InvalidSelectionError",
    "InvalidValueError",
    "NumberPromptOptions",
    "PromptAborted",
    "PromptError",
    "PromptValue",
    "Question",
    "QuestionType",
    "SelectPromptOptions",
    "Terminal",
    "TerminalModeError",
    "TextPromptOptions",
    "TogglePromptOptions",
    "UnknownQuestionTypeError",
    "clear_sequence",
    "prompt",
    "run_confirm",
    "run_number",
    "run_prompt",
    "run_select",
    "run_text",
    "run_toggle",
    "strip_ansi",
    "visual_line_count",
]

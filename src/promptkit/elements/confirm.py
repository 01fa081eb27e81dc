"""Confirm (yes/no) prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from rich.markup import escape

from promptkit.config import Config
from promptkit.ui.formatting import done_line, prompt_line
from promptkit.ui.terminal import Terminal

from .base import PromptIO

YES_ANSWERS = frozenset({"y", "yes"})


@dataclass
class ConfirmPromptOptions:
    message: str
    initial: bool = False
    yes_msg: str = "yes"
    no_msg: str = "no"
    yes_option: str = "(Y/n)"
    no_option: str = "(y/N)"


def run_confirm(
    options: ConfirmPromptOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> bool:
    """Ask a yes/no question. Anything but y/yes is no; empty keeps the initial."""
    ctx = PromptIO(stdin, stdout, terminal, config)
    hint = options.yes_option if options.initial else options.no_option
    ctx.write(prompt_line(ctx.figures, options.message, f"[dim]{escape(hint)}[/dim]"))

    raw = ctx.read_line().strip().lower()
    value = options.initial if not raw else raw in YES_ANSWERS

    ctx.writeln(done_line(ctx.figures, options.message, options.yes_msg if value else options.no_msg))
    return value

"""Toggle (on/off) prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from rich.markup import escape

from promptkit.config import Config
from promptkit.ui.formatting import done_line, prompt_line
from promptkit.ui.terminal import Terminal

from .base import PromptIO
from .confirm import YES_ANSWERS

ON_ANSWERS = YES_ANSWERS | {"on"}


@dataclass
class TogglePromptOptions:
    message: str
    initial: bool = False
    active: str = "on"
    inactive: str = "off"


def run_toggle(
    options: TogglePromptOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> bool:
    """Ask for an on/off value, shown with the active/inactive labels."""
    ctx = PromptIO(stdin, stdout, terminal, config)
    if options.initial:
        hint = f"[dim](Y/n)[/dim] {escape(options.active)}"
    else:
        hint = f"[dim](y/N)[/dim] {escape(options.inactive)}"
    ctx.write(prompt_line(ctx.figures, options.message, hint))

    raw = ctx.read_line().strip().lower()
    value = options.initial if not raw else raw in ON_ANSWERS

    ctx.writeln(done_line(ctx.figures, options.message, options.active if value else options.inactive))
    return value

"""Text prompt (plain, password and invisible echo)."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from typing import IO

from rich.markup import escape

from promptkit.config import Config
from promptkit.models import InputStyle
from promptkit.ui.formatting import done_line, prompt_line, render_style
from promptkit.ui.terminal import Terminal

from .base import PromptIO


@dataclass
class TextPromptOptions:
    message: str
    initial: str | None = None
    style: InputStyle = InputStyle.DEFAULT


def run_text(
    options: TextPromptOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> str:
    """Ask for one line of text.

    An empty answer falls back to the initial value (or ""). The style only
    changes how the answer is echoed, never the returned value.
    """
    ctx = PromptIO(stdin, stdout, terminal, config)
    initial = options.initial or ""
    placeholder = f"[dim]{escape(initial)}[/dim]" if initial and options.style is InputStyle.DEFAULT else ""
    ctx.write(prompt_line(ctx.figures, options.message, placeholder))

    hide = options.style is not InputStyle.DEFAULT and ctx.terminal.is_interactive()
    with ctx.terminal.hidden_input() if hide else contextlib.nullcontext():
        line = ctx.read_line()
    if hide:
        # the Enter keypress was not echoed
        ctx.writeln()

    value = line.strip() or initial
    ctx.writeln(done_line(ctx.figures, options.message, render_style(value, options.style)))
    return value

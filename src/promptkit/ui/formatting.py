"""Shared formatting for prompt lines (Rich markup)."""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.markup import escape

from promptkit.config import Config
from promptkit.models import InputStyle

from .figures import Figures


def make_console(file: IO[str], config: Config | None = None) -> Console:
    """Console bound to a prompt's output stream.

    Colour is only emitted when the stream is a terminal and the color
    setting is on. Rich's own wrapping is off so row arithmetic stays ours.
    """
    cfg = config or Config.load()
    return Console(
        file=file,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        no_color=not cfg.color,
    )


def symbol(figures: Figures, done: bool = False, aborted: bool = False, exited: bool = False) -> str:
    """Leading prompt symbol: ?, tick, or cross.

    Returns:
        Rich markup string
    """
    if aborted:
        return f"[red]{figures.cross}[/red]"
    if exited:
        return f"[yellow]{figures.cross}[/yellow]"
    if done:
        return f"[green]{figures.tick}[/green]"
    return "[cyan]?[/cyan]"


def delimiter(figures: Figures, completing: bool = False) -> str:
    """Separator between message and answer (pointer while asking, ellipsis when done)."""
    glyph = figures.ellipsis if completing else figures.pointer_small
    return f"[dim]{escape(glyph)}[/dim]"


def message(text: str) -> str:
    return f"[bold]{escape(text)}[/bold]"


def render_style(value: str, style: InputStyle) -> str:
    """Transform an answer for display. The answer itself is never changed."""
    if style is InputStyle.PASSWORD:
        return "*" * len(value)
    if style is InputStyle.INVISIBLE:
        return ""
    return value


def prompt_line(figures: Figures, text: str, suffix: str = "") -> str:
    """Pending line: ``? message › suffix``."""
    line = f"{symbol(figures)} {message(text)} {delimiter(figures)}"
    return f"{line} {suffix}" if suffix else f"{line} "


def done_line(figures: Figures, text: str, answer: str) -> str:
    """Completed line: ``✔ message … answer``."""
    return f"{symbol(figures, done=True)} {message(text)} {delimiter(figures, completing=True)} {escape(answer)}"

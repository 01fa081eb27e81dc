"""Select prompt: single choice from a menu.

On a terminal the menu is navigated key by key (arrows move between enabled
choices, typed text is matched on Return). Without a terminal the menu is
printed once and one line of input is matched against it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO

import readchar
from rich.markup import escape
from rich.text import Text

from promptkit.config import Config
from promptkit.errors import InvalidSelectionError, PromptAborted
from promptkit.models import Choice
from promptkit.ui.ansi import clear_sequence, strip_ansi
from promptkit.ui.formatting import delimiter, done_line, message, symbol
from promptkit.ui.keys import PromptAction, decide, parse_key
from promptkit.ui.terminal import Terminal

from .base import PromptIO

logger = logging.getLogger("promptkit.select")

SUBMIT_CHARS = (readchar.key.CR, readchar.key.LF)

# Parameter and intermediate bytes of a CSI sequence; any other byte ends it
CSI_PARAM_BYTES = ("\x20", "\x3f")


@dataclass
class SelectPromptOptions:
    message: str
    choices: Sequence[Choice]
    initial: int | None = None
    hint: str | None = None


def next_enabled(choices: Sequence[Choice], index: int) -> int:
    """First enabled choice strictly after index, or index if there is none."""
    for i in range(index + 1, len(choices)):
        if not choices[i].disabled:
            return i
    return index


def prev_enabled(choices: Sequence[Choice], index: int) -> int:
    """First enabled choice strictly before index, or index if there is none."""
    for i in range(index - 1, -1, -1):
        if not choices[i].disabled:
            return i
    return index


def initial_selection(choices: Sequence[Choice], initial: int | None) -> int:
    """Clamp initial into range and move it forward off a disabled choice."""
    if not choices:
        return 0
    index = min(max(initial or 0, 0), len(choices) - 1)
    if choices[index].disabled:
        index = next_enabled(choices, index)
    return index


def parse_selection(text: str, choices: Sequence[Choice], initial: int | None = None) -> int:
    """Resolve typed text to a choice index.

    Tries, in order: a 1-based number within range, a case-insensitive title
    or value match, then the initial index (or 0). Never fails; whether the
    index is selectable is checked by the caller.
    """
    raw = text.strip()
    try:
        number = int(raw)
    except ValueError:
        number = 0
    if 1 <= number <= len(choices):
        return number - 1

    wanted = raw.casefold()
    for i, choice in enumerate(choices):
        if choice.title.casefold() == wanted or choice.value.casefold() == wanted:
            return i

    return initial if initial is not None else 0


class SelectState:
    """Menu choices and the highlighted index."""

    def __init__(self, choices: Sequence[Choice], selected: int):
        self.choices = choices
        self.selected = selected

    def move_up(self) -> bool:
        """Select the previous enabled choice. Returns False at the top."""
        index = prev_enabled(self.choices, self.selected)
        moved = index != self.selected
        self.selected = index
        return moved

    def move_down(self) -> bool:
        """Select the next enabled choice. Returns False at the bottom."""
        index = next_enabled(self.choices, self.selected)
        moved = index != self.selected
        self.selected = index
        return moved

    def select_typed(self, typed: str, initial: int | None) -> None:
        """Jump to the choice typed text resolves to, if it is selectable."""
        index = parse_selection(typed, self.choices, initial)
        if 0 <= index < len(self.choices) and not self.choices[index].disabled:
            self.selected = index


class SelectPrompt:
    """One invocation of the select menu."""

    def __init__(self, options: SelectPromptOptions, ctx: PromptIO):
        self.options = options
        self.ctx = ctx
        self.hint = options.hint or ctx.config.select_hint
        self.state = SelectState(
            list(options.choices), initial_selection(options.choices, options.initial)
        )

    def show(self) -> str:
        """Run the prompt and return the chosen value."""
        if not self.state.choices:
            raise InvalidSelectionError("select prompt has no choices")

        if self.ctx.terminal.is_interactive():
            logger.debug("Select %r: interactive path", self.options.message)
            drawn = self._run_interactive()
            self.ctx.write_control(clear_sequence(drawn, self.ctx.console.width))
        else:
            logger.debug("Select %r: line path", self.options.message)
            self._run_line()

        return self._finish()

    def _run_line(self) -> None:
        self._draw(highlight=False)
        line = strip_ansi(self.ctx.read_line())
        self.state.selected = parse_selection(line, self.state.choices, self.options.initial)

    def _run_interactive(self) -> str:
        """Key-by-key loop. Returns the plain text of the block left on screen."""
        ctx = self.ctx
        with ctx.terminal.raw_mode():
            drawn = self._draw(highlight=True)
            typed = ""
            while True:
                char = ctx.read_char()
                if char in SUBMIT_CHARS:
                    if typed:
                        self.state.select_typed(typed, self.options.initial)
                    return drawn

                if char == readchar.key.ESC:
                    action = decide(parse_key(self._read_escape(char)), is_select=True)
                    if action is PromptAction.UP:
                        moved = self.state.move_up()
                    elif action is PromptAction.DOWN:
                        moved = self.state.move_down()
                    else:
                        moved = True
                    if not moved:
                        ctx.bell()
                    ctx.write_control(clear_sequence(drawn, ctx.console.width))
                    drawn = self._draw(highlight=True)
                    typed = ""
                    continue

                action = decide(parse_key(char))
                if action is PromptAction.ABORT:
                    raise PromptAborted("select prompt aborted")
                if action is PromptAction.DELETE:
                    typed = typed[:-1]
                elif char.isprintable():
                    typed += char

    def _read_escape(self, first: str) -> str:
        """Read the rest of an escape sequence started by first.

        CSI sequences run until a final byte, so modified keys such as
        ``ESC [ 1 ; 5 A`` are consumed whole. SS3 sequences take one byte.
        """
        sequence = first + self.ctx.read_char()
        if sequence[-1] == "O":
            return sequence + self.ctx.read_char()
        if sequence[-1] != "[":
            return sequence
        while True:
            char = self.ctx.read_char()
            sequence += char
            if not CSI_PARAM_BYTES[0] <= char <= CSI_PARAM_BYTES[1]:
                return sequence

    def _draw(self, highlight: bool) -> str:
        """Write the menu block and return its plain text."""
        markup = self._menu_markup(highlight)
        self.ctx.write(markup)
        return Text.from_markup(markup, emoji=False).plain

    def _menu_markup(self, highlight: bool) -> str:
        figures = self.ctx.figures
        lines = [f"{symbol(figures)} {message(self.options.message)} {delimiter(figures)}"]
        for i, choice in enumerate(self.state.choices):
            number = f"[cyan] {i + 1} [/cyan]"
            title = escape(choice.title)
            if choice.disabled:
                prefix = " "
                title = f"[dim strike]{title}[/dim strike]"
            elif highlight and i == self.state.selected:
                prefix = f"[cyan]{escape(figures.pointer)}[/cyan]"
                title = f"[cyan underline]{title}[/cyan underline]"
            else:
                prefix = escape(figures.pointer_small)
            line = f"  {number} {prefix} {title}"
            if choice.description:
                line += f" [dim]- {escape(choice.description)}[/dim]"
            lines.append(line)
        lines.append(f"  [dim]{escape(self.hint)}[/dim]")
        lines.append(f"  {escape(self.ctx.config.answer_label)}: ")
        return "\n".join(lines)

    def _finish(self) -> str:
        index = self.state.selected
        if not 0 <= index < len(self.state.choices):
            raise InvalidSelectionError(f"invalid choice: {index + 1}")
        choice = self.state.choices[index]
        if choice.disabled:
            raise InvalidSelectionError(f"selected option is disabled: {choice.title}")
        self.ctx.writeln(done_line(self.ctx.figures, self.options.message, choice.title))
        return choice.value


def run_select(
    options: SelectPromptOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> str:
    """Ask the user to pick one choice; returns its value.

    Raises:
        InvalidSelectionError: The answer resolves to a disabled or missing choice.
        PromptAborted: Ctrl-C / Ctrl-D on the interactive menu.
        InputClosedError: Input ended before an answer.
        TerminalModeError: The terminal mode could not be changed or restored.
    """
    return SelectPrompt(options, PromptIO(stdin, stdout, terminal, config)).show()

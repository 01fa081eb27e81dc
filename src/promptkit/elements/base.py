"""Base prompt I/O shared by every element."""

from __future__ import annotations

import sys
from typing import IO

from promptkit.config import Config
from promptkit.errors import InputClosedError
from promptkit.ui.figures import Figures
from promptkit.ui.formatting import make_console
from promptkit.ui.terminal import Terminal


class PromptIO:
    """Input stream, Rich console on the output stream, and terminal control.

    Streams default to the process stdin/stdout at construction time.
    """

    def __init__(
        self,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        terminal: Terminal | None = None,
        config: Config | None = None,
    ):
        self.config = config or Config.load()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.terminal = terminal or Terminal(self.stdin)
        self.console = make_console(self.stdout, self.config)
        self.figures = Figures.for_platform(self.config)

    def write(self, markup: str) -> None:
        self.console.print(markup, end="")

    def writeln(self, markup: str = "") -> None:
        self.console.print(markup)

    def write_control(self, sequence: str) -> None:
        """Write raw escape codes, bypassing Rich's control-code stripping."""
        self.stdout.write(sequence)
        self.stdout.flush()

    def bell(self) -> None:
        self.console.bell()

    def read_line(self) -> str:
        """Read one line, without its line terminator."""
        line = self.stdin.readline()
        if not line:
            raise InputClosedError("input closed before an answer was read")
        return line.rstrip("\r\n")

    def read_char(self) -> str:
        """Read one character; blocks until available."""
        char = self.stdin.read(1)
        if not char:
            raise InputClosedError("input closed before an answer was read")
        return char

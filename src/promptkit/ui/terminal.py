"""Terminal capability used by prompts.

Owns the input-mode lifecycle: cbreak mode for key-by-key reading and
echo suppression for hidden line input. Both are scoped with context
managers that restore the saved attributes on every exit path.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import IO

from promptkit.errors import TerminalModeError

logger = logging.getLogger("promptkit.terminal")


class Terminal:
    """Mode control for the terminal behind an input stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    def is_interactive(self) -> bool:
        """Whether the input stream is attached to a terminal device."""
        isatty = getattr(self._stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            # closed stream
            return False

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Deliver input byte by byte without echo until the block exits."""
        import tty

        with self._mode(tty.setcbreak, "raw"):
            yield

    @contextlib.contextmanager
    def hidden_input(self) -> Iterator[None]:
        """Keep line buffering but stop echoing typed characters."""
        import termios

        def disable_echo(fd: int, when: int) -> None:
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~termios.ECHO
            termios.tcsetattr(fd, when, attrs)

        with self._mode(disable_echo, "no-echo"):
            yield

    @contextlib.contextmanager
    def _mode(self, apply, label: str) -> Iterator[None]:
        import termios

        try:
            fd = self._stream.fileno()
            saved = termios.tcgetattr(fd)
            apply(fd, termios.TCSAFLUSH)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalModeError(f"cannot enter {label} mode: {exc}") from exc
        logger.debug("Terminal entered %s mode", label)
        try:
            yield
        finally:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            except termios.error as exc:
                raise TerminalModeError(f"cannot restore terminal mode: {exc}") from exc
            logger.debug("Terminal left %s mode", label)

"""Number prompt."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO

from promptkit.config import Config
from promptkit.errors import InvalidValueError
from promptkit.ui.formatting import done_line, prompt_line
from promptkit.ui.terminal import Terminal

from .base import PromptIO


@dataclass
class NumberPromptOptions:
    """Options for a number prompt.

    Attributes:
        float_mode: Accept decimals; otherwise only integers parse.
        precision: Decimal places the answer is rounded to.
        error_msg: Message of the error raised for unparsable input.
            Defaults to the invalid_number_message setting.
    """

    message: str
    initial: float | None = None
    min_value: float | None = None
    max_value: float | None = None
    float_mode: bool = False
    precision: int = 2
    error_msg: str | None = None


def round_half_away(value: float, digits: int) -> float:
    """Round to digits decimal places, halves away from zero.

    Values too large to scale are already whole at that precision and are
    returned unchanged.
    """
    try:
        scaled = abs(value) * 10.0**digits
    except OverflowError:
        return value
    if not math.isfinite(scaled):
        return value
    return math.copysign(math.floor(scaled + 0.5) / 10.0**digits, value)


def _format(value: float, options: NumberPromptOptions) -> str:
    if options.float_mode:
        return f"{value:.{options.precision}f}"
    return str(int(value))


def _parse(raw: str, options: NumberPromptOptions, error_msg: str) -> float:
    try:
        value = float(raw) if options.float_mode else float(int(raw))
    except (ValueError, OverflowError):
        raise InvalidValueError(error_msg) from None
    if not math.isfinite(value):
        raise InvalidValueError(error_msg)
    value = round_half_away(value, options.precision)
    if options.min_value is not None:
        value = max(value, options.min_value)
    if options.max_value is not None:
        value = min(value, options.max_value)
    return value


def run_number(
    options: NumberPromptOptions,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> float:
    """Ask for a number; empty input gives the initial value or 0."""
    ctx = PromptIO(stdin, stdout, terminal, config)
    initial = "" if options.initial is None else f"[dim]{_format(options.initial, options)}[/dim]"
    ctx.write(prompt_line(ctx.figures, options.message, initial))

    raw = ctx.read_line().strip()
    if raw:
        value = _parse(raw, options, options.error_msg or ctx.config.invalid_number_message)
    else:
        value = float(options.initial) if options.initial is not None else 0.0

    ctx.writeln(done_line(ctx.figures, options.message, _format(value, options)))
    return value

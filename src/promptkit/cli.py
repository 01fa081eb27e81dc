"""CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from promptkit.config import Config
    from promptkit.models import Question

app = typer.Typer(
    name="promptkit",
    help="Interactive terminal prompts - ask questions, print answers.",
    no_args_is_help=True,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from promptkit.config import Config

    return Config.load()


def _load_questions(path: Path) -> list[Question]:
    """Load questions from a JSON list (or an object with a "questions" list)."""
    from promptkit.models import Question

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from None
    if isinstance(data, dict):
        data = data.get("questions", [])
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of questions")
    return [Question.from_dict(item) for item in data]


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging on stderr")] = False,
):
    """Interactive terminal prompts."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s: %(message)s",
    )


@app.command()
def run(
    file: Annotated[Path, typer.Argument(help="JSON file with questions", exists=True, dir_okay=False)],
):
    """Ask every question in FILE and print the answers as JSON.

    Prompts are drawn on stderr so stdout carries only the answers.
    """
    from promptkit.errors import PromptError
    from promptkit.sequence import prompt

    try:
        questions = _load_questions(file)
        answers = prompt(questions, sys.stdin, sys.stderr, config=_get_config())
    except (PromptError, ValueError, KeyError) as exc:
        raise _fail(str(exc)) from None

    console.print_json(data=answers)


@app.command()
def select(
    message: Annotated[str, typer.Argument(help="Question to ask")],
    choices: Annotated[list[str], typer.Argument(help="Choices; use title=value to return a different value")],
    initial: Annotated[
        int | None, typer.Option("--initial", "-i", help="Number of the preselected choice (1-based)")
    ] = None,
    hint: Annotated[str | None, typer.Option("--hint", help="Hint line under the menu")] = None,
):
    """Pick one of CHOICES and print its value."""
    from promptkit.elements import SelectPromptOptions, run_select
    from promptkit.errors import PromptError
    from promptkit.models import Choice

    parsed = []
    for raw in choices:
        title, sep, value = raw.partition("=")
        parsed.append(Choice(title=title, value=value if sep else title))

    options = SelectPromptOptions(
        message=message,
        choices=parsed,
        initial=initial - 1 if initial is not None else None,
        hint=hint,
    )
    try:
        value = run_select(options, sys.stdin, sys.stderr, config=_get_config())
    except PromptError as exc:
        raise _fail(str(exc)) from None

    console.print(value, markup=False, highlight=False)


@app.command()
def settings():
    """Show effective settings and where they come from."""
    from promptkit.config import ConfigMeta

    cfg = _get_config()
    descriptions = {**ConfigMeta.TOGGLES, **ConfigMeta.SETTINGS}

    console.print(f"[bold]Config dir:[/bold] {escape(str(cfg.config_dir))}")
    for key, value in cfg.as_dict().items():
        console.print(f"[bold]{key}[/bold] = {escape(repr(value))}  [dim]{escape(descriptions[key])}[/dim]")

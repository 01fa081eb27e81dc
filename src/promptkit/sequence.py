"""Question dispatch and the prompt sequencer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import IO

from promptkit.config import Config
from promptkit.elements import (
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
from promptkit.errors import InvalidValueError, UnknownQuestionTypeError
from promptkit.models import InputStyle, PromptValue, Question, QuestionType
from promptkit.ui.terminal import Terminal

logger = logging.getLogger("promptkit.sequence")

TEXT_STYLES: dict[QuestionType, InputStyle] = {
    QuestionType.PASSWORD: InputStyle.PASSWORD,
    QuestionType.INVISIBLE: InputStyle.INVISIBLE,
}


def question_type(question: Question) -> QuestionType:
    """Resolve a question's type tag to the closed QuestionType set."""
    if isinstance(question.type, QuestionType):
        return question.type
    try:
        return QuestionType(question.type)
    except ValueError:
        raise UnknownQuestionTypeError(question.type) from None


def _text_initial(question: Question) -> str | None:
    return None if question.initial is None else str(question.initial)


def _number_initial(question: Question) -> float | None:
    if question.initial is None:
        return None
    try:
        return float(question.initial)
    except (TypeError, ValueError):
        raise InvalidValueError(f"initial value of {question.name!r} is not a number") from None


def _select_initial(question: Question) -> int | None:
    initial = question.initial
    if isinstance(initial, int) and not isinstance(initial, bool):
        return initial
    return None


def run_prompt(
    question: Question,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> PromptValue:
    """Run the prompt a single question describes and return its answer."""
    kind = question_type(question)
    io_args = {"stdin": stdin, "stdout": stdout, "terminal": terminal, "config": config}
    logger.debug("Running %s prompt %r", kind.value, question.name)

    if kind in (QuestionType.TEXT, QuestionType.PASSWORD, QuestionType.INVISIBLE):
        style = TEXT_STYLES.get(kind, question.style)
        options = TextPromptOptions(question.message, _text_initial(question), style)
        return run_text(options, **io_args)

    if kind is QuestionType.LIST:
        options = TextPromptOptions(question.message, _text_initial(question), InputStyle.DEFAULT)
        text = run_text(options, **io_args)
        return [part.strip() for part in text.split(question.separator or ",")]

    if kind is QuestionType.NUMBER:
        options = NumberPromptOptions(
            message=question.message,
            initial=_number_initial(question),
            min_value=question.min_value,
            max_value=question.max_value,
            float_mode=question.float_mode,
            precision=question.precision,
        )
        return run_number(options, **io_args)

    if kind is QuestionType.CONFIRM:
        options = ConfirmPromptOptions(question.message, initial=bool(question.initial))
        return run_confirm(options, **io_args)

    if kind is QuestionType.TOGGLE:
        options = TogglePromptOptions(
            question.message,
            initial=bool(question.initial),
            active=question.active,
            inactive=question.inactive,
        )
        return run_toggle(options, **io_args)

    # QuestionType.SELECT
    options = SelectPromptOptions(
        question.message, question.choices, _select_initial(question), question.hint
    )
    return run_select(options, **io_args)


def prompt(
    questions: Iterable[Question],
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
    *,
    terminal: Terminal | None = None,
    config: Config | None = None,
) -> dict[str, PromptValue]:
    """Run questions in order and collect answers by question name.

    Questions with an empty type are skipped. The first failure aborts the
    whole sequence; answers collected so far are discarded.

    Raises:
        InvalidValueError: A question has no message, or an answer is invalid.
        UnknownQuestionTypeError: A question's type is not a known prompt type.
    """
    answers: dict[str, PromptValue] = {}
    for question in questions:
        if not question.type_name:
            logger.debug("Skipping question %r without type", question.name)
            continue
        if not question.message:
            raise InvalidValueError("prompt message is required")
        answers[question.name] = run_prompt(
            question, stdin, stdout, terminal=terminal, config=config
        )
    return answers

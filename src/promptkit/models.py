"""Data models for promptkit."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# Answer produced by one prompt runner.
PromptValue = Union[str, bool, float, list[str]]


class InputStyle(Enum):
    """How a text answer is echoed back after submit."""

    DEFAULT = "default"
    PASSWORD = "password"
    INVISIBLE = "invisible"


class QuestionType(Enum):
    """Closed set of question kinds the sequencer can dispatch."""

    TEXT = "text"
    PASSWORD = "password"
    INVISIBLE = "invisible"
    NUMBER = "number"
    CONFIRM = "confirm"
    TOGGLE = "toggle"
    SELECT = "select"
    LIST = "list"


@dataclass(frozen=True)
class Choice:
    """Immutable select menu entry."""

    title: str
    value: str
    description: str | None = None
    disabled: bool = False

    @classmethod
    def coerce(cls, raw: Choice | str | Mapping[str, Any]) -> Choice:
        """Build a Choice from a plain title or a title/value mapping."""
        if isinstance(raw, Choice):
            return raw
        if isinstance(raw, str):
            return cls(title=raw, value=raw)
        if not isinstance(raw, Mapping):
            raise ValueError(f"choice must be a string or an object, got {raw!r}")
        title = str(raw["title"])
        value = raw.get("value", title)
        return cls(
            title=title,
            value=str(value),
            description=raw.get("description"),
            disabled=bool(raw.get("disabled", False)),
        )


@dataclass
class Question:
    """Configuration for one prompt in a sequence.

    ``initial`` is read according to the question type: a string for
    text/list prompts, a number for number prompts, a bool for confirm and
    toggle prompts, and a 0-based choice index for select prompts.
    An empty ``type`` marks the question as skipped.
    """

    name: str
    type: QuestionType | str = ""
    message: str = ""
    initial: str | float | bool | None = None
    choices: list[Choice] = field(default_factory=list)
    style: InputStyle = InputStyle.DEFAULT
    separator: str = ","
    float_mode: bool = False
    precision: int = 2
    min_value: float | None = None
    max_value: float | None = None
    active: str = "on"
    inactive: str = "off"
    hint: str | None = None

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, QuestionType) else self.type

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Question:
        """Build a Question from a JSON-style mapping.

        Accepts the short keys used in question files (``float``, ``round``,
        ``min``, ``max``) alongside the attribute names.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"question must be an object, got {data!r}")
        choices = data.get("choices") or []
        if not isinstance(choices, list):
            raise ValueError(f"choices must be a list, got {choices!r}")
        style = data.get("style", InputStyle.DEFAULT.value)
        return cls(
            name=str(data.get("name", "")),
            type=str(data.get("type") or ""),
            message=str(data.get("message") or ""),
            initial=data.get("initial"),
            choices=[Choice.coerce(c) for c in choices],
            style=style if isinstance(style, InputStyle) else InputStyle(style),
            separator=data.get("separator") or ",",
            float_mode=bool(data.get("float", data.get("float_mode", False))),
            precision=int(data.get("round", data.get("precision", 2))),
            min_value=data.get("min", data.get("min_value")),
            max_value=data.get("max", data.get("max_value")),
            active=data.get("active") or "on",
            inactive=data.get("inactive") or "off",
            hint=data.get("hint"),
        )

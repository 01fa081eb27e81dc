"""Glyphs used in prompt output."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from promptkit.config import Config


@dataclass(frozen=True)
class Figures:
    """Set of indicator glyphs for one platform family."""

    arrow_up: str
    arrow_down: str
    arrow_left: str
    arrow_right: str
    radio_on: str
    radio_off: str
    tick: str
    cross: str
    ellipsis: str
    pointer_small: str
    line: str
    pointer: str

    @classmethod
    def for_platform(cls, config: Config | None = None) -> Figures:
        """Pick the glyph set for the running platform.

        Windows consoles (or the ascii_figures setting) get the ASCII-safe set.
        """
        cfg = config or Config.load()
        if cfg.ascii_figures or sys.platform == "win32":
            return ASCII_FIGURES
        return UNICODE_FIGURES


UNICODE_FIGURES = Figures(
    arrow_up="↑",
    arrow_down="↓",
    arrow_left="←",
    arrow_right="→",
    radio_on="◉",
    radio_off="◯",
    tick="✔",
    cross="✖",
    ellipsis="…",
    pointer_small="›",
    line="─",
    pointer="❯",
)

ASCII_FIGURES = Figures(
    arrow_up="↑",
    arrow_down="↓",
    arrow_left="←",
    arrow_right="→",
    radio_on="(*)",
    radio_off="( )",
    tick="√",
    cross="×",
    ellipsis="...",
    pointer_small="»",
    line="─",
    pointer=">",
)

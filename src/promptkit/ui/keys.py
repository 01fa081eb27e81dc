"""Key events and their mapping to prompt actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import readchar


class KeyName(Enum):
    """Kind of key pressed."""

    CHAR = "char"
    RETURN = "return"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ABORT = "abort"
    ESCAPE = "escape"
    TAB = "tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    UNKNOWN = "unknown"


class PromptAction(Enum):
    """Semantic action a prompt element can handle."""

    FIRST = "first"
    LAST = "last"
    ABORT = "abort"
    RESET = "reset"
    SUBMIT = "submit"
    DELETE = "delete"
    DELETE_FORWARD = "delete_forward"
    EXIT = "exit"
    NEXT = "next"
    NEXT_PAGE = "next_page"
    PREV_PAGE = "prev_page"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class Key:
    """One key press. ``char`` is set for CHAR keys."""

    name: KeyName
    char: str = ""
    ctrl: bool = False
    meta: bool = False


# Raw terminal sequences for named keys
SEQUENCES: dict[str, KeyName] = {
    readchar.key.CR: KeyName.RETURN,
    readchar.key.LF: KeyName.ENTER,
    readchar.key.BACKSPACE: KeyName.BACKSPACE,
    readchar.key.CTRL_H: KeyName.BACKSPACE,
    readchar.key.DELETE: KeyName.DELETE,
    readchar.key.ESC: KeyName.ESCAPE,
    readchar.key.TAB: KeyName.TAB,
    readchar.key.UP: KeyName.UP,
    readchar.key.DOWN: KeyName.DOWN,
    readchar.key.LEFT: KeyName.LEFT,
    readchar.key.RIGHT: KeyName.RIGHT,
    readchar.key.HOME: KeyName.HOME,
    readchar.key.END: KeyName.END,
    readchar.key.PAGE_UP: KeyName.PAGE_UP,
    readchar.key.PAGE_DOWN: KeyName.PAGE_DOWN,
    # application cursor mode
    "\x1bOA": KeyName.UP,
    "\x1bOB": KeyName.DOWN,
    "\x1bOC": KeyName.RIGHT,
    "\x1bOD": KeyName.LEFT,
}

CTRL_ACTIONS: dict[str, PromptAction] = {
    "a": PromptAction.FIRST,
    "c": PromptAction.ABORT,
    "d": PromptAction.ABORT,
    "e": PromptAction.LAST,
    "g": PromptAction.RESET,
}

SELECT_ACTIONS: dict[str, PromptAction] = {
    "j": PromptAction.DOWN,
    "k": PromptAction.UP,
}

KEY_ACTIONS: dict[KeyName, PromptAction] = {
    KeyName.RETURN: PromptAction.SUBMIT,
    KeyName.ENTER: PromptAction.SUBMIT,
    KeyName.BACKSPACE: PromptAction.DELETE,
    KeyName.DELETE: PromptAction.DELETE_FORWARD,
    KeyName.ABORT: PromptAction.ABORT,
    KeyName.ESCAPE: PromptAction.EXIT,
    KeyName.TAB: PromptAction.NEXT,
    KeyName.PAGE_DOWN: PromptAction.NEXT_PAGE,
    KeyName.PAGE_UP: PromptAction.PREV_PAGE,
    KeyName.HOME: PromptAction.HOME,
    KeyName.END: PromptAction.END,
    KeyName.UP: PromptAction.UP,
    KeyName.DOWN: PromptAction.DOWN,
    KeyName.LEFT: PromptAction.LEFT,
    KeyName.RIGHT: PromptAction.RIGHT,
}


def parse_key(sequence: str) -> Key:
    """Turn a raw key sequence read from a terminal into a Key."""
    if sequence in SEQUENCES:
        return Key(SEQUENCES[sequence])
    if len(sequence) == 1:
        code = ord(sequence)
        if 1 <= code <= 26:
            # Ctrl-A .. Ctrl-Z
            return Key(KeyName.CHAR, chr(code + 96), ctrl=True)
        if sequence.isprintable():
            return Key(KeyName.CHAR, sequence)
    if len(sequence) == 2 and sequence[0] == readchar.key.ESC and sequence[1].isprintable():
        # Alt/Meta + char
        return Key(KeyName.CHAR, sequence[1], meta=True)
    return Key(KeyName.UNKNOWN)


def decide(key: Key, is_select: bool = False) -> PromptAction | None:
    """Map a key to a prompt action.

    Returns None when the key should be treated as literal typed input.
    """
    if key.meta and key.name is not KeyName.ESCAPE:
        return None
    if key.ctrl:
        return CTRL_ACTIONS.get(key.char) if key.name is KeyName.CHAR else None
    if is_select and key.name is KeyName.CHAR and key.char in SELECT_ACTIONS:
        return SELECT_ACTIONS[key.char]
    return KEY_ACTIONS.get(key.name)

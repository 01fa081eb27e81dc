"""Exceptions raised by prompts and the question sequencer."""


class PromptError(Exception):
    """Base class for every promptkit failure."""

    pass


class InvalidValueError(PromptError, ValueError):
    """Raised when an answer or a question definition is not usable."""

    pass


class InvalidSelectionError(PromptError, ValueError):
    """Raised when a select prompt resolves to a disabled or missing choice."""

    pass


class UnknownQuestionTypeError(PromptError, ValueError):
    """Raised when a question carries a type tag no runner handles."""

    def __init__(self, type_name: str):
        super().__init__(f"prompt type '{type_name}' is not defined")
        self.type_name = type_name


class InputClosedError(PromptError, EOFError):
    """Raised when the input stream ends before an answer was read."""

    pass


class TerminalModeError(PromptError, OSError):
    """Raised when the terminal input mode cannot be changed or restored."""

    pass


class PromptAborted(PromptError):
    """Raised when the user aborts an interactive prompt (Ctrl-C / Ctrl-D)."""

    pass

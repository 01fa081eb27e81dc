"""Pytest fixtures for promptkit tests."""

import contextlib
import io

import pytest

from promptkit.errors import TerminalModeError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty dir and clear the module-level cache."""
    from promptkit.config import Config, clear_config_cache

    monkeypatch.setenv("PROMPTKIT_CONFIG_DIR", str(tmp_path / "promptkit-config"))
    for key in Config.DEFAULTS:
        monkeypatch.delenv(f"PROMPTKIT_{key.upper()}", raising=False)
    # Rich would colour StringIO output when forced
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    clear_config_cache()

    yield

    clear_config_cache()


class FakeTerminal:
    """Terminal capability double that records mode changes."""

    def __init__(self, interactive=True, fail_enter=False, fail_restore=False):
        self.interactive = interactive
        self.fail_enter = fail_enter
        self.fail_restore = fail_restore
        self.events: list[str] = []

    def is_interactive(self) -> bool:
        return self.interactive

    @contextlib.contextmanager
    def raw_mode(self):
        with self._mode("raw"):
            yield

    @contextlib.contextmanager
    def hidden_input(self):
        with self._mode("hidden"):
            yield

    @contextlib.contextmanager
    def _mode(self, label):
        if self.fail_enter:
            raise TerminalModeError(f"cannot enter {label} mode")
        self.events.append(label)
        try:
            yield
        finally:
            self.events.append("restored")
            if self.fail_restore:
                raise TerminalModeError("cannot restore terminal mode")


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def make_terminal():
    """Factory for terminals that fail on enter or restore."""
    return FakeTerminal

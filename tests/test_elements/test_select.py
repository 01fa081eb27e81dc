"""Tests for the select prompt."""

import io

import pytest

from promptkit.elements.select import (
    SelectPromptOptions,
    SelectState,
    initial_selection,
    next_enabled,
    parse_selection,
    prev_enabled,
    run_select,
)
from promptkit.errors import (
    InputClosedError,
    InvalidSelectionError,
    PromptAborted,
    TerminalModeError,
)
from promptkit.models import Choice
from promptkit.ui.ansi import strip_ansi


def choices(*titles: str, disabled: tuple[int, ...] = ()) -> list[Choice]:
    return [
        Choice(title=t, value=t.lower(), disabled=i in disabled) for i, t in enumerate(titles)
    ]


def select(opts: SelectPromptOptions, text: str, stdout=None, terminal=None) -> str:
    return run_select(opts, io.StringIO(text), stdout or io.StringIO(), terminal=terminal)


class TestEnabledSearch:
    def test_next_skips_disabled(self):
        items = choices("A", "B", "C", disabled=(1,))
        assert next_enabled(items, 0) == 2

    def test_prev_skips_disabled(self):
        items = choices("A", "B", "C", disabled=(1,))
        assert prev_enabled(items, 2) == 0

    def test_no_wraparound_at_bottom(self):
        items = choices("A", "B", "C", disabled=(2,))
        assert next_enabled(items, 1) == 1

    def test_no_wraparound_at_top(self):
        items = choices("A", "B", "C", disabled=(0,))
        assert prev_enabled(items, 1) == 1


class TestInitialSelection:
    def test_defaults_to_first(self):
        assert initial_selection(choices("A", "B"), None) == 0

    def test_clamps_into_range(self):
        assert initial_selection(choices("A", "B", "C"), 10) == 2
        assert initial_selection(choices("A", "B", "C"), -4) == 0

    def test_moves_forward_off_disabled(self):
        assert initial_selection(choices("A", "B", "C", disabled=(0,)), 0) == 1

    def test_stays_when_nothing_enabled_after(self):
        assert initial_selection(choices("A", "B", disabled=(1,)), 1) == 1

    def test_all_disabled_stays(self):
        assert initial_selection(choices("A", "B", disabled=(0, 1)), 0) == 0


class TestParseSelection:
    def test_number(self):
        assert parse_selection("2", choices("One", "Two", "Three")) == 1

    def test_number_with_padding(self):
        assert parse_selection("  3 \t", choices("One", "Two", "Three")) == 2

    def test_title_case_insensitive(self):
        assert parse_selection("tWo", choices("One", "Two")) == 1

    def test_value_match(self):
        items = [Choice("Apple", "fruit-a"), Choice("Banana", "fruit-b")]
        assert parse_selection("FRUIT-B", items) == 1

    def test_out_of_range_number_falls_back(self):
        assert parse_selection("9", choices("One", "Two")) == 0
        assert parse_selection("0", choices("One", "Two"), initial=1) == 1

    def test_unmatched_uses_initial(self):
        assert parse_selection("nope", choices("One", "Two", "Three"), initial=2) == 2

    def test_unmatched_without_initial_is_zero(self):
        assert parse_selection("nope", choices("One", "Two")) == 0

    def test_number_beats_title(self):
        items = [Choice("2", "two"), Choice("Other", "other")]
        assert parse_selection("2", items) == 1


class TestSelectState:
    def test_moves_skip_disabled(self):
        state = SelectState(choices("A", "B", "C", disabled=(1,)), 0)
        assert state.move_down() is True
        assert state.selected == 2
        assert state.move_up() is True
        assert state.selected == 0

    def test_moves_stop_at_edges(self):
        state = SelectState(choices("A", "B"), 0)
        assert state.move_up() is False
        assert state.selected == 0
        state.selected = 1
        assert state.move_down() is False
        assert state.selected == 1

    def test_typed_disabled_is_ignored(self):
        state = SelectState(choices("A", "B", "C", disabled=(1,)), 0)
        state.select_typed("2", None)
        assert state.selected == 0

    def test_typed_enabled_is_taken(self):
        state = SelectState(choices("A", "B", "C"), 0)
        state.select_typed("c", None)
        assert state.selected == 2


class TestLinePath:
    def test_number_selects(self):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "2\n") == "two"

    def test_name_selects(self):
        opts = SelectPromptOptions("Fruit", [Choice("Apple", "apple"), Choice("Banana", "banana")])
        assert select(opts, "BANANA\n") == "banana"

    def test_disabled_selection_fails(self):
        opts = SelectPromptOptions("Pick", choices("A", "B", disabled=(1,)), initial=1)
        with pytest.raises(InvalidSelectionError):
            select(opts, "2\n")

    def test_unmatched_uses_initial(self):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"), initial=2)
        assert select(opts, "nothing like it\n") == "three"

    def test_empty_line_uses_first(self):
        opts = SelectPromptOptions("Pick", choices("One", "Two"))
        assert select(opts, "\n") == "one"

    def test_out_of_range_initial_fails(self):
        opts = SelectPromptOptions("Pick", choices("One", "Two"), initial=7)
        with pytest.raises(InvalidSelectionError):
            select(opts, "\n")

    def test_arrow_sequences_are_stripped(self):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "\x1b[A\x1b[B3\n") == "three"

    def test_renders_menu_and_result(self, stdout):
        opts = SelectPromptOptions(
            "Pick one",
            [Choice("One", "1"), Choice("Two", "2", description="second", disabled=True)],
            hint="Type it",
        )
        select(opts, "1\n", stdout=stdout)

        out = strip_ansi(stdout.getvalue())
        assert "? Pick one ›" in out
        assert " 1  › One" in out
        assert " 2    Two - second" in out
        assert "Type it" in out
        assert "Answer (number or name):" in out
        assert "✔ Pick one … One" in out

    def test_default_hint(self, stdout):
        select(SelectPromptOptions("Pick", choices("A")), "\n", stdout=stdout)
        assert "Use arrow-keys or type number. Return to submit." in stdout.getvalue()

    def test_no_choices_fails(self):
        with pytest.raises(InvalidSelectionError):
            select(SelectPromptOptions("Pick", []), "1\n")

    def test_end_of_input(self):
        with pytest.raises(InputClosedError):
            select(SelectPromptOptions("Pick", choices("A")), "")

    @pytest.mark.parametrize("text", ["1\n", "2\n", "3\n", "b\n", "c\n", "zzz\n", "\n", "9\n"])
    def test_never_returns_disabled_value(self, text):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C", disabled=(1,)))
        try:
            assert select(opts, text) != "b"
        except InvalidSelectionError:
            pass


class TestInteractivePath:
    def test_enter_keeps_initial(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"), initial=1)
        assert select(opts, "\r", terminal=terminal) == "two"

    def test_arrow_down_then_enter(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "\x1b[B\r", terminal=terminal) == "two"

    def test_arrows_skip_disabled(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C", "D", disabled=(1, 2)))
        assert select(opts, "\x1b[B\r", terminal=terminal) == "d"

    def test_up_at_top_stays(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B"))
        assert select(opts, "\x1b[A\x1b[A\r", terminal=terminal) == "a"

    def test_down_at_bottom_stays(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C", disabled=(2,)))
        assert select(opts, "\x1b[B\x1b[B\x1b[B\r", terminal=terminal) == "b"

    def test_initial_moves_off_disabled(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C", disabled=(0,)))
        assert select(opts, "\n", terminal=terminal) == "b"

    def test_typed_number(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "3\r", terminal=terminal) == "three"

    def test_typed_name(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "two\n", terminal=terminal) == "two"

    def test_typed_disabled_keeps_selection(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C", disabled=(1,)))
        assert select(opts, "\x1b[B2\r", terminal=terminal) == "c"

    def test_backspace_edits_typed_text(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "3\x7f2\r", terminal=terminal) == "two"

    def test_escape_resets_typed_text(self, terminal):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        assert select(opts, "3\x1b[B\r", terminal=terminal) == "two"

    def test_vi_keys_are_typed_text(self, terminal):
        opts = SelectPromptOptions("Pick", [Choice("j", "jay"), Choice("k", "kay")])
        assert select(opts, "k\r", terminal=terminal) == "kay"

    def test_other_escape_sequences_redraw_only(self, terminal, stdout):
        opts = SelectPromptOptions("Pick", choices("One", "Two"))
        assert select(opts, "\x1b[C\x1b[5~\r", stdout=stdout, terminal=terminal) == "one"
        assert stdout.getvalue().count("Answer (number or name)") == 3

    def test_redraw_clears_previous_block(self, terminal, stdout):
        opts = SelectPromptOptions("Pick", choices("One", "Two", "Three"))
        select(opts, "\x1b[B\r", stdout=stdout, terminal=terminal)

        out = stdout.getvalue()
        # 1 message + 3 choices + hint + answer line, cleared on redraw and on submit
        assert out.count("\x1b[2K") == 12
        assert out.count("\x1b[1A") == 10
        assert strip_ansi(out).rstrip().endswith("✔ Pick … Two")

    def test_all_disabled_fails_and_restores(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", disabled=(0, 1)))
        with pytest.raises(InvalidSelectionError):
            select(opts, "\x1b[B\r", terminal=terminal)
        assert terminal.events == ["raw", "restored"]

    def test_mode_restored_after_success(self, terminal):
        select(SelectPromptOptions("Pick", choices("A")), "\r", terminal=terminal)
        assert terminal.events == ["raw", "restored"]

    @pytest.mark.parametrize("key", ["\x03", "\x04"])
    def test_ctrl_c_and_ctrl_d_abort(self, terminal, key):
        with pytest.raises(PromptAborted):
            select(SelectPromptOptions("Pick", choices("A")), key, terminal=terminal)
        assert terminal.events == ["raw", "restored"]

    def test_end_of_input_restores(self, terminal):
        with pytest.raises(InputClosedError):
            select(SelectPromptOptions("Pick", choices("A")), "2", terminal=terminal)
        assert terminal.events == ["raw", "restored"]

    def test_enter_failure_reads_nothing(self, make_terminal, stdout):
        stdin = io.StringIO("1\r")
        with pytest.raises(TerminalModeError):
            run_select(
                SelectPromptOptions("Pick", choices("A")),
                stdin,
                stdout,
                terminal=make_terminal(fail_enter=True),
            )
        assert stdin.read() == "1\r"
        assert stdout.getvalue() == ""

    def test_restore_failure_is_reported_after_success(self, make_terminal):
        with pytest.raises(TerminalModeError):
            select(
                SelectPromptOptions("Pick", choices("A")),
                "\r",
                terminal=make_terminal(fail_restore=True),
            )

    @pytest.mark.parametrize("modified", ["\x1b[1;5A", "\x1b[1;2B", "\x1b[1;3C"])
    def test_modified_arrows_leave_state_alone(self, terminal, modified):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C"))
        assert select(opts, f"\x1b[B{modified}\r", terminal=terminal) == "b"

    def test_application_mode_arrows(self, terminal):
        opts = SelectPromptOptions("Pick", choices("A", "B", "C"))
        assert select(opts, "\x1bOB\x1bOB\x1bOA\r", terminal=terminal) == "b"

    def test_emoji_codes_are_measured_as_printed(self, terminal, stdout, monkeypatch):
        monkeypatch.setenv("COLUMNS", "80")
        opts = SelectPromptOptions("Pick", [Choice(":smile:" * 12, "smile")])
        select(opts, "\r", stdout=stdout, terminal=terminal)

        out = stdout.getvalue()
        assert ":smile:" in out
        # the 92-cell choice line wraps to two rows at 80 columns
        assert out.count("\x1b[2K") == 5

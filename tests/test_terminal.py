import pytest

from scosapps.screen import TextScreen
from scosapps.terminal import BANNER, PROMPT, Terminal


@pytest.fixture
def term():
    t = Terminal(TextScreen())
    t.open()
    return t


def test_open_draws_banner(term):
    assert term.buffer == BANNER + PROMPT
    assert term.screen.row_text(6)[11:29] == "SCos Terminal v1.0"


def test_cursor_drawn_after_prompt(term):
    row = term.screen.row_text(7)
    assert row[11:13] == PROMPT
    assert row[13] == "_"


def test_typing_and_backspace(term):
    term.handle_input(0x02)
    term.handle_input(0x0B)
    assert term.current_line == "10"
    term.handle_input(0x0E)
    assert term.current_line == "1"


def test_key_beyond_zero(term):
    term.handle_input(0x0C)
    assert term.current_line == ";"


def test_input_capped(term):
    for _ in range(300):
        term.handle_input(0x02)
    assert len(term.current_line) == 255


def test_help(term):
    term.current_line = "help"
    term.execute_command()
    assert "Available commands:\n" in term.buffer
    assert term.buffer.endswith(PROMPT)
    assert term.current_line == ""


def test_clear(term):
    term.current_line = "clear"
    term.execute_command()
    assert term.buffer == BANNER + PROMPT


def test_unknown_command_via_keys(term):
    term.handle_input(0x02)
    term.handle_input(0x03)
    term.handle_input(0x1C)
    assert "Command not found: 12\n" in term.buffer


def test_empty_line_just_adds_prompt(term):
    term.handle_input(0x1C)
    assert term.buffer == BANNER + PROMPT + "\n" + PROMPT


def test_exit_closes(term):
    term.current_line = "exit"
    term.execute_command()
    assert term.visible is False
    assert term.window is None


def test_escape_closes_and_ignores_input(term):
    term.handle_input(0x01)
    assert term.visible is False
    term.handle_input(0x02)
    assert term.current_line == ""


def test_open_twice_keeps_session(term):
    term.handle_input(0x02)
    term.open()
    assert term.current_line == "1"
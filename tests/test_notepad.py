import pytest

from scosapps.notepad import (
    CURSOR_CHAR,
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    MAX_LINE_LENGTH,
    MAX_LINES,
    WINDOW_FRAME,
    Notepad,
    open_notepad,
)
from scosapps.screen import TextScreen

KEY_H = 0x23
KEY_I = 0x17
KEY_Q = 0x10
KEY_ONE = 0x02
KEY_SPACE = 0x39

WIN_X, WIN_Y = WINDOW_FRAME[0], WINDOW_FRAME[1]


@pytest.fixture
def pad():
    notepad = Notepad(TextScreen())
    notepad.show()
    return notepad


def test_typing_fills_buffer_and_screen(pad):
    pad.handle_input(KEY_H)
    pad.handle_input(KEY_I)
    assert pad.buffer[0][:2] == ["h", "i"]
    assert pad.current_col == 2
    assert pad.screen.char_at(WIN_X + 2, WIN_Y + 2) == "h"
    assert pad.screen.char_at(WIN_X + 3, WIN_Y + 2) == "i"
    assert pad.screen.char_at(WIN_X + 4, WIN_Y + 2) == CURSOR_CHAR


def test_digit_and_letter_rows(pad):
    pad.handle_input(KEY_ONE)
    pad.handle_input(0x0B)
    pad.handle_input(KEY_Q)
    pad.handle_input(0x2C)
    assert "".join(pad.buffer[0][:4]) == "10qz"


def test_unmapped_key_types_nothing(pad):
    pad.handle_input(KEY_SPACE)
    assert pad.current_col == 0
    assert pad.buffer[0][0] == ""


def test_input_ignored_when_hidden():
    pad = Notepad(TextScreen())
    pad.handle_input(KEY_H)
    assert pad.buffer[0][0] == ""


def test_backspace_erases(pad):
    pad.handle_input(KEY_H)
    pad.handle_input(KEY_I)
    pad.handle_input(KEY_BACKSPACE)
    assert pad.buffer[0][:2] == ["h", ""]
    assert pad.current_col == 1


def test_backspace_at_line_start_returns_to_text_end(pad):
    pad.handle_input(KEY_H)
    pad.handle_input(KEY_I)
    pad.handle_input(KEY_ENTER)
    assert (pad.current_line, pad.current_col) == (1, 0)
    pad.handle_input(KEY_BACKSPACE)
    assert (pad.current_line, pad.current_col) == (0, 2)


def test_line_wraps_before_last_column(pad):
    for _ in range(MAX_LINE_LENGTH - 1):
        pad.insert_char("x")
    assert pad.current_line == 1
    assert pad.current_col == 0
    assert pad.buffer[0][MAX_LINE_LENGTH - 1] == ""


def test_new_line_stops_at_last_line(pad):
    for _ in range(MAX_LINES + 5):
        pad.new_line()
    assert pad.current_line == MAX_LINES - 1


def test_move_cursor_ignores_out_of_range(pad):
    pad.move_cursor(3, 2)
    assert (pad.current_col, pad.current_line) == (3, 2)
    pad.move_cursor(-10, MAX_LINES)
    assert (pad.current_col, pad.current_line) == (3, 2)


def test_mouse_click_moves_cursor(pad):
    pad.handle_mouse_click(WIN_X + 7, WIN_Y + 4)
    assert (pad.current_col, pad.current_line) == (5, 2)
    pad.handle_mouse_click(0, 0)
    assert (pad.current_col, pad.current_line) == (5, 2)


def test_escape_hides(pad):
    pad.handle_input(KEY_ESCAPE)
    assert pad.visible is False
    assert pad.window is None


def test_load_fills_rows_in_order():
    pad = Notepad(TextScreen())
    text = "a" * MAX_LINE_LENGTH + "bc"
    pad.load(text)
    assert all(c == "a" for c in pad.buffer[0])
    assert pad.buffer[1][:3] == ["b", "c", ""]


def test_load_leaves_last_cell_empty():
    pad = Notepad(TextScreen())
    pad.load("z" * (MAX_LINES * MAX_LINE_LENGTH + 10))
    assert pad.buffer[-1][-1] == ""
    assert pad.buffer[-1][-2] == "z"


def test_open_notepad_shows_content():
    screen = TextScreen()
    pad = open_notepad(screen, "hello")
    assert pad.visible
    assert screen.row_text(WIN_Y + 2)[WIN_X + 2:WIN_X + 7] == "_ello"
    assert "".join(pad.buffer[0][:5]) == "hello"
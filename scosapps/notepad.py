"""A small fixed-size text editor window."""

from __future__ import annotations

from .screen import Color, Rect, TextScreen, make_color

MAX_LINES = 15
MAX_LINE_LENGTH = 50

WINDOW_TITLE = "Notepad"
WINDOW_FRAME = (15, 3, 50, 18)

KEY_ESCAPE = 0x01
KEY_BACKSPACE = 0x0E
KEY_ENTER = 0x1C
KEY_ZERO = 0x0B
KEY_PRINTABLE_FIRST = 0x02
KEY_PRINTABLE_LAST = 0x35

ATTR_TEXT = make_color(Color.BLACK, Color.WHITE)
ATTR_CURSOR = make_color(Color.WHITE, Color.BLACK)
CURSOR_CHAR = "_"

_LETTER_ROWS = (
    (0x10, "qwertyuiop"),
    (0x1E, "asdfghjkl"),
    (0x2C, "zxcvbnm"),
)


def _key_to_char(key: int) -> str:
    """The character a scan code types, or an empty string."""
    if not KEY_PRINTABLE_FIRST <= key <= KEY_PRINTABLE_LAST:
        return ""
    if KEY_PRINTABLE_FIRST <= key <= KEY_ZERO:
        return "0" if key == KEY_ZERO else chr(ord("1") + key - KEY_PRINTABLE_FIRST)
    for first, letters in _LETTER_ROWS:
        if first <= key < first + len(letters):
            return letters[key - first]
    return ""


class Notepad:
    """A text grid of MAX_LINES by MAX_LINE_LENGTH cells with a cursor."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.window: Rect | None = None
        self.buffer: list[list[str]] = [[""] * MAX_LINE_LENGTH for _ in range(MAX_LINES)]
        self.current_line = 0
        self.current_col = 0

    def show(self) -> None:
        """Open the window with the cursor at the top left and draw it."""
        if self.visible:
            return
        self.window = Rect(*WINDOW_FRAME)
        self.visible = True
        self.current_line = 0
        self.current_col = 0
        self.draw()

    def hide(self) -> None:
        """Close the window."""
        if not self.visible or self.window is None:
            return
        self.visible = False
        self.window = None

    def load(self, content: str) -> None:
        """Copy text into the grid cell by cell, filling each row before the next."""
        capacity = MAX_LINES * MAX_LINE_LENGTH - 1
        for index, char in enumerate(content[:capacity]):
            line, col = divmod(index, MAX_LINE_LENGTH)
            self.buffer[line][col] = char

    def draw(self) -> None:
        """Draw the text and the cursor inside the window."""
        if not self.visible or self.window is None:
            return
        win = self.window
        screen = self.screen
        for y in range(win.y + 1, win.y + win.height - 1):
            for x in range(win.x + 1, win.x + win.width - 1):
                screen.put_char(x, y, " ", ATTR_TEXT)

        shown_lines = min(win.height - 4, MAX_LINES)
        shown_cols = min(win.width - 4, MAX_LINE_LENGTH)
        for line, row in enumerate(self.buffer[:max(shown_lines, 0)]):
            for col, char in enumerate(row[:max(shown_cols, 0)]):
                if char:
                    screen.put_char(win.x + 2 + col, win.y + 2 + line, char, ATTR_TEXT)

        screen.put_char(
            win.x + 2 + self.current_col, win.y + 2 + self.current_line, CURSOR_CHAR, ATTR_CURSOR
        )

    def handle_input(self, key: int) -> None:
        """React to a keyboard scan code."""
        if not self.visible or self.window is None:
            return
        if key == KEY_ESCAPE:
            self.hide()
        elif key == KEY_BACKSPACE:
            self.delete_char()
        elif key == KEY_ENTER:
            self.new_line()
        else:
            char = _key_to_char(key)
            if char:
                self.insert_char(char)

    def handle_mouse_click(self, x: int, y: int) -> None:
        """Move the cursor to the clicked cell of the text area."""
        if not self.visible or self.window is None:
            return
        win = self.window
        inside = (
            win.x + 1 <= x < win.x + win.width - 1
            and win.y + 1 <= y < win.y + win.height - 1
        )
        if not inside:
            return
        new_col = x - (win.x + 2)
        new_line = y - (win.y + 2)
        if 0 <= new_line < MAX_LINES:
            self.current_line = new_line
            if 0 <= new_col < MAX_LINE_LENGTH:
                self.current_col = new_col
            self.draw()

    def insert_char(self, char: str) -> None:
        """Write a character at the cursor and advance, wrapping at the line end."""
        if self.current_line >= MAX_LINES or self.current_col >= MAX_LINE_LENGTH - 1:
            return
        self.buffer[self.current_line][self.current_col] = char[:1]
        self.current_col += 1
        if self.current_col >= MAX_LINE_LENGTH - 1:
            self.new_line()
        self.draw()

    def delete_char(self) -> None:
        """Erase the character before the cursor, or join back to the previous line's end."""
        if self.current_col > 0:
            self.current_col -= 1
            self.buffer[self.current_line][self.current_col] = ""
        elif self.current_line > 0:
            self.current_line -= 1
            row = self.buffer[self.current_line]
            col = MAX_LINE_LENGTH - 1
            while col > 0 and not row[col - 1]:
                col -= 1
            self.current_col = col
        self.draw()

    def new_line(self) -> None:
        """Move the cursor to the start of the next line, if there is one."""
        if self.current_line < MAX_LINES - 1:
            self.current_line += 1
            self.current_col = 0
            self.draw()

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor by an offset; a move that would leave the grid is ignored per axis."""
        new_col = self.current_col + dx
        new_line = self.current_line + dy
        if 0 <= new_col < MAX_LINE_LENGTH:
            self.current_col = new_col
        if 0 <= new_line < MAX_LINES:
            self.current_line = new_line
        self.draw()


def open_notepad(screen: TextScreen, initial_content: str | None = None) -> Notepad:
    """Open a fresh notepad, optionally filled with some text."""
    notepad = Notepad(screen)
    if initial_content:
        notepad.load(initial_content)
    notepad.show()
    return notepad
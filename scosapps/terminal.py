"""A minimal terminal window with a scrollback buffer and three commands."""

from __future__ import annotations

from .screen import Rect, TextScreen

KEY_ESCAPE = 0x01
KEY_BACKSPACE = 0x0E
KEY_ENTER = 0x1C
KEY_FIRST_TYPABLE = 0x02
KEY_LAST_TYPABLE = 0x0D
KEY_ZERO = 0x0B

WINDOW_TITLE = "Terminal"
WINDOW_FRAME = (10, 5, 60, 15)
ATTR_TEXT = 0x0F

BANNER = "SCos Terminal v1.0\n"
PROMPT = "> "
MAX_INPUT = 255
HELP_TEXT = (
    "Available commands:\n"
    "  help - Show this help\n"
    "  clear - Clear screen\n"
    "  exit - Close terminal\n"
)


class Terminal:
    """A terminal window that echoes input and answers help, clear and exit."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.window: Rect | None = None
        self.buffer = ""
        self.current_line = ""

    def open(self) -> None:
        """Start a fresh session in a new window; does nothing if already open."""
        if self.visible:
            return
        self.buffer = BANNER + PROMPT
        self.current_line = ""
        self.window = Rect(*WINDOW_FRAME)
        self.visible = True
        self.draw()

    def close(self) -> None:
        """Close the window."""
        if not self.visible or self.window is None:
            return
        self.visible = False
        self.window = None

    def draw(self) -> None:
        """Draw the buffer from the top, then the input line and the cursor."""
        if not self.visible or self.window is None:
            return
        win = self.window
        screen = self.screen
        top = win.y + 1
        left = win.x + 1
        for y in range(top, win.y + win.height - 1):
            for x in range(left, win.x + win.width - 1):
                screen.put_char(x, y, " ", ATTR_TEXT)

        max_lines = win.height - 3
        max_cols = win.width - 3
        line = col = 0
        for char in self.buffer:
            if line >= max_lines:
                break
            if char == "\n":
                line += 1
                col = 0
            elif col < max_cols:
                screen.put_char(left + col, top + line, char, ATTR_TEXT)
                col += 1

        for char in self.current_line:
            if col >= max_cols:
                break
            screen.put_char(left + col, top + line, char, ATTR_TEXT)
            col += 1

        if col < max_cols:
            screen.put_char(left + col, top + line, "_", ATTR_TEXT)

    def handle_input(self, key: int) -> None:
        """React to a keyboard scan code."""
        if not self.visible:
            return
        if key == KEY_ESCAPE:
            self.close()
        elif key == KEY_BACKSPACE:
            if self.current_line:
                self.current_line = self.current_line[:-1]
                self.draw()
        elif key == KEY_ENTER:
            self.execute_command()
        elif KEY_FIRST_TYPABLE <= key <= KEY_LAST_TYPABLE and len(self.current_line) < MAX_INPUT:
            char = "0" if key == KEY_ZERO else chr(ord("0") + key - 1)
            self.current_line += char
            self.draw()

    def execute_command(self) -> None:
        """Echo the input line into the buffer and run it."""
        line = self.current_line
        self.buffer += line + "\n"
        if line.startswith("he"):
            self.buffer += HELP_TEXT
        elif line.startswith("cl"):
            self.buffer = BANNER
        elif line.startswith("ex"):
            self.close()
            return
        elif line:
            self.buffer += f"Command not found: {line}\n"
        self.buffer += PROMPT
        self.current_line = ""
        self.draw()
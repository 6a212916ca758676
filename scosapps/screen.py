"""An in-memory 80x25 text-mode screen with character and attribute cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 25
DEFAULT_ATTR = 0x07

BOX_CORNER = "+"
BOX_HORIZONTAL = "-"
BOX_VERTICAL = "|"


class Color(IntEnum):
    """The sixteen text-mode colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    YELLOW = 14
    WHITE = 15


def make_color(fg: int, bg: int) -> int:
    """Combine a foreground and background colour into one attribute byte."""
    return ((int(bg) << 4) | int(fg)) & 0xFF


@dataclass
class Rect:
    """A rectangle of cells, such as a window's frame."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell (x, y) lies inside the rectangle."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


class TextScreen:
    """A grid of character cells, each holding a character and an attribute."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        self.width = width
        self.height = height
        self._chars = [[" "] * width for _ in range(height)]
        self._attrs = [[DEFAULT_ATTR] * width for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")

    def put_char(self, x: int, y: int, char: str, attr: int) -> None:
        """Write one character; cells outside the screen are ignored."""
        if not self._in_bounds(x, y):
            return
        self._chars[y][x] = char[:1] or " "
        self._attrs[y][x] = attr & 0xFF

    def put_string(self, x: int, y: int, text: str, attr: int) -> None:
        """Write text left to right from (x, y), clipped at the screen edge."""
        for offset, char in enumerate(text):
            self.put_char(x + offset, y, char, attr)

    def clear(self, attr: int = DEFAULT_ATTR) -> None:
        """Blank every cell with the given attribute."""
        for y in range(self.height):
            self.clear_line(y, attr)

    def clear_line(self, y: int, attr: int = DEFAULT_ATTR) -> None:
        """Blank one row with the given attribute."""
        if not 0 <= y < self.height:
            return
        self._chars[y] = [" "] * self.width
        self._attrs[y] = [attr & 0xFF] * self.width

    def center_text(self, y: int, text: str, attr: int) -> None:
        """Write text centred horizontally on row y."""
        x = max(0, (self.width - len(text)) // 2)
        self.put_string(x, y, text, attr)

    def draw_box(self, x: int, y: int, width: int, height: int, attr: int) -> None:
        """Draw a one-cell border around the given rectangle."""
        if width <= 0 or height <= 0:
            return
        right = x + width - 1
        bottom = y + height - 1
        for cx in range(x + 1, right):
            self.put_char(cx, y, BOX_HORIZONTAL, attr)
            self.put_char(cx, bottom, BOX_HORIZONTAL, attr)
        for cy in range(y + 1, bottom):
            self.put_char(x, cy, BOX_VERTICAL, attr)
            self.put_char(right, cy, BOX_VERTICAL, attr)
        for cx, cy in ((x, y), (right, y), (x, bottom), (right, bottom)):
            self.put_char(cx, cy, BOX_CORNER, attr)

    def char_at(self, x: int, y: int) -> str:
        """The character in cell (x, y)."""
        self._check(x, y)
        return self._chars[y][x]

    def attr_at(self, x: int, y: int) -> int:
        """The attribute byte of cell (x, y)."""
        self._check(x, y)
        return self._attrs[y][x]

    def row_text(self, y: int) -> str:
        """All characters of row y as one string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(self._chars[y])
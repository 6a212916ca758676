"""The file manager page: a fixed listing of the home directory."""

from __future__ import annotations

from .screen import Color, TextScreen, make_color

ATTR_HEADER = make_color(Color.WHITE, Color.BLUE)
ATTR_TEXT = make_color(Color.BLACK, Color.WHITE)
ATTR_FOLDER = make_color(Color.YELLOW, Color.WHITE)
ATTR_STATUS = make_color(Color.LIGHT_GRAY, Color.WHITE)

AREA_LEFT, AREA_TOP, AREA_RIGHT, AREA_BOTTOM = 2, 2, 37, 20

ENTRIES = (
    ("[DIR] home", True),
    ("[DIR] apps", True),
    ("[DIR] system", True),
    ("welcome.txt", False),
    ("readme.txt", False),
)
STATUS = "5 items | 2 folders, 3 files"


def open_file_manager(screen: TextScreen) -> None:
    """Draw the file manager panel with its listing and status line."""
    for y in range(AREA_TOP, AREA_BOTTOM):
        for x in range(AREA_LEFT, AREA_RIGHT):
            screen.put_char(x, y, " ", ATTR_TEXT)

    screen.put_string(10, 3, "File Manager", ATTR_HEADER)
    screen.put_string(3, 4, "Path: /home", ATTR_TEXT)

    for row, (name, is_folder) in enumerate(ENTRIES):
        screen.put_string(4, 6 + row, name, ATTR_FOLDER if is_folder else ATTR_TEXT)

    screen.put_string(4, 18, STATUS, ATTR_STATUS)
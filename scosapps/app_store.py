"""An app store window listing applications that can be installed or removed."""

from __future__ import annotations

from dataclasses import dataclass

from .screen import Rect, TextScreen

KEY_ESCAPE = 0x01
KEY_ENTER = 0x1C
KEY_UP = 0x48
KEY_DOWN = 0x50

WINDOW_TITLE = "SCos App Store"
WINDOW_FRAME = (8, 3, 64, 18)

ATTR_BACKGROUND = 0x1F
ATTR_TITLE = 0x1E
ATTR_SELECTED = 0x4F
ATTR_INSTALLED = 0x2F
ATTR_DOWNLOAD = 0x6F
ATTR_INSTRUCTIONS = 0x17

TITLE = "Available Applications"
INSTRUCTIONS = "Use arrows to select, Enter to install/remove, Esc to exit"
INSTALLED_LABEL = "[INSTALLED]"
DOWNLOAD_LABEL = "[DOWNLOAD]"

NAME_WIDTH = 20
STATUS_OFFSET = 22
STATUS_WIDTH = 12
VERSION_OFFSET = 36
VERSION_WIDTH = 8


@dataclass
class StoreApp:
    """An application offered by the store."""

    name: str
    description: str
    version: str
    installed: bool = False


def _catalogue() -> list[StoreApp]:
    return [
        StoreApp("Text Editor Pro", "Advanced text editing", "v2.1", False),
        StoreApp("Math Calculator", "Scientific calculator", "v1.5", True),
        StoreApp("Image Viewer", "View image files", "v1.0", False),
        StoreApp("Music Player", "Play audio files", "v3.2", False),
        StoreApp("Code Editor", "Programming IDE", "v4.0", False),
        StoreApp("Web Browser+", "Enhanced web browser", "v2.8", False),
    ]


class AppStore:
    """A window with a selectable list of applications."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.window: Rect | None = None
        self.selected = 0
        self.apps = _catalogue()

    def show(self) -> None:
        """Open the store window and draw it."""
        if self.visible:
            return
        self.window = Rect(*WINDOW_FRAME)
        self.visible = True
        self.draw()

    def hide(self) -> None:
        """Close the store window."""
        if not self.visible or self.window is None:
            return
        self.visible = False
        self.window = None

    def _origin(self) -> tuple[int, int]:
        assert self.window is not None
        return self.window.x + 2, self.window.y + 2

    def draw(self) -> None:
        """Draw the title, the application list and the instructions."""
        if not self.visible or self.window is None:
            return
        win = self.window
        start_x, start_y = self._origin()
        screen = self.screen

        for y in range(start_y, win.y + win.height - 1):
            for x in range(start_x, win.x + win.width - 2):
                screen.put_char(x, y, " ", ATTR_BACKGROUND)

        screen.put_string(start_x, start_y, TITLE[: win.width - 4], ATTR_TITLE)

        for row, app in enumerate(self.apps[: max(win.height - 6, 0)]):
            y = start_y + 2 + row
            color = ATTR_SELECTED if row == self.selected else ATTR_BACKGROUND
            screen.put_string(start_x, y, app.name[:NAME_WIDTH], color)
            status = INSTALLED_LABEL if app.installed else DOWNLOAD_LABEL
            status_attr = ATTR_INSTALLED if app.installed else ATTR_DOWNLOAD
            screen.put_string(start_x + STATUS_OFFSET, y, status[:STATUS_WIDTH], status_attr)
            screen.put_string(start_x + VERSION_OFFSET, y, app.version[:VERSION_WIDTH], color)

        screen.put_string(
            start_x, win.y + win.height - 2, INSTRUCTIONS[: win.width - 4], ATTR_INSTRUCTIONS
        )

    def handle_input(self, key: int) -> None:
        """React to a keyboard scan code."""
        if not self.visible:
            return
        if key == KEY_UP:
            if self.selected > 0:
                self.selected -= 1
                self.draw()
        elif key == KEY_DOWN:
            if self.selected < len(self.apps) - 1:
                self.selected += 1
                self.draw()
        elif key == KEY_ENTER:
            self.toggle_installation()
        elif key == KEY_ESCAPE:
            self.hide()

    def handle_mouse_click(self, x: int, y: int) -> None:
        """Select the clicked application; a click on its status toggles it."""
        if not self.visible or self.window is None:
            return
        if not self.window.contains(x, y):
            return
        start_x, start_y = self._origin()
        row = y - (start_y + 2)
        if 0 <= row < len(self.apps):
            self.selected = row
            status_x = start_x + STATUS_OFFSET
            if status_x <= x < status_x + STATUS_WIDTH:
                self.toggle_installation()
            else:
                self.draw()

    def toggle_installation(self) -> None:
        """Install the selected application, or remove it if installed."""
        if 0 <= self.selected < len(self.apps):
            app = self.apps[self.selected]
            app.installed = not app.installed
            self.draw()
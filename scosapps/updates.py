"""A system updates window listing components with newer versions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .screen import Rect, TextScreen

WINDOW_TITLE = "System Updates"
WINDOW_FRAME = (10, 2, 60, 20)

KEY_ESCAPE = 0x01
KEY_ENTER = 0x1C
KEY_UP = 0x48
KEY_DOWN = 0x50
KEY_SPACE = 0x39
KEY_A = 0x1E
KEY_C = 0x2E

ATTR_BACKGROUND = 0x1F
ATTR_TITLE = 0x1E
ATTR_CRITICAL = 0x4F
ATTR_OK = 0x2F
ATTR_SELECTED = 0x70
ATTR_INSTRUCTIONS = 0x08
ATTR_FILLED = 0x2F

TITLE = "System Updates Available"
INSTALL_TITLE = "Installing Updates..."
CRITICAL_LABEL = "[CRITICAL]"
INSTRUCTIONS = (
    "Arrow keys: Select update",
    "Enter: Install selected | Space: Details | A: Install All",
    "C: Check for updates | Esc: Exit",
)

COMPONENT_WIDTH = 15
VERSION_OFFSET = 16
VERSION_WIDTH = 8
PROGRESS_WIDTH = 40
PROGRESS_TEXT_LIMIT = 50
PROGRESS_STEP = 10


class Mode(Enum):
    """Which page the window shows."""

    MAIN = 0
    DETAILS = 1
    INSTALLING = 2


@dataclass
class UpdateInfo:
    """A component with its installed and offered versions."""

    component: str
    current_version: str
    available_version: str
    description: str
    available: bool
    critical: bool


def _catalogue() -> list[UpdateInfo]:
    return [
        UpdateInfo("Kernel", "v1.2.3", "v1.2.4",
                   "Security patches and performance improvements", True, True),
        UpdateInfo("Window Manager", "v2.1.0", "v2.1.1",
                   "Bug fixes for window positioning", True, False),
        UpdateInfo("File System", "v1.0.5", "v1.0.6",
                   "Enhanced file operations support", True, False),
        UpdateInfo("Security Module", "v1.1.2", "v1.1.3",
                   "Updated authentication system", True, True),
        UpdateInfo("UI Framework", "v3.0.1", "v3.0.2",
                   "Visual improvements and theme updates", True, False),
        UpdateInfo("Device Drivers", "v1.0.8", "v1.0.9",
                   "Better hardware compatibility", False, False),
    ]


def _digit(value: int) -> str:
    return chr(ord("0") + value)


class UpdatesManager:
    """Lists available updates and installs them one at a time."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.window: Rect | None = None
        self.selected = 0
        self.mode = Mode.MAIN
        self.updates = _catalogue()
        self.install_progress = ""
        self.install_percent = 0

    def show(self) -> None:
        """Open the window, check for updates and draw the list."""
        if self.visible:
            return
        self.window = Rect(*WINDOW_FRAME)
        self.visible = True
        self.check_for_updates()
        self.draw()

    def hide(self) -> None:
        """Close the window."""
        if not self.visible or self.window is None:
            return
        self.visible = False
        self.window = None

    def check_for_updates(self) -> None:
        """Mark every other component, starting with the first, as having an update."""
        for index, update in enumerate(self.updates):
            update.available = index % 2 == 0

    def draw(self) -> None:
        """Draw the current page."""
        if not self.visible or self.window is None:
            return
        win = self.window
        start_x, start_y = win.x + 2, win.y + 2
        for y in range(start_y, win.y + win.height - 1):
            for x in range(start_x, win.x + win.width - 2):
                self.screen.put_char(x, y, " ", ATTR_BACKGROUND)
        if self.mode is Mode.MAIN:
            self._draw_list(win, start_x, start_y)
        elif self.mode is Mode.INSTALLING:
            self._draw_progress(win, start_x, start_y)

    def _draw_list(self, win: Rect, start_x: int, start_y: int) -> None:
        screen = self.screen
        limit = win.width - 4
        screen.put_string(start_x, start_y, TITLE[:limit], ATTR_TITLE)

        pending = [u for u in self.updates if u.available]
        critical = sum(1 for u in pending if u.critical)
        status = f"Available: {_digit(len(pending))} | Critical: {_digit(critical)}"
        screen.put_string(
            start_x, start_y + 2, status[:limit], ATTR_CRITICAL if critical else ATTR_OK
        )

        for index, update in enumerate(self.updates[: max(win.height - 8, 0)]):
            if not update.available:
                continue
            y = start_y + 4 + index
            color = ATTR_SELECTED if index == self.selected else ATTR_BACKGROUND
            screen.put_string(start_x, y, update.component[:COMPONENT_WIDTH], color)
            ver_x = start_x + VERSION_OFFSET
            screen.put_string(ver_x, y, update.current_version[:VERSION_WIDTH], color)
            arrow_x = ver_x + 9
            screen.put_string(arrow_x, y, "->", color)
            new_ver_x = arrow_x + 3
            screen.put_string(new_ver_x, y, update.available_version[:VERSION_WIDTH], color)
            if update.critical:
                screen.put_string(new_ver_x + 10, y, CRITICAL_LABEL, ATTR_CRITICAL)

        for offset, line in enumerate(INSTRUCTIONS):
            screen.put_string(
                start_x, win.y + win.height - 4 + offset, line[:limit], ATTR_INSTRUCTIONS
            )

    def _draw_progress(self, win: Rect, start_x: int, start_y: int) -> None:
        screen = self.screen
        limit = win.width - 4
        screen.put_string(start_x, start_y, INSTALL_TITLE[:limit], ATTR_TITLE)

        y = start_y + 4
        filled = self.install_percent * PROGRESS_WIDTH // 100
        screen.put_char(start_x, y, "[", ATTR_BACKGROUND)
        for cell in range(PROGRESS_WIDTH):
            done = cell < filled
            screen.put_char(
                start_x + 1 + cell, y, "#" if done else " ", ATTR_FILLED if done else ATTR_BACKGROUND
            )
        screen.put_char(start_x + PROGRESS_WIDTH + 1, y, "]", ATTR_BACKGROUND)

        percent = self.install_percent
        text = f" {_digit(percent // 10)}{_digit(percent % 10)}%"
        screen.put_string(start_x + PROGRESS_WIDTH + 3, y, text, ATTR_BACKGROUND)
        screen.put_string(start_x, y + 2, self.install_progress[:limit], ATTR_BACKGROUND)

    def install_update(self, index: int) -> None:
        """Install one update, showing progress, then return to the list."""
        if not 0 <= index < len(self.updates):
            return
        update = self.updates[index]
        self.mode = Mode.INSTALLING
        self.install_percent = 0
        prefix = "Installing "
        name = update.component[: max(PROGRESS_TEXT_LIMIT - len(prefix), 0)]
        self.install_progress = f"{prefix}{name}..."
        self.draw()
        for percent in range(0, 101, PROGRESS_STEP):
            self.install_percent = percent
            self.draw()
        update.available = False
        self.mode = Mode.MAIN
        self.draw()

    def handle_input(self, key: int) -> None:
        """React to a keyboard scan code."""
        if not self.visible:
            return
        if self.mode is Mode.MAIN:
            if key == KEY_UP:
                if self.selected > 0:
                    self.selected -= 1
                    self.draw()
            elif key == KEY_DOWN:
                if self.selected < len(self.updates) - 1:
                    self.selected += 1
                    self.draw()
            elif key == KEY_ENTER:
                if self.updates[self.selected].available:
                    self.install_update(self.selected)
            elif key == KEY_SPACE:
                self.draw()
            elif key == KEY_A:
                for index, update in enumerate(self.updates):
                    if update.available:
                        self.install_update(index)
            elif key == KEY_C:
                self.check_for_updates()
                self.draw()
            elif key == KEY_ESCAPE:
                self.hide()
        elif self.mode is Mode.INSTALLING and key == KEY_ESCAPE:
            self.mode = Mode.MAIN
            self.draw()

    def handle_mouse_click(self, x: int, y: int) -> None:
        """Select the clicked update, if it is available."""
        if not self.visible or self.window is None:
            return
        if not self.window.contains(x, y):
            return
        if self.mode is Mode.MAIN:
            row = y - (self.window.y + 2 + 4)
            if 0 <= row < len(self.updates) and self.updates[row].available:
                self.selected = row
                self.draw()
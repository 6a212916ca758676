"""The system information screen."""

from __future__ import annotations

from .screen import Color, TextScreen, make_color

ATTR_BACKGROUND = make_color(Color.LIGHT_GRAY, Color.BLUE)
ATTR_BORDER = make_color(Color.WHITE, Color.BLUE)
ATTR_TITLE = make_color(Color.YELLOW, Color.BLUE)
ATTR_INFO = make_color(Color.WHITE, Color.BLUE)
ATTR_HEADING = make_color(Color.LIGHT_CYAN, Color.BLUE)
ATTR_FOOTER = make_color(Color.DARK_GRAY, Color.BLUE)

_LINES = (
    (5, "SCos Operating System", ATTR_TITLE),
    (6, "=====================", ATTR_TITLE),
    (8, "Version: 1.3.0", ATTR_INFO),
    (9, "Build Date: 2025-05-30", ATTR_INFO),
    (10, "Architecture: x86", ATTR_INFO),
    (12, "System Information:", ATTR_HEADING),
    (13, "Memory Model: unknown", ATTR_INFO),
    (14, "Boot Mode: Protected Mode", ATTR_INFO),
    (15, "Display: VGA Text Mode 80x25", ATTR_INFO),
    (23, "(c) 2025 SCos Project", ATTR_FOOTER),
)


def open_about(screen: TextScreen) -> None:
    """Fill the screen with the framed system information page."""
    for y in range(screen.height):
        screen.clear_line(y, ATTR_BACKGROUND)
    screen.draw_box(5, 3, 70, 18, ATTR_BORDER)
    for y, text, attr in _LINES:
        screen.center_text(y, text, attr)
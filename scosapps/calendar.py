"""A month-view calendar with a sidebar of events, drawn on the text screen."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from .screen import Color, Rect, TextScreen, make_color

WINDOW_TITLE = "Calendar"
WINDOW_FRAME = (5, 2, 70, 20)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

TODAY = datetime.date(2025, 5, 30)

GRID_LEFT = 15
GRID_TOP = 5
COLUMN_WIDTH = 8
ROW_HEIGHT = 2
WEEKS = 6

ATTR_SCREEN = make_color(Color.LIGHT_GRAY, Color.BLACK)
ATTR_NAV = make_color(Color.YELLOW, Color.BLUE)
ATTR_TITLE = make_color(Color.WHITE, Color.BLUE)
ATTR_WEEKEND_HEADER = make_color(Color.LIGHT_RED, Color.BLACK)
ATTR_WEEKDAY_HEADER = make_color(Color.LIGHT_CYAN, Color.BLACK)
ATTR_SEPARATOR = make_color(Color.DARK_GRAY, Color.BLACK)
ATTR_EMPTY = make_color(Color.DARK_GRAY, Color.BLACK)
ATTR_TODAY = make_color(Color.BLACK, Color.LIGHT_GREEN)
ATTR_SELECTED = make_color(Color.BLACK, Color.YELLOW)
ATTR_WEEKEND = make_color(Color.LIGHT_RED, Color.BLACK)
ATTR_DAY = make_color(Color.WHITE, Color.BLACK)
ATTR_SIDEBAR = make_color(Color.LIGHT_CYAN, Color.BLACK)
ATTR_FOOTER = make_color(Color.LIGHT_GRAY, Color.BLACK)
ATTR_CLOCK = make_color(Color.YELLOW, Color.BLACK)
ATTR_MINI = make_color(Color.WHITE, Color.BLUE)

FOOTER = "Arrow Keys: Navigate | Space: Select | PgUp/PgDn: Change Month | ESC: Exit"
SIDEBAR_EVENTS_END = 22
EVENT_LINE_WIDTH = 11

CLOCK_LINES = ("+-------+", "|  12   |", "| 9  3  |", "|   6   |", "+-------+")
CLOCK_TIME = "14:30:25"
CLOCK_DAY = "Friday"


@dataclass
class Event:
    """A named day shown in its own colour."""

    day: int
    month: int
    year: int
    title: str
    color: int


def _default_events() -> list[Event]:
    return [
        Event(30, 5, 2025, "Today", Color.LIGHT_GREEN),
        Event(1, 6, 2025, "Summer Begin", Color.YELLOW),
        Event(4, 7, 2025, "Independence", Color.LIGHT_RED),
        Event(25, 12, 2025, "Christmas", Color.LIGHT_RED),
        Event(1, 1, 2025, "New Year", Color.LIGHT_CYAN),
        Event(14, 2, 2025, "Valentine", Color.LIGHT_MAGENTA),
    ]


def is_leap_year(year: int) -> bool:
    """Whether the year is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """The number of days in a month (1-12) of the given year."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def first_weekday(month: int, year: int) -> int:
    """The weekday of the first of the month, 0 for Sunday."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    past = max(year - 1, 0)
    total = 365 * past + past // 4 - past // 100 + past // 400
    total += sum(days_in_month(m, year) for m in range(1, month))
    return (total + 1) % 7


def draw_mini_calendar(screen: TextScreen, x: int, y: int) -> None:
    """Draw the small fixed month summary used by other windows."""
    screen.put_string(x, y, "May 2025", ATTR_NAV)
    screen.put_string(x, y + 1, "SMTWTFS", ATTR_MINI)
    screen.put_string(x, y + 2, "    123", ATTR_MINI)
    screen.put_string(x, y + 3, "4567890", ATTR_MINI)
    screen.put_string(x, y + 4, "1112...", ATTR_MINI)
    screen.put_char(x + 6, y + 4, "0", ATTR_TODAY)


class Calendar:
    """A full-screen month view with a selected day and a list of events."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.window: Rect | None = None
        self.today = TODAY
        self.view_month = TODAY.month
        self.view_year = TODAY.year
        self.selected_day = TODAY.day
        self.events = _default_events()

    def show(self) -> None:
        """Open the calendar window and draw the month."""
        if self.visible:
            return
        self.window = Rect(*WINDOW_FRAME)
        self.visible = True
        self.draw()

    def hide(self) -> None:
        """Close the calendar window."""
        if not self.visible or self.window is None:
            return
        self.visible = False
        self.window = None

    def find_event(self, day: int, month: int, year: int) -> Event | None:
        """The first event on the given date, if any."""
        return next(
            (e for e in self.events if (e.day, e.month, e.year) == (day, month, year)),
            None,
        )

    def draw(self) -> None:
        """Draw the whole calendar page for the viewed month."""
        self.screen.clear(ATTR_SCREEN)
        self._draw_header()
        self._draw_grid()
        self._draw_sidebar()
        self.screen.center_text(23, FOOTER, ATTR_FOOTER)

    def _draw_header(self) -> None:
        screen = self.screen
        title = f"{MONTH_NAMES[self.view_month - 1]} {self.view_year}"
        screen.center_text(1, title, ATTR_TITLE)
        screen.put_string(10, 1, "< Prev", ATTR_NAV)
        screen.put_string(64, 1, "Next >", ATTR_NAV)
        for index, name in enumerate(DAY_NAMES):
            attr = ATTR_WEEKEND_HEADER if index in (0, 6) else ATTR_WEEKDAY_HEADER
            screen.put_string(GRID_LEFT + index * COLUMN_WIDTH, 3, name, attr)
        for x in range(10, 70):
            screen.put_char(x, 4, "-", ATTR_SEPARATOR)

    def _day_attr(self, day: int, weekday: int, event: Event | None) -> int:
        if (day, self.view_month, self.view_year) == (
            self.today.day, self.today.month, self.today.year
        ):
            return ATTR_TODAY
        if day == self.selected_day:
            return ATTR_SELECTED
        if event is not None:
            return make_color(event.color, Color.BLACK)
        if weekday in (0, 6):
            return ATTR_WEEKEND
        return ATTR_DAY

    def _draw_grid(self) -> None:
        screen = self.screen
        length = days_in_month(self.view_month, self.view_year)
        first = first_weekday(self.view_month, self.view_year)
        day = 1
        for week in range(WEEKS):
            for weekday in range(7):
                x = GRID_LEFT + weekday * COLUMN_WIDTH
                y = GRID_TOP + week * ROW_HEIGHT
                if (week == 0 and weekday < first) or day > length:
                    screen.put_string(x, y, "  ", ATTR_EMPTY)
                    continue
                event = self.find_event(day, self.view_month, self.view_year)
                screen.put_string(x, y, f"{day:>2}", self._day_attr(day, weekday, event))
                if event is not None:
                    screen.put_char(x + 2, y, "*", make_color(event.color, Color.BLACK))
                day += 1

    def _draw_sidebar(self) -> None:
        screen = self.screen
        screen.put_string(2, 6, "Today:", ATTR_SIDEBAR)
        screen.put_string(2, 7, f"{self.today.day}/{self.today.month}", ATTR_DAY)

        screen.put_string(2, 9, "Selected:", ATTR_SIDEBAR)
        screen.put_string(2, 10, str(self.selected_day), ATTR_DAY)
        selected = self.find_event(self.selected_day, self.view_month, self.view_year)
        if selected is not None:
            screen.put_string(2, 11, selected.title, make_color(selected.color, Color.BLACK))

        screen.put_string(2, 14, "Events:", ATTR_SIDEBAR)
        line = 15
        for event in self.events:
            if line >= SIDEBAR_EVENTS_END:
                break
            if (event.month, event.year) != (self.view_month, self.view_year):
                continue
            prefix = f"{str(event.day)[:3]}: "
            text = prefix + event.title[: EVENT_LINE_WIDTH - len(prefix)]
            screen.put_string(2, line, text, make_color(event.color, Color.BLACK))
            line += 1

    def draw_with_clock(self) -> None:
        """Draw the calendar with a small clock face in the corner."""
        self.draw()
        for offset, text in enumerate(CLOCK_LINES):
            self.screen.put_string(65, 6 + offset, text, ATTR_CLOCK)
        self.screen.put_string(65, 12, CLOCK_TIME, ATTR_DAY)
        self.screen.put_string(65, 13, CLOCK_DAY, ATTR_SIDEBAR)

    def draw_simple(self) -> None:
        """Draw a plain summary page instead of the month grid."""
        screen = self.screen
        screen.clear(make_color(Color.WHITE, Color.BLACK))
        screen.center_text(10, "SCos Calendar", make_color(Color.YELLOW, Color.BLACK))
        screen.center_text(12, "May 2025", make_color(Color.WHITE, Color.BLACK))
        screen.center_text(14, "Today: Friday, May 30", make_color(Color.LIGHT_GREEN, Color.BLACK))
        screen.center_text(
            16, "Use openCalendar() for full interface", make_color(Color.LIGHT_CYAN, Color.BLACK)
        )

    def draw_month(self, month: int, year: int) -> None:
        """View the given month and draw it."""
        days_in_month(month, year)
        self.view_month = month
        self.view_year = year
        self.draw()

    def select_date(self, day: int) -> None:
        """Select a day of the viewed month and redraw."""
        self.selected_day = day
        self.draw()

    def _month_length(self) -> int:
        return days_in_month(self.view_month, self.view_year)

    def navigate_left(self) -> None:
        """Select the previous day, staying within the month."""
        if self.selected_day > 1:
            self.selected_day -= 1
            self.draw()

    def navigate_right(self) -> None:
        """Select the next day, staying within the month."""
        if self.selected_day < self._month_length():
            self.selected_day += 1
            self.draw()

    def navigate_up(self) -> None:
        """Select the same weekday a week earlier, staying within the month."""
        if self.selected_day > 7:
            self.selected_day -= 7
            self.draw()

    def navigate_down(self) -> None:
        """Select the same weekday a week later, staying within the month."""
        if self.selected_day + 7 <= self._month_length():
            self.selected_day += 7
            self.draw()

    def previous_month(self) -> None:
        """View the month before and select its first day."""
        self.view_month -= 1
        if self.view_month < 1:
            self.view_month = 12
            self.view_year -= 1
        self.selected_day = 1
        self.draw()

    def next_month(self) -> None:
        """View the month after and select its first day."""
        self.view_month += 1
        if self.view_month > 12:
            self.view_month = 1
            self.view_year += 1
        self.selected_day = 1
        self.draw()

    def handle_input(self, key: int) -> None:
        """React to a typed character code: WASD moves, Q and E change month."""
        actions = {
            "w": self.navigate_up,
            "s": self.navigate_down,
            "a": self.navigate_left,
            "d": self.navigate_right,
            "q": self.previous_month,
            "e": self.next_month,
        }
        if not 0 <= key < 0x110000:
            return
        action = actions.get(chr(key).lower()) if chr(key).isascii() else None
        if action is not None:
            action()
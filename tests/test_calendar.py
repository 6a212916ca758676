import calendar as stdcal

import pytest

from scosapps.calendar import (
    CLOCK_TIME,
    FOOTER,
    Calendar,
    days_in_month,
    draw_mini_calendar,
    first_weekday,
    is_leap_year,
)
from scosapps.screen import Color, TextScreen, make_color


def _grid_cell(screen, text):
    """Locate text within the month grid (rows 5-15, columns 15 and beyond)."""
    for y in range(5, 17):
        row = screen.row_text(y)
        col = row.find(text, 15)
        if col >= 0:
            return col, y
    raise AssertionError(f"{text!r} not found in grid")


@pytest.fixture
def cal():
    return Calendar(TextScreen())


@pytest.mark.parametrize("year", [1, 4, 100, 400, 1900, 2000, 2023, 2024, 2025, 2100])
def test_is_leap_year_matches_gregorian(year):
    assert is_leap_year(year) == stdcal.isleap(year)


@pytest.mark.parametrize("year", [1900, 2000, 2024, 2025])
def test_days_in_month_matches_gregorian(year):
    for month in range(1, 13):
        assert days_in_month(month, year) == stdcal.monthrange(year, month)[1]


@pytest.mark.parametrize("month", [0, 13])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(ValueError):
        days_in_month(month, 2025)


@pytest.mark.parametrize("year", [1, 2, 1600, 1999, 2000, 2024, 2025, 2400])
def test_first_weekday_matches_gregorian(year):
    for month in range(1, 13):
        expected = (stdcal.weekday(year, month, 1) + 1) % 7
        assert first_weekday(month, year) == expected


def test_draw_shows_title_and_footer(cal):
    cal.draw()
    assert "May 2025" in cal.screen.row_text(1)
    assert FOOTER in cal.screen.row_text(23)


def test_day_headers_colour_weekends(cal):
    cal.draw()
    assert cal.screen.row_text(3)[15:18] == "Sun"
    assert cal.screen.attr_at(15, 3) == make_color(Color.LIGHT_RED, Color.BLACK)
    assert cal.screen.row_text(3)[23:26] == "Mon"
    assert cal.screen.attr_at(23, 3) == make_color(Color.LIGHT_CYAN, Color.BLACK)


def test_today_is_highlighted(cal):
    cal.draw()
    x, y = _grid_cell(cal.screen, "30")
    assert cal.screen.attr_at(x, y) == make_color(Color.BLACK, Color.LIGHT_GREEN)


def test_today_column_is_friday(cal):
    cal.draw()
    x, _ = _grid_cell(cal.screen, "30")
    assert cal.screen.row_text(3)[x:x + 3] == "Fri"


def test_selected_day_is_highlighted(cal):
    cal.select_date(10)
    x, y = _grid_cell(cal.screen, "10")
    assert cal.selected_day == 10
    assert cal.screen.attr_at(x, y) == make_color(Color.BLACK, Color.YELLOW)


def test_find_event():
    cal = Calendar(TextScreen())
    assert cal.find_event(25, 12, 2025).title == "Christmas"
    assert cal.find_event(2, 2, 2025) is None


def test_navigation_stays_within_month(cal):
    cal.navigate_right()
    assert cal.selected_day == 31
    cal.navigate_right()
    assert cal.selected_day == 31
    cal.navigate_down()
    assert cal.selected_day == 31
    cal.navigate_up()
    assert cal.selected_day == 24
    cal.select_date(1)
    cal.navigate_left()
    cal.navigate_up()
    assert cal.selected_day == 1


def test_previous_month_wraps_year(cal):
    cal.draw_month(1, 2025)
    cal.previous_month()
    assert (cal.view_month, cal.view_year, cal.selected_day) == (12, 2024, 1)
    assert "December 2024" in cal.screen.row_text(1)


def test_next_month_wraps_year(cal):
    cal.draw_month(12, 2025)
    cal.next_month()
    assert (cal.view_month, cal.view_year, cal.selected_day) == (1, 2026, 1)


def test_month_round_trip(cal):
    cal.next_month()
    cal.previous_month()
    assert (cal.view_month, cal.view_year) == (5, 2025)


def test_draw_month_rejects_bad_month(cal):
    with pytest.raises(ValueError):
        cal.draw_month(13, 2025)
    assert cal.view_month == 5


def test_handle_input_keys(cal):
    cal.handle_input(ord("a"))
    assert cal.selected_day == 29
    cal.handle_input(ord("D"))
    assert cal.selected_day == 30
    cal.handle_input(ord("e"))
    assert cal.view_month == 6
    cal.handle_input(ord("Q"))
    assert cal.view_month == 5


def test_handle_input_ignores_other_keys(cal):
    cal.handle_input(ord(" "))
    cal.handle_input(27)
    assert (cal.selected_day, cal.view_month) == (30, 5)


def test_show_and_hide(cal):
    cal.show()
    window = cal.window
    cal.show()
    assert cal.visible and cal.window is window
    cal.hide()
    assert not cal.visible and cal.window is None


def test_draw_with_clock(cal):
    cal.draw_with_clock()
    assert cal.screen.row_text(12)[65:73] == CLOCK_TIME


def test_draw_simple(cal):
    cal.draw_simple()
    assert "SCos Calendar" in cal.screen.row_text(10)
    assert "Today: Friday, May 30" in cal.screen.row_text(14)


def test_draw_mini_calendar():
    screen = TextScreen()
    draw_mini_calendar(screen, 3, 4)
    assert screen.row_text(4)[3:11] == "May 2025"
    assert screen.row_text(5)[3:10] == "SMTWTFS"
    assert screen.char_at(9, 8) == "0"
    assert screen.attr_at(9, 8) == make_color(Color.BLACK, Color.LIGHT_GREEN)
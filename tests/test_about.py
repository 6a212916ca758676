from scosapps.about import open_about
from scosapps.screen import Color, TextScreen, make_color


def _opened():
    screen = TextScreen()
    open_about(screen)
    return screen


def test_title_centred_and_coloured():
    screen = _opened()
    title = "SCos Operating System"
    row = screen.row_text(5)
    start = row.index(title)
    assert start == (screen.width - len(title)) // 2
    assert screen.attr_at(start, 5) == make_color(Color.YELLOW, Color.BLUE)


def test_version_line_present():
    screen = _opened()
    assert "Version: 1.3.0" in screen.row_text(8)
    assert "Display: VGA Text Mode 80x25" in screen.row_text(15)


def test_background_filled():
    screen = _opened()
    assert screen.attr_at(0, 0) == make_color(Color.LIGHT_GRAY, Color.BLUE)
    assert screen.row_text(0).strip() == ""


def test_border_drawn():
    screen = _opened()
    border = make_color(Color.WHITE, Color.BLUE)
    assert screen.char_at(5, 3) == screen.char_at(74, 20)
    assert screen.attr_at(5, 3) == border
    assert screen.attr_at(74, 20) == border


def test_footer_colour():
    screen = _opened()
    row = screen.row_text(23)
    start = row.index("(c) 2025 SCos Project")
    assert screen.attr_at(start, 23) == make_color(Color.DARK_GRAY, Color.BLUE)
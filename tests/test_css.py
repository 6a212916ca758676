import pytest

from scosapps.css import (
    MAX_CSS_RULES,
    CSSRule,
    matches_selector,
    parse_color,
    parse_css,
    parse_inline_style,
)

SAMPLE_CSS = (
    "h1 { color: red; width: 40; }"
    ".header { color: yellow; }"
    ".content { color: green; }"
    "button { color: white; }"
    "p { color: blue; }"
)


def test_parse_sample_stylesheet():
    rules = parse_css(SAMPLE_CSS)
    assert rules == [
        CSSRule("h1", "color", "red"),
        CSSRule("h1", "width", "40"),
        CSSRule(".header", "color", "yellow"),
        CSSRule(".content", "color", "green"),
        CSSRule("button", "color", "white"),
        CSSRule("p", "color", "blue"),
    ]


def test_comments_and_whitespace_are_skipped():
    css = "/* heading */\n  h1 {\n\tcolor : red ;\n}\n/* end */"
    assert parse_css(css) == [CSSRule("h1", "color", "red")]


def test_last_declaration_without_semicolon():
    assert parse_css("p { color: blue }") == [CSSRule("p", "color", "blue")]


def test_missing_brace_yields_nothing():
    assert parse_css("h1 color: red;") == []


def test_rule_count_is_capped():
    css = "".join(f"p {{ width: {n}; }}" for n in range(MAX_CSS_RULES + 50))
    rules = parse_css(css)
    assert len(rules) == MAX_CSS_RULES
    assert rules[-1].value == str(MAX_CSS_RULES - 1)


def test_long_property_is_truncated():
    name = "x" * 40
    rules = parse_css(f"p {{ {name}: 1; }}")
    assert rules[0].property == name[:31]


@pytest.mark.parametrize(
    "name, expected",
    [("red", 4), ("green", 2), ("blue", 1), ("yellow", 6), ("cyan", 3),
     ("magenta", 5), ("white", 15), ("black", 0), ("gray", 8), ("grey", 8),
     ("#ff0000", 7), ("#abc", 7), ("purple", 15)],
)
def test_parse_color(name, expected):
    assert parse_color(name) == expected


def test_parse_inline_style_pairs():
    assert parse_inline_style("color: red; width: 10") == [("color", "red"), ("width", "10")]


def test_parse_inline_style_stops_without_colon():
    assert parse_inline_style("color: red; junk") == [("color", "red")]


def test_matches_id_selector():
    assert matches_selector("#title", "h1", "title", "header")
    assert not matches_selector("#title", "h1", "other", "header")


def test_matches_class_selector_by_substring():
    assert matches_selector(".header", "h1", "title", "header big")
    assert not matches_selector(".content", "h1", "title", "header")


def test_matches_tag_selector_uses_first_word():
    assert matches_selector("div p", "div", "", "")
    assert not matches_selector("div p", "p", "", "")
    assert matches_selector("button", "button", "click_me", "")
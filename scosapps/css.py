"""A small CSS reader: rule lists, inline styles, colours and selectors."""

from __future__ import annotations

from dataclasses import dataclass

MAX_CSS_RULES = 100
MAX_SELECTOR_LENGTH = 63
MAX_PROPERTY_LENGTH = 31
MAX_VALUE_LENGTH = 63

_WHITESPACE = " \t\r\n"
_BLANKS = " \t"

_NAMED_COLORS = {
    "red": 4,
    "green": 2,
    "blue": 1,
    "yellow": 6,
    "cyan": 3,
    "magenta": 5,
    "white": 15,
    "black": 0,
    "gray": 8,
    "grey": 8,
}
_HEX_COLOR = 7
_DEFAULT_COLOR = 15


@dataclass
class CSSRule:
    """One declaration together with the selector it applies to."""

    selector: str
    property: str
    value: str


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def parse_css(text: str) -> list[CSSRule]:
    """Split a stylesheet into one rule per declaration, at most MAX_CSS_RULES."""
    rules: list[CSSRule] = []
    end = len(text)
    pos = 0
    while pos < end and len(rules) < MAX_CSS_RULES:
        pos = _skip(text, pos, _WHITESPACE)
        if pos >= end:
            break
        if text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            pos = end if close < 0 else close + 2
            continue

        brace = text.find("{", pos)
        if brace < 0:
            break
        selector = text[pos:brace][:MAX_SELECTOR_LENGTH].strip(_WHITESPACE)
        pos = brace + 1

        while pos < end and text[pos] != "}":
            pos = _skip(text, pos, _WHITESPACE)
            if pos < end and text[pos] == "}":
                break
            colon = text.find(":", pos)
            if colon < 0:
                pos = end
                break
            prop = text[pos:colon][:MAX_PROPERTY_LENGTH].strip(_WHITESPACE)
            pos = _skip(text, colon + 1, _BLANKS)
            value_end = pos
            while value_end < end and text[value_end] not in ";}":
                value_end += 1
            value = text[pos:value_end][:MAX_VALUE_LENGTH].strip(_WHITESPACE)
            pos = value_end
            if pos < end and text[pos] == ";":
                pos += 1
            rules.append(CSSRule(selector, prop, value))
            if len(rules) >= MAX_CSS_RULES:
                break

        if pos < end and text[pos] == "}":
            pos += 1
    return rules


def parse_color(name: str) -> int:
    """Map a colour name to a 4-bit text-mode colour."""
    if name in _NAMED_COLORS:
        return _NAMED_COLORS[name]
    if name.startswith("#"):
        return _HEX_COLOR
    return _DEFAULT_COLOR


def parse_inline_style(style: str) -> list[tuple[str, str]]:
    """Split a style attribute into (property, value) pairs in order."""
    declarations: list[tuple[str, str]] = []
    end = len(style)
    pos = 0
    while pos < end:
        pos = _skip(style, pos, _BLANKS)
        if pos >= end:
            break
        colon = style.find(":", pos)
        if colon < 0:
            break
        prop = style[pos:colon][:MAX_PROPERTY_LENGTH].strip(_WHITESPACE)
        pos = _skip(style, colon + 1, _BLANKS)
        semi = style.find(";", pos)
        value_end = end if semi < 0 else semi
        value = style[pos:value_end][:MAX_VALUE_LENGTH].strip(_WHITESPACE)
        pos = value_end + 1 if semi >= 0 else end
        declarations.append((prop, value))
    return declarations


def matches_selector(selector: str, tag: str, element_id: str, class_name: str) -> bool:
    """Whether an element with this tag, id and class matches a simple selector."""
    if selector.startswith("#"):
        return selector[1:] == element_id
    if selector.startswith("."):
        return selector[1:] in class_name
    return selector.split(" ", 1)[0] == tag
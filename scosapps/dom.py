"""A small HTML document model with layout, styling, rendering and click handling."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field

from .css import CSSRule, matches_selector, parse_color, parse_css, parse_inline_style
from .screen import Rect, TextScreen
from .script import JSFunction, parse_js

MAX_DOM_ELEMENTS = 200
MAX_CSS_RULES = 100
MAX_JS_FUNCTIONS = 50
MAX_CHILDREN = 10
MAX_STACK_DEPTH = 50
MAX_TAG_TEXT = 511
MAX_TEXT_RUN = 255
MAX_CONTENT = 255
MAX_TAG_NAME = 31
MAX_ATTR_NAME = 31
MAX_ATTR_VALUE = 127
MAX_ID_LENGTH = 63

DEFAULT_COLOR = 0x1F
LEFT_MARGIN = 2
TOP_MARGIN = 2
LIST_INDENT = 4
CHILD_INDENT = 2
LAYOUT_RIGHT_EDGE = 78
LAYOUT_BOTTOM_ROW = 23
FLASH_ATTR = 0xFF
FLASH_SECONDS = 0.05

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr",
    }
)

_TAG_DEFAULTS = {
    "h1": (60, 2, 0x4F),
    "h2": (55, 2, 0x2F),
    "h3": (50, 1, 0x6F),
    "p": (70, 1, 0x1F),
    "button": (15, 1, 0x70),
    "input": (20, 1, 0x0F),
    "div": (75, 1, 0x1F),
    "span": (20, 1, 0x1F),
    "ul": (70, 1, 0x1F),
    "ol": (70, 1, 0x1F),
    "li": (68, 1, 0x1F),
}
_FALLBACK_DEFAULTS = (60, 1, 0x1F)

_SPACING = {"h1": 2, "h2": 1, "h3": 1, "p": 1, "div": 1, "ul": 1, "ol": 1}

_WHITESPACE = " \t\r\n"
_BLANKS = " \t"
_INT_PREFIX = re.compile(r"([+-]?)(\d*)")
_TAG_NAME = re.compile(r"[^ \t]*")


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _to_int(text: str) -> int:
    """Read an optional sign and leading digits, ignoring what follows."""
    match = _INT_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def _tag_name(tag_text: str) -> str:
    return _TAG_NAME.match(tag_text).group()[:MAX_TAG_NAME]


@dataclass
class HTMLElement:
    """One element of the document, with its layout box and colour."""

    tag: str
    id: str = ""
    class_name: str = ""
    content: str = ""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 1
    color: int = DEFAULT_COLOR
    visible: bool = True
    parent: int = -1
    children: list[int] = field(default_factory=list)

    def apply_css_property(self, prop: str, value: str) -> None:
        """Apply one style declaration; unknown properties are ignored."""
        if prop == "color":
            self.color = (self.color & 0xF0) | (parse_color(value) & 0x0F)
        elif prop == "background-color":
            self.color = (self.color & 0x0F) | ((parse_color(value) & 0x0F) << 4)
        elif prop == "width":
            self.width = _to_int(value)
        elif prop == "height":
            self.height = _to_int(value)

    def _apply_defaults(self) -> None:
        self.width, self.height, self.color = _TAG_DEFAULTS.get(self.tag, _FALLBACK_DEFAULTS)

    def _hit(self, x: int, y: int) -> bool:
        return (
            self.visible
            and self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )


class HTMLInterpreter:
    """Holds a parsed document, its style rules and its script functions."""

    def __init__(self) -> None:
        self.elements: list[HTMLElement] = []
        self.css_rules: list[CSSRule] = []
        self.js_functions: list[JSFunction] = []

    def reset(self) -> None:
        """Forget all elements, rules and functions."""
        self.elements.clear()
        self.css_rules.clear()
        self.js_functions.clear()

    def parse_html(self, html: str) -> None:
        """Add the elements of an HTML fragment, then lay out and style the document."""
        stack: list[int] = []
        parent = -1
        end = len(html)
        pos = 0
        while pos < end and len(self.elements) < MAX_DOM_ELEMENTS:
            if html[pos] == "<":
                close = html.find(">", pos)
                if close < 0:
                    break
                tag_text = html[pos + 1:close][:MAX_TAG_TEXT].strip(_WHITESPACE)
                pos = close + 1
                if tag_text.startswith("/"):
                    if stack:
                        stack.pop()
                        parent = stack[-1] if stack else -1
                elif not tag_text.startswith(("!", "?")):
                    self_closing = tag_text.endswith("/")
                    if self_closing:
                        tag_text = tag_text[:-1].strip(_WHITESPACE)
                    index = self._add_element(tag_text, parent)
                    if (
                        not self_closing
                        and _tag_name(tag_text) not in VOID_ELEMENTS
                        and len(stack) < MAX_STACK_DEPTH
                    ):
                        stack.append(index)
                        parent = index
            else:
                next_tag = html.find("<", pos)
                if next_tag < 0:
                    next_tag = end
                if parent >= 0:
                    text = html[pos:next_tag][:MAX_TEXT_RUN].strip(_WHITESPACE)
                    if text:
                        element = self.elements[parent]
                        element.content = (element.content + text)[:MAX_CONTENT]
                pos = next_tag
        self._calculate_layout()
        self._apply_css_rules()

    def parse_css(self, css: str) -> None:
        """Store the rules of a stylesheet; they take effect at the next parse_html."""
        room = max(MAX_CSS_RULES - len(self.css_rules), 0)
        self.css_rules.extend(parse_css(css)[:room])

    def parse_js(self, js: str) -> None:
        """Store the functions defined in script text."""
        room = max(MAX_JS_FUNCTIONS - len(self.js_functions), 0)
        self.js_functions.extend(parse_js(js)[:room])

    def _add_element(self, tag_text: str, parent: int) -> int:
        element = HTMLElement(tag=_tag_name(tag_text), parent=parent)
        split = re.search(r"[ \t]", tag_text)
        if split:
            self._parse_attributes(tag_text[split.start():], element)
        element.visible = True
        element._apply_defaults()
        index = len(self.elements)
        if 0 <= parent < index:
            siblings = self.elements[parent].children
            if len(siblings) < MAX_CHILDREN:
                siblings.append(index)
        self.elements.append(element)
        return index

    def _parse_attributes(self, attrs: str, element: HTMLElement) -> None:
        end = len(attrs)
        pos = 0
        while pos < end:
            pos = _skip(attrs, pos, _BLANKS)
            if pos >= end:
                break
            start = pos
            while pos < end and attrs[pos] not in "= \t":
                pos += 1
            if pos >= end or attrs[pos] != "=":
                while pos < end and attrs[pos] not in _BLANKS:
                    pos += 1
                continue
            name = attrs[start:pos][:MAX_ATTR_NAME]
            pos = _skip(attrs, pos + 1, _BLANKS)
            quote = attrs[pos] if pos < end and attrs[pos] in "\"'" else ""
            if quote:
                pos += 1
            stops = quote or _BLANKS
            value_start = pos
            while pos < end and attrs[pos] not in stops:
                pos += 1
            value = attrs[value_start:pos][:MAX_ATTR_VALUE]
            if quote and pos < end:
                pos += 1
            self._apply_attribute(element, name, value)

    @staticmethod
    def _apply_attribute(element: HTMLElement, name: str, value: str) -> None:
        if name == "id":
            element.id = value[:MAX_ID_LENGTH]
        elif name == "class":
            element.class_name = value[:MAX_ID_LENGTH]
        elif name == "style":
            for prop, prop_value in parse_inline_style(value):
                element.apply_css_property(prop, prop_value)
        elif name == "width":
            element.width = _to_int(value)
        elif name == "height":
            element.height = _to_int(value)

    def _calculate_layout(self) -> None:
        current_y = 0
        for index, element in enumerate(self.elements):
            if element.parent == -1:
                element.x = LEFT_MARGIN
                element.y = current_y + TOP_MARGIN
                current_y += element.height + _SPACING.get(element.tag, 0)
            else:
                parent = self.elements[element.parent]
                if element.tag == "li":
                    element.x = parent.x + LIST_INDENT
                    element.y = parent.y + parent.height + (index - element.parent - 1)
                else:
                    element.x = parent.x + CHILD_INDENT
                    element.y = parent.y + parent.height + 1
            if element.x + element.width > LAYOUT_RIGHT_EDGE:
                element.width = LAYOUT_RIGHT_EDGE - element.x
            if element.y > LAYOUT_BOTTOM_ROW:
                element.visible = False

    def _apply_css_rules(self) -> None:
        for rule in self.css_rules:
            for element in self.elements:
                if matches_selector(rule.selector, element.tag, element.id, element.class_name):
                    element.apply_css_property(rule.property, rule.value)

    def render_page(self, screen: TextScreen, window: Rect) -> None:
        """Draw every visible element inside the given window."""
        for element in self.elements:
            if element.visible:
                self._render_element(screen, window, element)

    @staticmethod
    def _render_element(screen: TextScreen, window: Rect, element: HTMLElement) -> None:
        screen_x = window.x + element.x
        screen_y = window.y + element.y
        text = element.content or element.tag
        if element.tag == "li":
            prefix = "• "
        elif element.tag == "button":
            prefix = "["
        else:
            prefix = ""

        offset = 0
        for char in prefix:
            if offset >= element.width:
                break
            screen.put_char(screen_x + offset, screen_y, char, element.color)
            offset += 1
        for char in text:
            if offset >= element.width or screen_x + offset >= window.x + window.width:
                break
            screen.put_char(screen_x + offset, screen_y, char, element.color)
            offset += 1
        if element.tag == "button" and offset < element.width:
            screen.put_char(screen_x + offset, screen_y, "]", element.color)

    def handle_click(
        self, x: int, y: int, screen: TextScreen | None = None
    ) -> HTMLElement | None:
        """Find the element at (x, y); a button runs its click handler. Returns the element hit."""
        for element in self.elements:
            if element._hit(x, y):
                if element.tag == "button":
                    handler = f"{element.id}_click" if element.id else "button_click"
                    self.execute_js(handler, screen)
                return element
        return None

    def execute_js(self, function_name: str, screen: TextScreen | None = None) -> bool:
        """Run the named function; returns whether such a function exists."""
        for function in self.js_functions:
            if function.name == function_name:
                if "alert" in function.body and screen is not None:
                    self._flash(screen)
                return True
        return False

    @staticmethod
    def _flash(screen: TextScreen) -> None:
        cells = [(x, y) for y in range(screen.height) for x in range(screen.width)]
        saved = [screen.attr_at(x, y) for x, y in cells]
        try:
            for x, y in cells:
                screen.put_char(x, y, screen.char_at(x, y), FLASH_ATTR)
            time.sleep(FLASH_SECONDS)
        finally:
            for (x, y), attr in zip(cells, saved):
                screen.put_char(x, y, screen.char_at(x, y), attr)

    def get_element_by_id(self, element_id: str) -> HTMLElement | None:
        """The first element with this id, if any."""
        return next((e for e in self.elements if e.id == element_id), None)

    def find_element_by_tag(self, tag: str) -> HTMLElement | None:
        """The first element with this tag, if any."""
        return next((e for e in self.elements if e.tag == tag), None)

    def update_element_content(self, element_id: str, content: str) -> None:
        """Replace the text of the element with this id, if there is one."""
        element = self.get_element_by_id(element_id)
        if element is not None:
            element.content = content

    def toggle_element_visibility(self, element_id: str) -> None:
        """Show or hide the element with this id, if there is one."""
        element = self.get_element_by_id(element_id)
        if element is not None:
            element.visible = not element.visible
"""A minimal script reader that collects named functions and their bodies."""

from __future__ import annotations

from dataclasses import dataclass

MAX_JS_FUNCTIONS = 50
MAX_NAME_LENGTH = 63
MAX_BODY_LENGTH = 511

_KEYWORD = "function"
_WHITESPACE = " \t\r\n"
_BLANKS = " \t"
_NAME_STOPS = "( \t"


@dataclass
class JSFunction:
    """A function's name and the raw text between its outer braces."""

    name: str
    body: str


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def parse_js(text: str) -> list[JSFunction]:
    """Collect up to MAX_JS_FUNCTIONS function definitions from script text.

    The keyword is looked for anywhere in the remaining text, and the reader
    then steps over as many characters as the keyword has from where it stands.
    """
    functions: list[JSFunction] = []
    end = len(text)
    pos = 0
    while pos < end and len(functions) < MAX_JS_FUNCTIONS:
        pos = _skip(text, pos, _WHITESPACE)
        if pos >= end:
            break
        if text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = end if newline < 0 else newline
            continue
        if text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            pos = end if close < 0 else close + 2
            continue
        if text.find(_KEYWORD, pos) < 0:
            pos += 1
            continue

        pos = _skip(text, min(pos + len(_KEYWORD), end), _BLANKS)
        name_end = pos
        while name_end < end and text[name_end] not in _NAME_STOPS:
            name_end += 1
        name = text[pos:name_end][:MAX_NAME_LENGTH]

        brace = text.find("{", name_end)
        if brace < 0:
            break
        body_start = brace + 1
        depth = 1
        pos = body_start
        while pos < end:
            if text[pos] == "{":
                depth += 1
            elif text[pos] == "}":
                depth -= 1
                if depth == 0:
                    break
            pos += 1
        functions.append(JSFunction(name, text[body_start:pos][:MAX_BODY_LENGTH]))
    return functions
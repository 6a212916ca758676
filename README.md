# scosapps

Small text-mode desktop applications that draw onto an in-memory 80x25
character screen. Every cell holds a character and a colour attribute
(foreground in the low four bits, background in the high four), so whatever an
application draws can be read back and checked.

## Modules

- `scosapps.screen` – `TextScreen` (`put_char`, `put_string`, `clear`,
  `clear_line`, `center_text`, `draw_box`, `char_at`, `attr_at`, `row_text`),
  `Rect`, the `Color` enum and `make_color(fg, bg)`.
- `scosapps.css` – `parse_css`, `parse_inline_style`, `parse_color` and
  `matches_selector`, with `CSSRule` holding one declaration.
- `scosapps.script` – `parse_js`, which collects named functions as `JSFunction`.
- `scosapps.dom` – `HTMLInterpreter` and `HTMLElement`: parses HTML into
  elements, lays them out, applies stored CSS rules, renders them into a
  window and handles clicks on buttons by running `<id>_click` functions.
- `scosapps.app_store` – `AppStore`, a list of `StoreApp` entries that can be
  toggled between installed and not installed.
- `scosapps.calculator` – `Calculator`, a four-function calculator, and
  `format_value`, which shows two truncated decimals.
- `scosapps.calendar` – `Calendar`, a month view with events and day
  navigation, plus `is_leap_year`, `days_in_month`, `first_weekday` and
  `draw_mini_calendar`.
- `scosapps.notepad` – `Notepad`, a 15 x 50 cell editor, and `open_notepad`.
- `scosapps.terminal` – `Terminal`, a window answering `help`, `clear` and `exit`.
- `scosapps.shell` – `Shell`, whose `execute_command` returns a
  `CommandResult(ok, output)` for `ls`, `cd`, `pwd`, `mkdir`, `touch`, `cat`,
  `rm`, `cp`, `mv` and `find`; `parse_command` splits a line in two.
- `scosapps.updates` – `UpdatesManager` with a list of `UpdateInfo`.
- `scosapps.about` – `open_about`; `scosapps.file_manager` – `open_file_manager`.
  Both draw a fixed page.

Most applications take keyboard input as scan codes: 0x01 is Escape, 0x1C is
Enter, 0x48 and 0x50 are the up and down arrows. `Calendar.handle_input`
takes character codes instead (`ord("w")`, `ord("a")`, `ord("s")`,
`ord("d")` move the selection, `ord("q")` and `ord("e")` change month).

## Installation

```
pip install .
```

## Examples

Draw on the screen and read it back:

```python
from scosapps.screen import Color, TextScreen, make_color

screen = TextScreen(80, 25)
screen.center_text(5, "Hello", make_color(Color.YELLOW, Color.BLUE))
print(screen.row_text(5).strip())         # Hello
```

Run shell commands:

```python
from scosapps.shell import Shell

shell = Shell()
print(shell.execute_command("cd documents").output)   # Changed to /documents
print(shell.execute_command("pwd").output)            # /documents
print(shell.current_directory)                        # /documents
```

Use the calculator:

```python
from scosapps.calculator import Calculator, format_value
from scosapps.screen import TextScreen

calc = Calculator(TextScreen(80, 25))
calc.show()
for ch in "12+30=":
    calc.process_input(ch)
print(format_value(calc.display_value))   # 42.00
```

Parse and render a page. Style rules are applied when HTML is parsed, so give
the stylesheet first:

```python
from scosapps.dom import HTMLInterpreter
from scosapps.screen import Rect, TextScreen

page = HTMLInterpreter()
page.parse_css("h1 { color: yellow; }")
page.parse_html("<h1 id='title'>Welcome</h1><p>Hello</p>")
screen = TextScreen(80, 25)
page.render_page(screen, Rect(5, 2, 70, 20))
print(page.get_element_by_id("title").content)   # Welcome
```

## What the package does not do

- There is no browser window: `scosapps.dom` parses and renders pages, but
  nothing provides an address bar, navigation buttons or loading of pages.
- There is no window manager, event loop or keyboard driver. Applications
  keep their own window rectangle and react only to the calls you make.
- There is no command-line program; everything is used from Python.
- The shell has no file system behind it: `ls` prints a fixed listing, `cat`
  knows only `readme.txt`, and `mkdir`, `touch`, `rm`, `cp`, `mv` and `find`
  only report what they would do.
- Updates are not downloaded; `UpdatesManager` only marks entries installed.

## Running the tests

```
pip install .[test]
pytest
```
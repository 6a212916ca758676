"""A four-function calculator drawn on the text screen."""

from __future__ import annotations

from .screen import Color, TextScreen, make_color

KEY_ESCAPE = 0x01
KEY_BACKSPACE = 0x0E
KEY_EQUALS = 0x0D
KEY_MINUS = 0x0C
KEY_PLUS = 0x1A
KEY_SLASH = 0x35
KEY_STAR = 0x37
KEY_ONE = 0x02
KEY_ZERO = 0x0B

OPERATORS = "+-*/"
BUTTONS = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", ".", "=", "+"),
)

AREA_LEFT, AREA_TOP, AREA_RIGHT, AREA_BOTTOM = 2, 2, 27, 20
DISPLAY_ROW = 5
DISPLAY_LEFT, DISPLAY_RIGHT = 4, 25
BUTTON_LEFT, BUTTON_TOP = 4, 7
BUTTON_PITCH_X, BUTTON_PITCH_Y = 5, 2
BUTTON_AREA_RIGHT, BUTTON_AREA_BOTTOM = 23, 14

ATTR_HEADER = make_color(Color.WHITE, Color.BLUE)
ATTR_TEXT = make_color(Color.BLACK, Color.WHITE)
ATTR_BUTTON = make_color(Color.BLACK, Color.LIGHT_GRAY)
ATTR_DISPLAY = make_color(Color.WHITE, Color.BLACK)
ATTR_HINT = make_color(Color.LIGHT_GRAY, Color.WHITE)

HINTS = (
    "Use number keys and operators",
    "Press Enter for result",
    "Press Esc to exit",
)

_KEY_OPERATORS = {KEY_MINUS: "-", KEY_PLUS: "+", KEY_SLASH: "/", KEY_STAR: "*"}


def format_value(value: float) -> str:
    """Format a number with two decimals, truncating rather than rounding."""
    integer_part = int(value)
    decimal_part = abs(int((value - integer_part) * 100))
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(integer_part)}.{decimal_part // 10}{decimal_part % 10}"


class Calculator:
    """Holds the running value, the stored operand and the pending operator."""

    def __init__(self, screen: TextScreen) -> None:
        self.screen = screen
        self.visible = False
        self.display_value = 0.0
        self.stored_value = 0.0
        self.current_operator = ""
        self.has_operand = False
        self.just_calculated = False

    def show(self) -> None:
        """Make the calculator visible and draw it."""
        self.visible = True
        self.draw()

    def hide(self) -> None:
        """Hide the calculator."""
        self.visible = False

    def clear(self) -> None:
        """Reset every value and the pending operator."""
        self.display_value = 0.0
        self.stored_value = 0.0
        self.current_operator = ""
        self.has_operand = False
        self.just_calculated = False

    def draw(self) -> None:
        """Draw the display, the keypad and the instructions."""
        screen = self.screen
        for y in range(AREA_TOP, AREA_BOTTOM):
            for x in range(AREA_LEFT, AREA_RIGHT):
                screen.put_char(x, y, " ", ATTR_TEXT)

        screen.put_string(8, 3, "Calculator", ATTR_HEADER)

        for x in range(DISPLAY_LEFT, DISPLAY_RIGHT):
            screen.put_char(x, DISPLAY_ROW, " ", ATTR_DISPLAY)
        text = format_value(self.display_value)
        screen.put_string(24 - len(text), DISPLAY_ROW, text, ATTR_DISPLAY)

        for row, labels in enumerate(BUTTONS):
            for col, label in enumerate(labels):
                x = BUTTON_LEFT + col * BUTTON_PITCH_X
                y = BUTTON_TOP + row * BUTTON_PITCH_Y
                screen.put_string(x, y, f"[{label}]", ATTR_BUTTON)

        for offset, hint in enumerate(HINTS):
            screen.put_string(4, 16 + offset, hint, ATTR_HINT)

    def input_digit(self, digit: int) -> None:
        """Append a decimal digit to the displayed value."""
        if self.just_calculated:
            self.display_value = 0.0
            self.just_calculated = False
        self.display_value = self.display_value * 10 + digit

    def input_operator(self, op: str) -> None:
        """Store the displayed value and remember the operator, finishing any pending one."""
        if op not in OPERATORS:
            raise ValueError(f"unknown operator: {op!r}")
        if self.has_operand and not self.just_calculated:
            self.calculate()
        self.stored_value = self.display_value
        self.current_operator = op
        self.has_operand = True
        self.just_calculated = False
        self.display_value = 0.0

    def calculate(self) -> None:
        """Apply the pending operator; division by zero leaves the display as it is."""
        if not self.has_operand:
            return
        op = self.current_operator
        if op == "+":
            self.display_value = self.stored_value + self.display_value
        elif op == "-":
            self.display_value = self.stored_value - self.display_value
        elif op == "*":
            self.display_value = self.stored_value * self.display_value
        elif op == "/" and self.display_value != 0:
            self.display_value = self.stored_value / self.display_value
        self.has_operand = False
        self.just_calculated = True

    def process_input(self, char: str) -> None:
        """Feed one typed character: a digit, an operator, or '=' / newline."""
        if char.isdigit() and len(char) == 1 and "0" <= char <= "9":
            self.input_digit(int(char))
        elif char in OPERATORS and len(char) == 1:
            self.input_operator(char)
        elif char in ("=", "\r", "\n"):
            self.calculate()

    def handle_input(self, key: int) -> None:
        """React to a keyboard scan code."""
        if not self.visible:
            return
        if key == KEY_ESCAPE:
            self.hide()
            return
        if KEY_ONE <= key <= KEY_ZERO:
            self.input_digit(0 if key == KEY_ZERO else key - 1)
        elif key == KEY_EQUALS:
            self.calculate()
        elif key in _KEY_OPERATORS:
            self.input_operator(_KEY_OPERATORS[key])
        elif key == KEY_BACKSPACE:
            self.clear()
        else:
            return
        self.draw()

    def handle_mouse_click(self, x: int, y: int) -> None:
        """Press the keypad button under screen cell (x, y), if any."""
        if not self.visible:
            return
        if not (BUTTON_LEFT <= x <= BUTTON_AREA_RIGHT and BUTTON_TOP <= y <= BUTTON_AREA_BOTTOM):
            return
        col = (x - BUTTON_LEFT) // BUTTON_PITCH_X
        row = (y - BUTTON_TOP) // BUTTON_PITCH_Y
        if not (0 <= col < 4 and 0 <= row < 4):
            return
        label = BUTTONS[row][col]
        if label.isdigit():
            self.input_digit(int(label))
        elif label in OPERATORS:
            self.input_operator(label)
        elif label == "=":
            self.calculate()
        self.draw()
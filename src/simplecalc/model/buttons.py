"""
Calculator Buttons (Input Classifier)
=====================================
Defines the closed set of keypad buttons and what each one means.

Every button carries:
    title: The glyph drawn on the key and echoed into the display/expression.
    category: How the Expression Engine reacts to it.
    role: Which color group the view paints it with.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, List, Optional


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ButtonCategory(StrEnum):
    """Semantic group driving the engine transition."""
    DIGIT = "digit"
    BINARY_OPERATOR = "binary_operator"
    EQUALS = "equals"
    RESET = "reset"


class ButtonRole(StrEnum):
    """Visual group used for coloring the keypad."""
    FUNCTION = "function"
    OPERATOR = "operator"
    DIGIT = "digit"


class CalculatorButton(StrEnum):
    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    THREE = "three"
    FOUR = "four"
    FIVE = "five"
    SIX = "six"
    SEVEN = "seven"
    EIGHT = "eight"
    NINE = "nine"
    DECIMAL = "decimal"

    EQUALS = "equals"
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    CLEAR = "clear"
    SIGN_TOGGLE = "sign_toggle"
    PERCENT = "percent"

    @property
    def info(self) -> ButtonInfo:
        return classify(self)

    @property
    def title(self) -> str:
        return BUTTON_INFO[self].title

    @property
    def category(self) -> ButtonCategory:
        return BUTTON_INFO[self].category

    @property
    def role(self) -> ButtonRole:
        return BUTTON_INFO[self].role

    @staticmethod
    def from_title(title: str) -> CalculatorButton:
        """Look up a button by the glyph drawn on it."""
        for button, info in BUTTON_INFO.items():
            if info.title == title:
                return button
        raise ValueError(f"No calculator button has the title '{title}'.")


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class ButtonInfo:
    title: str
    category: ButtonCategory
    role: ButtonRole


def _digit(title: str) -> ButtonInfo:
    return ButtonInfo(title=title, category=ButtonCategory.DIGIT, role=ButtonRole.DIGIT)


def _operator(title: str) -> ButtonInfo:
    return ButtonInfo(title=title, category=ButtonCategory.BINARY_OPERATOR, role=ButtonRole.OPERATOR)


def _reset(title: str) -> ButtonInfo:
    return ButtonInfo(title=title, category=ButtonCategory.RESET, role=ButtonRole.FUNCTION)


BUTTON_INFO: Dict[CalculatorButton, ButtonInfo] = {
    CalculatorButton.ZERO: _digit("0"),
    CalculatorButton.ONE: _digit("1"),
    CalculatorButton.TWO: _digit("2"),
    CalculatorButton.THREE: _digit("3"),
    CalculatorButton.FOUR: _digit("4"),
    CalculatorButton.FIVE: _digit("5"),
    CalculatorButton.SIX: _digit("6"),
    CalculatorButton.SEVEN: _digit("7"),
    CalculatorButton.EIGHT: _digit("8"),
    CalculatorButton.NINE: _digit("9"),
    CalculatorButton.DECIMAL: _digit("."),
    CalculatorButton.EQUALS: ButtonInfo(title="=", category=ButtonCategory.EQUALS, role=ButtonRole.OPERATOR),
    CalculatorButton.PLUS: _operator("+"),
    CalculatorButton.MINUS: _operator("-"),
    CalculatorButton.MULTIPLY: _operator("X"),
    CalculatorButton.DIVIDE: _operator("/"),
    # Sign toggle and percent have no own semantics, they reset like AC
    CalculatorButton.CLEAR: _reset("AC"),
    CalculatorButton.SIGN_TOGGLE: _reset("+/-"),
    CalculatorButton.PERCENT: _reset("%"),
}


def classify(button: CalculatorButton) -> ButtonInfo:
    """Return the glyph and semantic category of a button."""
    return BUTTON_INFO[button]


# ------------------------------------------------------------------------------
# Keypad layout & keyboard bindings
# ------------------------------------------------------------------------------
KEYPAD_LAYOUT: List[List[CalculatorButton]] = [
    [CalculatorButton.CLEAR, CalculatorButton.SIGN_TOGGLE, CalculatorButton.PERCENT, CalculatorButton.DIVIDE],
    [CalculatorButton.SEVEN, CalculatorButton.EIGHT, CalculatorButton.NINE, CalculatorButton.MULTIPLY],
    [CalculatorButton.FOUR, CalculatorButton.FIVE, CalculatorButton.SIX, CalculatorButton.MINUS],
    [CalculatorButton.ONE, CalculatorButton.TWO, CalculatorButton.THREE, CalculatorButton.PLUS],
    [CalculatorButton.ZERO, CalculatorButton.DECIMAL, CalculatorButton.EQUALS],
]

# Buttons occupying two grid columns
WIDE_BUTTONS = frozenset({CalculatorButton.ZERO})

KEY_BINDINGS: Dict[str, CalculatorButton] = {
    **{info.title: button for button, info in BUTTON_INFO.items() if info.category == ButtonCategory.DIGIT},
    ",": CalculatorButton.DECIMAL,
    "+": CalculatorButton.PLUS,
    "-": CalculatorButton.MINUS,
    "*": CalculatorButton.MULTIPLY,
    "x": CalculatorButton.MULTIPLY,
    "X": CalculatorButton.MULTIPLY,
    "/": CalculatorButton.DIVIDE,
    "=": CalculatorButton.EQUALS,
    "\r": CalculatorButton.EQUALS,
    "\n": CalculatorButton.EQUALS,
    "%": CalculatorButton.PERCENT,
    "\x1b": CalculatorButton.CLEAR,  # Escape
    "\x7f": CalculatorButton.CLEAR,  # Delete
}


def button_for_key(text: str) -> Optional[CalculatorButton]:
    """Map a typed character to a keypad button, None if it has no binding."""
    return KEY_BINDINGS.get(text)

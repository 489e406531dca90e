"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with button meaning, number parsing and expression evaluation.
"""
from simplecalc.model.buttons import ButtonCategory, ButtonInfo, ButtonRole, CalculatorButton, classify
from simplecalc.model.engine import ExpressionEngine

__all__ = [
    "ButtonCategory",
    "ButtonInfo",
    "ButtonRole",
    "CalculatorButton",
    "ExpressionEngine",
    "classify",
]

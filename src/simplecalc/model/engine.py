"""
Expression Engine (Calculator State)
====================================
This module defines the state machine behind the calculator display.

Why is this file needed?
------------------------
1. State Management: It holds the display text and the pending
   '[operand, operator]' expression in one place.
2. Decoupling: It knows nothing about Qt. The store wraps it and
   publishes its changes to the views.

Classes:
    ExpressionEngine: Display + pending expression and the input transitions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List

from simplecalc.config import ERROR_SENTINEL, INITIAL_DISPLAY
from simplecalc.model.buttons import ButtonCategory, CalculatorButton, classify
from simplecalc.model.numeric import apply_operator, format_result, parse_operand

logger = logging.getLogger(__name__)


@dataclass
class ExpressionEngine:
    """
    Two-operand calculator with at most one pending operator.

    'expression' is either empty or exactly [operand, operator_glyph].
    """
    display: str = INITIAL_DISPLAY
    expression: List[str] = field(default_factory=list)
    error_sentinel: str = ERROR_SENTINEL

    @property
    def has_pending(self) -> bool:
        return len(self.expression) == 2

    @property
    def is_error(self) -> bool:
        return self.display == self.error_sentinel

    def receive_input(self, button: CalculatorButton) -> None:
        """Apply one button press to the state."""
        info = classify(button)
        logger.debug(f"Input {button.name} ({info.category}); display={self.display!r}, expression={self.expression}")

        match info.category:
            case ButtonCategory.RESET:
                self.reset()
            case ButtonCategory.EQUALS:
                self.evaluate()
            case ButtonCategory.BINARY_OPERATOR:
                self._push_operator(info.title)
            case _:
                self._append_glyph(info.title)

    def evaluate(self) -> None:
        """
        Reduce '[operand, operator]' with the display as second operand.

        Does nothing unless an expression is pending. Dividing by a display of
        exactly '0' shows the error sentinel; other spellings of zero ('0.0',
        '00') are not caught and divide through to inf/nan.
        """
        if not self.has_pending:
            logger.debug("Nothing pending, evaluate ignored.")
            return

        operator = self.expression.pop()
        operand = self.expression.pop()

        if operator == "/" and self.display == "0":
            logger.warning(f"Division of {operand!r} by zero.")
            self.display = self.error_sentinel
            return

        result = apply_operator(operator, parse_operand(operand), parse_operand(self.display))
        self.display = format_result(result)
        logger.debug(f"{operand} {operator} -> {self.display}")

    def reset(self) -> None:
        """Clear the pending expression and empty the display."""
        self.expression = []
        self.display = ""
        logger.info("Calculator state has been reset.")

    def _push_operator(self, glyph: str) -> None:
        if self.has_pending:
            if not self.display:
                # Operator pressed twice in a row: the last one wins
                self.expression[-1] = glyph
                return
            self.evaluate()
            if self.is_error:
                # Leave the sentinel on screen, nothing stays pending
                return

        self.expression.append(self.display)
        self.expression.append(glyph)
        self.display = ""

    def _append_glyph(self, glyph: str) -> None:
        if self.display == INITIAL_DISPLAY or self.is_error:
            self.display = glyph
        else:
            self.display = self.display + glyph

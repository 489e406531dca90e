from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from simplecalc.model.buttons import CalculatorButton, button_for_key
from simplecalc.model.engine import ExpressionEngine

logger = logging.getLogger(__name__)


class CalculatorStore(QObject):
    """Owns the engine and emits signals whenever its state changes."""
    display_changed = Signal(str)
    expression_changed = Signal(list)

    def __init__(self, engine: Optional[ExpressionEngine] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._engine = engine or ExpressionEngine()

    @property
    def display(self) -> str:
        return self._engine.display

    @property
    def expression(self) -> list[str]:
        return list(self._engine.expression)

    def press(self, button: CalculatorButton) -> None:
        if not isinstance(button, CalculatorButton):
            raise TypeError(f"Expected a CalculatorButton, got {type(button).__name__}.")

        old_display = self._engine.display
        old_expression = list(self._engine.expression)

        self._engine.receive_input(button)

        if self._engine.expression != old_expression:
            self.expression_changed.emit(self.expression)
        if self._engine.display != old_display:
            self.display_changed.emit(self._engine.display)

    def press_key(self, text: str) -> bool:
        """Handle a typed character. Returns False if the key is not bound."""
        button = button_for_key(text)
        if button is None:
            logger.debug(f"Ignoring unbound key {text!r}.")
            return False
        self.press(button)
        return True

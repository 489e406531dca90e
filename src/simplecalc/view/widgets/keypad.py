"""
Keypad Widget
Builds the grid of calculator buttons from the keypad layout.
"""
from __future__ import annotations

from typing import Dict

from PySide6.QtWidgets import QWidget, QGridLayout, QPushButton, QSizePolicy
from PySide6.QtCore import Qt

from simplecalc import config
from simplecalc.controller.store import CalculatorStore
from simplecalc.model.buttons import CalculatorButton, KEYPAD_LAYOUT, WIDE_BUTTONS


class Keypad(QWidget):
    def __init__(self, store: CalculatorStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.buttons: Dict[CalculatorButton, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setSpacing(config.BUTTON_SPACING)
        grid.setContentsMargins(config.BUTTON_SPACING, config.BUTTON_SPACING,
                                config.BUTTON_SPACING, config.BUTTON_SPACING)

        for row_idx, row in enumerate(KEYPAD_LAYOUT):
            col_idx = 0
            for button in row:
                span = 2 if button in WIDE_BUTTONS else 1
                widget = self._create_button(button, span)
                grid.addWidget(widget, row_idx, col_idx, 1, span)
                self.buttons[button] = widget
                col_idx += span

    def _create_button(self, button: CalculatorButton, span: int) -> QPushButton:
        widget = QPushButton(button.title)
        width = config.BUTTON_SIZE * span + config.BUTTON_SPACING * (span - 1)
        widget.setMinimumSize(width, config.BUTTON_SIZE)
        widget.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        widget.setFocusPolicy(Qt.NoFocus)
        widget.setStyleSheet(
            f"QPushButton {{ background-color: {config.PALETTE[button.role]};"
            f" color: {config.TEXT_COLOR}; font-size: {config.BUTTON_FONT_SIZE}px;"
            f" border-radius: {config.BUTTON_CORNER_RADIUS}px; }}"
            f"QPushButton:pressed {{ background-color: {config.EXPRESSION_TEXT_COLOR}; }}"
        )
        # Bind the button now, not the loop variable
        widget.clicked.connect(lambda _checked=False, b=button: self.store.press(b))
        return widget

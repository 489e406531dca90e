"""
Display Widget
Shows the pending expression (small, gray) above the current display text.
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from simplecalc import config
from simplecalc.controller.store import CalculatorStore


class DisplayPanel(QWidget):
    def __init__(self, store: CalculatorStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        layout.setContentsMargins(config.BUTTON_SPACING, config.BUTTON_SPACING, config.BUTTON_SPACING, 0)
        layout.setSpacing(0)

        self.lbl_expression = QLabel(" ".join(store.expression))
        self.lbl_expression.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.lbl_expression.setStyleSheet(
            f"color: {config.EXPRESSION_TEXT_COLOR}; font-size: {config.EXPRESSION_FONT_SIZE}px;"
        )
        layout.addWidget(self.lbl_expression)

        self.lbl_display = QLabel(store.display)
        self.lbl_display.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.lbl_display.setStyleSheet(
            f"color: {config.TEXT_COLOR}; font-size: {config.DISPLAY_FONT_SIZE}px;"
        )
        layout.addWidget(self.lbl_display)

        self.store.display_changed.connect(self.on_display_changed)
        self.store.expression_changed.connect(self.on_expression_changed)

    # --- SLOTS ---

    def on_display_changed(self, text: str) -> None:
        self.lbl_display.setText(text)

    def on_expression_changed(self, tokens: list) -> None:
        self.lbl_expression.setText(" ".join(tokens))

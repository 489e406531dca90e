"""
Main Application Window
=======================
The primary GUI container holding the display and the keypad.

Why is this file needed?
------------------------
1. Layout: It stacks the display above the keypad on a black background.
2. Routing: It forwards keyboard input to the store.
"""
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PySide6.QtCore import QSettings
from PySide6.QtGui import QCloseEvent, QKeyEvent

from simplecalc import config
from simplecalc.controller.store import CalculatorStore
from simplecalc.view.widgets.display import DisplayPanel
from simplecalc.view.widgets.keypad import Keypad


class MainWindow(QMainWindow):
    def __init__(self, store: CalculatorStore) -> None:
        super().__init__()
        self.store = store

        self.setWindowTitle(config.VISIBLE_APP_NAME)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        main_widget.setStyleSheet(f"background-color: {config.BACKGROUND_COLOR};")
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, config.BUTTON_SPACING)
        main_layout.setSpacing(config.BUTTON_SPACING)
        main_layout.addStretch()

        # --- 1. DISPLAY ---
        self.display_panel = DisplayPanel(self.store)
        main_layout.addWidget(self.display_panel)

        # --- 2. KEYPAD ---
        self.keypad = Keypad(self.store)
        main_layout.addWidget(self.keypad)

        self._restore_geometry()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self.store.press_key(event.text()):
            super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        QSettings().setValue("ui/geometry", self.saveGeometry())
        super().closeEvent(event)

    def _restore_geometry(self) -> None:
        geometry = QSettings().value("ui/geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

"""Widget tests, run on the offscreen Qt platform."""
import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QSettings, Qt
from PySide6.QtGui import QKeyEvent

from conftest import press_all
from simplecalc import config
from simplecalc.controller.store import CalculatorStore
from simplecalc.model.buttons import CalculatorButton
from simplecalc.model.engine import ExpressionEngine
from simplecalc.view.main_window import MainWindow
from simplecalc.view.widgets.display import DisplayPanel
from simplecalc.view.widgets.keypad import Keypad


@pytest.fixture
def keypad(store):
    return Keypad(store)


def _grid_position(keypad, button):
    grid = keypad.layout()
    return grid.getItemPosition(grid.indexOf(keypad.buttons[button]))


def test_keypad_has_all_buttons(keypad):
    assert set(keypad.buttons) == set(CalculatorButton)
    for button, widget in keypad.buttons.items():
        assert widget.text() == button.title


def test_keypad_positions(keypad):
    assert _grid_position(keypad, CalculatorButton.CLEAR) == (0, 0, 1, 1)
    assert _grid_position(keypad, CalculatorButton.DIVIDE) == (0, 3, 1, 1)
    assert _grid_position(keypad, CalculatorButton.ZERO) == (4, 0, 1, 2)
    assert _grid_position(keypad, CalculatorButton.DECIMAL) == (4, 2, 1, 1)
    assert _grid_position(keypad, CalculatorButton.EQUALS) == (4, 3, 1, 1)


def test_keypad_colors_by_role(keypad):
    assert config.PALETTE["function"] in keypad.buttons[CalculatorButton.PERCENT].styleSheet()
    assert config.PALETTE["operator"] in keypad.buttons[CalculatorButton.EQUALS].styleSheet()
    assert config.PALETTE["digit"] in keypad.buttons[CalculatorButton.FIVE].styleSheet()


def test_clicking_buttons_drives_store(keypad, store):
    for button in (CalculatorButton.NINE, CalculatorButton.MINUS, CalculatorButton.FOUR, CalculatorButton.EQUALS):
        keypad.buttons[button].click()
    assert store.display == "5.0"


def test_display_panel_follows_store(store):
    panel = DisplayPanel(store)
    assert panel.lbl_display.text() == "0"

    press_all(store, "1", "2", "+")
    assert panel.lbl_display.text() == ""
    assert panel.lbl_expression.text() == "12 +"

    press_all(store, "3", "=")
    assert panel.lbl_display.text() == "15.0"
    assert panel.lbl_expression.text() == ""


def test_display_panel_shows_injected_expression(qapp):
    store = CalculatorStore(engine=ExpressionEngine(display="12", expression=["3", "+"]))
    panel = DisplayPanel(store)
    assert panel.lbl_display.text() == "12"
    assert panel.lbl_expression.text() == "3 +"


def test_main_window_keyboard_input(store):
    window = MainWindow(store)
    assert window.windowTitle() == config.VISIBLE_APP_NAME

    for key, text in ((Qt.Key_8, "8"), (Qt.Key_Slash, "/"), (Qt.Key_2, "2"), (Qt.Key_Return, "\r")):
        window.keyPressEvent(QKeyEvent(QEvent.KeyPress, key, Qt.NoModifier, text))

    assert store.display == "4.0"
    assert window.display_panel.lbl_display.text() == "4.0"


def test_main_window_ignores_unbound_keys(store):
    window = MainWindow(store)
    window.keyPressEvent(QKeyEvent(QEvent.KeyPress, Qt.Key_Q, Qt.NoModifier, "q"))
    assert store.display == "0"


@pytest.fixture
def restore_app_identity(qapp):
    org = QCoreApplication.organizationName()
    name = QCoreApplication.applicationName()
    display_name = qapp.applicationDisplayName()
    settings_format = QSettings.defaultFormat()
    yield
    QCoreApplication.setOrganizationName(org)
    QCoreApplication.setApplicationName(name)
    qapp.setApplicationDisplayName(display_name)
    QSettings.setDefaultFormat(settings_format)


def test_create_app_reuses_running_instance(qapp, restore_app_identity):
    from simplecalc.application import create_app

    app = create_app()
    assert app is qapp
    assert app.applicationDisplayName() == config.VISIBLE_APP_NAME
    assert app.organizationName() == config.ORG_ID
    assert QSettings.defaultFormat() == QSettings.Format.IniFormat

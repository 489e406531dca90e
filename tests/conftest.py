import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from simplecalc.controller.store import CalculatorStore
from simplecalc.model.buttons import CalculatorButton
from simplecalc.model.engine import ExpressionEngine


@pytest.fixture(scope="session")
def qapp(tmp_path_factory):
    # Keep window geometry and other settings out of the user profile
    settings_dir = str(tmp_path_factory.mktemp("settings"))
    for fmt in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, settings_dir)
    QCoreApplication.setOrganizationName("simplecalc-tests")
    QCoreApplication.setApplicationName("simplecalc-tests")
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine():
    return ExpressionEngine()


@pytest.fixture
def store(qapp):
    return CalculatorStore()


def press_all(target, *titles):
    """Feed glyphs to an engine (receive_input) or a store (press)."""
    handler = getattr(target, "receive_input", None) or target.press
    for title in titles:
        handler(CalculatorButton.from_title(title))

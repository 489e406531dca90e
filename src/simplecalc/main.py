"""
Application Initialization
==========================
This module wires the model, the store and the view together and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the environment.
2. Instantiates the Calculator Store (which owns the engine).
3. Instantiates the Main Window (View), passing the store in.
"""
import logging
import os
import sys

from simplecalc import config
from simplecalc.application import create_app
from simplecalc.controller.store import CalculatorStore
from simplecalc.logging_config import setup_logging
from simplecalc.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # e.g. SIMPLECALC_LOG_LEVEL=debug SIMPLECALC_LOG_FILE=calc.log
    setup_logging(
        level=os.environ.get(config.ENV_LOG_LEVEL, config.DEFAULT_LOG_LEVEL),
        log_file=os.environ.get(config.ENV_LOG_FILE) or None,
    )

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Store
    store = CalculatorStore()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    logger.info("Starting event loop.")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic strings (the error text, colors, sizes)
   from being scattered throughout the model and the view.
2. Identity: It defines the organization/application ids used by QSettings.

Exports:
    INITIAL_DISPLAY (str): Display text of a freshly created engine.
    ERROR_SENTINEL (str): Display text shown after a division by zero.
    PALETTE (dict): Button role -> background color.
"""
from typing import Dict

# Engine
INITIAL_DISPLAY: str = "0"
ERROR_SENTINEL: str = "Error"

# Application identity
ORG_ID = "simplecalc"
APP_ID = "simplecalc"
VISIBLE_APP_NAME = "SimpleCalc"

# Environment variables read at startup
ENV_LOG_LEVEL = "SIMPLECALC_LOG_LEVEL"
ENV_LOG_FILE = "SIMPLECALC_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"

# Format: Time - Module - Level - Message
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Layout (pixels)
BUTTON_SPACING: int = 12
BUTTON_SIZE: int = 80
BUTTON_CORNER_RADIUS: int = 30
BUTTON_FONT_SIZE: int = 32
DISPLAY_FONT_SIZE: int = 64
EXPRESSION_FONT_SIZE: int = 20

# Colors
BACKGROUND_COLOR = "#000000"
TEXT_COLOR = "#ffffff"
EXPRESSION_TEXT_COLOR = "#a0a0a0"
PALETTE: Dict[str, str] = {
    "function": "#d3d3d3",  # light gray
    "operator": "#555555",  # dark gray
    "digit": "#2e7d32",     # green
}

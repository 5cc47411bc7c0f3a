import argparse
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .commands import CommandBridge
from .config import AppConfig, DEFAULT_LOG_LEVEL, LOG_LEVELS, WINDOW_TITLE
from .game_logic import GameEngine
from .logging_config import configure_logging
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(11, 14, 20)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(22, 27, 34)
ALT_BASE_COLOR = QColor(11, 14, 20)
TOOLTIP_BASE_COLOR = Qt.white
TOOLTIP_TEXT_COLOR = Qt.black
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(31, 41, 55)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(34, 211, 238)
HIGHLIGHTED_TEXT_COLOR = Qt.black

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.ToolTipBase, TOOLTIP_BASE_COLOR)
    palette.setColor(QPalette.ToolTipText, TOOLTIP_TEXT_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Desktop Tic-Tac-Toe")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL,
                        choices=LOG_LEVELS, type=str.upper)
    parser.add_argument("--title", default=WINDOW_TITLE)
    parser.add_argument("--light", action="store_true",
                        help="keep the platform palette instead of the dark theme")
    args = parser.parse_args(argv)
    return AppConfig(window_title=args.title, log_level=args.log_level,
                     dark_theme=not args.light)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    config = parse_args(argv)
    log = configure_logging(config.log_level)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    if config.dark_theme:
        apply_default_palette(app)

    # one engine for the process, handed down explicitly
    bridge = CommandBridge(GameEngine())
    window = TicTacToeWindow(bridge, title=config.window_title)
    window.show()
    log.info("app_started", title=config.window_title)
    return app.exec()

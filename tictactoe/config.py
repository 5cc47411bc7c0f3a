from dataclasses import dataclass

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
WINDOW_MIN_WIDTH = 360
WINDOW_MIN_HEIGHT = 480
BOARD_MIN_SIZE = 150

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#161b22"
GRID_COLOR = "#30363d"
X_COLOR = "#22d3ee"          # cyan
O_COLOR = "#d946ef"          # fuchsia
WIN_LINE_COLOR = "#f8fafc"
STATUS_TEXT_COLOR = "#eee"
STATUS_ERROR_COLOR = "#ff8a8a"
STATUS_SUCCESS_COLOR = "lime"
INACTIVE_PLAYER_COLOR = "#555"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppConfig:
    """
    runtime settings, filled from the command line in main.py
    """
    window_title: str = WINDOW_TITLE
    log_level: str = DEFAULT_LOG_LEVEL
    dark_theme: bool = True

import os

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
APP_NAME = "Timeline Paint"
ORG_NAME = "TimelinePaint"
WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 750
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
LOG_DIR = os.path.expanduser("~/.timelinepaint")

BACKGROUND_COLOR = QColor(Qt.white)
DEFAULT_STROKE_COLOR = QColor(Qt.black)
DEFAULT_FILL_COLOR = QColor(Qt.white)

DEFAULT_STROKE_WIDTH = 2
MIN_STROKE_WIDTH = 1
MAX_STROKE_WIDTH = 20
MIN_ERASER_SIZE = 8
PREVIEW_FILL_ALPHA = 100

PALETTE_COLORS = [
    "#000000", "#404040", "#808080", "#C0C0C0", "#FFFFFF",
    "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#FF00FF",
    "#00FFFF", "#FFC800", "#FFAFAF", "#800080", "#8B4513",
]

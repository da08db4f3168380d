import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from .ui.main_window import TicTacToeWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

DARK = QColor(53, 53, 53)
DARKER = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
ACCENT_COLOR = QColor(42, 130, 218)
MUTED_COLOR = QColor(127, 127, 127)

PALETTE_ROLES = {
    QPalette.Window: DARK,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARKER,
    QPalette.AlternateBase: DARK,
    QPalette.Text: Qt.white,
    QPalette.Button: BUTTON_COLOR,
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Highlight: ACCENT_COLOR,
    QPalette.HighlightedText: Qt.white,
}
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_dark_palette(app):
    """
    dark theme for the whole application
    """
    palette = QPalette()
    for role, color in PALETTE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED_COLOR)
    app.setPalette(palette)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    window = TicTacToeWindow()
    window.resize(420, 480)
    window.show()
    return app.exec()

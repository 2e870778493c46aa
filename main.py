import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from xo_board.ui.main_window import GameWindow

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# THEME
# -----------------------------------------------------------------------------

DARK = QColor(35, 35, 35)
SURFACE = QColor(53, 53, 53)
RAISED = QColor(66, 66, 66)
ACCENT = QColor(42, 130, 218)
MUTED = QColor(127, 127, 127)

# (role, color) for the active/inactive groups
THEME_ROLES = (
    (QPalette.Window, SURFACE),
    (QPalette.WindowText, Qt.white),
    (QPalette.Base, DARK),
    (QPalette.AlternateBase, SURFACE),
    (QPalette.ToolTipBase, DARK),
    (QPalette.ToolTipText, Qt.white),
    (QPalette.Text, Qt.white),
    (QPalette.Button, RAISED),
    (QPalette.ButtonText, Qt.white),
    (QPalette.Highlight, ACCENT),
    (QPalette.HighlightedText, Qt.white),
)
# greyed out text when the reset button or menu entries are disabled
DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)

WINDOW_SIZE = (420, 480)


def build_palette():
    """
    dark palette for the Fusion style
    """
    palette = QPalette()
    for role, color in THEME_ROLES:
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED)
    return palette


def apply_default_palette(app: QApplication):
    app.setPalette(build_palette())

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = GameWindow()
    window.resize(*WINDOW_SIZE)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())

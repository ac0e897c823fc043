import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from noughts.game_logic import Game
from noughts.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

# palette role -> colour
DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
}
DISABLED_TEXT_COLOR = QColor(127, 127, 127)


def apply_default_palette(app: QApplication):
    """
    Apply the dark Fusion palette.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    # greyed-out reset button / menu entries
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# LOGGING / CLI
# -----------------------------------------------------------------------------

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')
DEFAULT_LOG_LEVEL = 'WARNING'


def configure_logging(level=DEFAULT_LOG_LEVEL):
    """
    Send the package's log records to stderr at the given level.
    """
    logger = logging.getLogger('noughts')
    logger.setLevel(level)
    # don't stack handlers if called twice
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def parse_args(argv):
    """
    Parse our own options; anything unknown is left for Qt.
    """
    parser = argparse.ArgumentParser(description='Two-player tic-tac-toe.')
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f'Logging level (default: {DEFAULT_LOG_LEVEL})'
    )
    return parser.parse_known_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    argv = sys.argv if argv is None else argv
    args, qt_args = parse_args(argv[1:])
    configure_logging(args.log_level)

    app = QApplication(argv[:1] + qt_args)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    # the one game for this process, handed to the window
    game = Game()
    window = TicTacToeWindow(game)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from ttt_scoreboard.config import AppConfig, LOG_LEVELS
from ttt_scoreboard.game_logic import Player
from ttt_scoreboard.score_store import QSettingsScoreStore
from ttt_scoreboard.ui.main_window import TicTacToeWindow

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

ACCENT_COLOR = QColor(42, 130, 218)
MUTED_COLOR = QColor(127, 127, 127)

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: ACCENT_COLOR,
    QPalette.Highlight: ACCENT_COLOR,
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Apply the dark Fusion palette used by the game window.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED_COLOR)
    app.setPalette(palette)


# -----------------------------------------------------------------------------
# SETUP
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe with a saved scoreboard.")
    parser.add_argument("--settings", help="ini file to keep the score in (default: native settings store)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="logging level (default: INFO)")
    # Qt consumes its own flags from sys.argv
    args, _ = parser.parse_known_args(argv)
    return args


def build_config(args, environ=None) -> AppConfig:
    config = AppConfig.from_env(environ)
    if args.settings:
        config.settings_path = args.settings
    if args.log_level:
        config.log_level = args.log_level
    return config


def setup_logging(level: str):
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    argv = sys.argv if argv is None else argv
    config = build_config(parse_args(argv[1:]))
    setup_logging(config.log_level)

    app = QApplication(argv)
    app.setOrganizationName(config.organization)
    app.setApplicationName(config.application)
    app.setStyle('Fusion')
    apply_default_palette(app)

    store = QSettingsScoreStore.from_config(config)
    window = TicTacToeWindow(store)
    window.show()
    score = window.game_logic.score
    logging.getLogger(__name__).info("started; score X=%d O=%d", score[Player.X], score[Player.O])
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())

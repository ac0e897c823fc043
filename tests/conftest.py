import os

import pytest

# no display needed for the widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from noughts.game_logic import Game, Gameboard  # noqa: E402


@pytest.fixture
def board():
    return Gameboard()


@pytest.fixture
def game():
    return Game()


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def play():
    """Play (row, col) moves in order for alternating players."""
    def _play(game, moves):
        for row, col in moves:
            game.make_move(row, col)
    return _play

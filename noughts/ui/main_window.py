import logging

from ..errors import GameError
from ..game_logic import CellValue, GameStatus
from ..ui.board_widget import BoardWidget, CELL_GLYPHS

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic-Tac-Toe"

PLAYER_ONE_GLYPH = CELL_GLYPHS[CellValue.PLAYER_ONE]
PLAYER_TWO_GLYPH = CELL_GLYPHS[CellValue.PLAYER_TWO]

# game status -> status line text
STATUS_MESSAGES = {
    GameStatus.PLAYER_ONE_TURN: f"player {PLAYER_ONE_GLYPH}'s turn",
    GameStatus.PLAYER_TWO_TURN: f"player {PLAYER_TWO_GLYPH}'s turn",
    GameStatus.PLAYER_ONE_WIN: f"player {PLAYER_ONE_GLYPH} wins!",
    GameStatus.PLAYER_TWO_WIN: f"player {PLAYER_TWO_GLYPH} wins!",
    GameStatus.TIE: "it's a tie!",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, reset
    """
    def __init__(self, game):
        """
        game is built once by the caller and shared with the board view
        """
        super().__init__()
        self.game = game
        self.board_widget = BoardWidget(self.game, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 4px 12px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def refresh(self):
        """
        re-render board and status line from the game
        """
        status = self.game.status()
        self._update_message(STATUS_MESSAGES[status],
                             is_success=status.is_over,
                             is_turn=not status.is_over)
        # no input once the game is over
        self.board_widget.set_accept_clicks(not status.is_over)
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        # rejected moves leave the board as it was
        try:
            self.game.make_move(r, c)
        except GameError as e:
            logger.debug("move (%d, %d) ignored: %s", r, c, e)
        else:
            logger.info("move (%d, %d) -> %s", r, c, self.game.status().name)
        self.refresh()

    @Slot()
    def reset_game(self):
        # fresh game, player one first
        self.game.reset()
        logger.info("new game")
        self.refresh()

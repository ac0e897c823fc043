import logging

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, CellValue

logger = logging.getLogger(__name__)

# cell value -> glyph shown to the user
CELL_GLYPHS = {
    CellValue.EMPTY: "",
    CellValue.PLAYER_ONE: "O",
    CellValue.PLAYER_TWO: "X",
}

BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
GLYPH_COLORS = {"O": "#ff8a8a", "X": "#8acaff"}
WIN_LINE_COLOR = "#f0e68c"


class BoardWidget(QWidget):
    """
    draws the game board and turns clicks into (row, col)
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game, parent=None):
        super().__init__(parent)
        self.game = game               # injected, read-only use
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in the widget: (x offset, y offset, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None if outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        row = int((y - oy) // cell); col = int((x - ox) // cell)
        # clamp float edge cases
        row = max(0, min(row, BOARD_SIZE - 1))
        col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, O/X marks, and the winning line if any
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            board = self.game.board()
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    glyph = CELL_GLYPHS[board[r][c]]
                    if not glyph:
                        continue
                    cx, cy = self._cell_centre(r, c)
                    rad = cell_size / 2 * 0.7
                    painter.setPen(QPen(QColor(GLYPH_COLORS[glyph]), 4))
                    if glyph == "X":
                        # two crossing lines
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
            line = self.game.winning_line()
            if line is not None:
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), 6))
                start, end = self._cell_centre(*line[0]), self._cell_centre(*line[-1])
                painter.drawLine(QPointF(*start), QPointF(*end))
        finally:
            painter.end()

    def _cell_centre(self, row, col):
        ox, oy, side = self._geometry()
        cell_size = side / BOARD_SIZE
        return (ox + col * cell_size + cell_size / 2,
                oy + row * cell_size + cell_size / 2)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        if cell is None:
            return  # outside the grid
        logger.debug("click on cell %s", cell)
        self.cell_clicked.emit(*cell)  # notify main window

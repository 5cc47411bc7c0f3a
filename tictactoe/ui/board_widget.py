from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_BACKGROUND, BOARD_MIN_SIZE, GRID_COLOR,
    O_COLOR, WIN_LINE_COLOR, X_COLOR,
)
from ..game_logic import EMPTY, GameState, winning_line

BOARD_SIZE = 3


class BoardWidget(QWidget):
    """
    custom widget to draw a game snapshot and pick cells by click
    """
    cell_clicked = Signal(int)  # emits board position 0-8

    def __init__(self, parent=None):
        super().__init__(parent)
        self.state = GameState()        # last snapshot shown
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(BOARD_MIN_SIZE, BOARD_MIN_SIZE))
        self._accept_clicks = True      # toggle click handling

    def set_state(self, state):
        # swap in a new snapshot and repaint
        self.state = state
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square side + offsets to center it
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w-side)/2, (h-side)/2

    def _cell_center(self, pos, side, ox, oy):
        cell = side / BOARD_SIZE
        r, c = divmod(pos, BOARD_SIZE)
        return QPointF(ox + c*cell + cell/2, oy + r*cell + cell/2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and strike through the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, ox, oy = self._geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            rad = cell_size/2 * 0.6
            for pos, sym in enumerate(self.state.board):
                if sym == EMPTY: continue
                center = self._cell_center(pos, side, ox, oy)
                cx, cy = center.x(), center.y()
                if sym == 'X':
                    painter.setPen(QPen(QColor(X_COLOR), 6, Qt.SolidLine, Qt.RoundCap))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 6))
                    painter.drawEllipse(center, rad, rad)
            # winning line, end cell to end cell
            line = winning_line(self.state.board)
            if line:
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(self._cell_center(line[0], side, ox, oy),
                                 self._cell_center(line[2], side, ox, oy))
        finally:
            painter.end()

    def position_at(self, x, y):
        """
        map widget coords to a board position, None if outside the grid
        """
        side, ox, oy = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / BOARD_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        return row*BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: only open cells of a running game emit
        """
        if not self._accept_clicks or self.state.game_over:
            return
        pos = self.position_at(event.position().x(), event.position().y())
        if pos is None or self.state.board[pos] != EMPTY:
            return
        self.cell_clicked.emit(pos)  # notify main window

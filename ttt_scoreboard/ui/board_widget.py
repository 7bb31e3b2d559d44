from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Player, Won, square_label

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
GRID_COLOR = QColor("#555")
BACKGROUND_COLOR = QColor("#333")
WIN_FILL_COLOR = QColor(239, 68, 68, 60)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index (0-8) on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        row, col = divmod(index, BOARD_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def index_at(self, x, y):
        """
        map widget coords to board index, or None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def cell_accessible_name(self, index):
        mark = self.game_logic.board[index]
        label = square_label(index)
        if mark is not None:
            return f"{label}: {Player(mark).value}"
        return f"{label}: empty. Place {self.game_logic.next_player.value}."

    def refresh(self):
        # repaint and describe every cell for screen readers
        names = (self.cell_accessible_name(i) for i in range(len(self.game_logic.board)))
        self.setAccessibleDescription("; ".join(names))
        self.update()

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            # background
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            # winning cells
            status = self.game_logic.status
            if isinstance(status, Won):
                for index in status.line:
                    painter.fillRect(self.cell_rect(index), WIN_FILL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # draw marks
            for index, mark in enumerate(self.game_logic.board):
                if mark is None: continue
                rect = self.cell_rect(index)
                cx, cy = rect.center().x(), rect.center().y()
                rad = cell_size / 2 * 0.7
                if mark == Player.X:
                    painter.setPen(QPen(X_COLOR, 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        # filled cells are disabled
        if index is None or not self.game_logic.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window

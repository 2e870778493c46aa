from PySide6.QtWidgets import QWidget, QSizePolicy, QToolTip
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRect, QRectF, QEvent
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..game_logic import Player, winning_line

# -----------------------------------------------------------------------------
# DRAWING CONSTANTS
# -----------------------------------------------------------------------------

GRID_SIZE = 3
MIN_BOARD_PX = 150
BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
WIN_CELL_COLOR = "#3d4a3d"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
DRAW_COLOR = "#ddd"
MARK_SCALE = 0.7                  # mark radius relative to half a cell


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the board
    """
    cell_clicked = Signal(int)    # emits cell index 0-8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine          # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(MIN_BOARD_PX, MIN_BOARD_PX))
        self.setMouseTracking(True)   # hover labels
        self.setAccessibleName("Tic-tac-toe board")
        self._accept_clicks = True    # toggle click handling

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
        # square grid centered in widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0:
            return None
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / GRID_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp against float edge cases
        row = max(0, min(row, GRID_SIZE - 1)); col = max(0, min(col, GRID_SIZE - 1))
        return row * GRID_SIZE + col

    def cell_rect(self, index):
        """
        drawing rect for a cell index
        """
        ox, oy, side = self._geometry()
        cell = side / GRID_SIZE
        row, col = divmod(index, GRID_SIZE)
        return QRectF(ox + col * cell, oy + row * cell, cell, cell)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the result
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))
            state = self.engine.state
            board = state.board
            cell_size = side / GRID_SIZE
            # winning cells under everything else
            line = winning_line(board) if state.winner else None
            for i in line or ():
                painter.fillRect(self.cell_rect(i), QColor(WIN_CELL_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            rad = cell_size / 2 * MARK_SCALE
            for index, mark in enumerate(board):
                if mark is None: continue
                center = self.cell_rect(index).center()
                cx, cy = center.x(), center.y()
                if mark is Player.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # result overlay
            if state.game_over:
                rect = QRect(int(ox), int(oy), int(side), int(side))
                if state.winner:
                    text = state.winner.value
                    color = X_COLOR if state.winner is Player.X else O_COLOR
                    size = max(1, int(side * 0.6))
                else:
                    text, color = "DRAW", DRAW_COLOR
                    size = max(1, int(side * 0.2))
                painter.setFont(QFont("Arial", size, QFont.Bold))
                painter.setPen(QPen(QColor(color), 10, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawText(rect, Qt.AlignCenter, text)
        finally:
            painter.end()

    def event(self, event):
        # tooltip shows the accessible label of the hovered cell
        if event.type() == QEvent.ToolTip:
            pos = event.pos()
            index = self.cell_index_at(pos.x(), pos.y())
            if index is None:
                QToolTip.hideText(); event.ignore()
            else:
                QToolTip.showText(event.globalPos(), self.engine.get_cell_label(index), self)
            return True
        return super().event(event)

    def mouseMoveEvent(self, event):
        # keep the accessible description on the hovered cell
        pos = event.position()
        index = self.cell_index_at(pos.x(), pos.y())
        self.setAccessibleDescription(
            self.engine.get_cell_label(index) if index is not None else ""
        )
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.engine.game_over:
            return
        pos = event.position()
        index = self.cell_index_at(pos.x(), pos.y())
        if index is None:
            return
        self.cell_clicked.emit(index)  # notify main window

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_state import BOARD_CELLS

GRID_SIZE = 3
BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_HIGHLIGHT_COLOR = QColor(255, 215, 0, 70)


def cell_at(x, y, width, height):
    """
    map widget coords to a cell index on the centred square grid, or None
    """
    side = min(width, height)
    if side <= 0:
        return None
    ox, oy = (width-side)/2, (height-side)/2
    if not (ox <= x < ox+side and oy <= y < oy+side):
        return None
    cell = side / GRID_SIZE
    col = min(int((x-ox)//cell), GRID_SIZE-1)
    row = min(int((y-oy)//cell), GRID_SIZE-1)
    return row*GRID_SIZE + col


class BoardWidget(QWidget):
    """
    draws a BoardView and reports clicked cells
    """
    cell_activated = Signal(int)  # emits cell index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._cells = ('',) * BOARD_CELLS
        self._winning_line = None
        self._accept_clicks = True      # toggle click handling

    def set_view(self, view):
        # take a fresh render model and repaint
        self._cells = view.cells
        self._winning_line = view.winning_line
        self._accept_clicks = view.accept_clicks
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, winning cells, X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            w, h = self.width(), self.height()
            side = min(w, h)
            offset_x, offset_y = (w-side)/2, (h-side)/2
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / GRID_SIZE
            # highlight the three winning cells under everything else
            for index in self._winning_line or ():
                r, c = divmod(index, GRID_SIZE)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size), WIN_HIGHLIGHT_COLOR)
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, GRID_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            for index, sym in enumerate(self._cells):
                if not sym: continue
                r, c = divmod(index, GRID_SIZE)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == 'X':
                    painter.setPen(QPen(X_COLOR, 4))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        map click to a board cell and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = cell_at(pos.x(), pos.y(), self.width(), self.height())
        if index is not None:
            self.cell_activated.emit(index)

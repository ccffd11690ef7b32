"""PyQt6 GUI frontend.

A custom-painted board widget driven by a ``QTimer`` frame clock, plus a
scramble button and a status line.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import QElapsedTimer, QPointF, QRectF, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleGame, Snapshot
from slidecore.engine.gesture import Point, Rect
from slidecore.models.board import Direction

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Wood palette
# ---------------------------------------------------------------------------
_FRAME = "#55391e"
_AREA = "#8b4513"
_TILE = "#deb887"
_TILE_EDGE = "#654321"
_EMPTY = "#cdaa7d"
_NUMBER = "#321900"
_BUTTON = "#ffc107"
_BUTTON_H = "#ffcc33"
_SOLVED = "#2e7d32"

BOARD_PX = 400
FRAME_MS = 16

_KEYS = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _styled_btn(text: str) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Verdana", 13, QFont.Weight.Bold))
    btn.setMinimumHeight(40)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{_BUTTON}; color:#212121;"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{_BUTTON_H}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Board
# ═══════════════════════════════════════════════════════════════════════════


class _BoardWidget(QWidget):
    """Paints the latest snapshot and turns mouse drags into gestures."""

    def __init__(self, config: PuzzleConfig) -> None:
        super().__init__()
        n = config.size
        self._tile = 2 * BOARD_PX / (2 * n + 1)
        self._border = self._tile / 4
        self.game = PuzzleGame(
            config,
            area=Rect(self._border, self._border, self._tile * n, self._tile * n),
        )
        self.snapshot: Snapshot = self.game.snapshot()
        self._press: Point | None = None
        self.setFixedSize(BOARD_PX, BOARD_PX)

    def show_snapshot(self, snap: Snapshot) -> None:
        self.snapshot = snap
        self.update()

    # -- painting --

    def _draw_tile(self, p: QPainter, row: float, col: float, value: int) -> None:
        rect = QRectF(
            self._border + col * self._tile,
            self._border + row * self._tile,
            self._tile,
            self._tile,
        )
        p.setPen(QPen(QColor(_TILE_EDGE), 2))
        p.setBrush(QColor(_EMPTY if value == 0 else _TILE))
        p.drawRoundedRect(rect, 5, 5)
        if value:
            p.setPen(QColor(_NUMBER))
            p.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(value))

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        snap = self.snapshot
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(self.rect(), QColor(_FRAME))
        side = self._tile * snap.size
        p.fillRect(QRectF(self._border, self._border, side, side), QColor(_AREA))
        p.setFont(QFont("Verdana", max(10, int(self._tile * 0.35))))

        for r, row in enumerate(snap.tiles):
            for c, val in enumerate(row):
                self._draw_tile(p, r, c, 0 if snap.is_suppressed(r, c) else val)
        if snap.animation is not None:
            ar, ac = snap.animation.position
            self._draw_tile(p, ar, ac, snap.animation.tile_value)
        p.end()

    # -- pointer --

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            pos: QPointF = event.position()
            self._press = (pos.x(), pos.y())

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        start, self._press = self._press, None
        if start is None:
            return
        pos = event.position()
        end = (pos.x(), pos.y())
        gestures = self.game.gestures
        if gestures.translate(start, end) is not None:
            self.game.handle_gesture(start, end)
            return
        cell = gestures.cell_at(start)
        if cell is not None and cell == gestures.cell_at(end):
            self.game.handle_tile(*cell)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, config: PuzzleConfig) -> None:
        super().__init__()
        self.setWindowTitle("Sliding Puzzle")
        self.setStyleSheet(f"QMainWindow, QWidget#page {{ background: {_FRAME}; }}")

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(10)
        root.setContentsMargins(0, 0, 0, 12)

        self._board = _BoardWidget(config)
        root.addWidget(self._board, alignment=Qt.AlignmentFlag.AlignCenter)

        self._scramble_btn = _styled_btn("Scramble (S)")
        self._scramble_btn.clicked.connect(self._scramble)
        root.addWidget(self._scramble_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self._status = QLabel("")
        self._status.setFont(QFont("Verdana", 12, QFont.Weight.Bold))
        self._status.setStyleSheet(f"color:{_SOLVED};")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        self.setCentralWidget(page)

        self._elapsed = QElapsedTimer()
        self._elapsed.start()
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(FRAME_MS)

    def _tick(self) -> None:
        snap = self._board.game.tick(float(self._elapsed.restart()))
        if snap.just_solved:
            self._status.setText(f"Solved in {snap.moves} moves!")
        self._board.show_snapshot(snap)

    def _scramble(self) -> None:
        if self._board.game.handle_scramble():
            self._status.setText("")

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEYS:
            self._board.game.handle_direction(_KEYS[key])
        elif key == Qt.Key.Key_S:
            self._scramble()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig) -> None:
    """Launch the PyQt6 GUI."""
    logger.debug("Starting PyQt frontend with %s", config)
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config)
    window.show()
    qapp.exec()

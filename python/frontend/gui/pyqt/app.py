"""PyQt6 GUI frontend — fully self-contained.

Tiles are absolutely positioned buttons that are re-laid out whenever
the window is resized.  No terminal interaction required.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QFont, QKeyEvent, QResizeEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay, TileLayout
from backend.settings import TILE_SIZE, TILE_SPACING

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
    radius: int = 8,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Board
# ═══════════════════════════════════════════════════════════════════════════


class _BoardWidget(QFrame):
    """Puzzle board: one button per tile plus the win overlay."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.game = game
        self.layout_px = TileLayout.from_viewport(
            game.state.cols * TILE_SIZE,
            game.state.rows * TILE_SIZE,
            game.state.rows,
            game.state.cols,
        )
        # smallest board the clamped layout can produce
        smallest = TileLayout.from_viewport(0, 0, game.state.rows, game.state.cols)
        self.setMinimumSize(*smallest.board_px)
        self.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")

        self._btns: list[QPushButton] = []
        for index, label, _ in game.tiles():
            b = QPushButton(label, self)
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, i=index: self._click(i))
            self._btns.append(b)

        self._overlay = _styled_btn(
            "You have won :)", bg=_GREEN, hover=_GREEN_H, fg=_BASE,
            font_size=18, min_w=240, min_h=56,
        )
        self._overlay.setParent(self)
        self._overlay.clicked.connect(self.new_game)

        self.sync()

    # -- geometry --

    def relayout(self, width: int, height: int) -> None:
        """Recompute tile size for the space available to the board."""
        self.layout_px = TileLayout.from_viewport(
            width, height, self.game.state.rows, self.game.state.cols
        )
        logger.debug(
            "layout recomputed: %dx%d → tile %dpx",
            width, height, self.layout_px.tile_px,
        )
        self.sync()

    # -- helpers --

    def sync(self) -> None:
        lay = self.layout_px
        bw, bh = lay.board_px
        self.resize(bw, bh)
        self.updateGeometry()

        board = self.game.board
        font = QFont("Helvetica", max(10, lay.font_px // 2), QFont.Weight.Bold)
        for (index, _, pos), b in zip(self.game.tiles(), self._btns):
            b.setGeometry(*lay.tile_rect(pos))
            b.setFont(font)
            correct = board.is_tile_correct(index)
            bg = _GREEN if correct else _BLUE
            hv = _GREEN_H if correct else _BLUE_H
            b.setStyleSheet(
                f"QPushButton{{background:{bg};color:{_BASE};"
                f"border:none;border-radius:8px;font-weight:bold;}}"
                f"QPushButton:hover{{background:{hv};}}"
            )

        ow, oh = self._overlay.sizeHint().width(), self._overlay.sizeHint().height()
        self._overlay.setGeometry((bw - ow) // 2, (bh - oh) // 2, ow, oh)
        self._overlay.setVisible(self.game.show_overlay)
        self._overlay.raise_()

    def sizeHint(self) -> QSize:  # noqa: N802
        return QSize(*self.layout_px.board_px)

    def _click(self, index: int) -> None:
        self.game.move(index)()
        self.sync()

    def new_game(self) -> None:
        self.game.new_game()
        self.sync()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    _HEADER_H = 80

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setWindowTitle("Sliding Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(12)
        root.setContentsMargins(16, 10, 16, 10)

        reset = _styled_btn("R E S E T", min_w=160, font_size=13)
        root.addWidget(reset, alignment=Qt.AlignmentFlag.AlignCenter)

        self.board_view = _BoardWidget(game)
        reset.clicked.connect(self.board_view.new_game)
        root.addWidget(self.board_view, alignment=Qt.AlignmentFlag.AlignCenter)
        root.addStretch(1)

        self.setCentralWidget(page)
        bw, bh = self.board_view.layout_px.board_px
        self.resize(bw + 2 * TILE_SPACING + 32, bh + self._HEADER_H + 20)

    def resizeEvent(self, event: QResizeEvent | None) -> None:  # noqa: N802
        super().resizeEvent(event)
        if event is None:
            return
        size = event.size()
        self.board_view.relayout(size.width() - 32, size.height() - self._HEADER_H)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_R:
            self.board_view.new_game()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(game: GamePlay | None = None) -> None:
    """Launch the PyQt6 GUI."""
    logger.info("starting pyqt frontend")
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(game if game is not None else GamePlay())
    window.show()
    qapp.exec()

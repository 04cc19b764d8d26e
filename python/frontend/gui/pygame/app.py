"""Pygame GUI frontend — fully self-contained.

Resizable window with a reset button, clickable tiles, and a win overlay.
No terminal interaction required.
"""

from __future__ import annotations

import logging

import pygame

from backend.engine.gameplay import GamePlay, TileLayout
from backend.settings import COLS, ROWS, TILE_SIZE, TILE_SPACING

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
HEADER_H = 64
MARGIN = 20
WIN_W = COLS * TILE_SIZE + TILE_SPACING + 2 * MARGIN
WIN_H = ROWS * TILE_SIZE + TILE_SPACING + 2 * MARGIN + HEADER_H


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, game: GamePlay) -> None:
        self._game = game

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H), pygame.RESIZABLE)
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_win = pygame.font.SysFont("Helvetica", 24, bold=True)

        self._reset_btn = _Btn((0, 0, 140, 40), "R E S E T", self._f_btn)
        self._win_btn = _Btn(
            (0, 0, 240, 56),
            "You have won :)",
            self._f_win,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._resize(WIN_W, WIN_H)

    # ── geometry ────────────────────────────────────────────────────────────

    def _resize(self, width: int, height: int) -> None:
        """Recompute tile geometry for a new window size."""
        self._layout = TileLayout.from_viewport(
            width - 2 * MARGIN,
            height - HEADER_H - 2 * MARGIN,
            self._game.state.rows,
            self._game.state.cols,
        )
        self._f_tile = pygame.font.SysFont(
            "Helvetica", max(14, self._layout.font_px), bold=True
        )
        bw, bh = self._layout.board_px
        self._origin = ((width - bw) // 2, HEADER_H + MARGIN)
        self._reset_btn.rect.center = (width // 2, HEADER_H // 2)
        ox, oy = self._origin
        self._win_btn.rect.center = (ox + bw // 2, oy + bh // 2)
        logger.debug(
            "layout recomputed: %dx%d → tile %dpx",
            width, height, self._layout.tile_px,
        )

    def _board_rect(self) -> pygame.Rect:
        bw, bh = self._layout.board_px
        return pygame.Rect(*self._origin, bw, bh)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        self._reset_btn.draw(self._surf)

        pygame.draw.rect(
            self._surf, COL_MANTLE, self._board_rect(), border_radius=10
        )

        ox, oy = self._origin
        board = self._game.board
        for index, label, pos in self._game.tiles():
            x, y, w, h = self._layout.tile_rect(pos)
            rect = pygame.Rect(ox + x, oy + y, w, h)
            col = COL_GREEN if board.is_tile_correct(index) else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = self._f_tile.render(label, True, COL_BASE)
            self._surf.blit(
                lbl,
                (
                    rect.centerx - lbl.get_width() // 2,
                    rect.centery - lbl.get_height() // 2,
                ),
            )

        if self._game.show_overlay:
            shade = pygame.Surface(self._board_rect().size, pygame.SRCALPHA)
            shade.fill((0, 0, 0, 150))
            self._surf.blit(shade, self._origin)
            self._win_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _click(self, pos: tuple[int, int]) -> None:
        if self._reset_btn.hit(pos):
            self._game.new_game()
            return
        if self._game.show_overlay:
            if self._win_btn.hit(pos):
                self._game.new_game()
            return

        ox, oy = self._origin
        cell = self._layout.hit(pos[0] - ox, pos[1] - oy)
        if cell is None:
            return
        index = self._game.board.tile_at(cell)
        if index is not None and index != self._game.board.empty_index:
            self._game.move(index)()

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.VIDEORESIZE:
            self._resize(ev.w, ev.h)
        elif ev.type == pygame.MOUSEMOTION:
            self._reset_btn.motion(ev.pos)
            self._win_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            self._click(ev.pos)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                self._game.new_game()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(game: GamePlay | None = None) -> None:
    """Launch the Pygame GUI."""
    logger.info("starting pygame frontend")
    app = PygameApp(game if game is not None else GamePlay())
    app.run_loop()

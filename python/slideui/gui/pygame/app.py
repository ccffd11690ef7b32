"""Pygame GUI frontend.

Draws the board from each ``Snapshot``, including the tile in transit,
and forwards arrow and W/A/D keys, swipes, taps and the scramble
button to the core.
"""

from __future__ import annotations

import logging

import pygame

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleGame, Snapshot
from slidecore.engine.gesture import Point, Rect
from slidecore.models.board import Direction

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Wood palette
# ---------------------------------------------------------------------------
COL_FRAME = (85, 57, 30)
COL_AREA = (139, 69, 19)
COL_TILE = (222, 184, 135)
COL_TILE_EDGE = (101, 67, 33)
COL_EMPTY = (205, 170, 125)
COL_NUMBER = (50, 25, 0)
COL_BUTTON = (255, 193, 7)
COL_BUTTON_HOT = (255, 204, 51)
COL_SOLVED = (46, 125, 50)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
BOARD_PX = 400
WIN_W, WIN_H = BOARD_PX, BOARD_PX + 70
FPS = 60

# S is scramble, so only W/A/D double the arrows
_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "_hot")

    def __init__(
        self, rect: tuple[int, int, int, int], text: str, font: pygame.font.Font
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = COL_BUTTON_HOT if self._hot else COL_BUTTON
        pygame.draw.rect(surf, c, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, (33, 33, 33))
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
    def __init__(self, config: PuzzleConfig) -> None:
        # tile side such that side * (n + 1/2) == BOARD_PX
        n = config.size
        self._tile = 2 * BOARD_PX / (2 * n + 1)
        self._border = self._tile / 4
        area = Rect(self._border, self._border, self._tile * n, self._tile * n)
        self._game = PuzzleGame(config, area=area)
        self._press: Point | None = None

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_tile = pygame.font.SysFont("Verdana", int(self._tile * 0.5))
        self._f_btn = pygame.font.SysFont("Verdana", 16)
        self._f_status = pygame.font.SysFont("Verdana", 14, bold=True)
        self._scramble_btn = _Btn(
            (int(self._border), BOARD_PX + 14, 150, 40), "Scramble (S)", self._f_btn
        )
        self._status = ""

    # ── drawing ─────────────────────────────────────────────────────────────

    def _cell_origin(self, row: float, col: float) -> tuple[float, float]:
        return (self._border + col * self._tile, self._border + row * self._tile)

    def _draw_tile(self, row: float, col: float, value: int) -> None:
        x, y = self._cell_origin(row, col)
        rect = pygame.Rect(round(x), round(y), round(self._tile), round(self._tile))
        if value == 0:
            pygame.draw.rect(self._surf, COL_EMPTY, rect, border_radius=5)
            pygame.draw.rect(self._surf, COL_TILE_EDGE, rect, width=2, border_radius=5)
            return
        pygame.draw.rect(self._surf, COL_TILE, rect, border_radius=5)
        pygame.draw.rect(self._surf, COL_TILE_EDGE, rect, width=2, border_radius=5)
        lbl = self._f_tile.render(str(value), True, COL_NUMBER)
        self._surf.blit(
            lbl,
            (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
        )

    def _draw(self, snap: Snapshot) -> None:
        self._surf.fill(COL_FRAME)
        side = self._tile * snap.size
        pygame.draw.rect(
            self._surf, COL_AREA, pygame.Rect(self._border, self._border, side, side)
        )

        for r, row in enumerate(snap.tiles):
            for c, val in enumerate(row):
                self._draw_tile(r, c, 0 if snap.is_suppressed(r, c) else val)

        # tile in transit goes on top of everything else
        if snap.animation is not None:
            ar, ac = snap.animation.position
            self._draw_tile(ar, ac, snap.animation.tile_value)

        self._scramble_btn.draw(self._surf)
        if self._status:
            lbl = self._f_status.render(self._status, True, COL_SOLVED)
            self._surf.blit(lbl, (self._scramble_btn.rect.right + 16, BOARD_PX + 26))

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        game = self._game
        if ev.type == pygame.MOUSEMOTION:
            self._scramble_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._scramble_btn.hit(ev.pos):
                self._scramble()
            else:
                self._press = ev.pos
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            start, self._press = self._press, None
            if start is None:
                return True
            if game.gestures.translate(start, ev.pos) is not None:
                game.handle_gesture(start, ev.pos)
            else:
                cell = game.gestures.cell_at(start)
                if cell is not None and cell == game.gestures.cell_at(ev.pos):
                    game.handle_tile(*cell)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEYS:
                game.handle_direction(_KEYS[ev.key])
            elif ev.key == pygame.K_s:
                self._scramble()
            elif ev.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
        return True

    def _scramble(self) -> None:
        if self._game.handle_scramble():
            self._status = ""

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            snap = self._game.tick(self._clock.get_time())
            if snap.just_solved:
                self._status = f"Solved in {snap.moves} moves!"
            self._draw(snap)
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig) -> None:
    """Launch the Pygame GUI."""
    logger.debug("Starting pygame frontend with %s", config)
    app = PygameApp(config)
    app.run_loop()

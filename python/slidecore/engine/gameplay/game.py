"""Core gameplay loop — routes input, advances the animation, reports state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from slidecore.config import PuzzleConfig
from slidecore.engine.animation import AnimationController, AnimationPhase
from slidecore.engine.gamegenerator import RandomSource, Scrambler
from slidecore.engine.gameplay.moves import Move, MoveEngine
from slidecore.engine.gamestate import SessionStats, SolvedDetector, SolveStatus
from slidecore.engine.gesture import GestureTranslator, Point, Rect
from slidecore.models.board import Cell, Direction, GridState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationView:
    tile_value: int
    source: Cell
    dest: Cell
    progress: float
    position: tuple[float, float]


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs for one frame. Read-only."""

    size: int
    tiles: tuple[tuple[int, ...], ...]
    empty: Cell
    animation: AnimationView | None
    solved: bool
    just_solved: bool
    moves: int
    elapsed_ms: float

    def is_suppressed(self, row: int, col: int) -> bool:
        """True if the cell should be drawn empty this frame."""
        return self.animation is not None and self.animation.source == (row, col)


class PuzzleGame:
    """Orchestrates a single puzzle session.

    Entry points are ``handle_direction``, ``handle_tile``,
    ``handle_gesture`` and ``handle_scramble`` for input, and ``tick`` for
    the frame clock. Requests that arrive while a tile is sliding are
    ignored.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        rng: RandomSource | None = None,
        area: Rect | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.size = self.config.size
        self.grid = GridState(self.size)
        self.detector = SolvedDetector()
        self.animation = AnimationController(
            self.grid, self.detector, self.config.animation_duration_ms
        )
        self.engine = MoveEngine(self.grid, self.animation)
        self.scrambler = Scrambler(
            self.engine,
            rng if rng is not None else random.Random(self.config.seed),
        )
        self.gestures = GestureTranslator(
            self.config.swipe_threshold, area=area, size=self.size
        )
        self.stats = SessionStats()
        self.detector.reset(self.grid)

    @classmethod
    def from_grid(
        cls,
        grid: GridState,
        config: PuzzleConfig | None = None,
        rng: RandomSource | None = None,
        area: Rect | None = None,
    ) -> PuzzleGame:
        """Create a session around an existing arrangement (e.g. in tests)."""
        game = cls(replace(config or PuzzleConfig(), size=grid.size), rng, area)
        game.grid.assign(grid)
        game.detector.reset(game.grid)
        return game

    # -- input ----------------------------------------------------------------

    def handle_direction(self, direction: Direction) -> bool:
        """Start sliding the tile on *direction*'s side of the empty slot."""
        if not self.engine.can_accept_move():
            logger.debug("Ignored %s: busy", direction.value)
            return False
        return self._start(self.engine.request_move(direction))

    def handle_tile(self, row: int, col: int) -> bool:
        """Start sliding the tile at (row, col) if it touches the empty slot."""
        if not self.engine.can_accept_move():
            logger.debug("Ignored tile (%d, %d): busy", row, col)
            return False
        return self._start(self.engine.request_move_at(row, col))

    def handle_gesture(self, start: Point, end: Point) -> bool:
        direction = self.gestures.translate(start, end)
        if direction is None:
            return False
        return self.handle_direction(direction)

    def handle_scramble(self) -> bool:
        """Shuffle the grid and restart the session counters."""
        if not self.engine.can_accept_move():
            logger.debug("Ignored scramble: busy")
            return False
        self.scrambler.scramble(self.config.scramble_moves)
        self.detector.reset(self.grid)
        self.stats.reset()
        self.stats.start()
        return True

    # -- clock ----------------------------------------------------------------

    def tick(self, elapsed_ms: float) -> Snapshot:
        """Advance time by *elapsed_ms* and return the frame snapshot."""
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed_ms}.")
        self.stats.advance(elapsed_ms)
        status = self.animation.advance(elapsed_ms)
        just_solved = False
        if status is not None:
            self.stats.increment_moves()
            if status is SolveStatus.SOLVED:
                just_solved = True
                self.stats.stop()
        return self.snapshot(just_solved=just_solved)

    def snapshot(self, just_solved: bool = False) -> Snapshot:
        return Snapshot(
            size=self.size,
            tiles=self.grid.rows(),
            empty=self.grid.empty,
            animation=self._animation_view(),
            solved=self.detector.was_solved,
            just_solved=just_solved,
            moves=self.stats.moves,
            elapsed_ms=self.stats.elapsed_ms,
        )

    # -- queries --------------------------------------------------------------

    @property
    def is_animating(self) -> bool:
        return self.animation.phase is AnimationPhase.ANIMATING

    # -- helpers --------------------------------------------------------------

    def _start(self, move: Move | None) -> bool:
        if move is None:
            return False
        self.animation.begin(move)
        return True

    def _animation_view(self) -> AnimationView | None:
        position = self.animation.position()
        if position is None:
            return None
        assert self.animation.source is not None and self.animation.dest is not None
        return AnimationView(
            tile_value=self.animation.tile_value,
            source=self.animation.source,
            dest=self.animation.dest,
            progress=self.animation.progress,
            position=position,
        )

"""Timed slide of a single tile between two cells."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from slidecore.config import DEFAULT_ANIMATION_DURATION_MS
from slidecore.engine.gamestate.state import SolvedDetector, SolveStatus
from slidecore.errors import BusyError
from slidecore.models.board import EMPTY, Cell, GridState

if TYPE_CHECKING:
    from slidecore.engine.gameplay.moves import Move

logger = logging.getLogger(__name__)


class AnimationPhase(StrEnum):
    IDLE = "idle"
    ANIMATING = "animating"


class AnimationController:
    """Interpolates one tile from its source cell to the empty slot.

    The grid keeps the pre-move contents until ``progress`` reaches 1.0;
    only then is the move committed and the solved detector consulted.
    Once started an animation always runs to completion.
    """

    def __init__(
        self,
        grid: GridState,
        detector: SolvedDetector,
        duration_ms: float = DEFAULT_ANIMATION_DURATION_MS,
    ) -> None:
        self.grid = grid
        self.detector = detector
        self.duration_ms = duration_ms
        self.active: bool = False
        self.tile_value: int = EMPTY
        self.source: Cell | None = None
        self.dest: Cell | None = None
        self.progress: float = 0.0

    @property
    def phase(self) -> AnimationPhase:
        return AnimationPhase.ANIMATING if self.active else AnimationPhase.IDLE

    # -- transitions ----------------------------------------------------------

    def begin(self, move: Move) -> None:
        if self.active:
            raise BusyError("An animation is already running.")
        self.active = True
        self.tile_value = move.tile_value
        self.source = move.source
        self.dest = move.dest
        self.progress = 0.0
        logger.debug(
            "Sliding tile %d %s from %s to %s",
            move.tile_value, move.direction.value, move.source, move.dest,
        )

    def advance(self, elapsed_ms: float) -> SolveStatus | None:
        """Step the animation; returns the solve status on commit."""
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed_ms}.")
        if not self.active:
            return None
        if self.duration_ms <= 0:
            self.progress = 1.0
        else:
            self.progress = min(self.progress + elapsed_ms / self.duration_ms, 1.0)
        if self.progress < 1.0:
            return None
        return self._commit()

    def _commit(self) -> SolveStatus:
        assert self.source is not None and self.dest is not None
        self.grid.slide(self.source)
        logger.debug("Committed tile %d at %s", self.tile_value, self.dest)

        self.active = False
        self.progress = 0.0
        self.tile_value = EMPTY
        self.source = None
        self.dest = None
        return self.detector.observe(self.grid)

    # -- render helpers -------------------------------------------------------

    def position(self) -> tuple[float, float] | None:
        """Fractional (row, col) of the sliding tile, or ``None`` when idle."""
        if not self.active or self.source is None or self.dest is None:
            return None
        (sr, sc), (dr, dc) = self.source, self.dest
        t = self.progress
        return (sr + (dr - sr) * t, sc + (dc - sc) * t)

    def is_suppressed(self, row: int, col: int) -> bool:
        """True for the source cell of a tile in transit."""
        return self.active and self.source == (row, col)

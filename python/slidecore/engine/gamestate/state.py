"""Solved-state detection and the per-session move/time counters."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slidecore.models.board import GridState

logger = logging.getLogger(__name__)


class SolveStatus(StrEnum):
    UNSOLVED = "unsolved"
    SOLVED = "solved"  # false → true edge, reported once
    STILL_SOLVED = "still_solved"


class SolvedDetector:
    """Checks the goal arrangement and remembers the last answer.

    ``is_solved`` is a pure query. ``observe`` compares against the
    previous observation so a solve is reported exactly once, which lets
    callers fire one-time side effects such as stopping the clock.
    """

    def __init__(self) -> None:
        self._was_solved = False

    @staticmethod
    def is_solved(grid: GridState) -> bool:
        """Row-major read must yield ``1, 2, …, N²-1, 0``."""
        flat = grid.flat()
        last = len(flat) - 1
        if flat[last] != 0:
            return False
        return all(v == i + 1 for i, v in enumerate(flat[:last]))

    @property
    def was_solved(self) -> bool:
        return self._was_solved

    def observe(self, grid: GridState) -> SolveStatus:
        solved = self.is_solved(grid)
        previous, self._was_solved = self._was_solved, solved
        if not solved:
            return SolveStatus.UNSOLVED
        if previous:
            return SolveStatus.STILL_SOLVED
        logger.info("Puzzle solved (%d×%d)", grid.size, grid.size)
        return SolveStatus.SOLVED

    def reset(self, grid: GridState) -> None:
        """Re-seed the memory from *grid* without reporting an edge."""
        self._was_solved = self.is_solved(grid)


class SessionStats:
    """Move counter and elapsed time, advanced by the game tick."""

    def __init__(self) -> None:
        self.moves: int = 0
        self.elapsed_ms: float = 0.0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    def advance(self, elapsed_ms: float) -> None:
        if self._running:
            self.elapsed_ms += elapsed_ms

    def start(self) -> None:
        self._running = True

    def stop(self) -> None:
        self._running = False

    def reset(self) -> None:
        self.moves = 0
        self.elapsed_ms = 0.0
        self._running = False

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

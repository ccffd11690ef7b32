"""Generates solvable puzzles by walking the empty slot from the solved state."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

from slidecore.config import DEFAULT_SCRAMBLE_MOVES
from slidecore.engine.gameplay.moves import MoveEngine
from slidecore.models.board import Direction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...


class Scrambler:
    """Random walk of legal moves that never immediately undoes itself.

    Every step is a legal tile move starting from the solved grid, so the
    result is always solvable.
    """

    def __init__(self, engine: MoveEngine, rng: RandomSource | None = None) -> None:
        self.engine = engine
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def candidates(self, last: Direction | None) -> list[Direction]:
        """Legal directions for the next step, minus the reversal of *last*.

        When only the reversal is available every legal direction is
        allowed again.
        """
        legal = self.engine.legal_directions()
        if last is None:
            return legal
        filtered = [d for d in legal if d != last.opposite]
        return filtered if filtered else legal

    def scramble(self, move_count: int = DEFAULT_SCRAMBLE_MOVES) -> list[Direction]:
        """Reset the grid and apply *move_count* random moves in place.

        Returns the applied walk in order.
        """
        if move_count < 0:
            raise ValueError(f"Move count cannot be negative, got {move_count}.")

        grid = self.engine.grid
        grid.reset()
        walk: list[Direction] = []
        last: Direction | None = None

        for _ in range(move_count):
            options = self.candidates(last)
            if not options:
                continue
            direction = self.rng.choice(options)
            self.engine.apply_immediate(direction)
            walk.append(direction)
            last = direction

        logger.info(
            "Scrambled %d×%d grid with %d moves, empty slot at %s",
            grid.size, grid.size, len(walk), grid.empty,
        )
        logger.debug("Scramble walk: %s", " ".join(d.value for d in walk))
        return walk

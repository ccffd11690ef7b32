"""Move legality and application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from slidecore.errors import BusyError, InvalidCoordinateError
from slidecore.models.board import Cell, Direction, GridState

if TYPE_CHECKING:
    from slidecore.engine.animation import AnimationController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A tile about to slide from *source* into the empty slot at *dest*."""

    direction: Direction
    tile_value: int
    source: Cell
    dest: Cell


class MoveEngine:
    """Validates moves against the current empty slot.

    ``request_move`` only describes a move; the animation controller
    decides when it is committed. ``apply_immediate`` mutates the grid
    straight away and is what the scrambler uses.
    """

    def __init__(
        self, grid: GridState, animation: AnimationController | None = None
    ) -> None:
        self.grid = grid
        self.animation = animation

    # -- queries --------------------------------------------------------------

    def can_accept_move(self) -> bool:
        return self.animation is None or not self.animation.active

    def source_for(self, direction: Direction) -> Cell | None:
        """Cell whose tile would slide in *direction*, or ``None``."""
        er, ec = self.grid.empty
        dr, dc = direction.offset
        sr, sc = er + dr, ec + dc
        if not self.grid.in_bounds(sr, sc):
            return None
        return (sr, sc)

    def legal_directions(self) -> list[Direction]:
        return [d for d in Direction if self.source_for(d) is not None]

    # -- requests -------------------------------------------------------------

    def request_move(self, direction: Direction) -> Move | None:
        """Describe the move for *direction* without touching the grid.

        Returns ``None`` when no tile sits on that side of the empty slot.
        """
        if not self.can_accept_move():
            raise BusyError(f"Cannot move {direction.value}: a tile is sliding.")
        source = self.source_for(direction)
        if source is None:
            logger.debug("Rejected %s: no tile on that side", direction.value)
            return None
        return Move(
            direction=direction,
            tile_value=self.grid.value_at(*source),
            source=source,
            dest=self.grid.empty,
        )

    def request_move_at(self, row: int, col: int) -> Move | None:
        """Describe the move that slides the tile at (row, col), if adjacent."""
        if not self.grid.in_bounds(row, col):
            raise InvalidCoordinateError(row, col, self.grid.size)
        er, ec = self.grid.empty
        for direction in Direction:
            dr, dc = direction.offset
            if (er + dr, ec + dc) == (row, col):
                return self.request_move(direction)
        if not self.can_accept_move():
            raise BusyError(f"Cannot move tile at ({row}, {col}): a tile is sliding.")
        logger.debug("Rejected tile (%d, %d): not next to the empty slot", row, col)
        return None

    def apply_immediate(self, direction: Direction) -> Move | None:
        """Slide a tile in *direction* right now.

        Returns the applied move, or ``None`` if it was not legal.
        """
        move = self.request_move(direction)
        if move is None:
            return None
        self.grid.slide(move.source)
        return move

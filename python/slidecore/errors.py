"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all puzzle core errors."""


class InvalidCoordinateError(PuzzleError, IndexError):
    """A cell outside ``[0, size) x [0, size)`` was accessed."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {size}×{size} grid."
        )
        self.row = row
        self.col = col
        self.size = size


class BusyError(PuzzleError):
    """A move was requested while a tile is still sliding."""


class IllegalMoveError(PuzzleError, ValueError):
    """A tile that is not next to the empty slot was asked to slide."""

"""Sliding puzzle core: grid, moves, scrambling, animation and input."""

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleGame, Snapshot
from slidecore.models.board import Direction, GridState

__all__ = ["Direction", "GridState", "PuzzleConfig", "PuzzleGame", "Snapshot"]

"""Tunables for a puzzle session."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 4
MIN_SIZE = 2
DEFAULT_ANIMATION_DURATION_MS = 100.0
DEFAULT_SWIPE_THRESHOLD = 30.0
DEFAULT_SCRAMBLE_MOVES = 150


@dataclass(frozen=True)
class PuzzleConfig:
    """Validated settings shared by the engine and the frontends.

    Example::

        PuzzleConfig(size=3, scramble_moves=40, seed=7)
    """

    size: int = DEFAULT_SIZE
    animation_duration_ms: float = DEFAULT_ANIMATION_DURATION_MS
    swipe_threshold: float = DEFAULT_SWIPE_THRESHOLD
    scramble_moves: int = DEFAULT_SCRAMBLE_MOVES
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < MIN_SIZE:
            raise ValueError(
                f"Grid size must be at least {MIN_SIZE}, got {self.size}."
            )
        if self.animation_duration_ms < 0:
            raise ValueError(
                "Animation duration cannot be negative, "
                f"got {self.animation_duration_ms}."
            )
        if self.swipe_threshold < 0:
            raise ValueError(
                f"Swipe threshold cannot be negative, got {self.swipe_threshold}."
            )
        if self.scramble_moves < 0:
            raise ValueError(
                f"Scramble move count cannot be negative, got {self.scramble_moves}."
            )

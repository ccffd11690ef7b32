"""Turns swipes, taps and key names into move requests."""

from __future__ import annotations

from dataclasses import dataclass

from slidecore.config import DEFAULT_SWIPE_THRESHOLD
from slidecore.models.board import Cell, Direction

Point = tuple[float, float]

_KEY_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned playable area in screen pixels."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )


class GestureTranslator:
    """Maps a completed pointer gesture to at most one direction.

    Horizontal swipes pull the neighbouring tile along the swipe
    (``+dx`` → RIGHT, ``-dx`` → LEFT); vertically ``+dy`` → UP and
    ``-dy`` → DOWN. Gestures that start outside ``area`` are left to the
    host UI.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_SWIPE_THRESHOLD,
        area: Rect | None = None,
        size: int | None = None,
    ) -> None:
        self.threshold = threshold
        self.area = area
        self.size = size

    def translate(self, start: Point, end: Point) -> Direction | None:
        if self.area is not None and not self.area.contains(start):
            return None
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        if max(abs(dx), abs(dy)) < self.threshold:
            return None
        if abs(dx) > abs(dy):
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        return Direction.UP if dy > 0 else Direction.DOWN

    @staticmethod
    def from_key(name: str) -> Direction | None:
        return _KEY_DIRECTIONS.get(name.lower())

    def cell_at(self, point: Point) -> Cell | None:
        """Grid cell under *point*, when an area and size are known."""
        if self.area is None or self.size is None or not self.area.contains(point):
            return None
        col = int((point[0] - self.area.x) * self.size // self.area.width)
        row = int((point[1] - self.area.y) * self.size // self.area.height)
        return (min(row, self.size - 1), min(col, self.size - 1))

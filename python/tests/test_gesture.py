"""Swipe, key and tap translation."""

from __future__ import annotations

import pytest

from slidecore.engine.gesture import GestureTranslator, Rect
from slidecore.models.board import Direction


@pytest.mark.parametrize(
    "end, expected",
    [
        ((150, 100), Direction.RIGHT),
        ((50, 100), Direction.LEFT),
        ((100, 150), Direction.UP),
        ((100, 50), Direction.DOWN),
        ((140, 120), Direction.RIGHT),
        ((80, 40), Direction.DOWN),
    ],
)
def test_dominant_axis_and_sign(end: tuple[int, int], expected: Direction) -> None:
    assert GestureTranslator(threshold=30).translate((100, 100), end) is expected


def test_below_threshold_produces_nothing() -> None:
    translator = GestureTranslator(threshold=30)
    assert translator.translate((100, 100), (129, 110)) is None
    assert translator.translate((100, 100), (100, 100)) is None


def test_threshold_is_inclusive() -> None:
    assert GestureTranslator(threshold=30).translate((0, 0), (30, 0)) is Direction.RIGHT


def test_diagonal_tie_is_vertical() -> None:
    assert GestureTranslator(threshold=10).translate((0, 0), (40, 40)) is Direction.UP
    assert GestureTranslator(threshold=10).translate((0, 0), (-40, -40)) is Direction.DOWN


def test_gesture_outside_area_is_ignored() -> None:
    translator = GestureTranslator(threshold=10, area=Rect(0, 0, 200, 200))
    assert translator.translate((250, 50), (150, 50)) is None
    assert translator.translate((150, 50), (250, 50)) is Direction.RIGHT


@pytest.mark.parametrize(
    "name, expected",
    [
        ("up", Direction.UP),
        ("DOWN", Direction.DOWN),
        ("left", Direction.LEFT),
        ("right", Direction.RIGHT),
        ("scramble", None),
        ("", None),
    ],
)
def test_from_key(name: str, expected: Direction | None) -> None:
    assert GestureTranslator.from_key(name) is expected


def test_cell_at_maps_points_to_cells() -> None:
    translator = GestureTranslator(area=Rect(10, 10, 400, 400), size=4)
    assert translator.cell_at((10, 10)) == (0, 0)
    assert translator.cell_at((115, 215)) == (2, 1)
    assert translator.cell_at((409.9, 409.9)) == (3, 3)
    assert translator.cell_at((5, 200)) is None


def test_cell_at_without_area() -> None:
    assert GestureTranslator().cell_at((10, 10)) is None

"""AnimationController timing, commit and single-tile guarantee."""

from __future__ import annotations

import pytest

from slidecore.engine.animation import AnimationController, AnimationPhase
from slidecore.engine.gameplay.moves import MoveEngine
from slidecore.engine.gamestate import SolvedDetector, SolveStatus
from slidecore.errors import BusyError
from slidecore.models.board import Direction, GridState

# empty at (0, 0), tile 5 directly below it
_EMPTY_TOP_LEFT = [0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 1]


def _setup(
    flat: list[int] | None = None, duration_ms: float = 100.0
) -> tuple[GridState, AnimationController, MoveEngine]:
    grid = GridState.from_flat(4, flat) if flat else GridState(4)
    animation = AnimationController(grid, SolvedDetector(), duration_ms)
    return grid, animation, MoveEngine(grid, animation)


def test_commit_after_progress_reaches_one() -> None:
    grid, animation, engine = _setup(_EMPTY_TOP_LEFT)
    move = engine.request_move(Direction.UP)
    assert move is not None
    assert (move.tile_value, move.source, move.dest) == (5, (1, 0), (0, 0))

    animation.begin(move)
    assert animation.phase is AnimationPhase.ANIMATING
    ticks = 0
    while animation.active:
        animation.advance(16)
        ticks += 1

    assert ticks == 7
    assert grid.value_at(0, 0) == 5
    assert grid.value_at(1, 0) == 0
    assert grid.empty == (1, 0)
    assert animation.phase is AnimationPhase.IDLE
    assert animation.progress == 0.0


def test_grid_untouched_until_commit() -> None:
    grid, animation, engine = _setup(_EMPTY_TOP_LEFT)
    before = grid.copy()
    animation.begin(engine.request_move(Direction.UP))  # type: ignore[arg-type]

    assert animation.advance(40) is None
    assert animation.progress == pytest.approx(0.4)
    assert animation.advance(40) is None
    assert animation.progress == pytest.approx(0.8)
    assert grid == before
    assert grid.empty == (0, 0)


def test_progress_is_clamped_and_commit_returns_status() -> None:
    grid, animation, engine = _setup()
    animation.begin(engine.request_move(Direction.DOWN))  # type: ignore[arg-type]

    status = animation.advance(1000)

    assert status is SolveStatus.UNSOLVED
    assert not animation.active
    assert animation.progress == 0.0
    assert grid.empty == (2, 3)


def test_commit_runs_solved_detector() -> None:
    grid, animation, engine = _setup([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
    animation.begin(engine.request_move(Direction.LEFT))  # type: ignore[arg-type]
    assert animation.advance(100) is SolveStatus.SOLVED
    assert grid.is_solved()


def test_second_begin_is_busy_and_state_unchanged() -> None:
    grid, animation, engine = _setup()
    first = engine.request_move(Direction.DOWN)
    other = engine.request_move(Direction.RIGHT)
    assert first is not None and other is not None
    animation.begin(first)
    animation.advance(30)

    with pytest.raises(BusyError):
        animation.begin(other)
    with pytest.raises(BusyError):
        engine.request_move(Direction.RIGHT)

    assert animation.source == (2, 3)
    assert animation.dest == (3, 3)
    assert animation.tile_value == 12
    assert animation.progress == pytest.approx(0.3)
    assert grid.is_solved()


def test_position_interpolates_linearly() -> None:
    _, animation, engine = _setup(_EMPTY_TOP_LEFT)
    assert animation.position() is None
    animation.begin(engine.request_move(Direction.UP))  # type: ignore[arg-type]

    assert animation.position() == (1.0, 0.0)
    animation.advance(25)
    assert animation.position() == pytest.approx((0.75, 0.0))
    animation.advance(50)
    assert animation.position() == pytest.approx((0.25, 0.0))


def test_source_cell_is_suppressed_while_animating() -> None:
    _, animation, engine = _setup(_EMPTY_TOP_LEFT)
    animation.begin(engine.request_move(Direction.UP))  # type: ignore[arg-type]

    assert animation.is_suppressed(1, 0)
    assert not animation.is_suppressed(0, 0)
    animation.advance(100)
    assert not animation.is_suppressed(1, 0)


def test_zero_duration_commits_on_first_advance() -> None:
    grid, animation, engine = _setup(duration_ms=0)
    animation.begin(engine.request_move(Direction.RIGHT))  # type: ignore[arg-type]
    assert animation.advance(0) is SolveStatus.UNSOLVED
    assert grid.empty == (3, 2)


def test_idle_advance_is_noop() -> None:
    grid, animation, _ = _setup()
    assert animation.advance(500) is None
    assert grid.is_solved()


def test_negative_elapsed_rejected() -> None:
    _, animation, _ = _setup()
    with pytest.raises(ValueError):
        animation.advance(-1)

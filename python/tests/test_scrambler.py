"""Scrambler random walk: determinism, reversal avoidance, solvability."""

from __future__ import annotations

import random

import pytest

from slidecore.engine.gamegenerator import Scrambler
from slidecore.engine.gameplay.moves import MoveEngine
from slidecore.engine.gamesolver import Solver
from slidecore.models.board import Direction, GridState


class _RecordingRandom(random.Random):
    """``random.Random`` that remembers every candidate list and pick."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.steps: list[tuple[list[Direction], Direction]] = []

    def choice(self, seq):  # type: ignore[override]
        picked = super().choice(seq)
        self.steps.append((list(seq), picked))
        return picked


class _FixedLegal:
    """Engine stand-in whose legal directions are fixed."""

    def __init__(self, legal: list[Direction]) -> None:
        self._legal = legal

    def legal_directions(self) -> list[Direction]:
        return list(self._legal)


def _scrambler(size: int, rng) -> Scrambler:
    return Scrambler(MoveEngine(GridState(size)), rng)


# -- determinism --------------------------------------------------------------


def test_first_choice_walk_is_exact(scripted) -> None:
    rng = scripted()
    scrambler = _scrambler(4, rng)

    walk = scrambler.scramble(4)

    assert walk == [Direction.DOWN, Direction.DOWN, Direction.DOWN, Direction.RIGHT]
    assert scrambler.engine.grid.rows() == (
        (1, 2, 0, 3),
        (5, 6, 7, 4),
        (9, 10, 11, 8),
        (13, 14, 15, 12),
    )
    assert scrambler.engine.grid.empty == (0, 2)
    assert rng.offered == [
        [Direction.DOWN, Direction.RIGHT],
        [Direction.DOWN, Direction.RIGHT],
        [Direction.DOWN, Direction.RIGHT],
        [Direction.RIGHT],
    ]


def test_same_seed_same_permutation() -> None:
    a = _scrambler(4, random.Random(1234))
    b = _scrambler(4, random.Random(1234))
    assert a.scramble() == b.scramble()
    assert a.engine.grid == b.engine.grid


def test_scramble_starts_from_solved(scripted) -> None:
    scrambler = _scrambler(3, scripted())
    scrambler.engine.apply_immediate(Direction.DOWN)
    scrambler.engine.apply_immediate(Direction.RIGHT)

    assert scrambler.scramble(0) == []
    assert scrambler.engine.grid.is_solved()


def test_negative_move_count() -> None:
    with pytest.raises(ValueError):
        _scrambler(4, random.Random(0)).scramble(-1)


# -- reversal avoidance -------------------------------------------------------


@pytest.mark.parametrize("seed", range(10))
def test_never_picks_pure_reversal(seed: int) -> None:
    rng = _RecordingRandom(seed)
    walk = _scrambler(4, rng).scramble(150)

    assert len(walk) == 150
    for previous, current in zip(walk, walk[1:]):
        assert current is not previous.opposite
    for candidates, _ in rng.steps[1:]:
        assert len(candidates) >= 1


def test_candidates_drop_reversal() -> None:
    scrambler = Scrambler(_FixedLegal([Direction.UP, Direction.LEFT]))  # type: ignore[arg-type]
    assert scrambler.candidates(Direction.DOWN) == [Direction.LEFT]
    assert scrambler.candidates(None) == [Direction.UP, Direction.LEFT]


def test_candidates_fall_back_to_all_legal_when_only_reversal_left() -> None:
    scrambler = Scrambler(_FixedLegal([Direction.UP]))  # type: ignore[arg-type]
    assert scrambler.candidates(Direction.DOWN) == [Direction.UP]


def test_candidates_empty_when_nothing_legal() -> None:
    scrambler = Scrambler(_FixedLegal([]))  # type: ignore[arg-type]
    assert scrambler.candidates(Direction.UP) == []


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_scramble_keeps_permutation_invariant(seed: int) -> None:
    scrambler = _scrambler(4, random.Random(seed))
    scrambler.scramble()
    grid = scrambler.engine.grid
    assert sorted(grid.flat()) == list(range(16))
    assert grid.value_at(*grid.empty) == 0
    assert Solver.is_solvable(grid)


@pytest.mark.parametrize("seed", range(5))
def test_replaying_inverse_walk_solves(seed: int) -> None:
    scrambler = _scrambler(4, random.Random(seed))
    walk = scrambler.scramble()
    engine = scrambler.engine

    for direction in Solver.inverse(walk):
        assert engine.apply_immediate(direction) is not None

    assert engine.grid.is_solved()


@pytest.mark.parametrize("seed", range(5))
def test_small_scramble_is_resolved_by_search(seed: int) -> None:
    scrambler = _scrambler(3, random.Random(seed))
    walk = scrambler.scramble(12)
    engine = scrambler.engine

    moves = Solver.solve(engine.grid)

    assert moves is not None
    assert len(moves) <= len(walk)
    for direction in moves:
        assert engine.apply_immediate(direction) is not None
    assert engine.grid.is_solved()

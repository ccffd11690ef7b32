"""Solver test suite — parity checks and search on JSON fixtures.

Boards live in ``<project_root>/fixtures/boards.json``. Each carries the
expected ``solved`` and ``solvable`` flags; solvable boards are solved by
search and the move list is replayed through the real move engine.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from slidecore.engine.gameplay.moves import MoveEngine
from slidecore.engine.gamesolver import Solver
from slidecore.engine.gamestate import SolvedDetector
from slidecore.models.board import Direction, GridState

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("boards.json")
_SOLVABLE = [b for b in _BOARDS if b["solvable"]]


def _grid(data: dict) -> GridState:
    return GridState.from_flat(data["size"], data["tiles"])


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solved_flag(board_data: dict) -> None:
    assert SolvedDetector.is_solved(_grid(board_data)) is board_data["solved"]


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_solvable_parity(board_data: dict) -> None:
    assert Solver.is_solvable(_grid(board_data)) is board_data["solvable"]


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_and_replay(board_data: dict) -> None:
    grid = _grid(board_data)

    moves = Solver.solve(grid)

    assert moves is not None
    assert all(isinstance(m, Direction) for m in moves)
    assert (len(moves) == 0) is board_data["solved"]

    engine = MoveEngine(grid)
    for i, direction in enumerate(moves):
        assert engine.apply_immediate(direction) is not None, (
            f"Move {i} ({direction.value}) was invalid at empty {grid.empty}"
        )
    assert grid.is_solved(), f"Not solved after {len(moves)} moves"


def test_unsolvable_returns_no_moves() -> None:
    grid = GridState.from_flat(3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert Solver.solve(grid) == []
    assert Solver.hint(grid) is None


def test_search_budget_exhausted() -> None:
    grid = GridState.from_flat(3, [8, 6, 7, 2, 5, 4, 3, 0, 1])
    assert Solver.is_solvable(grid)
    assert Solver.solve(grid, max_states=100) is None
    assert Solver.hint(grid, max_states=100) is None


def test_hint_is_first_step() -> None:
    grid = GridState.from_flat(3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert Solver.hint(grid) is Direction.LEFT


def test_inverse_walk() -> None:
    walk = [Direction.DOWN, Direction.RIGHT, Direction.UP]
    assert Solver.inverse(walk) == [Direction.DOWN, Direction.LEFT, Direction.UP]

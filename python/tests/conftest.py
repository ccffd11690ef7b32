"""Shared fixtures for the puzzle core tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from slidecore.config import PuzzleConfig
from slidecore.engine.gameplay import PuzzleGame


class ScriptedRandom:
    """Picks ``options[i]`` for each scripted index (0 once exhausted).

    Every candidate list it is offered is recorded in ``offered``.
    """

    def __init__(self, picks: Sequence[int] = ()) -> None:
        self._picks = list(picks)
        self.offered: list[list[Any]] = []

    def choice(self, seq: Sequence[Any]) -> Any:
        self.offered.append(list(seq))
        index = self._picks.pop(0) if self._picks else 0
        return seq[index]


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def game() -> PuzzleGame:
    """A solved 4×4 session with the default 100 ms slide."""
    return PuzzleGame(PuzzleConfig())

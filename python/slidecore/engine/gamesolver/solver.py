"""Solvability checks and a bounded breadth-first solver."""

from __future__ import annotations

from collections import deque
from itertools import combinations

from slidecore.models.board import EMPTY, Direction, GridState

DEFAULT_MAX_STATES = 200_000


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def is_solvable(grid: GridState) -> bool:
        """Return True if *grid* can reach the goal state.

        Uses the inversion-parity rule: odd widths need an even inversion
        count; even widths need inversions plus the empty slot's row
        counted from the bottom to be even.
        """
        tiles = [v for v in grid.flat() if v != EMPTY]
        parity = sum(a > b for a, b in combinations(tiles, 2)) % 2
        if grid.size % 2 == 0:
            row, _ = grid.empty
            parity ^= (grid.size - 1 - row) % 2
        return parity == 0

    @staticmethod
    def solve(
        grid: GridState, max_states: int = DEFAULT_MAX_STATES
    ) -> list[Direction] | None:
        """Return a shortest move sequence that solves *grid*.

        Returns ``[]`` if the grid is already solved or unsolvable, and
        ``None`` if the search gave up after *max_states* states.
        """
        if grid.is_solved() or not Solver.is_solvable(grid):
            return []

        n = grid.size
        goal = tuple(GridState.solved(n).flat())
        start = tuple(grid.flat())
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], Direction] | None] = {
            start: None
        }
        queue: deque[tuple[tuple[int, ...], int]] = deque(
            [(start, start.index(EMPTY))]
        )

        while queue:
            state, empty = queue.popleft()
            er, ec = divmod(empty, n)
            for direction in Direction:
                dr, dc = direction.offset
                sr, sc = er + dr, ec + dc
                if not (0 <= sr < n and 0 <= sc < n):
                    continue
                source = sr * n + sc
                tiles = list(state)
                tiles[empty], tiles[source] = tiles[source], EMPTY
                nxt = tuple(tiles)
                if nxt in parents:
                    continue
                parents[nxt] = (state, direction)
                if nxt == goal:
                    return Solver._path(parents, nxt)
                if len(parents) >= max_states:
                    return None
                queue.append((nxt, source))
        return None

    @staticmethod
    def hint(grid: GridState, max_states: int = DEFAULT_MAX_STATES) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable / too deep."""
        moves = Solver.solve(grid, max_states)
        return moves[0] if moves else None

    @staticmethod
    def inverse(walk: list[Direction]) -> list[Direction]:
        """Moves that undo *walk* when applied after it."""
        return [d.opposite for d in reversed(walk)]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _path(
        parents: dict[tuple[int, ...], tuple[tuple[int, ...], Direction] | None],
        state: tuple[int, ...],
    ) -> list[Direction]:
        moves: list[Direction] = []
        link = parents[state]
        while link is not None:
            state, direction = link
            moves.append(direction)
            link = parents[state]
        moves.reverse()
        return moves

"""Liquid sort solver: bounded breadth-first search over pour sequences."""

from __future__ import annotations

import logging
from collections import deque

from liquidsort.models.puzzle import Layers, Move, Puzzle

logger = logging.getLogger(__name__)

MAX_MOVES = 150

_StateKey = tuple[Layers, ...]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(puzzle: Puzzle, max_moves: int = MAX_MOVES) -> list[Move] | None:
        """Return a shortest move sequence that solves *puzzle*.

        Returns ``[]`` if *puzzle* is already solved and ``None`` if no
        solution exists within *max_moves* pours. States are deduplicated
        by :meth:`Puzzle.state_key`, so two puzzles that differ only in
        bottle order are explored once.
        """
        if puzzle.is_solved():
            return []

        start_key = puzzle.state_key()
        # key -> (parent key, move from parent); the start has no parent
        parents: dict[_StateKey, tuple[_StateKey, Move] | None] = {start_key: None}
        queue: deque[tuple[Puzzle, int]] = deque([(puzzle, 0)])
        count = len(puzzle)

        while queue:
            current, moves = queue.popleft()
            if moves >= max_moves:
                continue

            current_key = current.state_key()
            for i in range(count):
                for j in range(count):
                    if i == j:
                        continue
                    nxt = current.pour(i, j)
                    if nxt is None:
                        continue
                    key = nxt.state_key()
                    if key in parents:
                        continue
                    parents[key] = (current_key, Move(source=i, target=j))
                    if nxt.is_solved():
                        logger.debug(
                            "Solved in %d moves after visiting %d states",
                            moves + 1, len(parents),
                        )
                        return Solver._path(parents, key)
                    queue.append((nxt, moves + 1))

        logger.debug("No solution within %d moves (%d states)", max_moves, len(parents))
        return None

    @staticmethod
    def is_solvable(puzzle: Puzzle, max_moves: int = MAX_MOVES) -> bool:
        """Return True if *puzzle* can be solved in at most *max_moves* pours."""
        return Solver.solve(puzzle, max_moves) is not None

    @staticmethod
    def hint(puzzle: Puzzle, max_moves: int = MAX_MOVES) -> Move | None:
        """Return the first move of a shortest solution, or ``None``."""
        moves = Solver.solve(puzzle, max_moves)
        return moves[0] if moves else None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _path(
        parents: dict[_StateKey, tuple[_StateKey, Move] | None], key: _StateKey
    ) -> list[Move]:
        path: list[Move] = []
        link = parents[key]
        while link is not None:
            parent_key, move = link
            path.append(move)
            link = parents[parent_key]
        path.reverse()
        return path

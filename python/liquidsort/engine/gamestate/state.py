"""Tracks the mutable state of a level in progress."""

from __future__ import annotations

from dataclasses import dataclass

from liquidsort.models.puzzle import Puzzle


@dataclass(frozen=True)
class HistoryEntry:
    """The puzzle and move counter as they were before a pour."""

    puzzle: Puzzle
    moves: int


class GameState:
    """Holds the current puzzle, selection, move counter and undo history."""

    def __init__(self, level: int, puzzle: Puzzle) -> None:
        self.level = level
        self.puzzle = puzzle
        self.selected: str | None = None
        self.moves: int = 0
        self.history: list[HistoryEntry] = []
        self.is_won: bool = False

    # -- moves ----------------------------------------------------------------

    def push(self, puzzle: Puzzle) -> None:
        """Record the current position and advance to *puzzle*."""
        self.history.append(HistoryEntry(puzzle=self.puzzle, moves=self.moves))
        self.puzzle = puzzle
        self.moves += 1
        self.is_won = puzzle.is_solved()

    def pop(self) -> bool:
        if not self.history:
            return False
        entry = self.history.pop()
        self.puzzle = entry.puzzle
        self.moves = entry.moves
        self.selected = None
        self.is_won = False
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

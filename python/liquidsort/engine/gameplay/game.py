"""Core gameplay logic — processes selections and pours, tracks progress."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from liquidsort.engine.gamegenerator import GameGenerator
from liquidsort.engine.gamesolver import Solver
from liquidsort.engine.gamestate import GameState
from liquidsort.models.progress import Progress
from liquidsort.models.puzzle import Bottle, Move, PourRejection, Puzzle

logger = logging.getLogger(__name__)


class Action(StrEnum):
    SELECTED = "selected"
    DESELECTED = "deselected"
    EMPTY = "empty"
    POURED = "poured"
    INVALID = "invalid"


class InvalidReason(StrEnum):
    UNKNOWN_BOTTLE = "unknown_bottle"
    SAME_BOTTLE = PourRejection.SAME_BOTTLE.value
    EMPTY_SOURCE = PourRejection.EMPTY_SOURCE.value
    FULL = PourRejection.FULL.value
    COLOR_MISMATCH = PourRejection.COLOR_MISMATCH.value
    NO_OP = PourRejection.NO_OP.value


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a selection or pour.

    ``poured`` results fill in the bottle ids, color, layer count and win
    flag; ``invalid`` results carry a reason.
    """

    action: Action
    from_id: str | None = None
    to_id: str | None = None
    color: str | None = None
    count: int = 0
    is_won: bool = False
    reason: InvalidReason | None = None


class GamePlay:
    """Orchestrates a play session across levels."""

    def __init__(
        self, level: int = 1, unlocked_level: int = 1, sound_enabled: bool = True
    ) -> None:
        self.unlocked_level = max(1, unlocked_level)
        self.sound_enabled = sound_enabled
        self.state = GameState(level, GameGenerator.generate_for_level(level))

    @classmethod
    def from_progress(cls, progress: Progress) -> "GamePlay":
        """Resume at the highest unlocked level."""
        return cls(
            level=progress.highest_unlocked,
            unlocked_level=progress.highest_unlocked,
            sound_enabled=progress.sound_enabled,
        )

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle, level: int = 1) -> "GamePlay":
        """Create a session around an existing puzzle (e.g. a hand-built one)."""
        obj = object.__new__(cls)
        obj.unlocked_level = max(1, level)
        obj.sound_enabled = True
        obj.state = GameState(level, puzzle)
        return obj

    # -- level lifecycle ------------------------------------------------------

    def init_level(self, level: int) -> None:
        """Start *level* from scratch (selection, moves and history cleared)."""
        logger.debug("Initialising level %d", level)
        self.state = GameState(level, GameGenerator.generate_for_level(level))

    def reset_level(self) -> None:
        self.init_level(self.state.level)

    def next_level(self) -> int:
        """Advance one level and return the (possibly raised) unlock watermark."""
        level = self.state.level + 1
        if level > self.unlocked_level:
            self.unlocked_level = level
            logger.debug("Unlocked level %d", level)
        self.init_level(level)
        return self.unlocked_level

    def play_level(self, level: int) -> bool:
        """Start *level* if it has been unlocked. Returns True on success."""
        if not 1 <= level <= self.unlocked_level:
            return False
        self.init_level(level)
        return True

    # -- moves ----------------------------------------------------------------

    def select_bottle(self, bottle_id: str) -> MoveResult:
        """Handle a tap on a bottle: select, deselect or pour."""
        selected = self.state.selected

        if selected is None:
            index = self.state.puzzle.index_of(bottle_id)
            if index is not None and not self.state.puzzle[index].is_empty:
                self.state.selected = bottle_id
                return MoveResult(Action.SELECTED)
            return MoveResult(Action.EMPTY)

        if selected == bottle_id:
            self.state.selected = None
            return MoveResult(Action.DESELECTED)

        return self.pour(selected, bottle_id)

    def pour(self, from_id: str, to_id: str) -> MoveResult:
        """Pour the top run of *from_id* into *to_id*.

        Always clears the selection. Illegal pours leave bottles, moves and
        history untouched.
        """
        self.state.selected = None
        puzzle = self.state.puzzle

        source = puzzle.index_of(from_id)
        target = puzzle.index_of(to_id)
        if source is None or target is None:
            return MoveResult(Action.INVALID, reason=InvalidReason.UNKNOWN_BOTTLE)

        poured = puzzle.pour(source, target)
        if poured is None:
            rejection = puzzle.check_pour(source, target)
            assert rejection is not None
            return MoveResult(Action.INVALID, reason=InvalidReason(rejection.value))

        top = puzzle[source].top_info()
        assert top is not None
        count = puzzle[target].empty_count() - poured[target].empty_count()

        self.state.push(poured)
        if self.state.is_won:
            logger.debug("Level %d won in %d moves", self.state.level, self.state.moves)

        return MoveResult(
            Action.POURED,
            from_id=from_id,
            to_id=to_id,
            color=top.color,
            count=count,
            is_won=self.state.is_won,
        )

    def undo(self) -> bool:
        """Restore the position before the last pour. False if nothing to undo."""
        return self.state.pop()

    def hint(self) -> Move | None:
        """Return the next move of a shortest solution from here."""
        return Solver.hint(self.state.puzzle)

    # -- settings -------------------------------------------------------------

    def toggle_sound(self) -> bool:
        self.sound_enabled = not self.sound_enabled
        return self.sound_enabled

    @property
    def progress(self) -> Progress:
        return Progress(
            highest_unlocked=self.unlocked_level, sound_enabled=self.sound_enabled
        )

    # -- queries --------------------------------------------------------------

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def bottles(self) -> tuple[Bottle, ...]:
        return self.state.puzzle.bottles

    @property
    def selected(self) -> str | None:
        return self.state.selected

    @property
    def is_won(self) -> bool:
        return self.state.is_won

    @property
    def history_length(self) -> int:
        return len(self.state.history)

    @property
    def can_undo(self) -> bool:
        return self.state.can_undo

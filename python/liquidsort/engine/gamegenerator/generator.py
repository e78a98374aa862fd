"""Generates solvable liquid sort levels."""

from __future__ import annotations

import logging

from liquidsort.engine.gamerandom import SeededRandom
from liquidsort.engine.gamesolver import MAX_MOVES, Solver
from liquidsort.models.levels import level_config
from liquidsort.models.palette import COLOR_NAMES
from liquidsort.models.puzzle import CAPACITY, Bottle, Puzzle

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 100
ATTEMPT_SEED_STRIDE = 1000

SCRAMBLE_BASE_MOVES = 12
SCRAMBLE_MAX_MOVES = 60
SCRAMBLE_PROPOSALS_PER_MOVE = 20


class GameGenerator:
    """Builds puzzles from a seed: random deals checked by the solver, with
    a scrambled solved state as the fallback."""

    @staticmethod
    def generate(
        color_count: int,
        bottle_count: int,
        level_seed: int,
        max_attempts: int = MAX_ATTEMPTS,
        max_moves: int = MAX_MOVES,
    ) -> Puzzle:
        """Return a solvable, not yet solved puzzle for the given seed.

        The same arguments always produce the same puzzle.
        """
        GameGenerator._validate(color_count, bottle_count)

        for attempt in range(max_attempts):
            seed = level_seed + attempt * ATTEMPT_SEED_STRIDE
            candidate = GameGenerator.random_puzzle(color_count, bottle_count, seed)

            if candidate.is_solved():
                logger.debug("Attempt %d (seed %d) dealt a solved puzzle", attempt, seed)
                continue

            if Solver.is_solvable(candidate, max_moves):
                logger.debug("Attempt %d (seed %d) accepted", attempt, seed)
                return candidate.with_sequential_ids()

            logger.debug("Attempt %d (seed %d) is unsolvable", attempt, seed)

        logger.info(
            "No solvable deal in %d attempts for seed %d, scrambling instead",
            max_attempts, level_seed,
        )
        return GameGenerator.reverse_scramble(color_count, bottle_count, level_seed)

    @staticmethod
    def generate_for_level(level: int) -> Puzzle:
        """Return the puzzle for *level*, seeded by the level number."""
        config = level_config(level)
        return GameGenerator.generate(config.colors, config.bottles, level)

    # -- construction ---------------------------------------------------------

    @staticmethod
    def solved(color_count: int, bottle_count: int) -> Puzzle:
        """Return the goal state: one full bottle per color, then empty bottles."""
        GameGenerator._validate(color_count, bottle_count)
        bottles = [
            Bottle(id=f"bottle-{i}", layers=(color,) * CAPACITY)
            for i, color in enumerate(COLOR_NAMES[:color_count])
        ]
        bottles.extend(
            Bottle.empty(f"bottle-{i}") for i in range(color_count, bottle_count)
        )
        return Puzzle(tuple(bottles))

    @staticmethod
    def random_puzzle(color_count: int, bottle_count: int, seed: int) -> Puzzle:
        """Deal *color_count* shuffled colors into bottles, then shuffle the bottles."""
        rng = SeededRandom(seed)
        colors = rng.shuffle(COLOR_NAMES)[:color_count]
        layers = rng.shuffle([c for c in colors for _ in range(CAPACITY)])

        bottles = [
            Bottle(id=f"bottle-{i}", layers=tuple(layers[i * CAPACITY : (i + 1) * CAPACITY]))
            for i in range(color_count)
        ]
        bottles.extend(
            Bottle.empty(f"bottle-{i}") for i in range(color_count, bottle_count)
        )
        return Puzzle(tuple(rng.shuffle(bottles)))

    @staticmethod
    def reverse_scramble(color_count: int, bottle_count: int, level_seed: int) -> Puzzle:
        """Scramble the solved state by undoing random legal pours.

        Every accepted step is checked by pouring forward again, so the
        result can always be poured back into the goal state.
        """
        rng = SeededRandom(level_seed)
        puzzle = GameGenerator.solved(color_count, bottle_count)
        target = max(1, min(SCRAMBLE_MAX_MOVES, SCRAMBLE_BASE_MOVES + level_seed // 2))

        applied = 0
        for _ in range(target * SCRAMBLE_PROPOSALS_PER_MOVE):
            if applied == target:
                break
            source = rng.randrange(len(puzzle))
            dest = rng.randrange(len(puzzle))
            previous = GameGenerator._unpour(puzzle, source, dest, rng=rng)
            if previous is None or previous.is_solved():
                continue
            puzzle = previous
            applied += 1

        if applied == 0:
            puzzle = GameGenerator._first_split(puzzle)
            applied = 1

        logger.debug("Scrambled %d of %d target moves", applied, target)
        return Puzzle(tuple(rng.shuffle(puzzle.bottles))).with_sequential_ids()

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _validate(color_count: int, bottle_count: int) -> None:
        if not 1 <= color_count <= len(COLOR_NAMES):
            raise ValueError(
                f"color_count must be between 1 and {len(COLOR_NAMES)}, "
                f"got {color_count}."
            )
        if bottle_count <= color_count:
            raise ValueError(
                f"bottle_count ({bottle_count}) must exceed color_count "
                f"({color_count}) to leave an empty bottle."
            )

    @staticmethod
    def _first_split(puzzle: Puzzle) -> Puzzle:
        """Undo a one-layer pour from a complete bottle into an empty one.

        The goal state always has such a step since it keeps an empty bottle.
        """
        for into in range(len(puzzle)):
            for source in range(len(puzzle)):
                previous = GameGenerator._unpour(puzzle, into, source, amount=1)
                if previous is not None and not previous.is_solved():
                    return previous
        raise ValueError("Puzzle has no reversible pour to scramble with.")

    @staticmethod
    def _unpour(
        puzzle: Puzzle,
        poured_into: int,
        poured_from: int,
        rng: SeededRandom | None = None,
        amount: int = 1,
    ) -> Puzzle | None:
        """Return a state from which pouring *poured_from* into *poured_into*
        yields *puzzle*, or ``None`` if the proposed step is not such a state.

        With *rng* the amount moved is drawn at random, otherwise *amount*
        layers are moved.
        """
        if poured_into == poured_from:
            return None
        top = puzzle[poured_into].top_info()
        room = puzzle[poured_from].empty_count()
        if top is None or room == 0:
            return None

        if rng is not None:
            amount = 1 + rng.randrange(min(top.count, room))
        elif amount > min(top.count, room):
            return None

        into_layers = list(puzzle[poured_into].layers)
        for i in range(top.top_index, top.top_index - amount, -1):
            into_layers[i] = None
        from_layers = list(puzzle[poured_from].layers)
        first_free = from_layers.index(None)
        for i in range(first_free, first_free + amount):
            from_layers[i] = top.color

        bottles = list(puzzle.bottles)
        bottles[poured_into] = Bottle(id=puzzle[poured_into].id, layers=tuple(into_layers))
        bottles[poured_from] = Bottle(id=puzzle[poured_from].id, layers=tuple(from_layers))
        previous = Puzzle(tuple(bottles))

        if previous.pour(poured_from, poured_into) != puzzle:
            return None
        return previous

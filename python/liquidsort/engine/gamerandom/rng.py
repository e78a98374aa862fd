"""Deterministic random stream used by level generation.

Levels are never stored, only regenerated from their number, so the
recurrence below is fixed rather than delegated to :mod:`random`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2**31


def next_random(state: int) -> tuple[float, int]:
    """Advance *state* once and return ``(value, new_state)``, value in [0, 1)."""
    new_state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
    return new_state / LCG_MODULUS, new_state


def shuffle(sequence: Sequence[T], state: int) -> tuple[list[T], int]:
    """Fisher-Yates shuffle of a copy of *sequence*.

    Consumes one draw per position from the last index down to 1 and
    returns the shuffled list together with the advanced state.
    """
    result = list(sequence)
    for i in range(len(result) - 1, 0, -1):
        value, state = next_random(state)
        j = int(value * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result, state


@dataclass
class SeededRandom:
    """Stateful wrapper around :func:`next_random`."""

    seed: int
    state: int = field(init=False)

    def __post_init__(self) -> None:
        self.state = self.seed % LCG_MODULUS

    def random(self) -> float:
        value, self.state = next_random(self.state)
        return value

    def randrange(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.randrange(len(items))]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        result, self.state = shuffle(items, self.state)
        return result

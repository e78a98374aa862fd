"""Bottle and puzzle models for the liquid sort game.

Both types are immutable: every transition returns a new :class:`Puzzle`
and shares the bottles it did not touch.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

CAPACITY = 4

Color = str
Layers = tuple[Optional[Color], ...]


class PourRejection(StrEnum):
    """Why a pour is not allowed, in the order the rules are checked."""

    SAME_BOTTLE = "same_bottle"
    EMPTY_SOURCE = "empty_source"
    FULL = "full"
    COLOR_MISMATCH = "color_mismatch"
    NO_OP = "no_op"


@dataclass(frozen=True)
class TopInfo:
    color: Color
    count: int
    top_index: int


@dataclass(frozen=True)
class Move:
    """A pour between two bottle positions."""

    source: int
    target: int


@dataclass(frozen=True)
class Bottle:
    """A fixed-size container. ``layers[0]`` is the bottom, ``None`` is empty."""

    id: str
    layers: Layers

    def __post_init__(self) -> None:
        layers = tuple(self.layers)
        if len(layers) != CAPACITY:
            raise ValueError(
                f"Expected {CAPACITY} layers for bottle {self.id!r}, "
                f"got {len(layers)}."
            )
        object.__setattr__(self, "layers", layers)

    @classmethod
    def empty(cls, bottle_id: str) -> Bottle:
        return cls(id=bottle_id, layers=(None,) * CAPACITY)

    # -- queries --------------------------------------------------------------

    def top_info(self) -> TopInfo | None:
        """Return the top color, its contiguous run length and slot index."""
        for top in range(CAPACITY - 1, -1, -1):
            color = self.layers[top]
            if color is not None:
                count = 0
                for i in range(top, -1, -1):
                    if self.layers[i] != color:
                        break
                    count += 1
                return TopInfo(color=color, count=count, top_index=top)
        return None

    def empty_count(self) -> int:
        return sum(1 for layer in self.layers if layer is None)

    @property
    def is_empty(self) -> bool:
        return self.empty_count() == CAPACITY

    def is_uniform(self) -> bool:
        """True if every non-empty layer holds the same color."""
        colors = {layer for layer in self.layers if layer is not None}
        return len(colors) <= 1

    def is_complete(self) -> bool:
        first = self.layers[0]
        return first is not None and all(layer == first for layer in self.layers)


@dataclass(frozen=True)
class Puzzle:
    """An ordered set of bottles."""

    bottles: tuple[Bottle, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "bottles", tuple(self.bottles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_layers(cls, layers: Iterable[Sequence[Optional[Color]]]) -> Puzzle:
        """Build a puzzle with ids ``bottle-0``, ``bottle-1``, ...

        Example::

            Puzzle.from_layers([["red", "blue", "red", "blue"], [None] * 4])
        """
        return cls(
            tuple(
                Bottle(id=f"bottle-{i}", layers=tuple(row))
                for i, row in enumerate(layers)
            )
        )

    def with_sequential_ids(self) -> Puzzle:
        return Puzzle(
            tuple(
                Bottle(id=f"bottle-{i}", layers=b.layers)
                for i, b in enumerate(self.bottles)
            )
        )

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.bottles)

    def __iter__(self):
        return iter(self.bottles)

    def __getitem__(self, index: int) -> Bottle:
        return self.bottles[index]

    def index_of(self, bottle_id: str) -> int | None:
        for i, bottle in enumerate(self.bottles):
            if bottle.id == bottle_id:
                return i
        return None

    def layers(self) -> list[list[Optional[Color]]]:
        return [list(b.layers) for b in self.bottles]

    def is_solved(self) -> bool:
        return all(b.is_empty or b.is_complete() for b in self.bottles)

    def color_counts(self) -> Counter[Color]:
        return Counter(
            layer for b in self.bottles for layer in b.layers if layer is not None
        )

    def state_key(self) -> tuple[Layers, ...]:
        """Canonical key that ignores bottle order."""
        return tuple(sorted(self.bottles_key(), key=_layers_sort_key))

    def bottles_key(self) -> tuple[Layers, ...]:
        return tuple(b.layers for b in self.bottles)

    # -- pouring --------------------------------------------------------------

    def check_pour(self, source: int, target: int) -> PourRejection | None:
        """Return the first rule a pour breaks, or ``None`` if it is legal."""
        if source == target:
            return PourRejection.SAME_BOTTLE
        src = self.bottles[source]
        dst = self.bottles[target]
        top = src.top_info()
        if top is None:
            return PourRejection.EMPTY_SOURCE
        room = dst.empty_count()
        if room == 0:
            return PourRejection.FULL
        dst_top = dst.top_info()
        if dst_top is not None and dst_top.color != top.color:
            return PourRejection.COLOR_MISMATCH
        # Moving a single-color bottle into an empty one changes nothing.
        if room == CAPACITY and src.is_uniform():
            return PourRejection.NO_OP
        return None

    def can_pour(self, source: int, target: int) -> bool:
        return self.check_pour(source, target) is None

    def pour_amount(self, source: int, target: int) -> int:
        """Layers a legal pour would move; 0 when the pour is illegal."""
        if not self.can_pour(source, target):
            return 0
        top = self.bottles[source].top_info()
        assert top is not None
        return min(top.count, self.bottles[target].empty_count())

    def pour(self, source: int, target: int) -> Puzzle | None:
        """Return the puzzle after pouring *source* into *target*, or ``None``."""
        amount = self.pour_amount(source, target)
        if amount == 0:
            return None

        src = self.bottles[source]
        dst = self.bottles[target]
        top = src.top_info()
        assert top is not None

        src_layers = list(src.layers)
        for i in range(top.top_index, top.top_index - amount, -1):
            src_layers[i] = None

        dst_layers = list(dst.layers)
        added = 0
        for i in range(CAPACITY):
            if added == amount:
                break
            if dst_layers[i] is None:
                dst_layers[i] = top.color
                added += 1

        bottles = list(self.bottles)
        bottles[source] = Bottle(id=src.id, layers=tuple(src_layers))
        bottles[target] = Bottle(id=dst.id, layers=tuple(dst_layers))
        return Puzzle(tuple(bottles))

    def legal_moves(self) -> list[Move]:
        count = len(self.bottles)
        return [
            Move(source=i, target=j)
            for i in range(count)
            for j in range(count)
            if self.can_pour(i, j)
        ]


def _layers_sort_key(layers: Layers) -> tuple[str, ...]:
    return tuple("" if layer is None else layer for layer in layers)


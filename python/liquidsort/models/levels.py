"""Difficulty curve: level number -> colors and bottles."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

MAX_LEVEL = 100


@dataclass(frozen=True)
class LevelConfig:
    colors: int
    bottles: int

    @property
    def empty_bottles(self) -> int:
        return self.bottles - self.colors


# (last level of the band, colors, bottles)
_BANDS: tuple[tuple[int, int, int], ...] = (
    (5, 2, 3),
    (10, 2, 4),
    (20, 3, 4),
    (35, 3, 5),
    (50, 4, 5),
    (70, 4, 6),
    (85, 5, 6),
    (MAX_LEVEL, 5, 7),
)


def _build() -> dict[int, LevelConfig]:
    table: dict[int, LevelConfig] = {}
    level = 1
    for last, colors, bottles in _BANDS:
        while level <= last:
            table[level] = LevelConfig(colors=colors, bottles=bottles)
            level += 1
    return table


LEVELS = MappingProxyType(_build())


def clamp_level(level: int) -> int:
    return max(1, min(level, MAX_LEVEL))


def level_config(level: int) -> LevelConfig:
    """Return the configuration for *level*, clamped to the defined range."""
    return LEVELS[clamp_level(level)]

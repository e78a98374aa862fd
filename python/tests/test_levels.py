"""Difficulty table tests."""

from __future__ import annotations

import pytest

from liquidsort.models.levels import LEVELS, MAX_LEVEL, LevelConfig, level_config


def test_every_level_is_defined() -> None:
    assert sorted(LEVELS) == list(range(1, MAX_LEVEL + 1))


def test_difficulty_never_decreases() -> None:
    for level in range(2, MAX_LEVEL + 1):
        prev, cur = LEVELS[level - 1], LEVELS[level]
        assert cur.colors >= prev.colors
        assert cur.bottles >= prev.bottles


def test_every_level_has_an_empty_bottle() -> None:
    assert all(config.empty_bottles >= 1 for config in LEVELS.values())


@pytest.mark.parametrize(
    ("level", "colors", "bottles"),
    [(1, 2, 3), (5, 2, 3), (6, 2, 4), (20, 3, 4), (21, 3, 5), (50, 4, 5),
     (51, 4, 6), (85, 5, 6), (86, 5, 7), (100, 5, 7)],
)
def test_band_boundaries(level: int, colors: int, bottles: int) -> None:
    assert level_config(level) == LevelConfig(colors=colors, bottles=bottles)


def test_out_of_range_levels_are_clamped() -> None:
    assert level_config(0) == LEVELS[1]
    assert level_config(-3) == LEVELS[1]
    assert level_config(500) == LEVELS[MAX_LEVEL]


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        LEVELS[1] = LevelConfig(colors=7, bottles=9)  # type: ignore[index]

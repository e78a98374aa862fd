from liquidsort.models.levels import LEVELS, MAX_LEVEL, LevelConfig, level_config
from liquidsort.models.palette import COLOR_NAMES, COLORS
from liquidsort.models.progress import Progress, ProgressStore
from liquidsort.models.puzzle import (
    CAPACITY,
    Bottle,
    Move,
    PourRejection,
    Puzzle,
    TopInfo,
)

__all__ = [
    "CAPACITY",
    "COLORS",
    "COLOR_NAMES",
    "LEVELS",
    "MAX_LEVEL",
    "Bottle",
    "LevelConfig",
    "Move",
    "PourRejection",
    "Progress",
    "ProgressStore",
    "Puzzle",
    "TopInfo",
    "level_config",
]

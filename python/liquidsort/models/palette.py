"""Color palette.

The engine treats colors as opaque string tokens; the hex values are
only used by whatever draws the bottles.
"""

COLORS: dict[str, str] = {
    "red": "#E63946",
    "blue": "#00B4D8",
    "yellow": "#FFCE03",
    "purple": "#9B5DE5",
    "green": "#06D6A0",
    "orange": "#FF6B35",
    "pink": "#FF69B4",
}

COLOR_NAMES: tuple[str, ...] = tuple(COLORS)


def hex_for(color: str) -> str:
    return COLORS[color]

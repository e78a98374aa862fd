"""Saved progress: highest unlocked level and the sound toggle."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Progress:
    highest_unlocked: int = 1
    sound_enabled: bool = True


class ProgressStore:
    """Loads and saves :class:`Progress` as a small JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    # -- persistence ----------------------------------------------------------

    def load(self) -> Progress:
        if not self.filepath.exists():
            logger.debug("No progress file at %s, using defaults", self.filepath)
            return Progress()

        try:
            data = json.loads(self.filepath.read_text())
            progress = Progress(
                highest_unlocked=max(1, int(data.get("highest_unlocked", 1))),
                sound_enabled=bool(data.get("sound_enabled", True)),
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load progress from %s: %s", self.filepath, e)
            return Progress()

        logger.debug("Progress loaded: %s", progress)
        return progress

    def save(self, progress: Progress) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(asdict(progress), indent=2) + "\n")

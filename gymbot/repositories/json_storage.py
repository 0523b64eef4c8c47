"""
JSON file persistence for the exercise collection.

The whole collection lives in a single `exercises.json` array inside the
configured data directory. Every call reads or rewrites the full file.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import stat
import uuid

from pydantic import ValidationError

from gymbot.domain.exercises import Exercise, dump_exercises, parse_exercises

logger = logging.getLogger(__name__)

DATA_FILENAME = "exercises.json"


class StorageError(OSError):
    """Raised when the exercise file cannot be read, parsed or written."""


class JSONExerciseStorage:
    """Load/save the exercise list to `<data_dir>/exercises.json`."""

    def __init__(self, data_dir: str | os.PathLike[str], filename: str = DATA_FILENAME) -> None:
        self.data_dir = Path(data_dir)
        self.path = self.data_dir / filename

    def load(self) -> list[Exercise]:
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Failed to read %s: %s", self.path, exc)
            raise StorageError(f"Failed to load exercises from {self.path}") from exc
        if not isinstance(raw, list):
            raise StorageError(f"{self.path} must contain a JSON array")
        try:
            exercises = parse_exercises(raw)
        except ValidationError as exc:
            logger.error("Invalid exercise record in %s: %s", self.path, exc)
            raise StorageError(f"Invalid exercise data in {self.path}") from exc
        logger.debug("Loaded %d exercises from %s", len(exercises), self.path)
        return exercises

    def save(self, exercises: list[Exercise]) -> None:
        payload = json.dumps(dump_exercises(exercises), ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            # plain open() so a new file gets the umask-derived mode
            tmp_name = str(self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex}.tmp"))
            with open(tmp_name, "x", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            if self.path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except OSError as exc:
            logger.exception("Failed to write %s", self.path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to save exercises to {self.path}") from exc
        logger.debug("Saved %d exercises to %s", len(exercises), self.path)

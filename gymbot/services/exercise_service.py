"""Exercise collection use cases (queries, grouping, CRUD)."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional

from gymbot.domain.exercises import Exercise, same_category
from gymbot.repositories.json_storage import JSONExerciseStorage

logger = logging.getLogger(__name__)


class ExerciseService:
    """
    Every call loads the full collection, works on it in memory and, for
    mutations, writes the full collection back.

    Mutations are serialized with a process-wide lock so two concurrent writers
    cannot lose each other's changes. Readers take no lock.
    """

    def __init__(self, storage: JSONExerciseStorage) -> None:
        self.storage = storage
        self._write_lock = threading.Lock()

    # -------------------------- queries --------------------------
    def list_exercises(self) -> list[Exercise]:
        return self.storage.load()

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        for exercise in self.storage.load():
            if exercise.id == exercise_id:
                return exercise
        return None

    def get_by_week(self, week_number: int) -> list[Exercise]:
        return [ex for ex in self.storage.load() if ex.week_number is not None and ex.week_number == week_number]

    def get_by_category(self, category: str) -> list[Exercise]:
        return [ex for ex in self.storage.load() if same_category(ex.category, category)]

    def group_by_category(self) -> dict[Optional[str], list[Exercise]]:
        groups: dict[Optional[str], list[Exercise]] = {}
        for exercise in self.storage.load():
            groups.setdefault(exercise.category, []).append(exercise)
        return groups

    def group_by_week(self) -> dict[int, list[Exercise]]:
        groups: dict[int, list[Exercise]] = {}
        for exercise in self.storage.load():
            if exercise.week_number is None:
                continue
            groups.setdefault(exercise.week_number, []).append(exercise)
        return groups

    # -------------------------- mutations --------------------------
    def create(self, exercise: Exercise) -> Exercise:
        created = exercise.with_id(str(uuid.uuid4()))
        with self._write_lock:
            exercises = self.storage.load()
            exercises.append(created)
            self.storage.save(exercises)
        logger.info("Created exercise %s (%s)", created.id, created.name)
        return created

    def update(self, exercise_id: str, new_data: Exercise) -> Optional[Exercise]:
        with self._write_lock:
            exercises = self.storage.load()
            for idx, current in enumerate(exercises):
                if current.id == exercise_id:
                    updated = new_data.with_id(exercise_id)
                    exercises[idx] = updated
                    self.storage.save(exercises)
                    break
            else:
                logger.info("Update skipped, exercise %s not found", exercise_id)
                return None
        logger.info("Updated exercise %s", exercise_id)
        return updated

    def delete(self, exercise_id: str) -> bool:
        with self._write_lock:
            exercises = self.storage.load()
            remaining = [ex for ex in exercises if ex.id != exercise_id]
            removed = len(remaining) != len(exercises)
            if removed:
                self.storage.save(remaining)
        if removed:
            logger.info("Deleted exercise %s", exercise_id)
        return removed

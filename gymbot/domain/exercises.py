"""Domain models for exercises and training weeks."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict

CATEGORY_PUSH = "PUSH"
CATEGORY_PULL = "PULL"
CATEGORY_LEG = "LEG"
KNOWN_CATEGORIES = (CATEGORY_PUSH, CATEGORY_PULL, CATEGORY_LEG)

LEGACY_WEEK_FIELD = "weekNumber"


class Week(BaseModel):
    """Metadata about a training week. Dates are opaque strings."""

    model_config = ConfigDict(extra="ignore")

    weekNumber: int
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    goal: Optional[str] = None


class Exercise(BaseModel):
    """One workout movement entry."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    maxReps: Optional[int] = None
    week: Optional[Week] = None
    category: Optional[str] = None

    @property
    def week_number(self) -> Optional[int]:
        return self.week.weekNumber if self.week else None

    def with_id(self, exercise_id: str) -> "Exercise":
        return self.model_copy(update={"id": exercise_id})


def normalize_legacy_week(raw: Mapping[str, Any]) -> dict:
    """
    Convert the old flat `weekNumber` field into an embedded `week` object.

    The embedded object wins when both are present; the flat key is always dropped.
    """
    data = dict(raw)
    legacy = data.pop(LEGACY_WEEK_FIELD, None)
    if legacy is not None and data.get("week") is None:
        data["week"] = {"weekNumber": legacy}
    return data


def parse_exercise(raw: Any) -> Exercise:
    """Normalize and validate one raw record. Raises pydantic.ValidationError."""
    if isinstance(raw, Mapping):
        raw = normalize_legacy_week(raw)
    return Exercise.model_validate(raw)


def parse_exercises(items: Iterable[Any]) -> list[Exercise]:
    return [parse_exercise(item) for item in items]


def dump_exercises(exercises: Iterable[Exercise]) -> list[dict]:
    return [exercise.model_dump(mode="json") for exercise in exercises]


def same_category(value: Optional[str], category: Optional[str]) -> bool:
    """Case-insensitive category comparison; a missing category never matches."""
    if value is None or category is None:
        return False
    return value.lower() == category.lower()

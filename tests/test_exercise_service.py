from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Make the gymbot package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gymbot.domain.exercises import Exercise, Week  # noqa: E402
from gymbot.repositories.json_storage import JSONExerciseStorage  # noqa: E402
from gymbot.services.exercise_service import ExerciseService  # noqa: E402


@pytest.fixture()
def service(tmp_path):
    return ExerciseService(JSONExerciseStorage(tmp_path / "data"))


@pytest.fixture()
def seeded(service):
    service.create(Exercise(name="Bench", maxReps=8, category="PUSH", week=Week(weekNumber=1)))
    service.create(Exercise(name="Row", maxReps=10, category="PULL", week=Week(weekNumber=1)))
    service.create(Exercise(name="Squat", maxReps=5, category="LEG", week=Week(weekNumber=2)))
    service.create(Exercise(name="Dips", category="push"))
    service.create(Exercise(name="Mystery"))
    return service


def test_empty_store_scenario(service):
    assert service.list_exercises() == []

    created = service.create(Exercise(name="Squat", maxReps=10, category="LEG"))
    assert created.id

    assert len(service.list_exercises()) == 1
    assert service.get_by_category("leg") == [created]


def test_created_record_is_retrievable(service):
    created = service.create(Exercise(name="Press", maxReps=6, category="PUSH"))
    assert service.get_by_id(created.id) == created


def test_create_ignores_incoming_id(service):
    created = service.create(Exercise(id="client-chosen", name="Curl"))
    assert created.id != "client-chosen"
    assert service.get_by_id("client-chosen") is None


def test_create_assigns_unique_ids(service):
    ids = {service.create(Exercise(name=f"ex{i}")).id for i in range(20)}
    assert len(ids) == 20


def test_list_preserves_file_order(seeded):
    assert [ex.name for ex in seeded.list_exercises()] == ["Bench", "Row", "Squat", "Dips", "Mystery"]


def test_get_by_id_missing_returns_none(seeded):
    assert seeded.get_by_id("nope") is None


def test_get_by_week_excludes_exercises_without_week(seeded):
    assert [ex.name for ex in seeded.get_by_week(1)] == ["Bench", "Row"]
    assert [ex.name for ex in seeded.get_by_week(2)] == ["Squat"]
    assert seeded.get_by_week(9) == []


def test_get_by_category_matches_case_insensitively(seeded):
    assert [ex.name for ex in seeded.get_by_category("PUSH")] == ["Bench", "Dips"]
    assert [ex.name for ex in seeded.get_by_category("Pull")] == ["Row"]
    assert seeded.get_by_category("CORE") == []


def test_group_by_category_partitions_collection(seeded):
    groups = seeded.group_by_category()
    assert set(groups) == {"PUSH", "PULL", "LEG", "push", None}
    flattened = [ex for items in groups.values() for ex in items]
    assert sorted(ex.id for ex in flattened) == sorted(ex.id for ex in seeded.list_exercises())
    for category, items in groups.items():
        assert all(ex.category == category for ex in items)


def test_group_by_week_skips_weekless(seeded):
    groups = seeded.group_by_week()
    assert set(groups) == {1, 2}
    assert [ex.name for ex in groups[1]] == ["Bench", "Row"]


def test_update_replaces_record_wholesale(seeded):
    target = seeded.get_by_week(2)[0]
    updated = seeded.update(target.id, Exercise(id="ignored", name="Front Squat", category="LEG"))
    assert updated is not None
    assert updated.id == target.id
    assert updated.maxReps is None
    assert updated.week is None
    assert seeded.get_by_id(target.id) == updated
    assert [ex.name for ex in seeded.list_exercises()][2] == "Front Squat"


def test_update_missing_leaves_file_untouched(seeded):
    before = seeded.storage.path.read_text(encoding="utf-8")
    assert seeded.update("missing", Exercise(name="Ghost")) is None
    assert seeded.storage.path.read_text(encoding="utf-8") == before


def test_delete_removes_record(seeded):
    target = seeded.list_exercises()[0]
    assert seeded.delete(target.id) is True
    assert seeded.get_by_id(target.id) is None
    assert len(seeded.list_exercises()) == 4


def test_delete_missing_is_noop(service):
    assert service.delete("missing") is False
    assert not service.storage.path.exists()


def test_concurrent_creates_do_not_lose_updates(service):
    threads = [
        threading.Thread(target=service.create, args=(Exercise(name=f"t{i}"),))
        for i in range(10)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(service.list_exercises()) == 10

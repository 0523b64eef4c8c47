#!/usr/bin/env python3
"""
Register a new exercise directly in the JSON data file.

Usage:
  python scripts/add_exercise.py --name Squat [--max-reps 10] [--category LEG] [--week 3] [--data-dir ./data]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the gymbot package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gymbot.core.config import get_settings
from gymbot.core.log import configure_logging
from gymbot.domain.exercises import KNOWN_CATEGORIES, Exercise, Week
from gymbot.repositories.json_storage import JSONExerciseStorage
from gymbot.services.exercise_service import ExerciseService


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Add an exercise to exercises.json")
    ap.add_argument("--name", required=True, help="Exercise name (e.g. Squat)")
    ap.add_argument("--max-reps", type=int, help="Max reps reached")
    ap.add_argument("--category", help=f"Category, conventionally one of {', '.join(KNOWN_CATEGORIES)}")
    ap.add_argument("--week", type=int, help="Training week number")
    ap.add_argument("--data-dir", help="Directory holding exercises.json (default: DATA_STORAGE_PATH)")
    return ap


def main(argv: list[str] | None = None) -> Exercise:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Exercise name must not be empty")
    category = (args.category or "").strip() or None
    if category and category.upper() not in KNOWN_CATEGORIES:
        sys.stderr.write(f"Warning: unusual category '{category}'\n")

    data_dir = Path(args.data_dir) if args.data_dir else settings.data_storage_path
    service = ExerciseService(JSONExerciseStorage(data_dir))
    week = Week(weekNumber=args.week) if args.week is not None else None
    created = service.create(Exercise(name=name, maxReps=args.max_reps, week=week, category=category))
    print("OK: exercise added")
    print(f"  id: {created.id}")
    print(f"  file: {service.storage.path}")
    return created


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)

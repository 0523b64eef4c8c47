#!/usr/bin/env python3
"""One-off migration: rewrite legacy flat `weekNumber` records as embedded `week` objects."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Make the gymbot package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gymbot.core.config import get_settings
from gymbot.core.log import configure_logging
from gymbot.domain.exercises import LEGACY_WEEK_FIELD
from gymbot.repositories.json_storage import JSONExerciseStorage


def count_legacy_records(path: Path) -> int:
    if not path.exists():
        return 0
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        return 0
    return sum(1 for item in raw if isinstance(item, dict) and LEGACY_WEEK_FIELD in item)


def migrate(data_dir: Path, dry_run: bool = False) -> int:
    storage = JSONExerciseStorage(data_dir)
    if not storage.path.exists():
        raise SystemExit(f"File not found: {storage.path}")
    exercises = storage.load()
    legacy = count_legacy_records(storage.path)
    if legacy and not dry_run:
        storage.save(exercises)
    return legacy


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Normalize legacy weekNumber fields in exercises.json")
    ap.add_argument("--data-dir", help="Directory holding exercises.json (default: DATA_STORAGE_PATH)")
    ap.add_argument("--dry-run", action="store_true", help="Only report how many records would change")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    data_dir = Path(args.data_dir) if args.data_dir else settings.data_storage_path
    legacy = migrate(data_dir, dry_run=args.dry_run)
    verb = "would be rewritten" if args.dry_run else "rewritten"
    print(f"OK: {legacy} legacy record(s) {verb}")
    return legacy


if __name__ == "__main__":
    main()

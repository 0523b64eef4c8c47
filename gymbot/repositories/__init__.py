"""
Persistence adapters.

Today the exercises live in a single JSON file; services depend on the storage
accessor's load/save pair rather than touching the file themselves.
"""

from .json_storage import DATA_FILENAME, JSONExerciseStorage, StorageError

__all__ = ["DATA_FILENAME", "JSONExerciseStorage", "StorageError"]

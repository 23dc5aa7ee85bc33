"""
Persistent key/value blob storage.

The timetable is stored as one serialized blob under a fixed key, the same
way a browser keeps it in localStorage. On disk this is a single JSON file:

    {"event-timetable-data": "<serialized TimetableData>"}

Design rationale:
- the store layer only needs get/set of whole blobs
- keeping the blob as a string means the file can hold other keys later
  without touching the timetable encoding
- errors are raised as StorageError; deciding whether they are fatal is the
  caller's job (the schedule store never lets them escape)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

STORAGE_KEY = "event-timetable-data"


class StorageError(Exception):
    """Reading or writing the blob file failed."""


def _default_store_path() -> Path:
    """
    Return the default path of timetable.json inside the package.

    Using a function instead of a constant makes testing easier,
    because tests can override the path.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "timetable.json"


class BlobStore:
    """
    JSON-file backed key/value store. Every set() rewrites the whole file.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else _default_store_path()

    def _read_all(self) -> Dict[str, str]:
        # First run: file does not exist yet -> empty store
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self.path}: top level is not an object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Value under {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            entries = self._read_all()
        except StorageError:
            # a broken file is replaced, not merged
            entries = {}
        entries[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(entries, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e


class MemoryBlobStore(BlobStore):
    """
    Same interface, kept in a dict. Used for tests and throwaway sessions.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None) -> None:
        self.entries: Dict[str, str] = dict(entries or {})
        self.writes = 0

    def _read_all(self) -> Dict[str, str]:
        return dict(self.entries)

    def set(self, key: str, value: str) -> None:
        self.entries[key] = value
        self.writes += 1

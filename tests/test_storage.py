"""
Unit tests for the JSON blob file.

Storage contract:
- Missing file -> no value
- One JSON object on disk, blobs stored as strings under their key
- Unreadable content -> StorageError (the schedule store decides what to do)
"""

import json
import tempfile
import unittest
from pathlib import Path

from timetable.storage import STORAGE_KEY, BlobStore, MemoryBlobStore, StorageError


class TestBlobStore(unittest.TestCase):
    def test_get_missing_file_returns_none(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            store = BlobStore(Path(d) / "missing.json")
            self.assertIsNone(store.get(STORAGE_KEY))

    def test_set_and_get_roundtrip(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "nested" / "timetable.json"
            store = BlobStore(p)
            store.set(STORAGE_KEY, '{"a": 1}')
            store.set("other", "x")

            self.assertEqual(store.get(STORAGE_KEY), '{"a": 1}')
            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertEqual(data, {STORAGE_KEY: '{"a": 1}', "other": "x"})

    def test_corrupt_file_raises_storage_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "timetable.json"
            p.write_text("{broken", encoding="utf-8")
            with self.assertRaises(StorageError):
                BlobStore(p).get(STORAGE_KEY)

    def test_non_object_file_raises_storage_error(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "timetable.json"
            p.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(StorageError):
                BlobStore(p).get(STORAGE_KEY)

    def test_set_replaces_corrupt_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "timetable.json"
            p.write_text("{broken", encoding="utf-8")
            store = BlobStore(p)
            store.set(STORAGE_KEY, "fresh")
            self.assertEqual(store.get(STORAGE_KEY), "fresh")


class TestMemoryBlobStore(unittest.TestCase):
    def test_counts_writes(self) -> None:
        store = MemoryBlobStore()
        self.assertIsNone(store.get(STORAGE_KEY))
        store.set(STORAGE_KEY, "one")
        store.set(STORAGE_KEY, "two")
        self.assertEqual(store.get(STORAGE_KEY), "two")
        self.assertEqual(store.writes, 2)


if __name__ == "__main__":
    unittest.main()

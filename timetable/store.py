"""
Schedule store: owns the session's TimetableData root.

Two layers:
- module-level functions build a new root from an old one (pure, no I/O)
- ScheduleStore applies them, keeps the result as the session root
  and writes it to the blob store before returning

Lifecycle:

    store = ScheduleStore(BlobStore(path))
    data = store.init()          # load or seed
    data = store.add_event(data, event, data.selected_date)
    store.flush()                # optional, every mutation already persisted

Duplicate ids are not rejected; update and delete act on every event of the
date whose id matches.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from datetime import date
from typing import Callable, List, Optional

from timetable.model import Event, TimetableData, seed_data
from timetable.storage import STORAGE_KEY, BlobStore, StorageError

logger = logging.getLogger(__name__)


def events_for_date(data: TimetableData, day: str) -> List[Event]:
    return list(data.events.get(day, []))


def with_event_added(data: TimetableData, event: Event, day: str) -> TimetableData:
    events = dict(data.events)
    events[day] = [*events.get(day, []), event]
    return replace(data, events=events)


def with_event_updated(data: TimetableData, event_id: str, updated: Event, day: str) -> TimetableData:
    if day not in data.events:
        return data
    events = dict(data.events)
    events[day] = [updated if ev.id == event_id else ev for ev in events[day]]
    return replace(data, events=events)


def with_event_deleted(data: TimetableData, event_id: str, day: str) -> TimetableData:
    if day not in data.events:
        return data
    events = dict(data.events)
    events[day] = [ev for ev in events[day] if ev.id != event_id]
    return replace(data, events=events)


def with_selected_date(data: TimetableData, day: str) -> TimetableData:
    return replace(data, selected_date=day)


def with_venue_added(data: TimetableData, venue: str) -> TimetableData:
    return replace(data, venues=[*data.venues, venue])


def encode(data: TimetableData) -> str:
    return json.dumps(data.to_dict(), ensure_ascii=False)


def decode(blob: str) -> TimetableData:
    """
    Raises ValueError (json.JSONDecodeError included) for unusable blobs.
    """
    return TimetableData.from_dict(json.loads(blob))


class ScheduleStore:
    """
    Explicit store object passed to whichever layer needs it (CLI, interactive UI).
    """

    def __init__(
        self,
        blob_store: BlobStore,
        key: str = STORAGE_KEY,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.blob_store = blob_store
        self.key = key
        self._today = today
        self._data: Optional[TimetableData] = None

    @property
    def data(self) -> TimetableData:
        if self._data is None:
            raise RuntimeError("ScheduleStore.init() has not been called")
        return self._data

    def init(self) -> TimetableData:
        self._data = self.load()
        return self._data

    def flush(self) -> None:
        self.save(self.data)

    def load(self) -> TimetableData:
        """
        Return the persisted root, or seed (and persist) the default dataset.

        Never raises: unreadable or undecodable data is logged and replaced
        by the seed data.
        """
        try:
            blob = self.blob_store.get(self.key)
            if blob is not None:
                return decode(blob)
        except StorageError as e:
            logger.warning("Stored timetable unavailable, using seed data: %s", e)
        except ValueError as e:
            logger.warning("Stored timetable is corrupt, using seed data: %s", e)

        logger.info("Initializing timetable with seed data")
        data = seed_data(self._today())
        self.save(data)
        return data

    def save(self, data: TimetableData) -> None:
        try:
            self.blob_store.set(self.key, encode(data))
        except StorageError as e:
            logger.error("Saving timetable failed: %s", e)

    def _commit(self, data: TimetableData) -> TimetableData:
        self._data = data
        self.save(data)
        return data

    def get_events_for_date(self, data: TimetableData, day: str) -> List[Event]:
        return events_for_date(data, day)

    def add_event(self, data: TimetableData, event: Event, day: str) -> TimetableData:
        return self._commit(with_event_added(data, event, day))

    def update_event(self, data: TimetableData, event_id: str, updated: Event, day: str) -> TimetableData:
        return self._commit(with_event_updated(data, event_id, updated, day))

    def delete_event(self, data: TimetableData, event_id: str, day: str) -> TimetableData:
        return self._commit(with_event_deleted(data, event_id, day))

    def update_selected_date(self, data: TimetableData, day: str) -> TimetableData:
        return self._commit(with_selected_date(data, day))

    def add_venue(self, data: TimetableData, venue: str) -> TimetableData:
        return self._commit(with_venue_added(data, venue))

"""
Central data model definitions used across the project.

This module defines the canonical structure of Event and TimetableData so that:
- the store, the layout engine and the UI layers share the same field names
- the persisted JSON keeps exactly the structural names
  (selectedDate, venues, events, id, title, venue, startTime, endTime)
- decoding rejects malformed blobs instead of half-loading them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from timetable.timeutils import parse_date, time_to_minutes

DEFAULT_VENUES = ["Hall A", "Hall B", "Hall C", "Hall D"]


@dataclass(frozen=True)
class Event:
    """
    One timed event in one venue on one day.

    start_time/end_time are 'HH:MM' (24h, zero-padded).
    The date is not part of the event: it is the key the event is stored under.
    """

    id: str
    title: str
    venue: str
    start_time: str
    end_time: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "venue": self.venue,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "Event":
        if not isinstance(raw, dict):
            raise ValueError(f"Event must be an object, got {type(raw).__name__}")
        values = {}
        for key in ("id", "title", "venue", "startTime", "endTime"):
            value = raw.get(key)
            if not isinstance(value, str):
                raise ValueError(f"Event field {key!r} must be a string")
            values[key] = value
        # rendering needs real times; bad ones make the whole blob unusable
        time_to_minutes(values["startTime"])
        time_to_minutes(values["endTime"])
        return cls(
            id=values["id"],
            title=values["title"],
            venue=values["venue"],
            start_time=values["startTime"],
            end_time=values["endTime"],
        )


@dataclass(frozen=True)
class TimetableData:
    """
    The root object: everything that is persisted.

    events maps 'YYYY-MM-DD' -> events of that day, in insertion order.
    Instances are never modified; every mutation builds a new root.
    """

    selected_date: str
    venues: List[str] = field(default_factory=list)
    events: Dict[str, List[Event]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "selectedDate": self.selected_date,
            "venues": list(self.venues),
            "events": {d: [ev.to_dict() for ev in evs] for d, evs in self.events.items()},
        }

    @classmethod
    def from_dict(cls, raw: Any) -> "TimetableData":
        """
        Decode the structural encoding. Raises ValueError on anything malformed.
        """
        if not isinstance(raw, dict):
            raise ValueError("Timetable data must be an object")

        selected = raw.get("selectedDate")
        if not isinstance(selected, str):
            raise ValueError("selectedDate must be a string")
        parse_date(selected)

        venues_raw = raw.get("venues", [])
        if not isinstance(venues_raw, list) or not all(isinstance(v, str) for v in venues_raw):
            raise ValueError("venues must be a list of strings")

        events_raw = raw.get("events", {})
        if not isinstance(events_raw, dict):
            raise ValueError("events must be an object keyed by date")

        events: Dict[str, List[Event]] = {}
        for day, evs in events_raw.items():
            parse_date(day)
            if not isinstance(evs, list):
                raise ValueError(f"events[{day!r}] must be a list")
            events[day] = [Event.from_dict(e) for e in evs]

        return cls(selected_date=selected, venues=list(venues_raw), events=events)


def seed_data(today: date) -> TimetableData:
    """
    Built-in default dataset used when nothing is persisted yet.
    """
    day = today.isoformat()
    samples = [
        ("1", "Morning Keynote", "Hall A", "09:00", "10:30"),
        ("2", "Workshop: React Basics", "Hall B", "09:00", "11:00"),
        ("3", "Coffee Break", "Hall A", "10:30", "11:00"),
        ("4", "Panel Discussion", "Hall C", "11:00", "12:30"),
        ("5", "Lunch Break", "Hall A", "12:30", "13:30"),
        ("6", "Advanced Next.js", "Hall B", "13:30", "15:00"),
        ("7", "UI/UX Workshop", "Hall D", "14:00", "16:00"),
        ("8", "Networking Session", "Hall C", "15:00", "16:30"),
    ]
    events = [Event(id=i, title=t, venue=v, start_time=s, end_time=e) for i, t, v, s, e in samples]
    return TimetableData(selected_date=day, venues=list(DEFAULT_VENUES), events={day: events})

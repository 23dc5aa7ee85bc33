"""
Input rules for the add/edit event form.

The store trusts its input, so both the CLI and the interactive menu run
EventForm.validate() first and show the message instead of calling the store.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Sequence

from timetable.model import Event
from timetable.timeutils import minutes_to_time, time_to_minutes


def new_event_id() -> str:
    """
    Millisecond timestamp as text. Unique enough for one local user.
    """
    return str(time.time_ns() // 1_000_000)


@dataclass
class EventForm:
    title: str
    venue: str
    start_time: str
    end_time: str

    @classmethod
    def blank(cls, venues: Sequence[str]) -> "EventForm":
        return cls(title="", venue=venues[0] if venues else "", start_time="09:00", end_time="10:00")

    @classmethod
    def from_event(cls, event: Event) -> "EventForm":
        return cls(title=event.title, venue=event.venue, start_time=event.start_time, end_time=event.end_time)

    def validate(self, venues: Optional[Sequence[str]] = None) -> Optional[str]:
        """
        Return a user-facing message for the first problem found, or None.
        """
        fields = (self.title, self.venue, self.start_time, self.end_time)
        if not all(f.strip() for f in fields):
            return "Please fill in all fields"

        try:
            start = time_to_minutes(self.start_time)
            end = time_to_minutes(self.end_time)
        except ValueError:
            return "Times must be in HH:MM format"

        if start >= end:
            return "End time must be after start time"

        if venues is not None and self.venue not in venues:
            return f"Unknown venue: {self.venue}"

        return None

    def to_event(self, event_id: str) -> Event:
        # normalize '9:00' -> '09:00' so stored times stay zero-padded
        return Event(
            id=event_id,
            title=self.title.strip(),
            venue=self.venue,
            start_time=minutes_to_time(time_to_minutes(self.start_time)),
            end_time=minutes_to_time(time_to_minutes(self.end_time)),
        )

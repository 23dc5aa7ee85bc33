"""
Grid layout.

Turns one day's events into rectangles on the venue x time grid:

    top    = offset of the start time (15 min = 20 units)
    height = duration in units, at least MIN_EVENT_HEIGHT
    left   = venue column * column width
    width  = column width minus a small gutter

Events whose venue is not in the venue list are left out (no error).
Overlapping events in one venue are not rearranged, they simply overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from timetable.model import Event
from timetable.timeutils import (
    SLOT_PIXELS,
    SLOTS_PER_DAY,
    calculate_duration,
    duration_to_pixels,
    generate_time_slots,
    time_to_pixel_offset,
)

DEFAULT_COLUMN_WIDTH = 200
MIN_EVENT_HEIGHT = 70
GUTTER = 8
PALETTE_SIZE = 6


@dataclass(frozen=True)
class EventRect:
    event: Event
    column: int
    top: float
    left: float
    width: float
    height: float
    color: int

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class SlotLine:
    time: str
    top: float
    major: bool  # full hour


def color_index(event_id: str, palette_size: int = PALETTE_SIZE) -> int:
    """
    Deterministic color seed for an event id.

    Numeric ids (the usual case: timestamps, seed ids) use the number itself,
    anything else the sum of its code points.
    """
    text = event_id.strip()
    if text.isdecimal():
        return int(text) % palette_size
    return sum(ord(c) for c in text) % palette_size


def layout_events(
    venues: List[str], events: Iterable[Event], column_width: int = DEFAULT_COLUMN_WIDTH
) -> List[EventRect]:
    rects: List[EventRect] = []
    for ev in events:
        if ev.venue not in venues:
            continue
        # duplicate venue names: the first column wins
        column = venues.index(ev.venue)
        height = max(MIN_EVENT_HEIGHT, duration_to_pixels(calculate_duration(ev.start_time, ev.end_time)))
        rects.append(
            EventRect(
                event=ev,
                column=column,
                top=time_to_pixel_offset(ev.start_time),
                left=column * column_width,
                width=column_width - GUTTER,
                height=height,
                color=color_index(ev.id),
            )
        )
    return rects


def grid_height() -> int:
    return SLOTS_PER_DAY * SLOT_PIXELS


def slot_lines() -> List[SlotLine]:
    """
    Background grid lines, one per quarter hour; every 4th one is an hour line.
    """
    return [
        SlotLine(time=t, top=i * SLOT_PIXELS, major=(i % 4 == 0)) for i, t in enumerate(generate_time_slots())
    ]

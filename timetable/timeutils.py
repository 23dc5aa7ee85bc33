"""
Time arithmetic for the timetable grid.

Everything here is a pure function on "HH:MM" strings, minute counts or dates:
- wall-clock strings <-> minutes since midnight
- minutes/durations -> vertical pixel units (15 minutes = 20 units)
- the fixed sequence of quarter-hour slots of a day
- the Monday..Sunday week around a given date

Dates are plain local calendar dates (datetime.date), no timezone handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional

SLOT_MINUTES = 15
SLOT_PIXELS = 20
SLOTS_PER_DAY = 24 * 60 // SLOT_MINUTES

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass(frozen=True)
class WeekDate:
    """
    One tab of the week view.

    day:       short weekday name ("Mon")
    date:      day of month as text ("7")
    full_date: ISO date "YYYY-MM-DD"
    """

    day: str
    date: str
    full_date: str


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight back to zero-padded 'HH:MM'.
    Expects 0 <= minutes < 1440 (no wrap-around).
    """
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def calculate_duration(start: str, end: str) -> int:
    # negative if end is before start; callers keep the ordering
    return time_to_minutes(end) - time_to_minutes(start)


def duration_to_pixels(duration: int) -> float:
    return duration / SLOT_MINUTES * SLOT_PIXELS


def time_to_pixel_offset(hhmm: str) -> float:
    """
    Vertical position of a wall-clock time on the 24h axis (00:00 = 0, 24:00 = 1920).
    """
    return duration_to_pixels(time_to_minutes(hhmm))


def generate_time_slots() -> List[str]:
    """
    All quarter-hour boundaries of a day: '00:00', '00:15', ..., '23:45'.
    """
    return [minutes_to_time(i * SLOT_MINUTES) for i in range(SLOTS_PER_DAY)]


def format_time_12hour(hhmm: str) -> str:
    """
    '13:05' -> '1:05 PM', '00:00' -> '12:00 AM', '12:00' -> '12:00 PM'.
    """
    total = time_to_minutes(hhmm)
    hours, minutes = divmod(total, 60)
    period = "PM" if hours >= 12 else "AM"
    hour12 = hours % 12 or 12
    return f"{hour12}:{minutes:02d} {period}"


def get_week_dates(base_date: Optional[date] = None) -> List[WeekDate]:
    """
    Return the seven days (Monday first) of the week containing base_date.

    The week always starts on Monday, independent of locale.
    base_date defaults to today's local date.
    """
    base = base_date if base_date is not None else date.today()
    monday = base - timedelta(days=base.weekday())

    out: List[WeekDate] = []
    for i in range(7):
        d = monday + timedelta(days=i)
        out.append(WeekDate(day=WEEKDAY_NAMES[d.weekday()], date=str(d.day), full_date=d.isoformat()))
    return out


def parse_date(s: str) -> date:
    """
    Parse 'YYYY-MM-DD'. Raises ValueError for anything else.
    """
    text = s.strip()
    d = datetime.strptime(text, "%Y-%m-%d").date()
    # strptime also accepts "2026-2-9"
    if d.isoformat() != text:
        raise ValueError(f"Invalid date: {s!r}")
    return d

"""
Terminal rendering with rich.

The grid is drawn from the layout engine's rectangles: one table row per
quarter-hour slot, one column per venue. An event starts in the row of its
top offset and spans height / 20 rows, so the terminal view follows the same
geometry as the pixel layout (including the minimum height and overlaps).
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from timetable.layout import DEFAULT_COLUMN_WIDTH, EventRect, layout_events
from timetable.model import Event
from timetable.timeutils import (
    SLOT_MINUTES,
    SLOT_PIXELS,
    SLOTS_PER_DAY,
    WeekDate,
    format_time_12hour,
    generate_time_slots,
    time_to_minutes,
)

# blue, purple, green, orange, pink, teal
PALETTE = ["blue", "magenta", "green", "dark_orange", "deep_pink2", "cyan"]

DEFAULT_WINDOW = ("09:00", "17:00")


def event_line(ev: Event) -> str:
    return f"{ev.start_time}-{ev.end_time} | {ev.title} | @ {ev.venue}"


def time_range_12h(ev: Event) -> str:
    return f"{format_time_12hour(ev.start_time)} - {format_time_12hour(ev.end_time)}"


def _slot_of(hhmm: str) -> int:
    return time_to_minutes(hhmm) // SLOT_MINUTES


def _auto_window(rects: List[EventRect]) -> tuple[int, int]:
    """
    Whole hours covering all rectangles, or the default working day.
    """
    if not rects:
        return _slot_of(DEFAULT_WINDOW[0]), _slot_of(DEFAULT_WINDOW[1])
    first = int(min(r.top for r in rects) // SLOT_PIXELS)
    last = math.ceil(max(r.bottom for r in rects) / SLOT_PIXELS)
    first -= first % 4
    last += -last % 4
    return max(0, first), min(SLOTS_PER_DAY, last)


def render_grid(
    venues: List[str],
    events: Sequence[Event],
    column_width: int = DEFAULT_COLUMN_WIDTH,
    start: Optional[str] = None,
    end: Optional[str] = None,
    title: Optional[str] = None,
    full_day: bool = False,
) -> Table:
    """
    Build the venue x time table for one day.

    start/end ('HH:MM') limit the visible rows to [start, end); without them the
    window is derived from the events. full_day shows all 96 slots.
    """
    rects = layout_events(venues, events, column_width)

    row_from, row_to = (0, SLOTS_PER_DAY) if full_day else _auto_window(rects)
    if start is not None:
        row_from = _slot_of(start)
    if end is not None:
        row_to = _slot_of(end)
    elif start is not None and row_to <= row_from:
        # start after the events: show a default-length window from there
        row_to = row_from + _slot_of(DEFAULT_WINDOW[1]) - _slot_of(DEFAULT_WINDOW[0])
    row_to = max(row_from, min(SLOTS_PER_DAY, row_to))

    cells: List[List[List[Text]]] = [[[] for _ in venues] for _ in range(row_to - row_from)]
    for rect in rects:
        color = PALETTE[rect.color % len(PALETTE)]
        first = int(rect.top // SLOT_PIXELS)
        span = max(1, math.ceil(rect.height / SLOT_PIXELS))
        for row in range(first, first + span):
            if not (row_from <= row < row_to):
                continue
            if row == first:
                piece = Text(rect.event.title, style=f"bold {color}")
                piece.append(f"\n{time_range_12h(rect.event)}", style=color)
            else:
                piece = Text("┃", style=color)
            cells[row - row_from][rect.column].append(piece)

    table = Table(title=title, box=box.SIMPLE_HEAD, pad_edge=False)
    table.add_column("Time", justify="right", no_wrap=True)
    for venue in venues:
        table.add_column(Text(venue), min_width=max(8, column_width // 12))

    slots = generate_time_slots()
    for offset, row_cells in enumerate(cells):
        slot = row_from + offset
        label = format_time_12hour(slots[slot])
        label_text = Text(label, style="bold" if slot % 4 == 0 else "dim")
        table.add_row(label_text, *[Text("\n").join(parts) for parts in row_cells])

    return table


def render_week_tabs(week: Sequence[WeekDate], selected: str) -> Table:
    """
    One column per day; the selected day is highlighted.
    """
    table = Table(box=box.ROUNDED, show_lines=False)
    for wd in week:
        style = "bold cyan" if wd.full_date == selected else "white"
        table.add_column(Text(wd.day, style=style), justify="center")
    table.add_row(
        *[Text(wd.date, style="bold reverse cyan" if wd.full_date == selected else "") for wd in week]
    )
    return table


def render_event_table(events: Sequence[Event], title: Optional[str] = None) -> Table:
    """
    Numbered event list, ordered by start time.
    """
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("ID")
    table.add_column("Time")
    table.add_column("Title")
    table.add_column("Venue")
    for i, ev in enumerate(sorted_by_start(events), start=1):
        table.add_row(str(i), Text(ev.id), time_range_12h(ev), Text(ev.title), Text(ev.venue))
    return table


def sorted_by_start(events: Sequence[Event]) -> List[Event]:
    return sorted(events, key=lambda ev: (ev.start_time, ev.end_time, ev.venue))

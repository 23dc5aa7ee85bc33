"""
CLI (Command Line Interface).

This module provides quick terminal commands on top of the schedule store, e.g.:

    timetable show [--date 2026-10-19]
    timetable week
    timetable select 2026-10-20
    timetable add "Morning Keynote" --venue "Hall A" --start 09:00 --end 10:30
    timetable edit <event_id> --end 11:00
    timetable delete <event_id>
    timetable add-venue "Hall E"
    timetable interactive

Note:
- The interactive UI lives in timetable/interactive.py
- Dates default to the currently selected day of the timetable
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from timetable import config
from timetable.forms import EventForm, new_event_id
from timetable.model import Event
from timetable.render import event_line, render_event_table, render_grid, render_week_tabs
from timetable.storage import BlobStore
from timetable.store import ScheduleStore
from timetable.timeutils import get_week_dates, parse_date, time_to_minutes

console = Console()


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve_date(arg: Optional[str], store: ScheduleStore) -> Optional[str]:
    """
    --date argument or the selected day. Prints a message and returns None if invalid.
    """
    if not arg:
        return store.data.selected_date
    try:
        return parse_date(arg).isoformat()
    except ValueError:
        print(f"Not a valid date (YYYY-MM-DD): {arg}")
        return None


def _valid_hhmm(value: Optional[str]) -> bool:
    if value is None:
        return True
    try:
        time_to_minutes(value)
    except ValueError:
        return False
    return True


def _cmd_show(args: argparse.Namespace, store: ScheduleStore) -> int:
    """
    Draw the venue x time grid for one day.
    """
    day = _resolve_date(args.date, store)
    if day is None:
        return 1

    start, end = args.start, args.end
    if not (_valid_hhmm(start) and _valid_hhmm(end)):
        print("Times must be in HH:MM format")
        return 1

    data = store.data
    if not data.venues:
        print("No venues yet. Add one with: timetable add-venue <name>")
        return 0

    events = store.get_events_for_date(data, day)
    table = render_grid(data.venues, events, args.width, start=start, end=end, title=day, full_day=args.full)
    console.print(table)
    if not events:
        print("No events on this day.")
    return 0


def _cmd_week(args: argparse.Namespace, store: ScheduleStore) -> int:
    """
    Print the Monday..Sunday tabs around the selected (or given) date.
    """
    day = _resolve_date(args.date, store)
    if day is None:
        return 1
    console.print(render_week_tabs(get_week_dates(parse_date(day)), store.data.selected_date))
    return 0


def _cmd_list(args: argparse.Namespace, store: ScheduleStore) -> int:
    day = _resolve_date(args.date, store)
    if day is None:
        return 1

    events = store.get_events_for_date(store.data, day)
    if not events:
        print("No events on this day.")
        return 0
    console.print(render_event_table(events, title=f"Events on {day}"))
    return 0


def _cmd_select(args: argparse.Namespace, store: ScheduleStore) -> int:
    day = _resolve_date(args.date, store)
    if day is None:
        return 1
    store.update_selected_date(store.data, day)
    print(f"Selected: {day}")
    return 0


def _cmd_add(args: argparse.Namespace, store: ScheduleStore) -> int:
    """
    Create a new event on the selected (or given) day.
    """
    day = _resolve_date(args.date, store)
    if day is None:
        return 1

    data = store.data
    form = EventForm(title=args.title or "", venue=args.venue or "", start_time=args.start, end_time=args.end)
    message = form.validate(data.venues)
    if message:
        print(message)
        return 1

    event = form.to_event(new_event_id())
    store.add_event(data, event, day)
    print(f"Added: {event.id} | {event_line(event)}")
    return 0


def _find_event(store: ScheduleStore, event_id: str, day: str) -> Optional[Event]:
    for ev in store.get_events_for_date(store.data, day):
        if ev.id == event_id:
            return ev
    return None


def _cmd_edit(args: argparse.Namespace, store: ScheduleStore) -> int:
    """
    Change fields of an existing event; omitted options keep their value.
    """
    day = _resolve_date(args.date, store)
    if day is None:
        return 1

    current = _find_event(store, args.event_id, day)
    if current is None:
        print(f"No event with id '{args.event_id}' on {day}.")
        return 1

    form = EventForm.from_event(current)
    if args.title is not None:
        form.title = args.title
    if args.venue is not None:
        form.venue = args.venue
    if args.start is not None:
        form.start_time = args.start
    if args.end is not None:
        form.end_time = args.end

    data = store.data
    message = form.validate(data.venues)
    if message:
        print(message)
        return 1

    updated = form.to_event(current.id)
    store.update_event(data, current.id, updated, day)
    print(f"Updated: {updated.id} | {event_line(updated)}")
    return 0


def _cmd_delete(args: argparse.Namespace, store: ScheduleStore) -> int:
    day = _resolve_date(args.date, store)
    if day is None:
        return 1

    current = _find_event(store, args.event_id, day)
    if current is None:
        print(f"No event with id '{args.event_id}' on {day}.")
        return 1

    store.delete_event(store.data, current.id, day)
    print(f"Deleted: {current.id} | {event_line(current)}")
    return 0


def _cmd_venues(args: argparse.Namespace, store: ScheduleStore) -> int:
    venues = store.data.venues
    if not venues:
        print("No venues.")
        return 0
    for i, v in enumerate(venues, start=1):
        print(f"{i}) {v}")
    return 0


def _cmd_add_venue(args: argparse.Namespace, store: ScheduleStore) -> int:
    name = (args.name or "").strip()
    if not name:
        print("Please provide a venue name.")
        return 1

    data = store.data
    # duplicates are allowed; they show up as separate columns
    if name in data.venues:
        print(f"Warning: venue '{name}' already exists (adding anyway).")

    data = store.add_venue(data, name)
    print(f"Added venue: {name} (venues: {len(data.venues)})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="timetable", description="Event Timetable CLI")
    parser.add_argument("--data", type=str, default=None, help="Path of the timetable JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log store activity")
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Show the timetable grid of a day")
    p_show.add_argument("--date", type=str, help="Day to show (default: selected day)")
    p_show.add_argument("--from", dest="start", type=str, help="First visible time (HH:MM)")
    p_show.add_argument("--to", dest="end", type=str, help="End of visible window (HH:MM)")
    p_show.add_argument("--full", action="store_true", help="Show the whole day")
    p_show.add_argument("--width", type=int, default=config.VENUE_WIDTH, help="Venue column width")

    p_week = sub.add_parser("week", help="Show the week tabs")
    p_week.add_argument("--date", type=str, help="Any day of the week to show")

    p_list = sub.add_parser("list", help="List events of a day (with ids)")
    p_list.add_argument("--date", type=str, help="Day to list (default: selected day)")

    p_select = sub.add_parser("select", help="Select the active day")
    p_select.add_argument("date", type=str, help="Date (YYYY-MM-DD)")

    p_add = sub.add_parser("add", help="Add an event")
    p_add.add_argument("title", type=str, help="Event title")
    p_add.add_argument("--venue", type=str, required=True, help="Venue name")
    p_add.add_argument("--start", type=str, required=True, help="Start time (HH:MM)")
    p_add.add_argument("--end", type=str, required=True, help="End time (HH:MM)")
    p_add.add_argument("--date", type=str, help="Day (default: selected day)")

    p_edit = sub.add_parser("edit", help="Edit an event")
    p_edit.add_argument("event_id", type=str, help="Event id (see 'list')")
    p_edit.add_argument("--title", type=str)
    p_edit.add_argument("--venue", type=str)
    p_edit.add_argument("--start", type=str)
    p_edit.add_argument("--end", type=str)
    p_edit.add_argument("--date", type=str, help="Day (default: selected day)")

    p_delete = sub.add_parser("delete", help="Delete an event")
    p_delete.add_argument("event_id", type=str, help="Event id (see 'list')")
    p_delete.add_argument("--date", type=str, help="Day (default: selected day)")

    sub.add_parser("venues", help="List venues")

    p_venue = sub.add_parser("add-venue", help="Add a venue column")
    p_venue.add_argument("name", type=str, help="Venue name")

    sub.add_parser("interactive", help="Interactive menu mode")

    return parser


COMMANDS = {
    "show": _cmd_show,
    "week": _cmd_week,
    "list": _cmd_list,
    "select": _cmd_select,
    "add": _cmd_add,
    "edit": _cmd_edit,
    "delete": _cmd_delete,
    "venues": _cmd_venues,
    "add-venue": _cmd_add_venue,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, opens the store, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    store = ScheduleStore(BlobStore(args.data or config.DATA_PATH))
    store.init()

    handler = COMMANDS.get(args.command)
    if handler is not None:
        raise SystemExit(handler(args, store))

    if args.command == "interactive":
        from timetable.interactive import run_interactive

        run_interactive(store, column_width=config.VENUE_WIDTH)
        store.flush()
        raise SystemExit(0)

    raise SystemExit(2)

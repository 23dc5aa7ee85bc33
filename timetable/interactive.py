from __future__ import annotations

from typing import Optional

from rich.console import Console

from timetable.forms import EventForm, new_event_id
from timetable.layout import DEFAULT_COLUMN_WIDTH
from timetable.model import Event
from timetable.render import event_line, render_event_table, render_grid, render_week_tabs, sorted_by_start
from timetable.store import ScheduleStore
from timetable.timeutils import get_week_dates, parse_date

console = Console()


def _println(msg: str = "") -> None:
    console.print(msg, markup=False)


def _prompt(msg: str) -> str:
    return console.input(msg, markup=False)


def _prompt_default(label: str, default: str) -> str:
    value = _prompt(f"{label} [{default}]: ").strip()
    return value if value else default


def run_interactive(store: ScheduleStore, column_width: int = DEFAULT_COLUMN_WIDTH) -> None:
    """
    Interactive menu loop on top of an initialized store.
    """
    while True:
        _print_header(store)

        choice = _prompt(
            "\n[1] Switch day\n"
            "[2] Show timetable\n"
            "[3] Add event\n"
            "[4] Edit event\n"
            "[5] Delete event\n"
            "[6] Add venue\n"
            "[0] Exit\n"
            "Select: "
        ).strip()

        if choice == "0":
            _println("Bye.")
            return

        if choice == "1":
            _flow_switch_day(store)
        elif choice == "2":
            _flow_show_grid(store, column_width)
        elif choice == "3":
            _flow_add_event(store)
        elif choice == "4":
            _flow_edit_event(store)
        elif choice == "5":
            _flow_delete_event(store)
        elif choice == "6":
            _flow_add_venue(store)
        else:
            _println("Invalid choice.")


def _print_header(store: ScheduleStore) -> None:
    data = store.data
    events = store.get_events_for_date(data, data.selected_date)
    _println("\n=== Event Timetable (interactive) ===")
    _println(f"Selected day: {data.selected_date} | Venues: {len(data.venues)} | Events that day: {len(events)}")


def _flow_switch_day(store: ScheduleStore) -> None:
    data = store.data
    week = get_week_dates(parse_date(data.selected_date))
    console.print(render_week_tabs(week, data.selected_date))

    _println("Enter 1-7 for a day of this week, or a date (YYYY-MM-DD).")
    pick = _prompt("Day [blank = back]: ").strip()
    if not pick:
        return

    if pick.isdigit():
        i = int(pick)
        if not (1 <= i <= 7):
            _println("Out of range.")
            return
        target = week[i - 1].full_date
    else:
        try:
            target = parse_date(pick).isoformat()
        except ValueError:
            _println("Not a valid date.")
            return

    store.update_selected_date(data, target)
    _println(f"Selected: {target}")


def _flow_show_grid(store: ScheduleStore, column_width: int) -> None:
    data = store.data
    events = store.get_events_for_date(data, data.selected_date)
    console.print(render_week_tabs(get_week_dates(parse_date(data.selected_date)), data.selected_date))
    if not data.venues:
        _println("No venues yet. Add one with [6].")
        return
    console.print(render_grid(data.venues, events, column_width, title=data.selected_date))
    if not events:
        _println("No events on this day.")


def _pick_event(store: ScheduleStore, action: str) -> Optional[Event]:
    data = store.data
    events = sorted_by_start(store.get_events_for_date(data, data.selected_date))
    if not events:
        _println("No events on this day.")
        return None

    console.print(render_event_table(events, title=f"Events on {data.selected_date}"))
    pick = _prompt(f"Enter number to {action} [blank = back]: ").strip()
    if not pick:
        return None
    if not pick.isdigit():
        _println("Not a number.")
        return None
    i = int(pick)
    if not (1 <= i <= len(events)):
        _println("Out of range.")
        return None
    return events[i - 1]


def _fill_form(form: EventForm, venues: list[str]) -> EventForm:
    _println("Venues: " + ", ".join(f"{i}) {v}" for i, v in enumerate(venues, start=1)))
    title = _prompt_default("Event title", form.title) if form.title else _prompt("Event title: ").strip()

    venue = _prompt_default("Venue (name or number)", form.venue)
    if venue.isdigit() and 1 <= int(venue) <= len(venues):
        venue = venues[int(venue) - 1]

    start = _prompt_default("Start time (HH:MM)", form.start_time)
    end = _prompt_default("End time (HH:MM)", form.end_time)
    return EventForm(title=title, venue=venue, start_time=start, end_time=end)


def _flow_add_event(store: ScheduleStore) -> None:
    data = store.data
    if not data.venues:
        _println("No venues yet. Add one with [6].")
        return

    form = _fill_form(EventForm.blank(data.venues), data.venues)
    message = form.validate(data.venues)
    if message:
        _println(message)
        return

    event = form.to_event(new_event_id())
    store.add_event(data, event, data.selected_date)
    _println(f"Added: {event_line(event)}")


def _flow_edit_event(store: ScheduleStore) -> None:
    event = _pick_event(store, "edit")
    if event is None:
        return

    data = store.data
    form = _fill_form(EventForm.from_event(event), data.venues)
    message = form.validate(data.venues)
    if message:
        _println(message)
        return

    updated = form.to_event(event.id)
    store.update_event(data, event.id, updated, data.selected_date)
    _println(f"Updated: {event_line(updated)}")


def _flow_delete_event(store: ScheduleStore) -> None:
    event = _pick_event(store, "delete")
    if event is None:
        return

    _println(f"{event_line(event)}")
    sure = _prompt("This cannot be undone. Delete this event? [y/N]: ").strip().lower()
    if sure != "y":
        _println("Cancelled.")
        return

    data = store.data
    store.delete_event(data, event.id, data.selected_date)
    _println(f"Deleted: {event.title}")


def _flow_add_venue(store: ScheduleStore) -> None:
    name = _prompt("Venue name [blank = back]: ").strip()
    if not name:
        return

    data = store.data
    if name in data.venues:
        _println(f"Warning: venue '{name}' already exists (adding anyway).")
    store.add_venue(data, name)
    _println(f"Added venue: {name} (venues: {len(store.data.venues)})")

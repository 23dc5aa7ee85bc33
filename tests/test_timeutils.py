"""
Unit tests for time arithmetic.

Scale used by the grid:
- 15 minutes = 20 units, so a full day is 1920 units
- slots are the 96 quarter hours 00:00 .. 23:45
- weeks run Monday .. Sunday
"""

import unittest
from datetime import date, timedelta

from timetable.timeutils import (
    calculate_duration,
    duration_to_pixels,
    format_time_12hour,
    generate_time_slots,
    get_week_dates,
    minutes_to_time,
    parse_date,
    time_to_minutes,
    time_to_pixel_offset,
)


class TestMinutes(unittest.TestCase):
    def test_time_to_minutes(self) -> None:
        self.assertEqual(time_to_minutes("00:00"), 0)
        self.assertEqual(time_to_minutes("09:30"), 570)
        self.assertEqual(time_to_minutes("23:59"), 1439)

    def test_round_trip_every_slot_and_odd_minutes(self) -> None:
        for t in generate_time_slots() + ["07:07", "13:59", "23:59"]:
            self.assertEqual(minutes_to_time(time_to_minutes(t)), t)

    def test_invalid_time_raises(self) -> None:
        for bad in ["", "9", "25:00", "10:60", "ab:cd", "10:00:00"]:
            with self.assertRaises(ValueError):
                time_to_minutes(bad)

    def test_duration_can_be_negative(self) -> None:
        self.assertEqual(calculate_duration("10:00", "09:00"), -60)


class TestPixels(unittest.TestCase):
    def test_duration_to_pixels(self) -> None:
        self.assertEqual(duration_to_pixels(calculate_duration("09:00", "10:30")), 120)
        self.assertEqual(duration_to_pixels(15), 20)

    def test_time_to_pixel_offset(self) -> None:
        self.assertEqual(time_to_pixel_offset("00:00"), 0)
        self.assertEqual(time_to_pixel_offset("09:00"), 720)
        self.assertEqual(time_to_pixel_offset("23:45"), 1900)


class TestSlots(unittest.TestCase):
    def test_ninety_six_ascending_slots(self) -> None:
        slots = generate_time_slots()
        self.assertEqual(len(slots), 96)
        self.assertEqual(slots[0], "00:00")
        self.assertEqual(slots[-1], "23:45")
        minutes = [time_to_minutes(s) for s in slots]
        self.assertTrue(all(a < b for a, b in zip(minutes, minutes[1:])))

    def test_slots_are_fresh_lists(self) -> None:
        first = generate_time_slots()
        first.clear()
        self.assertEqual(len(generate_time_slots()), 96)


class TestFormat12Hour(unittest.TestCase):
    def test_examples(self) -> None:
        self.assertEqual(format_time_12hour("00:00"), "12:00 AM")
        self.assertEqual(format_time_12hour("13:05"), "1:05 PM")
        self.assertEqual(format_time_12hour("12:00"), "12:00 PM")
        self.assertEqual(format_time_12hour("09:30"), "9:30 AM")
        self.assertEqual(format_time_12hour("23:45"), "11:45 PM")


class TestWeekDates(unittest.TestCase):
    def test_every_weekday_maps_to_same_week(self) -> None:
        # 2026-10-19 is a Monday
        monday = date(2026, 10, 19)
        for offset in range(7):
            week = get_week_dates(monday + timedelta(days=offset))
            self.assertEqual(len(week), 7)
            self.assertEqual(week[0].full_date, "2026-10-19")
            self.assertEqual(week[0].day, "Mon")
            self.assertEqual(week[-1].full_date, "2026-10-25")
            self.assertEqual(week[-1].day, "Sun")

    def test_consecutive_days_across_month_end(self) -> None:
        # 2026-03-01 is a Sunday
        week = get_week_dates(date(2026, 3, 1))
        self.assertEqual(week[0].full_date, "2026-02-23")
        self.assertEqual(week[-1].full_date, "2026-03-01")
        days = [parse_date(w.full_date) for w in week]
        for a, b in zip(days, days[1:]):
            self.assertEqual(b - a, timedelta(days=1))
        self.assertEqual([w.date for w in week], ["23", "24", "25", "26", "27", "28", "1"])
        self.assertEqual([w.day for w in week], ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"])

    def test_parse_date_rejects_other_formats(self) -> None:
        self.assertEqual(parse_date("2026-10-19"), date(2026, 10, 19))
        for bad in ["2026-2-9", "19.10.2026", "2026-13-01", ""]:
            with self.assertRaises(ValueError):
                parse_date(bad)


if __name__ == "__main__":
    unittest.main()

"""Unit tests for clock-time extraction, calendar math and display formatting."""

import unittest
from datetime import date, datetime, time

from taskcapture.datetime_resolution.calendar_math import (
    add_months,
    business_days_between,
    day_of_month,
    days_until_weekday,
    end_of_week,
    month_range,
    roll_past_to_next_year,
    week_range,
)
from taskcapture.datetime_resolution.formatting import (
    describe_parsed,
    format_date_for_display,
    format_time_for_display,
)
from taskcapture.datetime_resolution.time_of_day import extract_time
from taskcapture.extraction.types import ParsedDateTime


class ExtractTimeTests(unittest.TestCase):
    def test_twelve_hour_forms(self) -> None:
        self.assertEqual(extract_time("3:30 pm"), time(15, 30))
        self.assertEqual(extract_time("at 9am"), time(9, 0))
        self.assertEqual(extract_time("12 am"), time(0, 0))
        self.assertEqual(extract_time("12 pm"), time(12, 0))

    def test_twenty_four_hour_and_bare_hour(self) -> None:
        self.assertEqual(extract_time("18:45"), time(18, 45))
        self.assertEqual(extract_time("dinner at 7"), time(7, 0))

    def test_named_periods(self) -> None:
        self.assertEqual(extract_time("noon"), time(12, 0))
        self.assertEqual(extract_time("this evening"), time(18, 0))
        self.assertEqual(extract_time("in the morning"), time(9, 0))

    def test_out_of_range_values_are_ignored(self) -> None:
        self.assertIsNone(extract_time("13 pm"))
        self.assertIsNone(extract_time("no clock here"))


class CalendarMathTests(unittest.TestCase):
    def test_add_months_clamps_day(self) -> None:
        self.assertEqual(add_months(date(2026, 1, 31), 1), date(2026, 2, 28))
        self.assertEqual(add_months(date(2026, 12, 15), 2), date(2027, 2, 15))

    def test_days_until_weekday(self) -> None:
        wednesday = date(2026, 10, 14)
        self.assertEqual(days_until_weekday(wednesday, 4), 2)
        self.assertEqual(days_until_weekday(wednesday, 2), 7)
        self.assertEqual(days_until_weekday(wednesday, 0), 5)

    def test_day_of_month(self) -> None:
        self.assertEqual(day_of_month(date(2026, 11, 10), 31), date(2026, 11, 30))
        self.assertEqual(day_of_month(date(2026, 10, 20), 5), date(2026, 11, 5))
        self.assertIsNone(day_of_month(date(2026, 10, 20), 40))

    def test_roll_past_to_next_year(self) -> None:
        today = date(2026, 10, 14)
        self.assertEqual(roll_past_to_next_year(date(2026, 2, 1), today), date(2027, 2, 1))
        self.assertEqual(roll_past_to_next_year(date(2026, 12, 1), today), date(2026, 12, 1))

    def test_ranges_and_business_days(self) -> None:
        start, end = week_range(date(2026, 10, 14))
        self.assertEqual(start, datetime(2026, 10, 12, 0, 0))
        self.assertEqual(end, datetime(2026, 10, 18, 23, 59, 59))
        self.assertEqual(end_of_week(date(2026, 10, 14)), date(2026, 10, 18))
        month_start, month_end = month_range(date(2026, 2, 10))
        self.assertEqual((month_start.date(), month_end.date()), (date(2026, 2, 1), date(2026, 2, 28)))
        self.assertEqual(business_days_between(date(2026, 10, 12), date(2026, 10, 18)), 5)
        self.assertEqual(business_days_between(date(2026, 10, 16), date(2026, 10, 19)), 2)
        self.assertEqual(business_days_between(date(2026, 10, 19), date(2026, 10, 12)), 0)


class FormattingTests(unittest.TestCase):
    def test_date_labels(self) -> None:
        today = date(2026, 10, 14)
        self.assertEqual(format_date_for_display(today, today), "Today")
        self.assertEqual(format_date_for_display(date(2026, 10, 15), today), "Tomorrow")
        self.assertEqual(format_date_for_display(date(2026, 10, 13), today), "Yesterday")
        self.assertEqual(format_date_for_display(date(2026, 12, 25), today), "Dec 25")
        self.assertEqual(format_date_for_display(date(2027, 1, 3), today), "Jan 3, 2027")

    def test_time_labels(self) -> None:
        self.assertEqual(format_time_for_display(time(15, 0)), "3:00 PM")
        self.assertEqual(format_time_for_display(time(0, 5)), "12:05 AM")

    def test_describe_parsed(self) -> None:
        parsed = ParsedDateTime(date(2026, 10, 15), time(15, 0), 0.9, "tomorrow at 3pm")
        self.assertEqual(describe_parsed(parsed, date(2026, 10, 14)), "Tomorrow at 3:00 PM (90% confidence)")


if __name__ == "__main__":
    unittest.main()

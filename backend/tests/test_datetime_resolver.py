"""Unit tests for the natural-language date/time cascade."""

from __future__ import annotations

import unittest
from datetime import date, datetime, time

from taskcapture.datetime_resolution import DateTimeResolver, resolve_datetime
from taskcapture.extraction.types import ParsedDateTime

# Wednesday.
NOW = datetime(2026, 10, 14, 9, 30)


class RelativeDayTests(unittest.TestCase):
    def test_tomorrow_with_clock_time(self) -> None:
        parsed = resolve_datetime("tomorrow at 3 PM", NOW)
        self.assertIsNotNone(parsed)
        self.assertEqual(parsed.date, date(2026, 10, 15))
        self.assertEqual(parsed.time, time(15, 0))
        self.assertAlmostEqual(parsed.confidence, 0.9)
        self.assertEqual(parsed.original_input, "tomorrow at 3 PM")

    def test_today_has_no_time_unless_mentioned(self) -> None:
        parsed = resolve_datetime("today", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 14))
        self.assertIsNone(parsed.time)

    def test_tonight_defaults_to_evening(self) -> None:
        parsed = resolve_datetime("tonight", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 14))
        self.assertEqual(parsed.time, time(20, 0))

    def test_now_uses_current_clock(self) -> None:
        parsed = resolve_datetime("right now", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 14))
        self.assertEqual(parsed.time, time(9, 30))

    def test_yesterday_and_day_after_tomorrow(self) -> None:
        self.assertEqual(resolve_datetime("yesterday", NOW).date, date(2026, 10, 13))
        self.assertEqual(resolve_datetime("the day after tomorrow", NOW).date, date(2026, 10, 16))

    def test_matching_is_case_insensitive(self) -> None:
        parsed = resolve_datetime("TOMORROW At 3 pm", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 15))
        self.assertEqual(parsed.time, time(15, 0))


class WeekdayTests(unittest.TestCase):
    def test_bare_weekday_is_upcoming(self) -> None:
        parsed = resolve_datetime("friday", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 16))
        self.assertAlmostEqual(parsed.confidence, 0.85)

    def test_qualified_weekday_is_more_confident(self) -> None:
        parsed = resolve_datetime("next Friday", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 16))
        self.assertAlmostEqual(parsed.confidence, 0.9)

    def test_same_weekday_moves_a_week_out(self) -> None:
        self.assertEqual(resolve_datetime("wednesday", NOW).date, date(2026, 10, 21))
        self.assertEqual(resolve_datetime("this wednesday", NOW).date, date(2026, 10, 21))
        self.assertEqual(resolve_datetime("next wednesday", NOW).date, date(2026, 10, 21))

    def test_next_friday_from_a_friday_moves_a_week(self) -> None:
        friday = datetime(2026, 10, 16, 8, 0)
        self.assertEqual(resolve_datetime("next friday", friday).date, date(2026, 10, 23))

    def test_bare_friday_said_on_a_friday_means_next_week(self) -> None:
        friday = datetime(2026, 10, 16, 8, 0)
        self.assertEqual(resolve_datetime("Friday", friday).date, date(2026, 10, 23))
        parsed = resolve_datetime("call mom friday", friday)
        self.assertEqual(parsed.date, date(2026, 10, 23))
        self.assertAlmostEqual(parsed.confidence, 0.85)

    def test_weekday_resolution_is_repeatable(self) -> None:
        resolver = DateTimeResolver()
        results = {resolver.resolve("Friday", NOW) for _ in range(5)}
        self.assertEqual(len(results), 1)


class OffsetTests(unittest.TestCase):
    def test_in_n_days(self) -> None:
        parsed = resolve_datetime("in 3 days", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 17))
        self.assertAlmostEqual(parsed.confidence, 0.8)

    def test_weeks_from_now(self) -> None:
        self.assertEqual(resolve_datetime("two weeks from now", NOW).date, date(2026, 10, 28))
        self.assertEqual(resolve_datetime("a week from today", NOW).date, date(2026, 10, 21))

    def test_in_a_month(self) -> None:
        self.assertEqual(resolve_datetime("in a month", NOW).date, date(2026, 11, 14))

    def test_hour_and_minute_durations_carry_time(self) -> None:
        hours = resolve_datetime("in 2 hours", NOW)
        self.assertEqual((hours.date, hours.time), (date(2026, 10, 14), time(11, 30)))
        minutes = resolve_datetime("in 45 minutes", NOW)
        self.assertEqual(minutes.time, time(10, 15))


class AbsoluteDateTests(unittest.TestCase):
    def test_past_month_day_rolls_to_next_year(self) -> None:
        parsed = resolve_datetime("March 5", NOW)
        self.assertEqual(parsed.date, date(2027, 3, 5))
        self.assertAlmostEqual(parsed.confidence, 0.75)

    def test_month_day_with_time_keeps_current_year(self) -> None:
        parsed = resolve_datetime("March 5 at 10am", NOW)
        self.assertEqual(parsed.date, date(2026, 3, 5))
        self.assertEqual(parsed.time, time(10, 0))

    def test_explicit_year_is_respected(self) -> None:
        self.assertEqual(resolve_datetime("December 25, 2026", NOW).date, date(2026, 12, 25))

    def test_day_of_month_phrase(self) -> None:
        self.assertEqual(resolve_datetime("15th of January", NOW).date, date(2027, 1, 15))

    def test_numeric_dates_are_month_first(self) -> None:
        self.assertEqual(resolve_datetime("12/25", NOW).date, date(2026, 12, 25))
        self.assertEqual(resolve_datetime("13/05/2027", NOW).date, date(2027, 5, 13))
        self.assertEqual(resolve_datetime("1/2/27", NOW).date, date(2027, 1, 2))

    def test_invalid_numeric_date_is_skipped(self) -> None:
        self.assertIsNone(resolve_datetime("2/30", NOW))

    def test_iso_date_uses_library_fallback(self) -> None:
        parsed = resolve_datetime("2026-11-03", NOW)
        self.assertEqual(parsed.date, date(2026, 11, 3))
        self.assertAlmostEqual(parsed.confidence, 0.6)
        self.assertFalse(parsed.needs_confirmation)


class RelativePeriodTests(unittest.TestCase):
    def test_end_and_beginning_of_period(self) -> None:
        self.assertEqual(resolve_datetime("end of month", NOW).date, date(2026, 10, 31))
        self.assertEqual(resolve_datetime("end of the week", NOW).date, date(2026, 10, 18))
        self.assertEqual(resolve_datetime("beginning of next month", NOW).date, date(2026, 11, 1))

    def test_next_week(self) -> None:
        parsed = resolve_datetime("next week", NOW)
        self.assertEqual(parsed.date, date(2026, 10, 21))
        self.assertAlmostEqual(parsed.confidence, 0.7)

    def test_ordinal_day_clamps_to_short_month(self) -> None:
        november = datetime(2026, 11, 10, 12, 0)
        self.assertEqual(resolve_datetime("the 31st", november).date, date(2026, 11, 30))

    def test_passed_ordinal_day_moves_to_next_month(self) -> None:
        self.assertEqual(resolve_datetime("the 5th", NOW).date, date(2026, 11, 5))


class NoMatchTests(unittest.TestCase):
    def test_empty_and_unrecognised_input(self) -> None:
        self.assertIsNone(resolve_datetime("", NOW))
        self.assertIsNone(resolve_datetime("   ", NOW))
        self.assertIsNone(resolve_datetime("sometime soon-ish", NOW))


class ParsedDateTimeTests(unittest.TestCase):
    def test_confidence_bands(self) -> None:
        high = ParsedDateTime(date(2026, 10, 15), None, 0.9, "tomorrow")
        low = ParsedDateTime(date(2026, 10, 15), None, 0.5, "eventually")
        self.assertTrue(high.is_high_confidence)
        self.assertFalse(high.needs_confirmation)
        self.assertTrue(low.needs_confirmation)

    def test_as_datetime_defaults_to_midnight(self) -> None:
        parsed = ParsedDateTime(date(2026, 10, 15), None, 0.9, "tomorrow")
        self.assertEqual(parsed.as_datetime(), datetime(2026, 10, 15, 0, 0))


if __name__ == "__main__":
    unittest.main()

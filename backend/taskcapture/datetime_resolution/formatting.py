"""Human-readable rendering of resolved dates and times."""

from __future__ import annotations

from datetime import date, time, timedelta

from taskcapture.extraction.types import ParsedDateTime


def format_date_for_display(value: date, today: date) -> str:
    if value == today:
        return "Today"
    if value == today + timedelta(days=1):
        return "Tomorrow"
    if value == today - timedelta(days=1):
        return "Yesterday"
    label = f"{value.strftime('%b')} {value.day}"
    if value.year == today.year:
        return label
    return f"{label}, {value.year}"


def format_time_for_display(value: time) -> str:
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def describe_parsed(parsed: ParsedDateTime, today: date) -> str:
    """Summary such as ``Tomorrow at 3:00 PM (90% confidence)``."""

    text = format_date_for_display(parsed.date, today)
    if parsed.time is not None:
        text = f"{text} at {format_time_for_display(parsed.time)}"
    return f"{text} ({int(round(parsed.confidence * 100))}% confidence)"

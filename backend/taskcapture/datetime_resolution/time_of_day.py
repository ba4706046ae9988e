"""Clock-time recognition for free-text fragments."""

from __future__ import annotations

import re
from datetime import time

TWELVE_HOUR_PATTERN = re.compile(
    r"\b(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<period>am|pm|a\.m\.?|p\.m\.?)(?![a-z])",
    re.IGNORECASE,
)
TWENTY_FOUR_HOUR_PATTERN = re.compile(r"\b(?P<hour>\d{1,2}):(?P<minute>\d{2})\b")
BARE_AT_HOUR_PATTERN = re.compile(r"\bat\s+(?P<hour>\d{1,2})\b(?![:/.]\d)", re.IGNORECASE)

# Checked in order; "midnight" before "night" and "noon" never matches inside "afternoon".
NAMED_PERIODS: tuple[tuple[re.Pattern[str], time], ...] = (
    (re.compile(r"\bmidnight\b", re.IGNORECASE), time(0, 0)),
    (re.compile(r"\b(?:noon|midday)\b", re.IGNORECASE), time(12, 0)),
    (re.compile(r"\bmorning\b", re.IGNORECASE), time(9, 0)),
    (re.compile(r"\bafternoon\b", re.IGNORECASE), time(14, 0)),
    (re.compile(r"\bevening\b", re.IGNORECASE), time(18, 0)),
    (re.compile(r"\b(?:tonight|tonite|night)\b", re.IGNORECASE), time(20, 0)),
)

TIME_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:at\s+|by\s+|around\s+)?\d{1,2}(?::\d{2})?\s*(?:am|pm|a\.m\.?|p\.m\.?)(?![a-z])",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:at\s+|by\s+)?\d{1,2}:\d{2}\b", re.IGNORECASE),
    re.compile(r"\bat\s+\d{1,2}\b(?![:/.]\d)", re.IGNORECASE),
    re.compile(
        r"\b(?:(?:in|this|at|by)\s+(?:the\s+)?)?(?:midnight|noon|midday|morning|afternoon|evening|tonight|tonite|night)\b",
        re.IGNORECASE,
    ),
)


def extract_time(fragment: str) -> time | None:
    """Return the first clock time mentioned in ``fragment``.

    Explicit clock notation wins over named periods. Out-of-range values are
    skipped rather than raised.
    """

    if not fragment:
        return None

    match = TWELVE_HOUR_PATTERN.search(fragment)
    if match is not None:
        period = match.group("period").lower().replace(".", "")
        resolved = _build_time(match.group("hour"), match.group("minute"), period)
        if resolved is not None:
            return resolved

    match = TWENTY_FOUR_HOUR_PATTERN.search(fragment)
    if match is not None:
        resolved = _build_time(match.group("hour"), match.group("minute"), None)
        if resolved is not None:
            return resolved

    match = BARE_AT_HOUR_PATTERN.search(fragment)
    if match is not None:
        resolved = _build_time(match.group("hour"), None, None)
        if resolved is not None:
            return resolved

    for pattern, value in NAMED_PERIODS:
        if pattern.search(fragment):
            return value
    return None


def to_24_hour(hour: int, period: str | None) -> int:
    """Apply the am/pm convention to a 12-hour clock value."""

    if period == "pm" and hour != 12:
        return hour + 12
    if period == "am" and hour == 12:
        return 0
    return hour


def _build_time(raw_hour: str, raw_minute: str | None, period: str | None) -> time | None:
    hour = to_24_hour(int(raw_hour), period)
    minute = int(raw_minute) if raw_minute else 0
    if period is not None and not 1 <= int(raw_hour) <= 12:
        return None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return time(hour, minute)

"""Natural-language date/time resolution as an ordered rule cascade."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Callable, NamedTuple

import dateparser

from taskcapture.datetime_resolution.calendar_math import (
    MONTH_INDEX,
    WEEKDAY_INDEX,
    add_months,
    add_years,
    day_of_month,
    end_of_month,
    end_of_week,
    end_of_year,
    next_weekday,
    roll_past_to_next_year,
    start_of_next,
)
from taskcapture.datetime_resolution.time_of_day import extract_time
from taskcapture.extraction.types import ParsedDateTime

logger = logging.getLogger(__name__)

WEEKDAY_ALTERNATION = "|".join(sorted(WEEKDAY_INDEX, key=len, reverse=True))
MONTH_ALTERNATION = "|".join(sorted(MONTH_INDEX, key=len, reverse=True))

_WORD_NUMBERS: dict[str, int] = {
    "a": 1,
    "an": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
}
_COUNT = r"(?P<count>\d+|" + "|".join(_WORD_NUMBERS) + r")"

_TODAY_RE = re.compile(r"(?<!from )\b(?:(?P<word>today|tonight|tonite)|(?P<now>now))\b")
_DAY_AFTER_TOMORROW_RE = re.compile(r"\b(?:the\s+)?day\s+after\s+tomorrow\b")
_TOMORROW_RE = re.compile(r"\b(?:tomorrow|tmrw|tmr)\b")
_YESTERDAY_RE = re.compile(r"\byesterday\b")
_WEEKDAY_RE = re.compile(
    r"\b(?:(?P<prefix>next|this)\s+)?(?P<day>" + WEEKDAY_ALTERNATION + r")\b"
    r"(?:\s+(?P<suffix>next|this)\s+week\b)?"
)
_OFFSET_RE = re.compile(r"\b(?:in|after)\s+" + _COUNT + r"\s+(?P<unit>day|week|month)s?\b")
_OFFSET_FROM_NOW_RE = re.compile(
    r"\b" + _COUNT + r"\s+(?P<unit>day|week|month)s?\s+from\s+(?:now|today)\b"
)
_DURATION_RE = re.compile(
    r"\b(?:in|after)\s+" + _COUNT + r"\s+(?P<unit>hour|hr|minute|min)s?\b"
)
_MONTH_DAY_RE = re.compile(
    r"\b(?P<month>" + MONTH_ALTERNATION + r")\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?\b"
    r"(?:,?\s+(?P<year>\d{4})\b)?"
)
_DAY_MONTH_RE = re.compile(
    r"\b(?P<day>\d{1,2})(?:st|nd|rd|th)?\s+(?:of\s+)?(?P<month>" + MONTH_ALTERNATION + r")\b"
    r"(?:,?\s+(?P<year>\d{4})\b)?"
)
_NUMERIC_DATE_RE = re.compile(
    r"(?<![\d/])(?P<first>\d{1,2})/(?P<second>\d{1,2})(?:/(?P<year>\d{2,4}))?(?![\d/])"
)
_END_OF_PERIOD_RE = re.compile(r"\bend\s+of\s+(?:the\s+|this\s+)?(?P<unit>week|month|year)\b")
_BEGINNING_OF_NEXT_RE = re.compile(
    r"\b(?:beginning|start)\s+of\s+(?:the\s+)?next\s+(?P<unit>week|month|year)\b"
)
_RELATIVE_PERIOD_RE = re.compile(r"\b(?P<which>next|this)\s+(?P<unit>week|month|year)\b")
_ORDINAL_DAY_RE = re.compile(r"\bthe\s+(?P<day>\d{1,2})(?:st|nd|rd|th)\b")
_FALLBACK_CANDIDATE_RE = re.compile(
    r"\b\d{4}-\d{1,2}-\d{1,2}\b"
    r"|\b\d{1,2}\.\d{1,2}\.\d{4}\b"
    r"|\b\d{1,2}/\d{1,2}/\d{4}\b"
    r"|\b(?:" + MONTH_ALTERNATION + r")\.?\s+\d{1,2},\s*\d{4}\b"
)

FALLBACK_DATE_FORMATS: tuple[str, ...] = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y-%m-%d",
    "%d.%m.%Y",
)


class RuleHit(NamedTuple):
    """What a recognizer found; ``confidence`` overrides the rule's tier value."""

    date: date
    time: time | None = None
    confidence: float | None = None
    year_inferred: bool = False


Recognizer = Callable[[str, datetime], "RuleHit | None"]


@dataclass(frozen=True, slots=True)
class DateRule:
    """One cascade entry: first matching rule wins."""

    name: str
    confidence: float
    recognize: Recognizer


def _count_value(raw: str) -> int:
    return _WORD_NUMBERS.get(raw) or int(raw)


def _recognize_today(text: str, now: datetime) -> RuleHit | None:
    match = _TODAY_RE.search(text)
    if match is None:
        return None
    if match.group("now") and extract_time(text) is None:
        return RuleHit(now.date(), now.time().replace(second=0, microsecond=0))
    return RuleHit(now.date())


def _recognize_adjacent_day(text: str, now: datetime) -> RuleHit | None:
    today = now.date()
    if _DAY_AFTER_TOMORROW_RE.search(text):
        return RuleHit(today + timedelta(days=2))
    if _TOMORROW_RE.search(text):
        return RuleHit(today + timedelta(days=1))
    if _YESTERDAY_RE.search(text):
        return RuleHit(today - timedelta(days=1))
    return None


def _recognize_weekday(text: str, now: datetime) -> RuleHit | None:
    match = _WEEKDAY_RE.search(text)
    if match is None:
        return None
    qualifier = match.group("prefix") or match.group("suffix")
    target = WEEKDAY_INDEX[match.group("day")]
    resolved = next_weekday(now.date(), target)
    return RuleHit(resolved, confidence=0.9 if qualifier else 0.85)


def _recognize_day_offset(text: str, now: datetime) -> RuleHit | None:
    match = _OFFSET_RE.search(text) or _OFFSET_FROM_NOW_RE.search(text)
    if match is None:
        return None
    count = _count_value(match.group("count"))
    unit = match.group("unit")
    today = now.date()
    if unit == "month":
        return RuleHit(add_months(today, count))
    days = count * 7 if unit == "week" else count
    return RuleHit(today + timedelta(days=days))


def _recognize_duration(text: str, now: datetime) -> RuleHit | None:
    match = _DURATION_RE.search(text)
    if match is None:
        return None
    count = _count_value(match.group("count"))
    if match.group("unit") in ("hour", "hr"):
        target = now + timedelta(hours=count)
    else:
        target = now + timedelta(minutes=count)
    return RuleHit(target.date(), target.time().replace(second=0, microsecond=0))


def _recognize_month_day(text: str, now: datetime) -> RuleHit | None:
    match = _MONTH_DAY_RE.search(text) or _DAY_MONTH_RE.search(text)
    if match is None:
        return None
    month = MONTH_INDEX[match.group("month")]
    day = int(match.group("day"))
    explicit_year = match.group("year")
    year = int(explicit_year) if explicit_year else now.year
    try:
        resolved = date(year, month, day)
    except ValueError:
        logger.debug("Skipping invalid month/day %s in %r", match.group(0), text)
        return None
    return RuleHit(resolved, year_inferred=explicit_year is None)


def _recognize_numeric_date(text: str, now: datetime) -> RuleHit | None:
    match = _NUMERIC_DATE_RE.search(text)
    if match is None:
        return None
    first = int(match.group("first"))
    second = int(match.group("second"))
    # Month-first unless the first group cannot be a month.
    month, day = (first, second) if first <= 12 else (second, first)
    raw_year = match.group("year")
    year = int(raw_year) if raw_year else now.year
    if year < 100:
        year += 2000
    try:
        resolved = date(year, month, day)
    except ValueError:
        logger.debug("Skipping invalid numeric date %s in %r", match.group(0), text)
        return None
    return RuleHit(resolved, year_inferred=raw_year is None)


def _recognize_relative_period(text: str, now: datetime) -> RuleHit | None:
    today = now.date()
    match = _END_OF_PERIOD_RE.search(text)
    if match is not None:
        unit = match.group("unit")
        if unit == "week":
            return RuleHit(end_of_week(today))
        if unit == "month":
            return RuleHit(end_of_month(today))
        return RuleHit(end_of_year(today))

    match = _BEGINNING_OF_NEXT_RE.search(text)
    if match is not None:
        return RuleHit(start_of_next(today, match.group("unit")))

    match = _RELATIVE_PERIOD_RE.search(text)
    if match is not None:
        if match.group("which") == "this":
            return RuleHit(today)
        unit = match.group("unit")
        if unit == "week":
            return RuleHit(today + timedelta(days=7))
        if unit == "month":
            return RuleHit(add_months(today, 1))
        return RuleHit(add_years(today, 1))

    match = _ORDINAL_DAY_RE.search(text)
    if match is not None:
        resolved = day_of_month(today, int(match.group("day")))
        if resolved is not None:
            return RuleHit(resolved)
    return None


def _recognize_with_library(text: str, now: datetime) -> RuleHit | None:
    for match in _FALLBACK_CANDIDATE_RE.finditer(text):
        try:
            parsed = dateparser.parse(
                match.group(0),
                date_formats=list(FALLBACK_DATE_FORMATS),
                languages=["en"],
                settings={
                    "RELATIVE_BASE": now.replace(tzinfo=None),
                    "STRICT_PARSING": True,
                    "PREFER_DATES_FROM": "future",
                },
            )
        except (ValueError, OverflowError):
            logger.debug("dateparser rejected %r", match.group(0))
            continue
        if parsed is not None:
            return RuleHit(parsed.date())
    return None


DEFAULT_RULES: tuple[DateRule, ...] = (
    DateRule("today", 0.9, _recognize_today),
    DateRule("adjacent_day", 0.9, _recognize_adjacent_day),
    DateRule("weekday", 0.85, _recognize_weekday),
    DateRule("day_offset", 0.8, _recognize_day_offset),
    DateRule("duration", 0.8, _recognize_duration),
    DateRule("month_day", 0.75, _recognize_month_day),
    DateRule("numeric_date", 0.75, _recognize_numeric_date),
    DateRule("relative_period", 0.7, _recognize_relative_period),
    DateRule("library_fallback", 0.6, _recognize_with_library),
)


class DateTimeResolver:
    """Turn a text fragment into a concrete date, optional time and confidence."""

    def __init__(self, rules: tuple[DateRule, ...] = DEFAULT_RULES) -> None:
        self.rules = rules

    def resolve(self, fragment: str, now: datetime | None = None) -> ParsedDateTime | None:
        """Return the first rule's resolution, or ``None`` when nothing is recognised."""

        if not fragment or not fragment.strip():
            return None
        now = now or datetime.now()
        text = " ".join(fragment.lower().split())

        for rule in self.rules:
            try:
                hit = rule.recognize(text, now)
            except (ValueError, OverflowError):
                logger.debug("Rule %s skipped malformed input %r", rule.name, fragment)
                continue
            if hit is None:
                continue

            clock = hit.time if hit.time is not None else extract_time(text)
            resolved = hit.date
            if hit.year_inferred and clock is None:
                resolved = roll_past_to_next_year(resolved, now.date())
            confidence = hit.confidence if hit.confidence is not None else rule.confidence
            return ParsedDateTime(
                date=resolved,
                time=clock,
                confidence=min(max(confidence, 0.0), 1.0),
                original_input=fragment,
            )
        return None


_DEFAULT_RESOLVER = DateTimeResolver()


def resolve_datetime(fragment: str, now: datetime | None = None) -> ParsedDateTime | None:
    """Resolve with the default rule cascade."""

    return _DEFAULT_RESOLVER.resolve(fragment, now)

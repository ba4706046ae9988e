"""Independent regex strategies that turn message text into raw task matches.

Each strategy is a pure function scanning the whole text. Strategies overlap
on purpose; the pipeline deduplicates their combined output.
"""

from __future__ import annotations

import re
from typing import Callable

from taskcapture.extraction.title_cleaner import strip_datetime_phrases
from taskcapture.extraction.types import Priority, RawMatch

Strategy = Callable[[str], list[RawMatch]]

# Action phrases stop at sentence punctuation; clause-level ones also stop at commas.
_CLAUSE = r"(?P<action>[^,.!?;]+?)(?=[,.!?;]|$)"
_SENTENCE_END = r"(?=[.!?;]|$)"

_DIRECT_REQUEST_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:can you|could you|would you mind|please)\s+" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:remember to|make sure to|you need to|don'?t forget to)\s+" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?P<action>(?:pick up|buy|get|grab|stop by)\s+[^,.!?;]+?)(?=[,.!?;]|$)", re.IGNORECASE),
)

_SCHEDULED_EVENT_PATTERN = re.compile(
    r"\b(?P<trigger>we have|there's|there is|appointment|meeting|dinner|lunch)\s+"
    r"(?P<event>[^.!?;]+?)\s+"
    r"(?P<when>tomorrow|today|tonight|next week|this \w+|on \w+|at \d+)\b"
    r"(?P<rest>[^.!?;]*)" + _SENTENCE_END,
    re.IGNORECASE,
)
_SCHEDULED_AT_CLOCK_PATTERN = re.compile(
    r"(?P<event>[^,.!?;]+?)\s+"
    r"(?P<when>tomorrow|today|tonight|next week|this \w+|on \w+)\s+"
    r"(?P<clock>at \d{1,2}:\d{2})(?P<rest>[^.!?;]*)" + _SENTENCE_END,
    re.IGNORECASE,
)
_EVENT_TRIGGERS_IN_TITLE = {"appointment", "meeting", "dinner", "lunch"}

_SHOPPING_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:we need|i need|need|buy|get)\s+(?!to\b)(?P<items>[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:grocery|groceries|shopping)(?:\s+list)?\s*:\s*(?P<items>[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
)
_ITEM_SPLIT_RE = re.compile(r",|\band\b|\bor\b", re.IGNORECASE)
_ITEM_LEAD_RE = re.compile(r"^(?:some|more|a few|a|an)\s+", re.IGNORECASE)

_APPOINTMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?P<action>(?:doctor|dentist)(?:'s)?\s+[^.!?;]+?|(?:appointment|meeting)\s+[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:\b(?:i|we)\s+have\s+(?:an?\s+)?|\bthere(?:'s| is)\s+(?:an?\s+)?|\b(?:my|our)\s+)?"
        r"(?P<action>\b[^,.!?;]+?\s+(?:appointment|meeting)\b[^.!?;]*?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
)

_REMINDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:remind me|reminder)\s+(?:to\s+|that\s+|about\s+)?" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:don'?t let me forget|make sure i)\s+(?:to\s+)?" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:i need to remember|remember that i need)\s+(?:to\s+)?" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:note to self|mental note)\s*:?\s*" + _CLAUSE, re.IGNORECASE),
)
REMINDER_BOOST = 0.1

_DEADLINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:deadline for|due date for)\s+(?P<task>[^.!?;]+?)\s+(?:is|:)\s*(?P<when>[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
    re.compile(
        r"(?P<task>[^,.!?;]+?)\s+needs\s+to\s+be\s+(?:done|completed|finished|submitted)\s+(?:by|before)\s+"
        r"(?P<when>[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
    re.compile(
        r"(?P<task>[^,.!?;]+?)\s+(?:is due(?:\s+(?:by|on|before))?|due by|due on|deadline is|must be done by)\s+"
        r"(?P<when>[^.!?;]+?)" + _SENTENCE_END,
        re.IGNORECASE,
    ),
)
DEADLINE_BOOST = 0.15

_ACTION_ITEM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:action items?\s*:?|to-?dos?\s*:|to do\s*:)\s*" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:we should|let's|let us)\s+" + _CLAUSE, re.IGNORECASE),
    re.compile(r"\b(?:it would be good to|we ought to)\s+" + _CLAUSE, re.IGNORECASE),
    re.compile(
        r"(?:^|(?<=\s))(?:\d+[.)]|[-•*])\s+(?P<action>[^.!?;]+?)(?=\s+(?:\d+[.)]|[-•*])\s|[.!?;]|$)",
    ),
)

_HOUSEHOLD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"\b(?:need to\s+)?(?P<action>(?:clean|cleaning|tidy up|organize)\s+[^,.!?;]+?)(?=[,.!?;]|$)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:the\s+)?(?P<room>kitchen|bathroom|bedroom|living room|garage|yard|basement)\s+"
        r"(?:needs|requires)\s+(?:to be\s+)?(?P<need>[^,.!?;]+?)(?=[,.!?;]|$)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?P<action>(?:change|replace)\s+(?:the\s+)?[^,.!?;]*?\b(?:filter|bulb|battery|batteries)\b)",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?P<action>(?:fix|repair|maintain)\s+[^,.!?;]+?)(?=[,.!?;]|$)", re.IGNORECASE),
    re.compile(
        r"(?<!buy )(?<!get )(?<!some )\b(?P<action>(?:water|feed|walk)\s+[^,.!?;]+?)(?=[,.!?;]|$)",
        re.IGNORECASE,
    ),
)
HOUSEHOLD_BOOST = 0.05


def _strip(value: str | None) -> str:
    return " ".join((value or "").split())


def direct_requests(text: str) -> list[RawMatch]:
    """Requests and commands: "can you ...", "don't forget to ...", "pick up ..."."""

    matches: list[RawMatch] = []
    for pattern in _DIRECT_REQUEST_PATTERNS:
        for match in pattern.finditer(text):
            matches.append(
                RawMatch(
                    full_span=_strip(match.group(0)),
                    action_phrase=_strip(match.group("action")),
                    strategy="direct_request",
                )
            )
    return matches


def scheduled_items(text: str) -> list[RawMatch]:
    """Events tied to a relative day or clock time."""

    matches: list[RawMatch] = []
    for match in _SCHEDULED_EVENT_PATTERN.finditer(text):
        trigger = match.group("trigger").lower()
        event = _strip(match.group("event"))
        if not event:
            continue
        action = f"{match.group('trigger')} {event}" if trigger in _EVENT_TRIGGERS_IN_TITLE else event
        full_span = _strip(match.group(0))
        matches.append(
            RawMatch(
                full_span=full_span,
                action_phrase=action,
                strategy="scheduled_item",
                date_fragment=full_span,
            )
        )
    for match in _SCHEDULED_AT_CLOCK_PATTERN.finditer(text):
        event = _strip(match.group("event"))
        if not event:
            continue
        full_span = _strip(match.group(0))
        matches.append(
            RawMatch(
                full_span=full_span,
                action_phrase=event,
                strategy="scheduled_item",
                date_fragment=full_span,
            )
        )
    return matches


def shopping_lists(text: str) -> list[RawMatch]:
    """Item lists after buy/get/need; every item becomes its own "Buy ..." match."""

    matches: list[RawMatch] = []
    for pattern in _SHOPPING_PATTERNS:
        for match in pattern.finditer(text):
            full_span = _strip(match.group(0))
            for raw_item in _ITEM_SPLIT_RE.split(match.group("items")):
                item = _ITEM_LEAD_RE.sub("", _strip(raw_item))
                if not strip_datetime_phrases(item):
                    continue
                matches.append(
                    RawMatch(
                        full_span=full_span,
                        action_phrase=item,
                        strategy="shopping_list",
                        title=f"Buy {item}",
                        date_fragment=full_span,
                        category="household",
                    )
                )
    return matches


def appointments(text: str) -> list[RawMatch]:
    """Doctor, dentist and meeting mentions."""

    matches: list[RawMatch] = []
    for pattern in _APPOINTMENT_PATTERNS:
        for match in pattern.finditer(text):
            action = _strip(match.group("action"))
            if not action:
                continue
            full_span = _strip(match.group(0))
            matches.append(
                RawMatch(
                    full_span=full_span,
                    action_phrase=action,
                    strategy="appointment",
                    date_fragment=full_span,
                )
            )
    return matches


def reminders(text: str) -> list[RawMatch]:
    """Explicit reminder phrasing; scored slightly higher."""

    matches: list[RawMatch] = []
    for pattern in _REMINDER_PATTERNS:
        for match in pattern.finditer(text):
            matches.append(
                RawMatch(
                    full_span=_strip(match.group(0)),
                    action_phrase=_strip(match.group("action")),
                    strategy="reminder",
                    confidence_boost=REMINDER_BOOST,
                )
            )
    return matches


def deadlines(text: str) -> list[RawMatch]:
    """Due-date phrasing such as "X is due by Y"; always high priority."""

    matches: list[RawMatch] = []
    for pattern in _DEADLINE_PATTERNS:
        for match in pattern.finditer(text):
            task = _strip(match.group("task"))
            if not task:
                continue
            matches.append(
                RawMatch(
                    full_span=_strip(match.group(0)),
                    action_phrase=task,
                    strategy="deadline",
                    date_fragment=_strip(match.group("when")),
                    priority=Priority.HIGH,
                    confidence_boost=DEADLINE_BOOST,
                )
            )
    return matches


def action_items(text: str) -> list[RawMatch]:
    """Todo markers, "we should ..." suggestions and list entries."""

    matches: list[RawMatch] = []
    for pattern in _ACTION_ITEM_PATTERNS:
        for match in pattern.finditer(text):
            matches.append(
                RawMatch(
                    full_span=_strip(match.group(0)),
                    action_phrase=_strip(match.group("action")),
                    strategy="action_item",
                )
            )
    return matches


def household_tasks(text: str) -> list[RawMatch]:
    matches: list[RawMatch] = []
    for pattern in _HOUSEHOLD_PATTERNS:
        for match in pattern.finditer(text):
            if "room" in pattern.groupindex:
                action = f"{_strip(match.group('need'))} {match.group('room').lower()}"
            else:
                action = _strip(match.group("action"))
            full_span = _strip(match.group(0))
            matches.append(
                RawMatch(
                    full_span=full_span,
                    action_phrase=action,
                    strategy="household",
                    date_fragment=full_span,
                    category="household",
                    confidence_boost=HOUSEHOLD_BOOST,
                )
            )
    return matches


STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("direct_request", direct_requests),
    ("scheduled_item", scheduled_items),
    ("shopping_list", shopping_lists),
    ("appointment", appointments),
    ("reminder", reminders),
    ("deadline", deadlines),
    ("action_item", action_items),
    ("household", household_tasks),
)

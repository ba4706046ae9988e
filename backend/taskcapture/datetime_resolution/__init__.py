"""Natural-language date/time resolution package."""

from taskcapture.datetime_resolution.resolver import (
    DEFAULT_RULES,
    DateRule,
    DateTimeResolver,
    resolve_datetime,
)
from taskcapture.datetime_resolution.time_of_day import extract_time

__all__ = [
    "DEFAULT_RULES",
    "DateRule",
    "DateTimeResolver",
    "extract_time",
    "resolve_datetime",
]

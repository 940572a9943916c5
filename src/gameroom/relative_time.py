"""
Human readable "time ago" labels for Unix timestamps.
----

Elapsed time gets bucketed into the coarsest unit that still reads naturally,
e.g. 50 seconds is "a minute ago" and 40 hours is "2 days ago".
Every unit is rounded from the previous (rounded) unit, so a label never reads "1 hours".
"""

from typing import Callable

from src.core.models import UnixTimestamp

RelativeTimeFn = Callable[[UnixTimestamp, UnixTimestamp], str]

DAYS_PER_MONTH = 30.4

# upper (exclusive) bounds before switching to the next unit
SECONDS_THRESHOLD = 45
MINUTES_THRESHOLD = 45
HOURS_THRESHOLD = 22
DAYS_THRESHOLD = 26
MONTHS_THRESHOLD = 11


def _round(value: float) -> int:
    """Round half up (the builtin round() rounds half to even)."""
    return int(value + 0.5)


def _describe(seconds: int) -> str:
    """Wording for a non-negative number of elapsed seconds, without direction."""
    minutes = _round(seconds / 60)
    hours = _round(minutes / 60)
    days = _round(hours / 24)
    months = _round(days / DAYS_PER_MONTH)
    years = _round(months / 12)

    if seconds < SECONDS_THRESHOLD:
        return "a few seconds"
    if minutes <= 1:
        return "a minute"
    if minutes < MINUTES_THRESHOLD:
        return f"{minutes} minutes"
    if hours <= 1:
        return "an hour"
    if hours < HOURS_THRESHOLD:
        return f"{hours} hours"
    if days <= 1:
        return "a day"
    if days < DAYS_THRESHOLD:
        return f"{days} days"
    if months <= 1:
        return "a month"
    if months < MONTHS_THRESHOLD:
        return f"{months} months"
    if years <= 1:
        return "a year"
    return f"{years} years"


def format_relative_time(timestamp: UnixTimestamp, now: UnixTimestamp) -> str:
    """Label for `timestamp` as seen at the instant `now` (both in seconds since epoch)."""
    elapsed = int(now) - int(timestamp)
    if elapsed >= 0:
        return f"{_describe(elapsed)} ago"
    # clock skew between the players' nodes can put the record slightly in the future
    return f"in {_describe(-elapsed)}"

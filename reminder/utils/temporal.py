#!/usr/bin/env python3
"""
temporal.py
-----------
Clock and calendar helpers shared by every time-dependent operation.

All "now" readings go through a Clock so that the visibility engine,
mutators and backup throttling can be pinned to a fixed instant in tests.
Timestamps are integer UTC epoch seconds throughout; 0 means "unset".

Key Features:
    - SystemClock / FixedClock with a common interface
    - Projection of a stored due date onto the current year or month
    - Repeat window check across previous/current/next occurrences
    - Short and long display strings for timestamps

Usage:
    from reminder.utils.temporal import FixedClock, timestamp_for_date

    clock = FixedClock(timestamp_for_date(2024, 3, 8))
    this_year = timestamp_for_date_this_year(3, 10, clock)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

DAY_SECS = 24 * 60 * 60
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock:
    """Source of the current time. Subclasses return UTC epoch seconds."""

    def now(self) -> int:
        raise NotImplementedError


class SystemClock(Clock):
    """Wall-clock time."""

    def now(self) -> int:
        return int(time.time())


class FixedClock(Clock):
    """
    Clock frozen at a given instant.

    Used by tests (and by callers that need a consistent "now" across a
    batch of operations). The instant can be moved explicitly.
    """

    def __init__(self, timestamp: int) -> None:
        self._timestamp = int(timestamp)

    def now(self) -> int:
        return self._timestamp

    def set(self, timestamp: int) -> None:
        """Move the clock to an absolute instant."""
        self._timestamp = int(timestamp)

    def advance(self, seconds: int) -> int:
        """
        Move the clock forward.

        Returns:
            The new timestamp
        """
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        self._timestamp += int(seconds)
        return self._timestamp


SYSTEM_CLOCK = SystemClock()


def resolve_clock(clock: Optional[Clock]) -> Clock:
    """Return the given clock or the shared system clock."""
    return clock if clock is not None else SYSTEM_CLOCK


def current_timestamp(clock: Optional[Clock] = None) -> int:
    """Current UTC epoch seconds according to the clock."""
    return resolve_clock(clock).now()


def timestamp_to_datetime(timestamp: int) -> datetime:
    """Convert epoch seconds (negative before 1970) to an aware UTC datetime."""
    return EPOCH + timedelta(seconds=timestamp)


def timestamp_for_date(year: int, month: int, day: int) -> int:
    """
    Epoch seconds for UTC midnight of a calendar date.

    A day past the end of the month is clamped to the month's last day
    (31 → 30 in June, 29-Feb → 28-Feb in common years), so recurring due
    dates still land inside every month/year.

    Raises:
        ValueError: If month is outside 1..12 or day is below 1
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if day < 1:
        raise ValueError(f"day must be >= 1, got {day}")
    last_day = calendar.monthrange(year, month)[1]
    moment = datetime(year, month, min(day, last_day), tzinfo=timezone.utc)
    return int(moment.timestamp())


def timestamp_for_date_this_year(
    month: int, day: int, clock: Optional[Clock] = None
) -> int:
    """Project (month, day) onto the current UTC year at midnight."""
    today = timestamp_to_datetime(current_timestamp(clock))
    return timestamp_for_date(today.year, month, day)


def timestamp_for_date_this_year_month(day: int, clock: Optional[Clock] = None) -> int:
    """Project a day-of-month onto the current UTC year and month at midnight."""
    today = timestamp_to_datetime(current_timestamp(clock))
    return timestamp_for_date(today.year, today.month, day)


@dataclass(frozen=True)
class RepeatCandidates:
    """Occurrences of a recurring due date around "now"."""

    current: int
    previous: int
    next: int

    @classmethod
    def around(cls, current: int, cycle_secs: int) -> "RepeatCandidates":
        """Build candidates one cycle before and after the current occurrence."""
        return cls(current=current, previous=current - cycle_secs, next=current + cycle_secs)

    def __iter__(self) -> Iterator[int]:
        return iter((self.current, self.previous, self.next))


def is_within_repeat_window(
    candidates: RepeatCandidates,
    days_before: int,
    days_after: int,
    clock: Optional[Clock] = None,
) -> bool:
    """
    Check whether "now" falls inside the window of any candidate occurrence.

    The window of an occurrence is [occurrence - days_before,
    occurrence + days_after], both ends inclusive.

    Args:
        candidates: Current, previous and next occurrences
        days_before: Days before an occurrence to start showing
        days_after: Days after an occurrence to keep showing

    Returns:
        True if any of the three windows contains "now"
    """
    now = current_timestamp(clock)
    return any(
        occurrence - days_before * DAY_SECS <= now <= occurrence + days_after * DAY_SECS
        for occurrence in candidates
    )


def format_timestamp(timestamp: int, fmt: str) -> str:
    """Format a timestamp in UTC; only an unset (0) timestamp renders as 'nil'."""
    if timestamp != 0:
        return timestamp_to_datetime(timestamp).strftime(fmt)
    return "nil"


def format_long(timestamp: int) -> str:
    """e.g. 'Sunday, 10-Mar-24 00:00:00 UTC'"""
    return format_timestamp(timestamp, "%A, %d-%b-%y %H:%M:%S UTC")


def format_short(timestamp: int) -> str:
    """e.g. '10-Mar-24'"""
    return format_timestamp(timestamp, "%d-%b-%y")

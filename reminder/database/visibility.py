#!/usr/bin/env python3
"""
visibility.py
-------------
Due-date visibility: which pending notes should be surfaced "now".

Policies, chosen by the note's tags (a note without a due date is never
surfaced):

    Plain due date (no "repeat" group tag)
        From 7 days before the due date, with no upper bound, until the
        note is marked done.

    repeat-annually
        Month/day of the due date projected onto the previous, current and
        next year; shown from 3 days before to 7 days after an occurrence.

    repeat-monthly
        Day of the due date projected onto the current month, with the
        previous/next occurrences approximated as -30/+30 days (not exact
        calendar months); shown from 1 day before to 3 days after.

A note tagged both repeat-annually and repeat-monthly qualifies through
either check. A "repeat" group tag without one of these two slugs gives
the note no policy at all.

The engine only reads notes and tags.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Set

from reminder.models.enums import NoteStatus
from reminder.models.note import Note
from reminder.models.tag import REPEAT_ANNUALLY, REPEAT_MONTHLY
from reminder.utils.temporal import (
    DAY_SECS,
    Clock,
    RepeatCandidates,
    current_timestamp,
    is_within_repeat_window,
    resolve_clock,
    timestamp_for_date_this_year,
    timestamp_for_date_this_year_month,
    timestamp_to_datetime,
)

from .managers.tag_registry import TagRegistry

PLAIN_DAYS_BEFORE = 7

ANNUAL_CYCLE_SECS = 365 * DAY_SECS
ANNUAL_DAYS_BEFORE = 3
ANNUAL_DAYS_AFTER = 7

MONTHLY_CYCLE_SECS = 30 * DAY_SECS
MONTHLY_DAYS_BEFORE = 1
MONTHLY_DAYS_AFTER = 3


class DueDateVisibility:
    """
    Selects pending notes whose due date (or recurrence) is near.

    Attributes:
        tags: Registry used to resolve the repeat group and slugs
        clock: Source of "now"
    """

    def __init__(self, tags: TagRegistry, clock: Optional[Clock] = None) -> None:
        self.tags = tags
        self.clock = resolve_clock(clock)

    # ---- Policies ----
    def plain_due(self, note: Note) -> bool:
        now = current_timestamp(self.clock)
        return now >= note.complete_by - PLAIN_DAYS_BEFORE * DAY_SECS

    def annual_due(self, note: Note) -> bool:
        due = timestamp_to_datetime(note.complete_by)
        current = timestamp_for_date_this_year(due.month, due.day, self.clock)
        return is_within_repeat_window(
            RepeatCandidates.around(current, ANNUAL_CYCLE_SECS),
            ANNUAL_DAYS_BEFORE,
            ANNUAL_DAYS_AFTER,
            self.clock,
        )

    def monthly_due(self, note: Note) -> bool:
        due = timestamp_to_datetime(note.complete_by)
        current = timestamp_for_date_this_year_month(due.day, self.clock)
        return is_within_repeat_window(
            RepeatCandidates.around(current, MONTHLY_CYCLE_SECS),
            MONTHLY_DAYS_BEFORE,
            MONTHLY_DAYS_AFTER,
            self.clock,
        )

    # ---- Selection ----
    def _tag_id(self, slug: str) -> Optional[int]:
        tag = self.tags.get(slug)
        return tag.id if tag is not None else None

    def is_visible(self, note: Note, repeat_tag_ids: Optional[Set[int]] = None) -> bool:
        """
        Whether a single note should be surfaced now.

        Args:
            note: Note to check
            repeat_tag_ids: Precomputed ids of the "repeat" group
        """
        if note.status is not NoteStatus.PENDING or not note.has_due_date:
            return False

        if repeat_tag_ids is None:
            repeat_tag_ids = self.tags.repeat_tag_ids()
        if not note.has_any_tag(repeat_tag_ids):
            return self.plain_due(note)

        annually_id = self._tag_id(REPEAT_ANNUALLY)
        if annually_id is not None and annually_id in note.tag_ids and self.annual_due(note):
            return True
        monthly_id = self._tag_id(REPEAT_MONTHLY)
        if monthly_id is not None and monthly_id in note.tag_ids and self.monthly_due(note):
            return True
        return False

    def notes_approaching_due_date(self, notes: Iterable[Note]) -> List[Note]:
        """
        Pending notes to surface now, in their given order.

        Callers sort the result before display.
        """
        repeat_tag_ids = self.tags.repeat_tag_ids()
        return [note for note in notes if self.is_visible(note, repeat_tag_ids)]

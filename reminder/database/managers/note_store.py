#!/usr/bin/env python3
"""
note_store.py
--------------------
Manages the ordered collection of Note entities.

Key Features:
    - Registration of notes against a set of tag ids
    - Mutators for text, summary, due date, comments, tags, status and the
      main/incidental flag; each successful call bumps updated_at
    - Filtering by status, tag and main flag
    - Canonical ordering: most recently updated first

Every mutator validates before touching the note, so a rejected call leaves
it exactly as it was.

Usage:
    store = NoteStore(clock=clock, logger=logger)
    note = store.register([0, 4], "Renew passport")
    store.update_complete_by(note, "10-03-2020")
    store.update_status(note, "done", repeat_tag_ids={4, 5})
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Union

from reminder.core.exceptions import ValidationError
from reminder.core.logging_manager import ReminderLogger
from reminder.core.validators import DataValidator
from reminder.models.enums import NoteStatus, Outcome
from reminder.models.note import Comment, Note
from reminder.utils.display import external_texts
from reminder.utils.temporal import Clock

from .base_manager import BaseManager


def sort_notes(notes: Iterable[Note]) -> List[Note]:
    """Notes ordered by updated_at, most recent first (stable)."""
    return sorted(notes, key=lambda note: note.updated_at, reverse=True)


def _unique_ids(tag_ids: Iterable[int]) -> List[int]:
    seen: List[int] = []
    for tag_id in tag_ids:
        if tag_id not in seen:
            seen.append(int(tag_id))
    return seen


def _coerce_status(status: Union[NoteStatus, str]) -> NoteStatus:
    try:
        return NoteStatus(status)
    except ValueError as e:
        raise ValidationError(f"Unknown note status: {status!r}") from e


class NoteStore(BaseManager):
    """Ordered collection of notes; never deletes."""

    def __init__(
        self,
        notes: Optional[Iterable[Note]] = None,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> None:
        super().__init__(clock, logger)
        self.notes: List[Note] = list(notes or [])

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, tag_ids: Optional[Iterable[int]], text: str) -> Note:
        """
        Create and append a pending note without a due date.

        Args:
            tag_ids: Ids of the tags to attach (may be empty)
            text: Note text; trimmed

        Returns:
            The new Note

        Raises:
            EmptyInputError: If the text is blank
        """
        note_text = DataValidator.require_text(text, "Note's text")
        now = self._now()
        note = Note(
            text=note_text,
            tag_ids=_unique_ids(tag_ids or []),
            created_at=now,
            updated_at=now,
        )
        self.notes.append(note)
        self.log.log_operation(
            "note_registered", {"text": note.text, "tag_ids": note.tag_ids}
        )
        return note

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def _touch(self, note: Note, operation: str) -> Outcome:
        note.updated_at = self._now()
        self.log.log_operation(operation, {"text": note.text})
        return Outcome.APPLIED

    def update_text(self, note: Note, text: str) -> Outcome:
        """
        Raises:
            EmptyInputError: If the text is blank
        """
        note.text = DataValidator.require_text(text, "Note's text")
        return self._touch(note, "note_text_updated")

    def update_summary(self, note: Note, text: str) -> Outcome:
        """
        Raises:
            EmptyInputError: If the summary is blank
        """
        note.summary = DataValidator.require_text(text, "Note's summary")
        return self._touch(note, "note_summary_updated")

    def update_complete_by(self, note: Note, date_text: str) -> Outcome:
        """
        Set or clear the due date.

        Args:
            note: Note to update
            date_text: 'DD-MM-YYYY', or 'nil' to clear the due date

        Raises:
            EmptyInputError: If date_text is blank
            InvalidDateError: If date_text is not a real DD-MM-YYYY date
        """
        note.complete_by = DataValidator.parse_due_date(date_text)
        return self._touch(note, "note_due_date_updated")

    def add_comment(self, note: Note, text: str) -> Outcome:
        """
        Append a comment.

        Raises:
            EmptyInputError: If the comment is blank
        """
        comment_text = DataValidator.require_text(text, "Note's comment text")
        note.comments.append(Comment(text=comment_text, created_at=self._now()))
        return self._touch(note, "note_comment_added")

    def update_tags(self, note: Note, tag_ids: Iterable[int]) -> Outcome:
        """Replace the note's tags. Ids are not checked against the registry."""
        note.tag_ids = _unique_ids(tag_ids)
        return self._touch(note, "note_tags_updated")

    def update_status(
        self,
        note: Note,
        status: Union[NoteStatus, str],
        repeat_tag_ids: Iterable[int],
    ) -> Outcome:
        """
        Change the note's status.

        Recurring notes (carrying a repeat-group tag) never change status,
        and setting the current status again is a no-op; both are reported
        as Outcome.SKIPPED rather than errors.

        Raises:
            ValidationError: If status is not a known NoteStatus
        """
        new_status = _coerce_status(status)
        if note.has_any_tag(repeat_tag_ids):
            self.log.log_warning(
                'Update skipped as one of the associated tags is a "repeat" group tag',
                {"text": note.text},
            )
            return Outcome.SKIPPED
        if note.status is new_status:
            self.log.log_warning(
                "Update skipped as there were no changes", {"text": note.text}
            )
            return Outcome.SKIPPED

        note.status = new_status
        return self._touch(note, "note_status_updated")

    def toggle_main_flag(self, note: Note) -> Outcome:
        note.is_main = not note.is_main
        return self._touch(note, "note_main_flag_toggled")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def sorted(self) -> List[Note]:
        """All notes in canonical order."""
        return sort_notes(self.notes)

    def with_status(self, status: Union[NoteStatus, str]) -> List[Note]:
        wanted = _coerce_status(status)
        return sort_notes(note for note in self.notes if note.status is wanted)

    def with_tag_and_status(
        self, tag_id: int, status: Union[NoteStatus, str]
    ) -> List[Note]:
        return [note for note in self.with_status(status) if tag_id in note.tag_ids]

    def only_main(self) -> List[Note]:
        return sort_notes(note for note in self.notes if note.is_main)

    def external_texts(self, max_width: int) -> List[str]:
        """Compact one-line labels for all notes, in canonical order."""
        return external_texts(self.sorted(), max_width)

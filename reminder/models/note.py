#!/usr/bin/env python3
"""
note.py
-------
Note and Comment entities.

A note is a task item referencing tags by id. Comments are append-only.
Notes compare by identity: two notes with the same text are still two
separate tasks.

Mutations live in reminder.database.managers.note_store.NoteStore; the
entity itself only knows how to describe and serialize itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from reminder.core.exceptions import ValidationError
from reminder.core.validators import DataValidator

from .enums import NoteStatus


@dataclass
class Comment:
    """A single remark on a note."""

    text: str
    created_at: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "created_at": self.created_at}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        if not isinstance(data, dict):
            raise ValidationError(f"Comment entry must be an object, got {data!r}")
        return cls(
            text=str(data.get("text") or ""),
            created_at=DataValidator.normalize_int(data.get("created_at")),
        )


@dataclass(eq=False)
class Note:
    """
    A task item.

    Attributes:
        text: Non-empty title of the task
        comments: Append-only comment history
        status: pending or done
        tag_ids: Ids of associated tags (unique, order kept)
        complete_by: Due date as epoch seconds; 0 means no due date
        summary: Optional longer description, may span several lines
        is_main: Main (True) vs incidental (False) priority flag
        created_at: Epoch seconds, never changed after creation
        updated_at: Epoch seconds of the last successful mutation
    """

    text: str
    comments: List[Comment] = field(default_factory=list)
    status: NoteStatus = NoteStatus.PENDING
    tag_ids: List[int] = field(default_factory=list)
    complete_by: int = 0
    summary: str = ""
    is_main: bool = False
    created_at: int = 0
    updated_at: int = 0

    @property
    def has_due_date(self) -> bool:
        return self.complete_by != 0

    def has_any_tag(self, tag_ids: Iterable[int]) -> bool:
        """True if the note carries at least one of the given tag ids."""
        return not set(self.tag_ids).isdisjoint(tag_ids)

    def comment_texts(self) -> List[str]:
        return [comment.text for comment in self.comments]

    def searchable_text(self) -> str:
        """
        Text used by full-text search: the note text followed by its
        comments in brackets, e.g. 'Renew passport [booked slot, paid fee]'.
        """
        if self.comments:
            comments = ", ".join(self.comment_texts())
        else:
            comments = "no-comments"
        return f"{self.text} [{comments}]"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "comments": [comment.to_dict() for comment in self.comments],
            "status": self.status.value,
            "tag_ids": list(self.tag_ids),
            "complete_by": self.complete_by,
            "summary": self.summary,
            "is_main": self.is_main,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Note":
        """
        Build a note from its stored form; missing fields take zero values.

        Raises:
            ValidationError: If a field has an unusable value
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Note entry must be an object, got {data!r}")

        raw_status = data.get("status") or NoteStatus.PENDING.value
        try:
            status = NoteStatus(raw_status)
        except ValueError as e:
            raise ValidationError(f"Unknown note status: {raw_status!r}") from e

        return cls(
            text=str(data.get("text") or ""),
            comments=[Comment.from_dict(c) for c in data.get("comments") or []],
            status=status,
            tag_ids=[DataValidator.normalize_int(i) for i in data.get("tag_ids") or []],
            complete_by=DataValidator.normalize_int(data.get("complete_by")),
            summary=str(data.get("summary") or ""),
            is_main=DataValidator.normalize_bool(data.get("is_main")),
            created_at=DataValidator.normalize_int(data.get("created_at")),
            updated_at=DataValidator.normalize_int(data.get("updated_at")),
        )

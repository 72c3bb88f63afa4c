"""
models package
--------------
Entities of the reminder data file.

    Tag      - named category, optionally in a group ("repeat", "priority"...)
    Comment  - append-only remark attached to a note
    Note     - task item with status, due date, tags and comments
    User     - descriptive owner profile
"""
from .enums import NoteStatus, Outcome
from .note import Comment, Note
from .tag import (
    BASIC_TAGS,
    REPEAT_ANNUALLY,
    REPEAT_GROUP,
    REPEAT_MONTHLY,
    Tag,
)
from .user import User

__all__ = [
    "BASIC_TAGS",
    "Comment",
    "Note",
    "NoteStatus",
    "Outcome",
    "REPEAT_ANNUALLY",
    "REPEAT_GROUP",
    "REPEAT_MONTHLY",
    "Tag",
    "User",
]

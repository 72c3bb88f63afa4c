"""
Enumeration Types
------------------

Enums:
    - NoteStatus: Completion status of a note (pending, done)
    - Outcome: Result of a mutation that may legitimately do nothing
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class NoteStatus(str, Enum):
    """
    Completion status of a note.
    - PENDING: Still to be done (default for new notes)
    - DONE: Completed
    """

    PENDING = "pending"
    DONE = "done"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available status choices."""
        return [status.value for status in cls]

    @property
    def initial(self) -> str:
        """Single upper-case letter used in compact listings."""
        return self.value[0].upper()


class Outcome(str, Enum):
    """
    Result of an operation that is not an error but may not change anything.

    - APPLIED: The change was made (and persisted, at aggregate level)
    - SKIPPED: Nothing to do (status unchanged, repeat-group note, backup gap)
    - CANCELLED: The caller's selection was cancelled
    - EXIT_TO_MENU: The caller asked to leave the current listing
    """

    APPLIED = "applied"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"
    EXIT_TO_MENU = "exit_to_menu"

    @property
    def changed(self) -> bool:
        return self is Outcome.APPLIED

"""
database package
----------------
The reminder data engine: tag registry, note store, due-date visibility
and the ReminderData aggregate persisted as one JSON file.
"""
from .manager import ReminderData, ReminderStats
from .visibility import DueDateVisibility

__all__ = ["DueDateVisibility", "ReminderData", "ReminderStats"]

"""
managers package
--------------------
Collections owned by the ReminderData aggregate.

Available Managers:
    BaseManager: Shared clock/logger plumbing
    TagRegistry: Ordered tags; id assignment, slug uniqueness, group lookup
    NoteStore: Ordered notes; mutation, filtering and canonical sorting

Usage:
    from reminder.database.managers import TagRegistry, NoteStore

    tags = TagRegistry(clock=clock, logger=logger)
    notes = NoteStore(clock=clock, logger=logger)
"""
from .base_manager import BaseManager
from .note_store import NoteStore, sort_notes
from .tag_registry import TagRegistry

__all__ = ["BaseManager", "NoteStore", "TagRegistry", "sort_notes"]

#!/usr/bin/env python3
"""
manager.py
--------------------
The ReminderData aggregate: the single unit that is read from and written
to the data file.

Provides the ReminderData class, which owns:
    - the User profile
    - the TagRegistry (tags)
    - the NoteStore (notes)
    - the data file location and backup bookkeeping

Every mutating operation writes the whole aggregate back to the data file
once it succeeds. A rejected operation (validation error) changes nothing
and writes nothing; an operation reported as Outcome.SKIPPED writes nothing.
There is no batching and no partial write.

Core Operations:
    Lifecycle:
        - load: Read an existing data file
        - ensure_data_file: Create a fresh data file with basic tags if missing
        - persist: Serialize the aggregate to the data file

    Tags:
        - register_basic_tags, register_tag
        - tag_from_slug, tags_from_ids, tag_ids_for_group, sorted_tag_slugs

    Notes:
        - register_note
        - update_note_text, update_note_summary, update_note_complete_by
        - add_note_comment, update_note_tags, update_note_status
        - toggle_note_main_flag

    Queries:
        - find_notes_by_tag_id, find_notes_by_tag_slug
        - notes_approaching_due_date, search, stats

    Backups:
        - create_backup, auto_backup, list_backups, restore_backup

Usage:
    data = ReminderData.ensure_data_file("~/reminder/data.json")
    note = data.register_note([data.tag_from_slug("current").id], "Pay rent")
    data.update_note_complete_by(note, "01-11-2024")
    for note in data.notes_approaching_due_date():
        print(note.text)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

# --- Local imports ---
from reminder.core.backup_manager import BackupManager
from reminder.core.exceptions import StorageError, ValidationError
from reminder.core.logging_manager import ReminderLogger, safe_logger
from reminder.core.paths import expand_path
from reminder.core.validators import DataValidator
from reminder.models.enums import NoteStatus, Outcome
from reminder.models.note import Note
from reminder.models.tag import Tag
from reminder.models.user import User
from reminder.utils.display import render_note
from reminder.utils.temporal import Clock, resolve_clock

from .decorators import log_operation, persists
from .managers import NoteStore, TagRegistry, sort_notes
from .visibility import DueDateVisibility


@dataclass
class ReminderStats:
    """Counts reported by ReminderData.stats()."""

    data_file: str
    tag_count: int
    pending_count: int
    total_count: int

    def summary(self) -> str:
        return (
            f'Stats of "{self.data_file}"\n'
            f"  - Number of Tags: {self.tag_count}\n"
            f"  - Pending Notes: {self.pending_count}/{self.total_count}\n"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data_file": self.data_file,
            "tag_count": self.tag_count,
            "pending_count": self.pending_count,
            "total_count": self.total_count,
        }


class ReminderData:
    """
    Aggregate of user, tags and notes backed by one JSON data file.

    Attributes:
        data_file: Path of the JSON data file
        user: Owner profile
        tag_registry: Ordered tags
        note_store: Ordered notes
        last_backup_at: Epoch seconds of the last automatic backup
        updated_at: Epoch seconds of the last persist
        clock: Single source of "now" for every timestamp
        logger: Optional logger
    """

    def __init__(
        self,
        data_file: Union[str, Path],
        user: Optional[User] = None,
        tags: Optional[Iterable[Tag]] = None,
        notes: Optional[Iterable[Note]] = None,
        last_backup_at: int = 0,
        updated_at: int = 0,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> None:
        self.data_file = expand_path(data_file)
        self.user = user or User()
        self.last_backup_at = last_backup_at
        self.updated_at = updated_at
        self.clock = resolve_clock(clock)
        self.logger = logger

        self.tag_registry = TagRegistry(tags, clock=self.clock, logger=logger)
        self.note_store = NoteStore(notes, clock=self.clock, logger=logger)
        self.visibility = DueDateVisibility(self.tag_registry, clock=self.clock)
        self.backup_manager = BackupManager(self.data_file, clock=self.clock, logger=logger)

    @property
    def tags(self) -> List[Tag]:
        return self.tag_registry.tags

    @property
    def notes(self) -> List[Note]:
        return self.note_store.notes

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user.to_dict(),
            "notes": [note.to_dict() for note in self.notes],
            "tags": [tag.to_dict() for tag in self.tags],
            "data_file": str(self.data_file),
            "last_backup_at": self.last_backup_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        data_file: Union[str, Path],
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> "ReminderData":
        """
        Build an aggregate from a parsed data file.

        The path the data was read from wins over the stored 'data_file'
        value, so a moved data file keeps writing to its new location.

        Raises:
            ValidationError: If the document has the wrong shape
        """
        if not isinstance(data, dict):
            raise ValidationError("Data file must contain a JSON object")
        return cls(
            data_file=data_file,
            user=User.from_dict(data.get("user")),
            tags=[Tag.from_dict(t) for t in data.get("tags") or []],
            notes=[Note.from_dict(n) for n in data.get("notes") or []],
            last_backup_at=DataValidator.normalize_int(data.get("last_backup_at")),
            updated_at=DataValidator.normalize_int(data.get("updated_at")),
            clock=clock,
            logger=logger,
        )

    @classmethod
    def load(
        cls,
        data_file: Union[str, Path],
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> "ReminderData":
        """
        Read an existing data file.

        Raises:
            StorageError: If the file cannot be read or is not valid JSON
            ValidationError: If the JSON does not describe reminder data
        """
        path = expand_path(data_file)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            safe_logger(logger).log_error(e, {"operation": "load", "data_file": str(path)})
            raise StorageError(f"Cannot read data file {path}: {e}") from e
        except json.JSONDecodeError as e:
            safe_logger(logger).log_error(e, {"operation": "load", "data_file": str(path)})
            raise StorageError(f"Data file {path} is not valid JSON: {e}") from e

        data = cls.from_dict(raw, path, clock=clock, logger=logger)
        safe_logger(logger).log_info(
            f"Read contents of {path}",
            {"tags": len(data.tags), "notes": len(data.notes)},
        )
        return data

    @classmethod
    def ensure_data_file(
        cls,
        data_file: Union[str, Path],
        user: Optional[User] = None,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> "ReminderData":
        """
        Load the data file, creating it (with basic tags) when missing.

        Args:
            data_file: Data file path ('~' is expanded)
            user: Profile for a newly created file

        Returns:
            The loaded or newly created aggregate

        Raises:
            StorageError: If the file cannot be created or read
        """
        path = expand_path(data_file)
        if path.exists():
            return cls.load(path, clock=clock, logger=logger)

        safe_logger(logger).log_info(f"Generating new data file {path}")
        data = cls(path, user=user, clock=clock, logger=logger)
        data.persist()
        data.register_basic_tags()
        return data

    def persist(self) -> None:
        """
        Write the whole aggregate to the data file.

        Raises:
            StorageError: If writing fails; in-memory state is kept
        """
        self.updated_at = self.clock.now()
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            self.data_file.write_text(
                json.dumps(self.to_dict(), indent=4, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "persist", "data_file": str(self.data_file)}
            )
            raise StorageError(f"Failed to write data file {self.data_file}: {e}") from e

        safe_logger(self.logger).log_debug(
            "Updated the data file", {"data_file": str(self.data_file)}
        )

    def _replace_with(self, other: "ReminderData") -> None:
        self.user = other.user
        self.last_backup_at = other.last_backup_at
        self.updated_at = other.updated_at
        self.tag_registry.tags = list(other.tags)
        self.note_store.notes = list(other.notes)

    # -------------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------------

    @log_operation("register_basic_tags")
    @persists
    def register_basic_tags(self) -> List[Tag]:
        """
        Raises:
            RegistryNotEmptyError: If tags already exist
        """
        return self.tag_registry.seed_basic_tags()

    @log_operation("register_tag")
    @persists
    def register_tag(self, slug: str, group: str = "") -> Tag:
        """
        Raises:
            EmptyInputError: If the slug is blank
            DuplicateSlugError: If the slug is taken
        """
        return self.tag_registry.register(slug, group)

    def tag_from_slug(self, slug: str) -> Optional[Tag]:
        return self.tag_registry.get(slug)

    def tags_from_ids(self, tag_ids: Iterable[int]) -> List[Tag]:
        return self.tag_registry.from_ids(tag_ids)

    def tag_ids_for_group(self, group: str) -> set:
        return self.tag_registry.ids_for_group(group)

    def sorted_tag_slugs(self) -> List[str]:
        return self.tag_registry.sorted_slugs()

    # -------------------------------------------------------------------------
    # Notes
    # -------------------------------------------------------------------------

    @log_operation("register_note")
    @persists
    def register_note(self, tag_ids: Optional[Iterable[int]], text: str) -> Note:
        """
        Raises:
            EmptyInputError: If the text is blank
        """
        return self.note_store.register(tag_ids, text)

    @log_operation("update_note_text")
    @persists
    def update_note_text(self, note: Note, text: str) -> Outcome:
        return self.note_store.update_text(note, text)

    @log_operation("update_note_summary")
    @persists
    def update_note_summary(self, note: Note, text: str) -> Outcome:
        return self.note_store.update_summary(note, text)

    @log_operation("update_note_complete_by")
    @persists
    def update_note_complete_by(self, note: Note, date_text: str) -> Outcome:
        return self.note_store.update_complete_by(note, date_text)

    @log_operation("add_note_comment")
    @persists
    def add_note_comment(self, note: Note, text: str) -> Outcome:
        return self.note_store.add_comment(note, text)

    @log_operation("update_note_tags")
    @persists
    def update_note_tags(self, note: Note, tag_ids: Iterable[int]) -> Outcome:
        return self.note_store.update_tags(note, tag_ids)

    @log_operation("update_note_status")
    @persists
    def update_note_status(
        self, note: Note, status: Union[NoteStatus, str]
    ) -> Outcome:
        """
        Change a note's status; recurring notes and unchanged statuses are
        reported as Outcome.SKIPPED.
        """
        repeat_tag_ids = self.tag_registry.repeat_tag_ids()
        return self.note_store.update_status(note, status, repeat_tag_ids)

    @log_operation("toggle_note_main_flag")
    @persists
    def toggle_note_main_flag(self, note: Note) -> Outcome:
        return self.note_store.toggle_main_flag(note)

    def note_text(self, note: Note) -> str:
        """Detail view of a note with tag slugs resolved."""
        return render_note(note, self.tags_from_ids(note.tag_ids))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find_notes_by_tag_id(
        self, tag_id: int, status: Union[NoteStatus, str] = NoteStatus.PENDING
    ) -> List[Note]:
        return self.note_store.with_tag_and_status(tag_id, status)

    def find_notes_by_tag_slug(
        self, slug: str, status: Union[NoteStatus, str] = NoteStatus.PENDING
    ) -> List[Note]:
        """Notes with the tag and status; empty if the slug is unknown."""
        tag = self.tag_from_slug(slug)
        if tag is None:
            return []
        return self.find_notes_by_tag_id(tag.id, status)

    def notes_approaching_due_date(self) -> List[Note]:
        """Pending notes the due-date engine surfaces now (unordered)."""
        return self.visibility.notes_approaching_due_date(self.notes)

    def search(self, query: str) -> List[Note]:
        """
        Case-insensitive substring search over note text and comments.

        Returns:
            Matching notes in canonical order; all notes for a blank query
        """
        needle = (query or "").strip().lower()
        return [
            note
            for note in sort_notes(self.notes)
            if needle in note.searchable_text().lower()
        ]

    def stats(self) -> ReminderStats:
        return ReminderStats(
            data_file=str(self.data_file),
            tag_count=len(self.tags),
            pending_count=len(self.note_store.with_status(NoteStatus.PENDING)),
            total_count=len(self.notes),
        )

    # -------------------------------------------------------------------------
    # Backups
    # -------------------------------------------------------------------------

    @log_operation("create_backup")
    def create_backup(self) -> Path:
        """
        Raises:
            BackupError: If the data file is missing or cannot be copied
        """
        return self.backup_manager.create_backup()

    @log_operation("auto_backup")
    def auto_backup(self, min_gap_secs: int) -> Optional[Path]:
        """
        Back up the data file unless the last backup is recent.

        Args:
            min_gap_secs: Minimum seconds since last_backup_at

        Returns:
            Path of the new backup, or None when skipped

        Raises:
            BackupError: If the backup fails
            StorageError: If the updated bookkeeping cannot be written
        """
        now = self.clock.now()
        gap = now - self.last_backup_at
        if gap < min_gap_secs:
            safe_logger(self.logger).log_info(
                "Skipping automatic backup", {"gap": gap, "min_gap_secs": min_gap_secs}
            )
            return None

        backup_path = self.create_backup()
        self.last_backup_at = now
        self.persist()
        return backup_path

    def list_backups(self) -> List[Dict[str, Any]]:
        return self.backup_manager.list_backups()

    @log_operation("restore_backup")
    def restore_backup(self, backup_path: Union[str, Path]) -> Optional[Path]:
        """
        Replace the data file with a backup and reload it.

        Returns:
            Path of the safety backup taken before restoring

        Raises:
            BackupError: If the restore fails
            StorageError: If the restored file cannot be read
        """
        safety_backup = self.backup_manager.restore_backup(Path(backup_path))
        restored = ReminderData.load(self.data_file, clock=self.clock, logger=self.logger)
        self._replace_with(restored)
        return safety_backup

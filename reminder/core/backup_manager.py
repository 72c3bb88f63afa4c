#!/usr/bin/env python3
"""
backup_manager.py
--------------------
Backup and restore of the reminder data file.

Backups are written next to the data file. For a data file 'P.ext':

    P_backup_<unix seconds>.ext   timestamped copy
    P_backup_latest.ext           alias of the most recent backup

The alias is a symlink; where symlinks are unavailable it is a plain copy.

Usage:
    from reminder.core.backup_manager import BackupManager

    manager = BackupManager(data_file, clock=clock, logger=logger)
    backup_path = manager.create_backup()
    backups = manager.list_backups()
    manager.restore_backup(backup_path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Local imports ---
from reminder.utils.temporal import Clock, format_long, resolve_clock

from .exceptions import BackupError
from .logging_manager import ReminderLogger, safe_logger

BACKUP_MARKER = "_backup_"
LATEST_TAG = "latest"


class BackupManager:
    """
    Creates, lists and restores backups of a single data file.

    Attributes:
        data_file: Path of the data file being backed up
        clock: Source of the backup timestamp
        logger: Optional logger for backup operations
    """

    def __init__(
        self,
        data_file: Path,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> None:
        self.data_file = Path(data_file)
        self.clock = resolve_clock(clock)
        self.logger = logger

    # ---- Naming ----
    def _sibling(self, tag: str) -> Path:
        stem = self.data_file.stem
        return self.data_file.with_name(f"{stem}{BACKUP_MARKER}{tag}{self.data_file.suffix}")

    def backup_path_for(self, timestamp: int) -> Path:
        """Path of the backup taken at the given epoch second."""
        return self._sibling(str(timestamp))

    @property
    def latest_path(self) -> Path:
        """Alias that always refers to the most recent backup."""
        return self._sibling(LATEST_TAG)

    def _backup_pattern(self) -> "re.Pattern[str]":
        return re.compile(
            rf"^{re.escape(self.data_file.stem + BACKUP_MARKER)}(\d+){re.escape(self.data_file.suffix)}$"
        )

    # ---- Operations ----
    def _point_latest_to(self, backup_path: Path) -> None:
        latest = self.latest_path
        if latest.is_symlink() or latest.exists():
            latest.unlink()
        try:
            os.symlink(backup_path.name, latest)
        except (OSError, NotImplementedError):
            shutil.copy2(backup_path, latest)

    def create_backup(self) -> Path:
        """
        Copy the data file to a timestamped sibling and move the latest alias.

        Does not check how long ago the previous backup was taken.

        Returns:
            Path to the created backup file

        Raises:
            BackupError: If the data file is missing or copying fails
        """
        if not self.data_file.exists():
            raise BackupError(f"Data file not found: {self.data_file}")

        backup_path = self.backup_path_for(self.clock.now())
        try:
            shutil.copy2(self.data_file, backup_path)
            self._point_latest_to(backup_path)
        except OSError as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "create_backup", "target_path": str(backup_path)}
            )
            raise BackupError(f"Failed to create backup: {e}") from e

        safe_logger(self.logger).log_operation(
            "backup_created",
            {
                "backup_path": str(backup_path),
                "latest_path": str(self.latest_path),
                "backup_size": backup_path.stat().st_size,
            },
        )
        return backup_path

    def list_backups(self) -> List[Dict[str, Any]]:
        """
        List timestamped backups, newest first.

        Returns:
            Dictionaries with name, path, size, timestamp and created
        """
        pattern = self._backup_pattern()
        backups = []
        directory = self.data_file.parent
        if not directory.exists():
            return backups

        for candidate in directory.iterdir():
            match = pattern.match(candidate.name)
            if not match or not candidate.is_file():
                continue
            timestamp = int(match.group(1))
            backups.append(
                {
                    "name": candidate.name,
                    "path": str(candidate),
                    "size": candidate.stat().st_size,
                    "timestamp": timestamp,
                    "created": format_long(timestamp),
                }
            )
        backups.sort(key=lambda b: b["timestamp"], reverse=True)
        return backups

    def restore_backup(self, backup_path: Path) -> Optional[Path]:
        """
        Overwrite the data file with a backup.

        A safety backup of the current data file is taken first.

        Args:
            backup_path: Backup file to restore

        Returns:
            Path of the safety backup, or None if there was no data file

        Raises:
            BackupError: If the backup is missing or the restore fails
        """
        backup_path = Path(backup_path)
        if not backup_path.exists():
            raise BackupError(f"Backup file not found: {backup_path}")

        try:
            # Read first: the safety backup may reuse the same file name
            content = backup_path.read_bytes()
        except OSError as e:
            raise BackupError(f"Cannot read backup {backup_path}: {e}") from e

        safety_backup = self.create_backup() if self.data_file.exists() else None

        try:
            self.data_file.write_bytes(content)
        except OSError as e:
            safe_logger(self.logger).log_error(
                e, {"operation": "restore_backup", "backup_path": str(backup_path)}
            )
            raise BackupError(f"Failed to restore backup: {e}") from e

        safe_logger(self.logger).log_operation(
            "backup_restored",
            {
                "restored_from": str(backup_path),
                "pre_restore_backup": str(safety_backup) if safety_backup else None,
            },
        )
        return safety_backup

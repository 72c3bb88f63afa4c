#!/usr/bin/env python3
"""
config.py
---------
YAML configuration for the reminder tool.

Example config.yaml:

    data_file: ~/Dropbox/reminder/data.json
    log_dir: ~/reminder/logs
    auto_backup_gap_secs: 604800

Every key is optional; missing keys fall back to the defaults in
reminder.core.paths. Unknown keys are ignored.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from .exceptions import ValidationError
from .paths import DATA_FILE, LOG_DIR, expand_path

DEFAULT_AUTO_BACKUP_GAP_SECS = 7 * 24 * 60 * 60


@dataclass
class ReminderConfig:
    """
    Runtime configuration.

    Attributes:
        data_file: Path of the JSON data file
        log_dir: Directory for log files
        auto_backup_gap_secs: Minimum seconds between automatic backups
    """

    data_file: Path = field(default_factory=lambda: DATA_FILE)
    log_dir: Path = field(default_factory=lambda: LOG_DIR)
    auto_backup_gap_secs: int = DEFAULT_AUTO_BACKUP_GAP_SECS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReminderConfig":
        """
        Build a config from a parsed YAML mapping.

        Raises:
            ValidationError: If a value has the wrong type
        """
        config = cls()
        if data.get("data_file"):
            config.data_file = expand_path(str(data["data_file"]))
        if data.get("log_dir"):
            config.log_dir = expand_path(str(data["log_dir"]))
        if "auto_backup_gap_secs" in data:
            gap = data["auto_backup_gap_secs"]
            if isinstance(gap, bool) or not isinstance(gap, int) or gap < 0:
                raise ValidationError(
                    f"auto_backup_gap_secs must be a non-negative integer, got {gap!r}"
                )
            config.auto_backup_gap_secs = gap
        return config

    @classmethod
    def load(cls, path: Optional[Path]) -> "ReminderConfig":
        """
        Load configuration from a YAML file.

        Args:
            path: Config file path; None or a missing file yields defaults

        Returns:
            ReminderConfig instance

        Raises:
            ValidationError: If the file is not valid YAML or not a mapping
        """
        if path is None or not Path(path).exists():
            return cls()

        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid YAML in config file {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)

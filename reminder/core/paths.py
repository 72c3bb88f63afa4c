#!/usr/bin/env python3
"""
paths.py
-------------------
Default path constants for the reminder tool.

All user data lives under a single home directory:

    REMINDER_HOME/          # ~/reminder unless $REMINDER_HOME is set
    ├── data.json           # The data file (notes, tags, user)
    ├── data_backup_*.json  # Timestamped backups beside the data file
    ├── config.yaml         # Optional configuration
    └── logs/               # Application logs

Paths are resolved at import time. Nothing is created here; the data file
is bootstrapped by ReminderData.ensure_data_file().
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_reminder_home() -> Path:
    """
    Determine the reminder home directory.

    Returns:
        $REMINDER_HOME when set, otherwise ~/reminder
    """
    env_home = os.environ.get("REMINDER_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / "reminder"


def expand_path(path: str | Path) -> Path:
    """Expand a leading '~' in a user supplied path."""
    return Path(path).expanduser()


# ----- Project directory -----
REMINDER_HOME: Path = _get_reminder_home()

# ---- Data ----
DATA_FILE = REMINDER_HOME / "data.json"
CONFIG_FILE = REMINDER_HOME / "config.yaml"

# ---- Logs ----
LOG_DIR = REMINDER_HOME / "logs"

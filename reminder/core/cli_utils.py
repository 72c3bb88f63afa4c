#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for reminder commands.

Functions:
    setup_logger: Initialize ReminderLogger for CLI operations
"""
from pathlib import Path

from reminder.core.logging_manager import ReminderLogger


def setup_logger(log_dir: Path, component_name: str) -> ReminderLogger:
    """
    Setup logging for CLI operations.

    Creates the log directory if needed and initializes a ReminderLogger
    for the given component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'cli')

    Returns:
        Configured ReminderLogger instance
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return ReminderLogger(log_dir, component_name=component_name)

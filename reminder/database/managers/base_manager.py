#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base class for the in-memory collections of the data file.

Holds the two collaborators every manager needs: the clock (single source
of "now") and an optional logger.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC
from typing import Optional

# --- Local imports ---
from reminder.core.logging_manager import ReminderLogger, safe_logger
from reminder.utils.temporal import Clock, resolve_clock


class BaseManager(ABC):
    """
    Abstract base manager.

    Attributes:
        clock: Clock used for every timestamp the manager writes
        logger: Optional logger for operation tracking
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> None:
        self.clock = resolve_clock(clock)
        self.logger = logger

    def _now(self) -> int:
        return self.clock.now()

    @property
    def log(self) -> ReminderLogger:
        """Logger that is always safe to call."""
        return safe_logger(self.logger)

#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for the reminder data file.

Each component gets two rotating files in the log directory:

    <component>.log   every record (DEBUG and up): mutations, backups, loads
    errors.log        failures only, with context and traceback

Warnings, such as a status update skipped on a recurring note, are also
echoed to the console. Records carry their details as JSON so that one
line describes one operation on the data file.

Code that may run without a configured logger calls safe_logger(logger),
which hands back a shared NullLogger instead of None.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"
MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUPS = 3


def _format_details(message: str, details: Optional[Dict[str, Any]]) -> str:
    if not details:
        return message
    return f"{message}: {json.dumps(details, default=str, ensure_ascii=False)}"


def _reset_handlers(logger: logging.Logger) -> None:
    # A new ReminderLogger for the same component replaces the old handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class ReminderLogger:
    """
    Rotating file logger for one reminder component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix of the logger names and of the main log file
    """

    def __init__(self, log_dir: Path, component_name: str = "reminder") -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._build(
            "operations",
            logging.DEBUG,
            self._rotating(self.log_dir / f"{component_name}.log", logging.DEBUG),
            self._console(),
        )
        self.error_logger = self._build(
            "errors",
            logging.ERROR,
            self._rotating(self.log_dir / "errors.log", logging.ERROR),
        )

    def _build(self, suffix: str, level: int, *handlers: logging.Handler) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        logger.propagate = False
        _reset_handlers(logger)
        for handler in handlers:
            logger.addHandler(handler)
        return logger

    @staticmethod
    def _rotating(path: Path, level: int) -> logging.Handler:
        handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    @staticmethod
    def _console() -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.WARNING)
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        return handler

    def _emit(
        self, level: int, label: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        self.main_logger.log(level, f"{label} - {_format_details(message, details)}")

    # ---- Records ----
    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """One completed change, e.g. 'note_registered' with the note text."""
        self._emit(logging.INFO, "OPERATION", operation, details)

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """Write the error, its context and the active traceback to errors.log."""
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        lines.append(f"Traceback:\n{traceback.format_exc()}")
        for line in lines:
            self.error_logger.error(line)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log the error and return the line shown to the user.

        Examples:
            >>> logger.log_cli_error(DuplicateSlugError("Tag already exists: work"))
            '❌ DuplicateSlugError: Tag already exists: work'
        """
        self.log_error(error, context or {"source": "cli"})
        return _cli_message(error, show_traceback)


def _cli_message(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The full error goes to the log of ctx.obj["logger"]; stderr gets one
    line (plus the traceback with --verbose). Never returns.

    Args:
        ctx: Click context whose obj carries 'logger' and 'verbose'
        error: The failure
        operation: Command step that failed (e.g. 'add_note')
        additional_context: Note index, tag slug, backup path...
        exit_code: Process exit status
    """
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(ctx.obj.get("logger")).log_cli_error(
        error, context, show_traceback=ctx.obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Stand-in with the ReminderLogger interface that records nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return _cli_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[ReminderLogger]) -> ReminderLogger:
    """Return the logger, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]

#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for ReminderData operations.
"""
from datetime import datetime
from functools import wraps
from typing import Callable

from reminder.core.logging_manager import safe_logger
from reminder.models.enums import Outcome


def log_operation(operation_name: str):
    """
    Decorator to log an operation with timing and context.

    Logs a debug record on entry, an operation record on success and the
    error (with traceback) on failure; exceptions are re-raised unchanged.

    Args:
        operation_name: Name of the operation being logged

    Returns:
        Decorator function
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            logger = safe_logger(getattr(self, "logger", None))
            start_time = datetime.now()
            operation_id = f"{operation_name}_{start_time.strftime('%Y%m%d_%H%M%S_%f')}"

            logger.log_debug(
                f"Starting {operation_name}",
                {
                    "operation_id": operation_id,
                    "args_count": len(args),
                    "kwargs_keys": list(kwargs.keys()),
                },
            )

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                logger.log_error(
                    e,
                    {
                        "operation": operation_name,
                        "operation_id": operation_id,
                        "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    },
                )
                raise

            details = {
                "operation_id": operation_id,
                "duration_seconds": (datetime.now() - start_time).total_seconds(),
            }
            if isinstance(result, Outcome):
                details["outcome"] = result.value
            logger.log_operation(f"{operation_name}_completed", details)
            return result

        return wrapper

    return decorator


def persists(function: Callable) -> Callable:
    """
    Decorator for ReminderData mutators: write the data file after the
    wrapped call succeeds.

    Nothing is written when the call raises (validation failures leave the
    data untouched) or when it returns an Outcome that changed nothing.
    Any other result (a new Tag or Note) is written.
    """

    @wraps(function)
    def wrapper(self, *args, **kwargs):
        result = function(self, *args, **kwargs)
        if not isinstance(result, Outcome) or result.changed:
            self.persist()
        return result

    return wrapper

#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the reminder project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in different subsystems.

Exception Hierarchy:
    Exception (built-in)
    └── ReminderError - Base for all reminder errors
        ├── ValidationError - Invalid input; state is never touched
        │   ├── EmptyInputError - Blank required text or date
        │   ├── InvalidDateError - Date string that is not DD-MM-YYYY
        │   ├── DuplicateSlugError - Tag slug collision
        │   └── RegistryNotEmptyError - Seeding a non-empty tag registry
        └── StorageError - Reading or writing the data file failed
            └── BackupError - Backup creation/restoration failures

Usage:
    from reminder.core.exceptions import ValidationError, StorageError

    try:
        data.add_note_comment(note, text)
    except ValidationError as e:
        logger.log_warning(f"Invalid input: {e}")
    except StorageError as e:
        logger.log_error(e)
"""


class ReminderError(Exception):
    """
    Base exception for all reminder errors.

    Catch this to handle any error raised by the reminder core, or catch
    specific subclasses for more granular error handling.
    """

    pass


class ValidationError(ReminderError):
    """
    Exception for input validation failures.

    Raised before any mutation is applied, so the in-memory data and the
    data file are left exactly as they were.

    Examples:
        >>> raise ValidationError("Tag group must be a string")
    """

    pass


class EmptyInputError(ValidationError):
    """
    Exception for blank required input.

    Raised when a note text, summary, comment, tag slug or due date is
    empty after trimming.

    Examples:
        >>> raise EmptyInputError("Note's text is empty")
        >>> raise EmptyInputError("Note's due date is empty")
    """

    pass


class InvalidDateError(ValidationError):
    """
    Exception for due dates that cannot be parsed.

    Examples:
        >>> raise InvalidDateError("Invalid date '31-02-2024': expected DD-MM-YYYY")
    """

    pass


class DuplicateSlugError(ValidationError):
    """
    Exception for tag slug collisions.

    Examples:
        >>> raise DuplicateSlugError("Tag already exists: work")
    """

    pass


class RegistryNotEmptyError(ValidationError):
    """
    Exception raised when seeding basic tags into a registry that already
    holds tags.
    """

    pass


class StorageError(ReminderError):
    """
    Exception for data file read/write failures.

    Raised when the data file cannot be read, parsed, or written. When
    raised from a persist call, the in-memory state is already ahead of
    the file; the caller decides whether to retry or carry on.

    Examples:
        >>> raise StorageError("Failed to write data file: permission denied")
        >>> raise StorageError("Data file is not valid JSON")
    """

    pass


class BackupError(StorageError):
    """
    Exception for backup creation and restoration failures.

    Raised when backup operations fail, including:
    - Creating new backups
    - Updating the latest-backup alias
    - Restoring from backups

    Examples:
        >>> raise BackupError("Data file not found: ~/reminder/data.json")
        >>> raise BackupError("Cannot restore from backup: file not found")
    """

    pass

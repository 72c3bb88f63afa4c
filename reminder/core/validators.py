#!/usr/bin/env python3
"""
validators.py
--------------------
Input validation and normalization used by the managers and the data file
loader.

The calling layer is expected to hand over trimmed, pre-validated strings;
these checks run again in the core so that blank or malformed input can
never reach the data file.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional

from .exceptions import EmptyInputError, InvalidDateError, ValidationError

NIL_DATE = "nil"
"""Token that clears a note's due date."""

DATE_PATTERN = re.compile(
    r"^((0?[1-9]|[12][0-9]|3[01])-(0?[1-9]|1[012])-((19|20)\d\d)|(nil))$"
)
"""Accepted due date input: DD-MM-YYYY (leading zeros optional) or 'nil'."""


class DataValidator:
    """Centralized validation for reminder inputs."""

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Trim a string value.

        Args:
            value: Value to normalize

        Returns:
            Trimmed string, or None for None/blank input
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def require_text(value: Any, what: str) -> str:
        """
        Return trimmed text, rejecting blank input.

        Args:
            value: Raw input
            what: Human-readable field name used in the error message

        Raises:
            EmptyInputError: If value is None or blank after trimming
        """
        text = DataValidator.normalize_string(value)
        if text is None:
            raise EmptyInputError(f"{what} is empty")
        return text

    @staticmethod
    def normalize_slug(value: Any) -> str:
        """
        Normalize a tag slug (trimmed, lowercased).

        Raises:
            EmptyInputError: If the slug is blank
        """
        return DataValidator.require_text(value, "Tag's slug").lower()

    @staticmethod
    def normalize_group(value: Any) -> str:
        """Normalize a tag group; blank or missing means no group."""
        return (DataValidator.normalize_string(value) or "").lower()

    @staticmethod
    def is_valid_date_string(value: Any) -> bool:
        """Check DD-MM-YYYY / 'nil' syntax without parsing the date."""
        if value is None:
            return False
        return DATE_PATTERN.match(str(value).strip()) is not None

    @staticmethod
    def parse_due_date(value: Any) -> int:
        """
        Parse a due date string into UTC-midnight epoch seconds.

        Args:
            value: 'DD-MM-YYYY' (leading zeros optional) or 'nil'

        Returns:
            Epoch seconds, or 0 for 'nil'

        Raises:
            EmptyInputError: If the input is blank
            InvalidDateError: If the input does not name a real date, or
                names 01-01-1970 (epoch 0, which means "unset")
        """
        text = DataValidator.require_text(value, "Note's due date")
        if text == NIL_DATE:
            return 0
        if not DATE_PATTERN.match(text):
            raise InvalidDateError(f"Invalid date '{text}': expected DD-MM-YYYY or nil")

        day, month, year = (int(part) for part in text.split("-"))
        try:
            moment = datetime(year, month, day, tzinfo=timezone.utc)
        except ValueError as e:
            raise InvalidDateError(f"Invalid date '{text}': {e}") from e

        timestamp = int(moment.timestamp())
        # 0 is the stored "no due date" marker
        if timestamp == 0:
            raise InvalidDateError(f"Invalid date '{text}': collides with the unset marker")
        return timestamp

    @staticmethod
    def normalize_bool(value: Any) -> bool:
        """
        Convert stored values to boolean.

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            if value.lower() in ("false", "0", "no", "off", ""):
                return False
        raise ValidationError(f"Cannot convert '{value}' to boolean")

    @staticmethod
    def normalize_int(value: Any) -> int:
        """
        Convert stored values to int; missing values become 0.

        Raises:
            ValidationError: If conversion fails
        """
        if value is None:
            return 0
        if isinstance(value, bool):
            raise ValidationError(f"Expected an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Expected an integer, got {value!r}") from e

#!/usr/bin/env python3
"""
tag.py
------
Tag entity.

A tag is identified by a stable integer id (its creation position) and a
unique lowercase slug. Tags in the "repeat" group give their notes
recurring due-date semantics.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from reminder.core.exceptions import ValidationError
from reminder.core.validators import DataValidator

REPEAT_GROUP = "repeat"
REPEAT_ANNUALLY = "repeat-annually"
REPEAT_MONTHLY = "repeat-monthly"

BASIC_TAGS: List[Tuple[str, str]] = [
    ("current", ""),
    ("priority-urgent", "priority"),
    ("priority-medium", "priority"),
    ("priority-low", "priority"),
    (REPEAT_ANNUALLY, REPEAT_GROUP),
    (REPEAT_MONTHLY, REPEAT_GROUP),
    ("tips", "tips"),
]
"""Seed tags (slug, group) in id order for a fresh data file."""


@dataclass
class Tag:
    """
    A named category for notes.

    Attributes:
        id: Creation position; never reused or changed
        slug: Lowercase, trimmed, unique name
        group: Lowercase group name, empty when ungrouped
        created_at: Epoch seconds
        updated_at: Epoch seconds
    """

    id: int
    slug: str
    group: str = ""
    created_at: int = 0
    updated_at: int = 0

    @property
    def is_repeat(self) -> bool:
        return self.group == REPEAT_GROUP

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "slug": self.slug,
            "group": self.group,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        """
        Build a tag from its stored form.

        Raises:
            ValidationError: If the stored slug is blank or a field has the
                wrong type
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Tag entry must be an object, got {data!r}")
        return cls(
            id=DataValidator.normalize_int(data.get("id")),
            slug=DataValidator.normalize_slug(data.get("slug")),
            group=DataValidator.normalize_group(data.get("group")),
            created_at=DataValidator.normalize_int(data.get("created_at")),
            updated_at=DataValidator.normalize_int(data.get("updated_at")),
        )

    def __str__(self) -> str:
        if self.group:
            return f"{self.slug} ({self.group})"
        return self.slug

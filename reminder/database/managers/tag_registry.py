#!/usr/bin/env python3
"""
tag_registry.py
--------------------
Manages the ordered collection of Tag entities.

Key Features:
    - Id assignment (a tag's id is the registry size when it was created)
    - Slug normalization (trimmed, lowercased) and uniqueness
    - Lookup by slug, by id list and by group
    - Seeding of the basic tags on a fresh data file

Stored order is creation order. sorted_slugs() is a pure query;
sort_in_place() is the explicit mutator for callers that want the
registry itself reordered by slug.

Usage:
    registry = TagRegistry(clock=clock, logger=logger)
    registry.seed_basic_tags()
    work = registry.register("work")
    repeat_ids = registry.repeat_tag_ids()
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set

from reminder.core.exceptions import DuplicateSlugError, RegistryNotEmptyError
from reminder.core.logging_manager import ReminderLogger
from reminder.core.validators import DataValidator
from reminder.models.tag import BASIC_TAGS, Tag
from reminder.utils.temporal import Clock

from .base_manager import BaseManager


class TagRegistry(BaseManager):
    """
    Ordered, slug-unique collection of tags.

    Tags are never removed, so ids run 0..n-1 in creation order.
    """

    def __init__(
        self,
        tags: Optional[Iterable[Tag]] = None,
        clock: Optional[Clock] = None,
        logger: Optional[ReminderLogger] = None,
    ) -> None:
        super().__init__(clock, logger)
        self.tags: List[Tag] = list(tags or [])

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def next_id(self) -> int:
        """Id the next registered tag will receive."""
        return len(self.tags)

    def register(self, slug: str, group: str = "") -> Tag:
        """
        Create and append a new tag.

        Args:
            slug: Tag name; trimmed and lowercased
            group: Optional group; lowercased

        Returns:
            The new Tag

        Raises:
            EmptyInputError: If the slug is blank
            DuplicateSlugError: If a tag with the same slug exists
        """
        normalized = DataValidator.normalize_slug(slug)
        if self.get(normalized) is not None:
            self.log.log_warning("Tag already exists", {"slug": normalized})
            raise DuplicateSlugError(f"Tag already exists: {normalized}")

        now = self._now()
        tag = Tag(
            id=self.next_id(),
            slug=normalized,
            group=DataValidator.normalize_group(group),
            created_at=now,
            updated_at=now,
        )
        self.tags.append(tag)
        self.log.log_operation("tag_registered", tag.to_dict())
        return tag

    def seed_basic_tags(self) -> List[Tag]:
        """
        Register the basic tags (ids 0..6) on an empty registry.

        Returns:
            The seeded tags

        Raises:
            RegistryNotEmptyError: If the registry already holds tags
        """
        if self.tags:
            raise RegistryNotEmptyError(
                "Skipped registering basic tags as tag list is not empty"
            )
        return [self.register(slug, group) for slug, group in BASIC_TAGS]

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, slug: str) -> Optional[Tag]:
        """Tag with exactly this slug, or None."""
        for tag in self.tags:
            if tag.slug == slug:
                return tag
        return None

    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        for tag in self.tags:
            if tag.id == tag_id:
                return tag
        return None

    def from_ids(self, tag_ids: Iterable[int]) -> List[Tag]:
        """
        Tags for the given ids, in the order of the ids.

        Ids without a matching tag are skipped.
        """
        found = []
        for tag_id in tag_ids:
            tag = self.get_by_id(tag_id)
            if tag is not None:
                found.append(tag)
        return found

    def ids_for_group(self, group: str) -> Set[int]:
        """Ids of all tags whose group equals the argument."""
        return {tag.id for tag in self.tags if tag.group == group}

    def repeat_tag_ids(self) -> Set[int]:
        """Ids of the "repeat" group tags; notes carrying one recur."""
        return {tag.id for tag in self.tags if tag.is_repeat}

    def slugs(self) -> List[str]:
        """Slugs in stored order."""
        return [tag.slug for tag in self.tags]

    def sorted_slugs(self) -> List[str]:
        """Slugs in ascending order; the registry itself is not reordered."""
        return sorted(self.slugs())

    def sort_in_place(self) -> None:
        """Reorder the stored tags by slug. Ids are unaffected."""
        self.tags.sort(key=lambda tag: tag.slug)

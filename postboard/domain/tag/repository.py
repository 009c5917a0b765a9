"""Persistence contract for tags."""

from typing import Protocol

from postboard.domain.common.value_objects import TagId
from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.value_objects import TagSlug


class TagRepositoryProtocol(Protocol):
    """Protocol for Tag repository operations."""

    def save(self, tag: Tag) -> None: ...

    def find_by_id(self, tag_id: TagId) -> Tag | None: ...

    def find_by_slug(self, slug: TagSlug) -> Tag | None: ...

    def find_all(self) -> list[Tag]:
        """Get all tags ordered by name."""
        ...

    def delete(self, tag: Tag) -> None: ...

"""Tag domain layer."""

from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.exceptions import TagSlugAlreadyExistsError
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug

__all__ = ["Tag", "TagColor", "TagName", "TagSlug", "TagSlugAlreadyExistsError"]

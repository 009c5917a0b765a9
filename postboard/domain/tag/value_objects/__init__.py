"""Tag value objects."""

from .tag_color import TagColor
from .tag_name import TagName
from .tag_slug import TagSlug

__all__ = ["TagColor", "TagName", "TagSlug"]

"""Read models returned by tag queries."""

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.tag.entities.tag import Tag


@dataclass(frozen=True)
class TagDTO:
    id: str
    name: str
    slug: str
    color: str
    created_at: datetime

    @classmethod
    def from_entity(cls, tag: Tag) -> "TagDTO":
        return cls(
            id=tag.id.to_string(),
            name=tag.name.to_string(),
            slug=tag.slug.to_string(),
            color=tag.color.to_string(),
            created_at=tag.created_at.to_datetime(),
        )

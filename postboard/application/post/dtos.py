"""Read models returned by post queries."""

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.post.entities.post import Post


@dataclass(frozen=True)
class PostDTO:
    """Flattened, primitive-only view of a post."""

    id: str
    title: str
    content: str
    status: str
    author_id: str
    created_at: datetime
    published_at: datetime | None

    @classmethod
    def from_entity(cls, post: Post) -> "PostDTO":
        return cls(
            id=post.id.to_string(),
            title=post.title.to_string(),
            content=post.content.to_string(),
            status=post.status.to_string(),
            author_id=post.author_id.to_string(),
            created_at=post.created_at.to_datetime(),
            published_at=post.published_at.to_datetime() if post.published_at else None,
        )

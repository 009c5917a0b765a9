"""Read models returned by comment queries."""

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.comment.entities.comment import Comment


@dataclass(frozen=True)
class CommentDTO:
    id: str
    content: str
    post_id: str
    author_id: str
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentDTO":
        return cls(
            id=comment.id.to_string(),
            content=comment.content.to_string(),
            post_id=comment.post_id.to_string(),
            author_id=comment.author_id.to_string(),
            created_at=comment.created_at.to_datetime(),
        )

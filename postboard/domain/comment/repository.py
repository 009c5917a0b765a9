"""Persistence contract for comments."""

from typing import Protocol

from postboard.domain.comment.entities.comment import Comment
from postboard.domain.common.value_objects import CommentId, PostId


class CommentRepositoryProtocol(Protocol):
    """Protocol for Comment repository operations."""

    def save(self, comment: Comment) -> None: ...

    def find_by_id(self, comment_id: CommentId) -> Comment | None: ...

    def find_by_post_id(self, post_id: PostId) -> list[Comment]:
        """
        Get all comments on a post.

        Returns:
            List of comments ordered by created_at ASC (oldest first)
        """
        ...

    def delete(self, comment: Comment) -> None: ...

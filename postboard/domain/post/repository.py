"""Persistence contract for the Post aggregate."""

from typing import Protocol

from postboard.domain.common.value_objects import PostId
from postboard.domain.post.entities.post import Post


class PostRepositoryProtocol(Protocol):
    """Protocol for Post repository operations."""

    def save(self, post: Post) -> None:
        """
        Insert or update a post.

        After this call `find_by_id(post.id)` reflects the in-memory state.
        """
        ...

    def find_by_id(self, post_id: PostId) -> Post | None:
        """
        Find a post by ID.

        Returns:
            Post entity if found, None otherwise
        """
        ...

    def find_all(self) -> list[Post]:
        """Get all posts ordered by created_at DESC."""
        ...

    def find_published(self) -> list[Post]:
        """Get published posts ordered by published_at DESC."""
        ...

    def delete(self, post: Post) -> None:
        """Remove a post. Its author is left untouched."""
        ...

"""Post domain layer."""

from postboard.domain.post.entities.post import Post
from postboard.domain.post.exceptions import PostNotFoundError
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle

__all__ = [
    "Post",
    "PostContent",
    "PostNotFoundError",
    "PostStatus",
    "PostTitle",
]

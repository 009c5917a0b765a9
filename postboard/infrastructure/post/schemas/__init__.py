"""Post context schemas."""

from postboard.infrastructure.post.schemas.post_schemas import (
    Post,
    PostCreatedResponse,
    PostCreateRequest,
    PostsResponse,
    PostUpdateRequest,
)

__all__ = [
    "Post",
    "PostCreateRequest",
    "PostCreatedResponse",
    "PostUpdateRequest",
    "PostsResponse",
]

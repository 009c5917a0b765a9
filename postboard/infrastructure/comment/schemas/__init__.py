"""Comment context schemas."""

from postboard.infrastructure.comment.schemas.comment_schemas import (
    Comment,
    CommentCreatedResponse,
    CommentCreateRequest,
    CommentsResponse,
)

__all__ = ["Comment", "CommentCreateRequest", "CommentCreatedResponse", "CommentsResponse"]

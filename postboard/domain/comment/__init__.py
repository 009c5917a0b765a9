"""Comment domain layer."""

from postboard.domain.comment.entities.comment import Comment
from postboard.domain.comment.value_objects import CommentContent

__all__ = ["Comment", "CommentContent"]

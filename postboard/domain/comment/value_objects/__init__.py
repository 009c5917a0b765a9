"""Comment value objects."""

from .comment_content import CommentContent

__all__ = ["CommentContent"]

"""Common value objects shared across all domain modules."""

from .email import Email
from .identifier import CommentId, Identifier, PostId, TagId, UserId
from .timestamp import Timestamp

__all__ = [
    "CommentId",
    "Email",
    "Identifier",
    "PostId",
    "TagId",
    "Timestamp",
    "UserId",
]

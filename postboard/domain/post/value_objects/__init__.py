"""Post value objects."""

from .post_content import PostContent
from .post_status import PostStatus
from .post_title import PostTitle

__all__ = ["PostContent", "PostStatus", "PostTitle"]

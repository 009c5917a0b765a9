from .comment_mapper import CommentMapper

__all__ = ["CommentMapper"]

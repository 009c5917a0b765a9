from .list_comments import ListCommentsHandler, ListCommentsQuery

__all__ = ["ListCommentsHandler", "ListCommentsQuery"]

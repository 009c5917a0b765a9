from .list_tags import ListTagsHandler, ListTagsQuery

__all__ = ["ListTagsHandler", "ListTagsQuery"]

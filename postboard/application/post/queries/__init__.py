from .get_post import GetPostHandler, GetPostQuery
from .list_posts import ListPostsHandler, ListPostsQuery

__all__ = ["GetPostHandler", "GetPostQuery", "ListPostsHandler", "ListPostsQuery"]

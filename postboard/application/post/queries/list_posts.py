"""Query and handler for listing posts."""

from dataclasses import dataclass

from postboard.application.common.query import Query, QueryHandler
from postboard.application.post.dtos import PostDTO
from postboard.domain.post.repository import PostRepositoryProtocol


@dataclass(frozen=True)
class ListPostsQuery(Query):
    only_published: bool = False


class ListPostsHandler(QueryHandler[ListPostsQuery, list[PostDTO]]):
    """
    List posts.

    All posts come newest-created first. With ``only_published`` set, only
    published posts are returned, most recently published first.
    """

    def __init__(self, post_repository: PostRepositoryProtocol) -> None:
        self.post_repository = post_repository

    def handle(self, query: ListPostsQuery) -> list[PostDTO]:
        if query.only_published:
            posts = self.post_repository.find_published()
        else:
            posts = self.post_repository.find_all()
        return [PostDTO.from_entity(post) for post in posts]

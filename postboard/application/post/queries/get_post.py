"""Query and handler for fetching a single post."""

from dataclasses import dataclass

from postboard.application.common.query import Query, QueryHandler
from postboard.application.post.dtos import PostDTO
from postboard.domain.common.value_objects import PostId
from postboard.domain.post.repository import PostRepositoryProtocol


@dataclass(frozen=True)
class GetPostQuery(Query):
    post_id: str


class GetPostHandler(QueryHandler[GetPostQuery, PostDTO | None]):
    """Return the post as a DTO, or None when it does not exist."""

    def __init__(self, post_repository: PostRepositoryProtocol) -> None:
        self.post_repository = post_repository

    def handle(self, query: GetPostQuery) -> PostDTO | None:
        post = self.post_repository.find_by_id(PostId.from_string(query.post_id))
        return PostDTO.from_entity(post) if post else None

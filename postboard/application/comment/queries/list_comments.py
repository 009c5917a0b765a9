"""Query and handler for listing the comments on a post."""

from dataclasses import dataclass

from postboard.application.comment.dtos import CommentDTO
from postboard.application.common.query import Query, QueryHandler
from postboard.domain.comment.repository import CommentRepositoryProtocol
from postboard.domain.common.value_objects import PostId


@dataclass(frozen=True)
class ListCommentsQuery(Query):
    post_id: str


class ListCommentsHandler(QueryHandler[ListCommentsQuery, list[CommentDTO]]):
    """Comments on a post, oldest first. Unknown posts yield an empty list."""

    def __init__(self, comment_repository: CommentRepositoryProtocol) -> None:
        self.comment_repository = comment_repository

    def handle(self, query: ListCommentsQuery) -> list[CommentDTO]:
        comments = self.comment_repository.find_by_post_id(PostId.from_string(query.post_id))
        return [CommentDTO.from_entity(comment) for comment in comments]

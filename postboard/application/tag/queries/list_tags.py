"""Query and handler for listing tags."""

from dataclasses import dataclass

from postboard.application.common.query import Query, QueryHandler
from postboard.application.tag.dtos import TagDTO
from postboard.domain.tag.repository import TagRepositoryProtocol


@dataclass(frozen=True)
class ListTagsQuery(Query):
    pass


class ListTagsHandler(QueryHandler[ListTagsQuery, list[TagDTO]]):
    def __init__(self, tag_repository: TagRepositoryProtocol) -> None:
        self.tag_repository = tag_repository

    def handle(self, query: ListTagsQuery) -> list[TagDTO]:
        return [TagDTO.from_entity(tag) for tag in self.tag_repository.find_all()]

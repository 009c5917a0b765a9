"""
Query and QueryHandler base classes.

Queries represent requests for information without side effects.
They are named descriptively: GetPost, ListPosts, etc.

Example:
    @dataclass(frozen=True)
    class GetPostQuery(Query):
        post_id: str

    class GetPostHandler(QueryHandler[GetPostQuery, PostDTO | None]):
        def __init__(self, post_repository: PostRepositoryProtocol) -> None:
            self.post_repository = post_repository

        def handle(self, query: GetPostQuery) -> PostDTO | None:
            post = self.post_repository.find_by_id(PostId.from_string(query.post_id))
            return PostDTO.from_entity(post) if post else None
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the query)
TQuery = TypeVar("TQuery", bound="Query")
# Output type (the result of the query)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """
    Base class for Queries.

    Queries are:
    - Immutable (frozen dataclass)
    - Named descriptively (GetPost, ListPosts)
    - Carry filter parameters
    - Have no side effects (read-only)
    """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Query Handlers:
    - Execute a single query type
    - Return DTOs (not domain entities)
    - Have no side effects

    Each query has exactly one handler.
    """

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        """
        Handle the query and return the result.

        Query handlers should NOT:
        - Modify any state
        - Trigger side effects
        - Return domain entities directly
        """
        raise NotImplementedError

"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    class Comment(Entity[CommentId]):
        def update_content(self, content: CommentContent) -> None:
            self._content = content
"""

from abc import ABC
from typing import Generic, TypeVar

from .value_objects.identifier import Identifier

IdType = TypeVar("IdType", bound=Identifier)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable only through their own behaviour methods
    - Have lifecycle (created, modified, deleted)

    Subclasses store their identifier in `_id`; aggregates only ever
    reference other aggregates through such identifiers.
    """

    _id: IdType

    @property
    def id(self) -> IdType:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

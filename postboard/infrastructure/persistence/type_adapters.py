"""
Adapters between value objects and storable primitives.

Every value object that is persisted has exactly one adapter in ``ADAPTERS``.
Column types look their adapter up here, so supporting a new value object in
a table means adding it to the registry and nothing else.

Law: ``adapter.from_storage(adapter.to_storage(value)) == value``.
"""

from datetime import UTC, datetime
from typing import Any, Generic, Protocol, TypeVar

from postboard.domain.comment.value_objects import CommentContent
from postboard.domain.common.value_object import StringValueObject, ValueObject
from postboard.domain.common.value_objects import (
    CommentId,
    Email,
    PostId,
    TagId,
    Timestamp,
    UserId,
)
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug
from postboard.domain.user.value_objects import UserRole

TValue = TypeVar("TValue", bound=ValueObject)
TString = TypeVar("TString", bound=StringValueObject)


class TypeAdapter(Protocol[TValue]):
    """Converts a value object to a storage primitive and back."""

    value_type: type[TValue]

    def to_storage(self, value: TValue) -> Any: ...

    def from_storage(self, primitive: Any) -> TValue: ...


class StringValueAdapter(Generic[TString]):
    """Stores a string-backed value object as its string."""

    def __init__(self, value_type: type[TString]) -> None:
        self.value_type = value_type

    def to_storage(self, value: TString) -> str:
        return value.to_string()

    def from_storage(self, primitive: str) -> TString:
        return self.value_type.from_string(primitive)

    def __repr__(self) -> str:
        return f"StringValueAdapter({self.value_type.__name__})"


class TimestampAdapter:
    """
    Stores a Timestamp as an aware UTC datetime.

    Engines that drop the offset (SQLite) hand back naive datetimes; those are
    read as UTC, which is what was written.
    """

    value_type = Timestamp

    def to_storage(self, value: Timestamp) -> datetime:
        return value.to_datetime()

    def from_storage(self, primitive: datetime) -> Timestamp:
        if primitive.tzinfo is None:
            primitive = primitive.replace(tzinfo=UTC)
        return Timestamp(primitive)

    def __repr__(self) -> str:
        return "TimestampAdapter()"


_STRING_VALUE_TYPES: tuple[type[StringValueObject], ...] = (
    PostId,
    UserId,
    CommentId,
    TagId,
    PostTitle,
    PostContent,
    PostStatus,
    Email,
    UserRole,
    CommentContent,
    TagName,
    TagSlug,
    TagColor,
)

ADAPTERS: dict[type[ValueObject], TypeAdapter[Any]] = {
    **{value_type: StringValueAdapter(value_type) for value_type in _STRING_VALUE_TYPES},
    Timestamp: TimestampAdapter(),
}


def adapter_for(value_type: type[TValue]) -> TypeAdapter[TValue]:
    """
    Get the adapter registered for a value object class.

    Lookup is by exact class; subclasses are not matched to their parent's
    adapter.

    Raises:
        LookupError: If no adapter is registered for the class
    """
    try:
        return ADAPTERS[value_type]
    except KeyError as e:
        raise LookupError(f"No persistence adapter registered for {value_type.__name__}") from e

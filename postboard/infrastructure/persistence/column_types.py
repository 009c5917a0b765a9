"""
SQLAlchemy column types for value objects.

Mapped attributes hold value objects, never raw primitives; conversion goes
through the adapter registered for the column's value type. ``None`` passes
through untouched in both directions, so nullable columns map to
``ValueObject | None``.

Example:
    class PostORM(Base):
        id: Mapped[PostId] = mapped_column(IdentifierType(PostId), primary_key=True)
        title: Mapped[PostTitle] = mapped_column(StringValueType(PostTitle, 255))
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from postboard.domain.common.value_object import StringValueObject
from postboard.domain.common.value_objects import Timestamp
from postboard.domain.common.value_objects.identifier import IDENTIFIER_LENGTH, Identifier

from .type_adapters import adapter_for


def _check_type(value: Any, value_type: type) -> None:
    if not isinstance(value, value_type):
        raise TypeError(
            f"Expected {value_type.__name__} for this column, got {type(value).__name__}"
        )


class StringValueType(TypeDecorator[StringValueObject]):
    """VARCHAR column holding a string-backed value object."""

    impl = String
    cache_ok = True

    def __init__(self, value_type: type[StringValueObject], length: int | None = None) -> None:
        super().__init__(length)
        self.value_type = value_type
        self.adapter = adapter_for(value_type)

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        _check_type(value, self.value_type)
        return self.adapter.to_storage(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        return self.adapter.from_storage(value)

    @property
    def python_type(self) -> type:
        return self.value_type


class TextValueType(StringValueType):
    """TEXT column holding a string-backed value object (unbounded length)."""

    impl = Text
    cache_ok = True

    def __init__(self, value_type: type[StringValueObject]) -> None:
        super().__init__(value_type)


class IdentifierType(StringValueType):
    """VARCHAR(36) column holding an identifier value object."""

    cache_ok = True

    def __init__(self, value_type: type[Identifier]) -> None:
        if not issubclass(value_type, Identifier):
            raise TypeError(f"{value_type.__name__} is not an identifier type")
        super().__init__(value_type, IDENTIFIER_LENGTH)


class TimestampType(TypeDecorator[Timestamp]):
    """Timezone-aware DATETIME column holding a Timestamp."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def __init__(self) -> None:
        super().__init__()
        self.adapter = adapter_for(Timestamp)

    def process_bind_param(self, value: Any, dialect: Dialect) -> datetime | None:
        if value is None:
            return None
        _check_type(value, Timestamp)
        return self.adapter.to_storage(value)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> Timestamp | None:
        if value is None:
            return None
        return self.adapter.from_storage(value)

    @property
    def python_type(self) -> type:
        return Timestamp

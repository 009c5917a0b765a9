"""Persistence type adapters and SQLAlchemy column types for value objects."""

from .column_types import IdentifierType, StringValueType, TextValueType, TimestampType
from .type_adapters import (
    ADAPTERS,
    StringValueAdapter,
    TimestampAdapter,
    TypeAdapter,
    adapter_for,
)

__all__ = [
    "ADAPTERS",
    "IdentifierType",
    "StringValueAdapter",
    "StringValueType",
    "TextValueType",
    "TimestampAdapter",
    "TimestampType",
    "TypeAdapter",
    "adapter_for",
]

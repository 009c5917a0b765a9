"""
Timestamp value object.

All timestamps in the domain are timezone-aware and expressed in UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ..exceptions import ValidationError
from ..value_object import ValueObject

if TYPE_CHECKING:
    from typing import Self


@dataclass(frozen=True, order=True)
class Timestamp(ValueObject):
    """A point in time, stored as an aware UTC datetime."""

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise ValidationError("Timestamp must be a datetime", field="timestamp")
        if self.value.tzinfo is None:
            raise ValidationError(
                "Timestamp must be timezone-aware", field="timestamp", value=self.value
            )
        object.__setattr__(self, "value", self.value.astimezone(UTC))

    @classmethod
    def now(cls) -> Self:
        """Create a timestamp for the current moment."""
        return cls(datetime.now(UTC))

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Wrap a datetime. Naive datetimes are taken to already be in UTC."""
        if not isinstance(value, datetime):
            raise ValidationError("Timestamp must be a datetime", field="timestamp", value=value)
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return cls(value)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse an ISO 8601 string."""
        try:
            parsed = datetime.fromisoformat(value)
        except (TypeError, ValueError) as err:
            raise ValidationError(
                f"Invalid timestamp: {value}", field="timestamp", value=value
            ) from err
        return cls.from_datetime(parsed)

    def to_datetime(self) -> datetime:
        return self.value

    def to_string(self) -> str:
        """ISO 8601 representation, e.g. ``2024-05-01T12:30:00+00:00``."""
        return self.value.isoformat()

    def to_primitive(self) -> str:
        return self.to_string()

    def is_before(self, other: Timestamp) -> bool:
        return self.value < other.value

    def is_after(self, other: Timestamp) -> bool:
        return self.value > other.value

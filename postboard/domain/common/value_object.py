"""
Base classes for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class PostTitle(StringValueObject):
        def __post_init__(self) -> None:
            if len(self.value) < 3:
                raise ValidationError("Post title must be at least 3 characters long")

    title = PostTitle.from_string("Hello World")
    title.to_string()  # "Hello World"
"""

from dataclasses import dataclass
from typing import Self


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (dataclass equality)
    - Self-validating (validation in __post_init__)

    Subclasses should be decorated with @dataclass(frozen=True)
    and implement validation in __post_init__.
    """

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Override in subclasses if needed. Default returns
        the first attribute value for single-value VOs.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)

    def __str__(self) -> str:
        return str(self.to_primitive())


@dataclass(frozen=True)
class StringValueObject(ValueObject):
    """
    Value object wrapping a single validated string.

    `from_string` is the named constructor used by handlers and persistence
    adapters; `to_string` returns the canonical stored form.
    """

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Validate `value` and wrap it. Raises ValidationError when invalid."""
        return cls(value)

    def to_string(self) -> str:
        """Return the canonical string form."""
        return self.value

    def _normalize(self, value: str) -> None:
        """Replace the wrapped value while the instance is being initialised."""
        object.__setattr__(self, "value", value)

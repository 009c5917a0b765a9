"""
Identifier value objects.

Identifiers are UUIDs kept in their canonical 36 character textual form,
e.g. ``"0b6f2c8e-3f0a-4c1e-9a57-2d4b8e5f1c3a"``. New identifiers are random
(version 4); parsing accepts any UUID version, so ids created elsewhere can
be read back from storage or request input.
"""

import re
from dataclasses import dataclass
from typing import Self
from uuid import uuid4

from ..exceptions import ValidationError
from ..value_object import StringValueObject

IDENTIFIER_LENGTH = 36

_IDENTIFIER_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


@dataclass(frozen=True)
class Identifier(StringValueObject):
    """
    Opaque identifier with a canonical textual representation.

    Two identifiers of the same type are equal iff their canonical strings
    match. Input is accepted in any letter case and stored lowercase.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _IDENTIFIER_PATTERN.fullmatch(self.value):
            raise ValidationError(
                f"Invalid {self.__class__.__name__} format: {self.value}",
                field="id",
                value=self.value,
            )
        self._normalize(self.value.lower())

    @classmethod
    def generate(cls) -> Self:
        """Generate a new random identifier."""
        return cls(str(uuid4()))


@dataclass(frozen=True)
class PostId(Identifier):
    """Strongly-typed post identifier."""


@dataclass(frozen=True)
class UserId(Identifier):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class CommentId(Identifier):
    """Strongly-typed comment identifier."""


@dataclass(frozen=True)
class TagId(Identifier):
    """Strongly-typed tag identifier."""

"""Tag slug value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

if TYPE_CHECKING:
    from typing import Self

    from .tag_name import TagName

MIN_TAG_SLUG_LENGTH = 2
MAX_TAG_SLUG_LENGTH = 50

_TAG_SLUG_PATTERN = re.compile(r"^[a-z0-9\-]+$")
_UNSLUGGABLE_PATTERN = re.compile(r"[^a-z0-9\s\-_]")
_SEPARATOR_PATTERN = re.compile(r"[\s_]+")


@dataclass(frozen=True)
class TagSlug(StringValueObject):
    """
    URL-safe tag key (e.g. ``machine-learning``).

    Lowercase letters, digits and hyphens only; cannot start or end
    with a hyphen.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Tag slug must be a string", field="slug")
        self._normalize(self.value.strip())
        if not self.value:
            raise ValidationError("Tag slug cannot be empty", field="slug")
        if len(self.value) < MIN_TAG_SLUG_LENGTH:
            raise ValidationError(
                f"Tag slug must be at least {MIN_TAG_SLUG_LENGTH} characters long",
                field="slug",
                value=self.value,
            )
        if len(self.value) > MAX_TAG_SLUG_LENGTH:
            raise ValidationError(
                f"Tag slug cannot exceed {MAX_TAG_SLUG_LENGTH} characters", field="slug"
            )
        if not _TAG_SLUG_PATTERN.fullmatch(self.value):
            raise ValidationError(
                "Tag slug must contain only lowercase letters, numbers, and hyphens",
                field="slug",
                value=self.value,
            )
        if self.value.startswith("-") or self.value.endswith("-"):
            raise ValidationError(
                "Tag slug cannot start or end with a hyphen", field="slug", value=self.value
            )

    @classmethod
    def from_name(cls, name: TagName) -> Self:
        """Derive a slug from a tag name ("Machine Learning" -> "machine-learning")."""
        slug = _UNSLUGGABLE_PATTERN.sub("", name.to_string().lower())
        slug = _SEPARATOR_PATTERN.sub("-", slug).strip("-")
        if not slug:
            raise ValidationError(
                "Cannot generate valid slug from tag name", field="slug", value=name.to_string()
            )
        return cls(slug)

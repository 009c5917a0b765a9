"""Tag name value object."""

import re
from dataclasses import dataclass

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

MIN_TAG_NAME_LENGTH = 2
MAX_TAG_NAME_LENGTH = 50

# letters, numbers, spaces, hyphens, underscores
_TAG_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_]+$")


@dataclass(frozen=True)
class TagName(StringValueObject):
    """Human readable tag name, trimmed."""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Tag name must be a string", field="name")
        self._normalize(self.value.strip())
        if not self.value:
            raise ValidationError("Tag name cannot be empty", field="name")
        if len(self.value) < MIN_TAG_NAME_LENGTH:
            raise ValidationError(
                f"Tag name must be at least {MIN_TAG_NAME_LENGTH} characters long",
                field="name",
                value=self.value,
            )
        if len(self.value) > MAX_TAG_NAME_LENGTH:
            raise ValidationError(
                f"Tag name cannot exceed {MAX_TAG_NAME_LENGTH} characters", field="name"
            )
        if not _TAG_NAME_PATTERN.fullmatch(self.value):
            raise ValidationError(
                "Tag name contains invalid characters", field="name", value=self.value
            )

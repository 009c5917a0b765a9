"""Post content value object."""

from dataclasses import dataclass

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

MIN_CONTENT_LENGTH = 10


@dataclass(frozen=True)
class PostContent(StringValueObject):
    """Body text of a blog post, at least MIN_CONTENT_LENGTH characters."""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Post content must be a string", field="content")
        if len(self.value) < MIN_CONTENT_LENGTH:
            raise ValidationError(
                f"Post content must be at least {MIN_CONTENT_LENGTH} characters long",
                field="content",
            )
        if not self.value.strip():
            raise ValidationError(
                "Post content cannot be empty or only whitespace", field="content"
            )

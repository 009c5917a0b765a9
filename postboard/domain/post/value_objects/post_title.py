"""Post title value object."""

from dataclasses import dataclass

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

MIN_TITLE_LENGTH = 3
MAX_TITLE_LENGTH = 255


@dataclass(frozen=True)
class PostTitle(StringValueObject):
    """
    Title of a blog post.

    Business Rules:
    - Between MIN_TITLE_LENGTH and MAX_TITLE_LENGTH characters
    - Not made up of whitespace only
    - Stored exactly as given (no trimming)
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Post title must be a string", field="title")
        length = len(self.value)
        if length < MIN_TITLE_LENGTH:
            raise ValidationError(
                f"Post title must be at least {MIN_TITLE_LENGTH} characters long",
                field="title",
                value=self.value,
            )
        if length > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Post title cannot be longer than {MAX_TITLE_LENGTH} characters",
                field="title",
            )
        if not self.value.strip():
            raise ValidationError(
                "Post title cannot be empty or only whitespace", field="title", value=self.value
            )

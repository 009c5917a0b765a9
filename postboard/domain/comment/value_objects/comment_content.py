"""Comment content value object."""

from dataclasses import dataclass

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

MIN_COMMENT_LENGTH = 3
MAX_COMMENT_LENGTH = 1000


@dataclass(frozen=True)
class CommentContent(StringValueObject):
    """Text of a comment. Surrounding whitespace is stripped before validation."""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Comment content must be a string", field="content")
        self._normalize(self.value.strip())
        if not self.value:
            raise ValidationError("Comment content cannot be empty", field="content")
        if len(self.value) < MIN_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment content must be at least {MIN_COMMENT_LENGTH} characters long",
                field="content",
                value=self.value,
            )
        if len(self.value) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"Comment content cannot exceed {MAX_COMMENT_LENGTH} characters",
                field="content",
            )

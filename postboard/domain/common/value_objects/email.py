"""Email address value object."""

import re
from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import StringValueObject

MAX_EMAIL_LENGTH = 255

# local-part@domain, where the domain has at least two dot separated labels
_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?$"
)


@dataclass(frozen=True)
class Email(StringValueObject):
    """
    A syntactically valid email address.

    Uniqueness is not a concern of the value object; it is enforced by
    the user registration use case and the storage layer.
    """

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError(
                f"Invalid email format: {self.value}", field="email", value=self.value
            )
        if len(self.value) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email address cannot be longer than {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.value,
            )

"""User role value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_object import StringValueObject

if TYPE_CHECKING:
    from typing import Self

ROLE_USER = "user"
ROLE_ADMIN = "admin"


@dataclass(frozen=True)
class UserRole(StringValueObject):
    """
    Role of a user account, either ``user`` or ``admin``.

    Rows written by the previous schema hold ``ROLE_USER``/``ROLE_ADMIN``;
    those spellings are accepted and normalised to the canonical form.
    """

    VALID_ROLES: ClassVar[tuple[str, ...]] = (ROLE_USER, ROLE_ADMIN)
    _LEGACY_ROLES: ClassVar[dict[str, str]] = {"ROLE_USER": ROLE_USER, "ROLE_ADMIN": ROLE_ADMIN}

    def __post_init__(self) -> None:
        if isinstance(self.value, str) and self.value in self._LEGACY_ROLES:
            self._normalize(self._LEGACY_ROLES[self.value])
        if self.value not in self.VALID_ROLES:
            raise ValidationError(
                f"Invalid user role: {self.value}. Allowed values: {', '.join(self.VALID_ROLES)}",
                field="role",
                value=self.value,
            )

    @classmethod
    def user(cls) -> Self:
        return cls(ROLE_USER)

    @classmethod
    def admin(cls) -> Self:
        return cls(ROLE_ADMIN)

    @property
    def is_admin(self) -> bool:
        return self.value == ROLE_ADMIN

    @property
    def is_user(self) -> bool:
        return self.value == ROLE_USER

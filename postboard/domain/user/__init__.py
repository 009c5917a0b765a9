"""User domain layer."""

from postboard.domain.user.entities.user import User
from postboard.domain.user.exceptions import EmailAlreadyExistsError, UserNotFoundError
from postboard.domain.user.value_objects import UserRole

__all__ = [
    "EmailAlreadyExistsError",
    "User",
    "UserNotFoundError",
    "UserRole",
]

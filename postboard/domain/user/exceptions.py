"""User domain exceptions."""

from postboard.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(BusinessRuleViolationError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__("unique_email", f"Email {email} is already registered")
        self.email = email

"""Command and handler for user registration."""

from dataclasses import dataclass, field

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.application.user.protocols import PasswordHasherProtocol
from postboard.domain.common.value_objects import Email, UserId
from postboard.domain.user.entities.user import User
from postboard.domain.user.exceptions import EmailAlreadyExistsError
from postboard.domain.user.repository import UserRepositoryProtocol

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command):
    email: str
    password: str = field(repr=False)


class RegisterUserHandler(CommandHandler[RegisterUserCommand, str]):
    """Register a new user account with the plain ``user`` role."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_hasher: PasswordHasherProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    def handle(self, command: RegisterUserCommand) -> str:
        """
        Register a new user account.

        Args:
            command: Email and plain text password (will be hashed)

        Returns:
            The identifier of the new user

        Raises:
            ValidationError: If the email is malformed
            EmailAlreadyExistsError: If the email is already registered
        """
        email = Email.from_string(command.email)
        if self.user_repository.find_by_email(email) is not None:
            raise EmailAlreadyExistsError(email.to_string())

        user = User.create(
            id=UserId.generate(),
            email=email,
            password_hash=self.password_hasher.hash_password(command.password),
        )
        self.user_repository.save(user)

        logger.info("user_registered", user_id=user.id.value, email=email.value)
        return user.id.to_string()

"""Command and handler for granting the admin role."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.common.value_objects import UserId
from postboard.domain.user.exceptions import UserNotFoundError
from postboard.domain.user.repository import UserRepositoryProtocol

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PromoteUserToAdminCommand(Command):
    user_id: str


class PromoteUserToAdminHandler(CommandHandler[PromoteUserToAdminCommand, None]):
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def handle(self, command: PromoteUserToAdminCommand) -> None:
        user_id = UserId.from_string(command.user_id)
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.promote_to_admin()
        self.user_repository.save(user)

        logger.info("promoted_user_to_admin", user_id=user_id.value)

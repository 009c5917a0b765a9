"""Command and handler for archiving a published post."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.common.value_objects import PostId
from postboard.domain.post.exceptions import PostNotFoundError
from postboard.domain.post.repository import PostRepositoryProtocol

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ArchivePostCommand(Command):
    post_id: str


class ArchivePostHandler(CommandHandler[ArchivePostCommand, None]):
    def __init__(self, post_repository: PostRepositoryProtocol) -> None:
        self.post_repository = post_repository

    def handle(self, command: ArchivePostCommand) -> None:
        post_id = PostId.from_string(command.post_id)
        post = self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        post.archive()
        self.post_repository.save(post)

        logger.info("archived_post", post_id=post_id.value)

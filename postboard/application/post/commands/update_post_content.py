"""Command and handler for editing a draft's title and content."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.common.value_objects import PostId
from postboard.domain.post.exceptions import PostNotFoundError
from postboard.domain.post.repository import PostRepositoryProtocol
from postboard.domain.post.value_objects import PostContent, PostTitle

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdatePostContentCommand(Command):
    post_id: str
    title: str
    content: str


class UpdatePostContentHandler(CommandHandler[UpdatePostContentCommand, None]):
    def __init__(self, post_repository: PostRepositoryProtocol) -> None:
        self.post_repository = post_repository

    def handle(self, command: UpdatePostContentCommand) -> None:
        """
        Replace title and content of a draft post.

        Inputs are validated before the post is loaded, so invalid input is
        reported even for unknown posts.

        Raises:
            ValidationError: If the new title or content is invalid
            PostNotFoundError: If the post does not exist
            DomainError: If the post is published or archived
        """
        post_id = PostId.from_string(command.post_id)
        title = PostTitle.from_string(command.title)
        content = PostContent.from_string(command.content)

        post = self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        post.update_content(title, content)
        self.post_repository.save(post)

        logger.info("updated_post_content", post_id=post_id.value)

"""Command and handler for creating a draft post."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.common.value_objects import PostId, UserId
from postboard.domain.post.entities.post import Post
from postboard.domain.post.repository import PostRepositoryProtocol
from postboard.domain.post.value_objects import PostContent, PostTitle

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreatePostCommand(Command):
    title: str
    content: str
    author_id: str


class CreatePostHandler(CommandHandler[CreatePostCommand, str]):
    """Create a new post in draft state."""

    def __init__(self, post_repository: PostRepositoryProtocol) -> None:
        self.post_repository = post_repository

    def handle(self, command: CreatePostCommand) -> str:
        """
        Create and store a draft post.

        Returns:
            The identifier of the new post

        Raises:
            ValidationError: If title, content or author id is invalid
        """
        post = Post.create(
            id=PostId.generate(),
            title=PostTitle.from_string(command.title),
            content=PostContent.from_string(command.content),
            author_id=UserId.from_string(command.author_id),
        )
        self.post_repository.save(post)

        logger.info("created_post", post_id=post.id.value, author_id=post.author_id.value)
        return post.id.to_string()

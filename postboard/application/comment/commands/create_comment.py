"""Command and handler for commenting on a post."""

from dataclasses import dataclass

import structlog

from postboard.application.common.command import Command, CommandHandler
from postboard.domain.comment.entities.comment import Comment
from postboard.domain.comment.repository import CommentRepositoryProtocol
from postboard.domain.comment.value_objects import CommentContent
from postboard.domain.common.value_objects import CommentId, PostId, UserId
from postboard.domain.post.exceptions import PostNotFoundError
from postboard.domain.post.repository import PostRepositoryProtocol

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateCommentCommand(Command):
    content: str
    post_id: str
    author_id: str


class CreateCommentHandler(CommandHandler[CreateCommentCommand, str]):
    """Leave a comment on an existing post."""

    def __init__(
        self,
        comment_repository: CommentRepositoryProtocol,
        post_repository: PostRepositoryProtocol,
    ) -> None:
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    def handle(self, command: CreateCommentCommand) -> str:
        """
        Create a comment.

        Returns:
            The identifier of the new comment

        Raises:
            ValidationError: If content or an identifier is invalid
            PostNotFoundError: If the post does not exist
        """
        content = CommentContent.from_string(command.content)
        post_id = PostId.from_string(command.post_id)
        author_id = UserId.from_string(command.author_id)

        if self.post_repository.find_by_id(post_id) is None:
            raise PostNotFoundError(post_id)

        comment = Comment.create(
            id=CommentId.generate(),
            content=content,
            post_id=post_id,
            author_id=author_id,
        )
        self.comment_repository.save(comment)

        logger.info("created_comment", comment_id=comment.id.value, post_id=post_id.value)
        return comment.id.to_string()

"""Comment entity for discussions on posts."""

from postboard.domain.comment.value_objects import CommentContent
from postboard.domain.common.entity import Entity
from postboard.domain.common.value_objects import CommentId, PostId, Timestamp, UserId


class Comment(Entity[CommentId]):
    """
    Comment left by a user on a post.

    Business Rules:
    - References its post and author by id only
    - Has no lifecycle beyond creation and content edits
    """

    def __init__(
        self,
        id: CommentId,
        content: CommentContent,
        post_id: PostId,
        author_id: UserId,
        created_at: Timestamp,
    ) -> None:
        self._id = id
        self._content = content
        self._post_id = post_id
        self._author_id = author_id
        self._created_at = created_at

    @property
    def content(self) -> CommentContent:
        return self._content

    @property
    def post_id(self) -> PostId:
        return self._post_id

    @property
    def author_id(self) -> UserId:
        return self._author_id

    @property
    def created_at(self) -> Timestamp:
        return self._created_at

    def update_content(self, content: CommentContent) -> None:
        self._content = content

    def belongs_to_post(self, post_id: PostId) -> bool:
        """Check if this comment was left on the specified post."""
        return self._post_id == post_id

    @classmethod
    def create(
        cls,
        id: CommentId,
        content: CommentContent,
        post_id: PostId,
        author_id: UserId,
    ) -> "Comment":
        """
        Create a new comment.

        Args:
            id: Identifier for the comment
            content: Validated comment text
            post_id: ID of the post being commented on
            author_id: ID of the commenting user

        Returns:
            New Comment instance
        """
        return cls(
            id=id,
            content=content,
            post_id=post_id,
            author_id=author_id,
            created_at=Timestamp.now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CommentId,
        content: CommentContent,
        post_id: PostId,
        author_id: UserId,
        created_at: Timestamp,
    ) -> "Comment":
        """Reconstitute a comment from persistence."""
        return cls(
            id=id,
            content=content,
            post_id=post_id,
            author_id=author_id,
            created_at=created_at,
        )

"""
Post aggregate root.

Encapsulates all business rules for the lifecycle of a blog post.
"""

from postboard.domain.common.entity import Entity
from postboard.domain.common.exceptions import DomainError, InvariantViolationError
from postboard.domain.common.value_objects import PostId, Timestamp, UserId
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle


class Post(Entity[PostId]):
    """
    Post aggregate root.

    Business Rules:
    - New posts start as drafts without a publication timestamp
    - Only drafts can be published; publishing stamps published_at once
    - Only published posts can be archived; archiving keeps published_at
    - Title and content can only be edited while the post is a draft
    - published_at is set iff the status is published or archived
    - The author is referenced by id only; deleting a post never touches the user

    State is held in private attributes and changed only through the
    behaviour methods below. Use `create` for new posts and `create_with_id`
    to rehydrate from persistence.
    """

    def __init__(
        self,
        id: PostId,
        title: PostTitle,
        content: PostContent,
        status: PostStatus,
        author_id: UserId,
        created_at: Timestamp,
        published_at: Timestamp | None = None,
    ) -> None:
        self._id = id
        self._title = title
        self._content = content
        self._status = status
        self._author_id = author_id
        self._created_at = created_at
        self._published_at = published_at
        self._check_publication_invariant()

    @property
    def title(self) -> PostTitle:
        return self._title

    @property
    def content(self) -> PostContent:
        return self._content

    @property
    def status(self) -> PostStatus:
        return self._status

    @property
    def author_id(self) -> UserId:
        return self._author_id

    @property
    def created_at(self) -> Timestamp:
        return self._created_at

    @property
    def published_at(self) -> Timestamp | None:
        return self._published_at

    def publish(self) -> None:
        """
        Publish a draft post.

        Raises:
            DomainError: If the post is already published or archived
        """
        if self._status.is_published:
            raise DomainError("Post is already published")
        if self._status.is_archived:
            raise DomainError("Cannot publish an archived post")

        self._status = PostStatus.published()
        self._published_at = Timestamp.now()

    def archive(self) -> None:
        """
        Archive a published post, keeping its publication timestamp.

        Raises:
            DomainError: If the post is a draft or already archived
        """
        if self._status.is_archived:
            raise DomainError("Post is already archived")
        if not self._status.can_transition_to(PostStatus.archived()):
            raise DomainError("Only published posts can be archived")

        self._status = PostStatus.archived()

    def update_content(self, title: PostTitle, content: PostContent) -> None:
        """
        Replace title and content of a draft.

        Raises:
            DomainError: If the post is published or archived
        """
        if self._status.is_published:
            raise DomainError("Cannot update published post")
        if self._status.is_archived:
            raise DomainError("Cannot update archived post")

        self._title = title
        self._content = content

    def is_written_by(self, user_id: UserId) -> bool:
        return self._author_id == user_id

    def _check_publication_invariant(self) -> None:
        if self._status.is_draft and self._published_at is not None:
            raise InvariantViolationError("Post", "a draft cannot have a publication timestamp")
        if not self._status.is_draft and self._published_at is None:
            raise InvariantViolationError(
                "Post", f"a {self._status} post must have a publication timestamp"
            )

    @classmethod
    def create(
        cls,
        id: PostId,
        title: PostTitle,
        content: PostContent,
        author_id: UserId,
    ) -> "Post":
        """Create a new draft post."""
        return cls(
            id=id,
            title=title,
            content=content,
            status=PostStatus.draft(),
            author_id=author_id,
            created_at=Timestamp.now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: PostId,
        title: PostTitle,
        content: PostContent,
        status: PostStatus,
        author_id: UserId,
        created_at: Timestamp,
        published_at: Timestamp | None,
    ) -> "Post":
        """
        Reconstitute a post from persistence.

        Raises:
            InvariantViolationError: If status and published_at disagree
        """
        return cls(
            id=id,
            title=title,
            content=content,
            status=status,
            author_id=author_id,
            created_at=created_at,
            published_at=published_at,
        )

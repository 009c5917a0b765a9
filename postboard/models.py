"""
Database models.

Columns are typed with the value-object column types, so every mapped
attribute already holds a domain value object. Aggregates reference each
other by id only; there are no foreign keys between them.
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from postboard.database import Base
from postboard.domain.comment.value_objects import CommentContent
from postboard.domain.common.value_objects import (
    CommentId,
    Email,
    PostId,
    TagId,
    Timestamp,
    UserId,
)
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug
from postboard.domain.user.value_objects import UserRole
from postboard.infrastructure.persistence import (
    IdentifierType,
    StringValueType,
    TextValueType,
    TimestampType,
)


class User(Base):
    """User account."""

    __tablename__ = "users"

    id: Mapped[UserId] = mapped_column(IdentifierType(UserId), primary_key=True)
    email: Mapped[Email] = mapped_column(
        StringValueType(Email, 255), unique=True, nullable=False
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(StringValueType(UserRole, 50), nullable=False)
    created_at: Mapped[Timestamp] = mapped_column(TimestampType(), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class Post(Base):
    """Blog post."""

    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_status_published_at", "status", "published_at"),
    )

    id: Mapped[PostId] = mapped_column(IdentifierType(PostId), primary_key=True)
    title: Mapped[PostTitle] = mapped_column(StringValueType(PostTitle, 255), nullable=False)
    content: Mapped[PostContent] = mapped_column(TextValueType(PostContent), nullable=False)
    status: Mapped[PostStatus] = mapped_column(StringValueType(PostStatus, 50), nullable=False)
    author_id: Mapped[UserId] = mapped_column(IdentifierType(UserId), index=True, nullable=False)
    created_at: Mapped[Timestamp] = mapped_column(TimestampType(), index=True, nullable=False)
    published_at: Mapped[Timestamp | None] = mapped_column(TimestampType(), nullable=True)

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}', status='{self.status}')>"


class Comment(Base):
    """Comment on a post."""

    __tablename__ = "comments"

    id: Mapped[CommentId] = mapped_column(IdentifierType(CommentId), primary_key=True)
    content: Mapped[CommentContent] = mapped_column(
        TextValueType(CommentContent), nullable=False
    )
    post_id: Mapped[PostId] = mapped_column(IdentifierType(PostId), index=True, nullable=False)
    author_id: Mapped[UserId] = mapped_column(IdentifierType(UserId), nullable=False)
    created_at: Mapped[Timestamp] = mapped_column(TimestampType(), nullable=False)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, post_id={self.post_id})>"


class Tag(Base):
    """Tag that can be attached to posts."""

    __tablename__ = "tags"

    id: Mapped[TagId] = mapped_column(IdentifierType(TagId), primary_key=True)
    name: Mapped[TagName] = mapped_column(StringValueType(TagName, 50), nullable=False)
    slug: Mapped[TagSlug] = mapped_column(
        StringValueType(TagSlug, 50), unique=True, nullable=False
    )
    color: Mapped[TagColor] = mapped_column(StringValueType(TagColor, 7), nullable=False)
    created_at: Mapped[Timestamp] = mapped_column(TimestampType(), nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, slug='{self.slug}')>"

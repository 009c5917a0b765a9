"""Integration tests for the SQLAlchemy repositories against in-memory SQLite."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.orm import Session

from postboard.domain.comment.entities.comment import Comment
from postboard.domain.comment.value_objects import CommentContent
from postboard.domain.common.value_objects import (
    CommentId,
    Email,
    PostId,
    TagId,
    Timestamp,
    UserId,
)
from postboard.domain.post.entities.post import Post
from postboard.domain.post.value_objects import PostContent, PostStatus, PostTitle
from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.exceptions import TagSlugAlreadyExistsError
from postboard.domain.tag.value_objects import TagColor, TagName, TagSlug
from postboard.domain.user.entities.user import User
from postboard.domain.user.exceptions import EmailAlreadyExistsError
from postboard.domain.user.value_objects import UserRole
from postboard.infrastructure.comment.repositories import CommentRepository
from postboard.infrastructure.post.repositories import PostRepository
from postboard.infrastructure.tag.repositories import TagRepository
from postboard.infrastructure.user.repositories import UserRepository

BASE = datetime(2024, 1, 1, tzinfo=UTC)


def make_post(
    author_id: UserId, days: int = 0, status: PostStatus | None = None, title: str = "Hello World"
) -> Post:
    status = status or PostStatus.draft()
    published_at = None if status.is_draft else Timestamp(BASE + timedelta(days=days, hours=1))
    return Post.create_with_id(
        id=PostId.generate(),
        title=PostTitle.from_string(title),
        content=PostContent.from_string("This is more than ten characters"),
        status=status,
        author_id=author_id,
        created_at=Timestamp(BASE + timedelta(days=days)),
        published_at=published_at,
    )


def make_user(email: str = "a@b.com") -> User:
    return User.create(
        id=UserId.generate(), email=Email.from_string(email), password_hash="opaque-hash"
    )


class TestPostRepository:
    """Test saving, loading and ordering posts."""

    def test_save_and_find_by_id(self, db_session: Session) -> None:
        repo = PostRepository(db_session)
        post = make_post(UserId.generate())

        repo.save(post)
        found = repo.find_by_id(post.id)

        assert found == post
        assert found.title == post.title
        assert found.status == PostStatus.draft()
        assert found.published_at is None
        assert found.created_at == post.created_at

    def test_find_missing_returns_none(self, db_session: Session) -> None:
        assert PostRepository(db_session).find_by_id(PostId.generate()) is None

    def test_save_existing_post_updates_it(self, db_session: Session) -> None:
        repo = PostRepository(db_session)
        post = make_post(UserId.generate())
        repo.save(post)

        post.publish()
        repo.save(post)

        found = repo.find_by_id(post.id)
        assert found.status == PostStatus.published()
        assert found.published_at == post.published_at
        assert len(repo.find_all()) == 1

    def test_find_all_newest_first(self, db_session: Session) -> None:
        repo = PostRepository(db_session)
        author_id = UserId.generate()
        for days, title in [(1, "Second"), (0, "First"), (2, "Third")]:
            repo.save(make_post(author_id, days=days, title=title))

        titles = [p.title.to_string() for p in repo.find_all()]

        assert titles == ["Third", "Second", "First"]

    def test_find_published_excludes_drafts_and_archived(self, db_session: Session) -> None:
        repo = PostRepository(db_session)
        author_id = UserId.generate()
        repo.save(make_post(author_id, 0, PostStatus.published(), "Older"))
        repo.save(make_post(author_id, 1, PostStatus.draft(), "Draft"))
        repo.save(make_post(author_id, 2, PostStatus.published(), "Newer"))
        repo.save(make_post(author_id, 3, PostStatus.archived(), "Archived"))

        titles = [p.title.to_string() for p in repo.find_published()]

        assert titles == ["Newer", "Older"]

    def test_delete_post_keeps_author(self, db_session: Session) -> None:
        users = UserRepository(db_session)
        posts = PostRepository(db_session)
        author = make_user()
        users.save(author)
        post = make_post(author.id)
        posts.save(post)

        posts.delete(post)

        assert posts.find_by_id(post.id) is None
        assert users.find_by_id(author.id) == author


class TestUserRepository:
    def test_save_and_find_by_email(self, db_session: Session) -> None:
        repo = UserRepository(db_session)
        user = make_user("reader@example.org")
        repo.save(user)

        found = repo.find_by_email(Email.from_string("reader@example.org"))

        assert found == user
        assert found.password_hash == "opaque-hash"
        assert found.role == UserRole.user()

    def test_duplicate_email_raises_email_already_exists(self, db_session: Session) -> None:
        repo = UserRepository(db_session)
        repo.save(make_user("a@b.com"))

        with pytest.raises(EmailAlreadyExistsError):
            repo.save(make_user("a@b.com"))

        assert len(repo.find_all()) == 1

    def test_promotion_is_persisted(self, db_session: Session) -> None:
        repo = UserRepository(db_session)
        user = make_user()
        repo.save(user)

        user.promote_to_admin()
        repo.save(user)

        assert repo.find_by_id(user.id).is_admin

    def test_legacy_role_rows_are_read_as_canonical_roles(self, db_session: Session) -> None:
        repo = UserRepository(db_session)
        user = make_user()
        repo.save(user)
        db_session.execute(text("UPDATE users SET role = 'ROLE_ADMIN'"))
        db_session.commit()
        db_session.expire_all()

        assert repo.find_by_id(user.id).role == UserRole.admin()


class TestCommentRepository:
    def test_find_by_post_id_oldest_first(self, db_session: Session) -> None:
        repo = CommentRepository(db_session)
        post_id = PostId.generate()
        other_post_id = PostId.generate()
        for minutes, text, target in [
            (2, "third", post_id),
            (0, "first", post_id),
            (1, "elsewhere", other_post_id),
            (1, "second", post_id),
        ]:
            repo.save(
                Comment.create_with_id(
                    id=CommentId.generate(),
                    content=CommentContent.from_string(text),
                    post_id=target,
                    author_id=UserId.generate(),
                    created_at=Timestamp(BASE + timedelta(minutes=minutes)),
                )
            )

        texts = [c.content.to_string() for c in repo.find_by_post_id(post_id)]

        assert texts == ["first", "second", "third"]

    def test_delete(self, db_session: Session) -> None:
        repo = CommentRepository(db_session)
        comment = Comment.create(
            id=CommentId.generate(),
            content=CommentContent.from_string("Nice post!"),
            post_id=PostId.generate(),
            author_id=UserId.generate(),
        )
        repo.save(comment)

        repo.delete(comment)

        assert repo.find_by_id(comment.id) is None


class TestTagRepository:
    def test_find_by_slug_and_order_by_name(self, db_session: Session) -> None:
        repo = TagRepository(db_session)
        for name in ["Rust", "Go", "Python"]:
            tag_name = TagName.from_string(name)
            repo.save(
                Tag.create(
                    id=TagId.generate(),
                    name=tag_name,
                    slug=TagSlug.from_name(tag_name),
                    color=TagColor.gray(),
                )
            )

        assert [t.name.to_string() for t in repo.find_all()] == ["Go", "Python", "Rust"]
        assert repo.find_by_slug(TagSlug.from_string("python")).name.to_string() == "Python"
        assert repo.find_by_slug(TagSlug.from_string("java")) is None

    def test_duplicate_slug_raises(self, db_session: Session) -> None:
        repo = TagRepository(db_session)
        slug = TagSlug.from_string("python")
        repo.save(
            Tag.create(TagId.generate(), TagName.from_string("Python"), slug, TagColor.blue())
        )

        with pytest.raises(TagSlugAlreadyExistsError):
            repo.save(
                Tag.create(TagId.generate(), TagName.from_string("python"), slug, TagColor.red())
            )

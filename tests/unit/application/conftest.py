"""In-memory repositories for exercising handlers without a database."""

import pytest

from postboard.domain.comment.entities.comment import Comment
from postboard.domain.common.value_objects import CommentId, Email, PostId, TagId, UserId
from postboard.domain.post.entities.post import Post
from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.value_objects import TagSlug
from postboard.domain.user.entities.user import User


class InMemoryPostRepository:
    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.save_count = 0

    def save(self, post: Post) -> None:
        self.posts[post.id] = post
        self.save_count += 1

    def find_by_id(self, post_id: PostId) -> Post | None:
        return self.posts.get(post_id)

    def find_all(self) -> list[Post]:
        return sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)

    def find_published(self) -> list[Post]:
        published = [p for p in self.posts.values() if p.status.is_published]
        return sorted(published, key=lambda p: p.published_at or p.created_at, reverse=True)

    def delete(self, post: Post) -> None:
        self.posts.pop(post.id, None)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    def save(self, user: User) -> None:
        self.users[user.id] = user

    def find_by_id(self, user_id: UserId) -> User | None:
        return self.users.get(user_id)

    def find_by_email(self, email: Email) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def find_all(self) -> list[User]:
        return sorted(self.users.values(), key=lambda u: u.created_at, reverse=True)

    def delete(self, user: User) -> None:
        self.users.pop(user.id, None)


class InMemoryCommentRepository:
    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}

    def save(self, comment: Comment) -> None:
        self.comments[comment.id] = comment

    def find_by_id(self, comment_id: CommentId) -> Comment | None:
        return self.comments.get(comment_id)

    def find_by_post_id(self, post_id: PostId) -> list[Comment]:
        matching = [c for c in self.comments.values() if c.belongs_to_post(post_id)]
        return sorted(matching, key=lambda c: c.created_at)

    def delete(self, comment: Comment) -> None:
        self.comments.pop(comment.id, None)


class InMemoryTagRepository:
    def __init__(self) -> None:
        self.tags: dict[TagId, Tag] = {}

    def save(self, tag: Tag) -> None:
        self.tags[tag.id] = tag

    def find_by_id(self, tag_id: TagId) -> Tag | None:
        return self.tags.get(tag_id)

    def find_by_slug(self, slug: TagSlug) -> Tag | None:
        return next((t for t in self.tags.values() if t.slug == slug), None)

    def find_all(self) -> list[Tag]:
        return sorted(self.tags.values(), key=lambda t: t.name.to_string())

    def delete(self, tag: Tag) -> None:
        self.tags.pop(tag.id, None)


class FakePasswordHasher:
    def hash_password(self, plain_password: str) -> str:
        return f"hashed:{plain_password}"

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed:{plain_password}"


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def comment_repository() -> InMemoryCommentRepository:
    return InMemoryCommentRepository()


@pytest.fixture
def tag_repository() -> InMemoryTagRepository:
    return InMemoryTagRepository()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()

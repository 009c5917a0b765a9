"""Repository for Post domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from postboard.domain.common.value_objects import PostId
from postboard.domain.post.entities.post import Post
from postboard.domain.post.value_objects import PostStatus
from postboard.infrastructure.post.mappers.post_mapper import PostMapper
from postboard.models import Post as PostORM

logger = logging.getLogger(__name__)


class PostRepository:
    """Repository for Post domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = PostMapper()

    def _find_orm(self, post_id: PostId) -> PostORM | None:
        stmt = select(PostORM).where(PostORM.id == post_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, post_id: PostId) -> Post | None:
        """
        Find a post by ID.

        Args:
            post_id: The post ID

        Returns:
            Post entity if found, None otherwise
        """
        orm_model = self._find_orm(post_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Post]:
        """
        Get all posts regardless of status.

        Returns:
            List of post entities ordered by created_at DESC
        """
        stmt = select(PostORM).order_by(PostORM.created_at.desc(), PostORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_published(self) -> list[Post]:
        """
        Get published posts.

        Archived posts are excluded even though they keep published_at.

        Returns:
            List of post entities ordered by published_at DESC
        """
        stmt = (
            select(PostORM)
            .where(PostORM.status == PostStatus.published())
            .order_by(PostORM.published_at.desc(), PostORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, post: Post) -> None:
        """
        Insert the post if its id is unknown, otherwise update it.

        Args:
            post: The post entity to save
        """
        orm_model = self._find_orm(post.id)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(post))
            self.db.commit()
            logger.info(f"Created post {post.id}")
            return

        self.mapper.to_orm(post, orm_model)
        self.db.commit()
        logger.info(f"Updated post {post.id}")

    def delete(self, post: Post) -> None:
        """
        Delete a post. Its author is not touched.

        Args:
            post: The post entity to delete
        """
        orm_model = self._find_orm(post.id)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted post {post.id}")

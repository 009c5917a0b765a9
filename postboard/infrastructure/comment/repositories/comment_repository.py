"""Repository for Comment domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from postboard.domain.comment.entities.comment import Comment
from postboard.domain.common.value_objects import CommentId, PostId
from postboard.infrastructure.comment.mappers.comment_mapper import CommentMapper
from postboard.models import Comment as CommentORM

logger = logging.getLogger(__name__)


class CommentRepository:
    """Repository for Comment domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CommentMapper()

    def _find_orm(self, comment_id: CommentId) -> CommentORM | None:
        stmt = select(CommentORM).where(CommentORM.id == comment_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, comment_id: CommentId) -> Comment | None:
        orm_model = self._find_orm(comment_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_post_id(self, post_id: PostId) -> list[Comment]:
        """
        Get all comments on a post.

        Args:
            post_id: The post ID

        Returns:
            List of comment entities ordered by created_at ASC
        """
        stmt = (
            select(CommentORM)
            .where(CommentORM.post_id == post_id)
            .order_by(CommentORM.created_at.asc(), CommentORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, comment: Comment) -> None:
        orm_model = self._find_orm(comment.id)
        if orm_model is None:
            self.db.add(self.mapper.to_orm(comment))
        else:
            self.mapper.to_orm(comment, orm_model)
        self.db.commit()
        logger.info(f"Saved comment {comment.id} on post {comment.post_id}")

    def delete(self, comment: Comment) -> None:
        orm_model = self._find_orm(comment.id)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        self.db.commit()

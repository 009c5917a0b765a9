"""Mapper for Comment ORM <-> Domain conversion."""

from postboard.domain.comment.entities.comment import Comment
from postboard.models import Comment as CommentORM


class CommentMapper:
    def to_domain(self, orm_model: CommentORM) -> Comment:
        return Comment.create_with_id(
            id=orm_model.id,
            content=orm_model.content,
            post_id=orm_model.post_id,
            author_id=orm_model.author_id,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Comment, orm_model: CommentORM | None = None) -> CommentORM:
        if orm_model:
            orm_model.content = domain_entity.content
            return orm_model

        return CommentORM(
            id=domain_entity.id,
            content=domain_entity.content,
            post_id=domain_entity.post_id,
            author_id=domain_entity.author_id,
            created_at=domain_entity.created_at,
        )

"""Mapper for Post ORM <-> Domain conversion."""

from postboard.domain.post.entities.post import Post
from postboard.models import Post as PostORM


class PostMapper:
    """Mapper for Post ORM <-> Domain conversion."""

    def to_domain(self, orm_model: PostORM) -> Post:
        """Convert ORM model to domain entity."""
        return Post.create_with_id(
            id=orm_model.id,
            title=orm_model.title,
            content=orm_model.content,
            status=orm_model.status,
            author_id=orm_model.author_id,
            created_at=orm_model.created_at,
            published_at=orm_model.published_at,
        )

    def to_orm(self, domain_entity: Post, orm_model: PostORM | None = None) -> PostORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; author and creation time never change
            orm_model.title = domain_entity.title
            orm_model.content = domain_entity.content
            orm_model.status = domain_entity.status
            orm_model.published_at = domain_entity.published_at
            return orm_model

        return PostORM(
            id=domain_entity.id,
            title=domain_entity.title,
            content=domain_entity.content,
            status=domain_entity.status,
            author_id=domain_entity.author_id,
            created_at=domain_entity.created_at,
            published_at=domain_entity.published_at,
        )

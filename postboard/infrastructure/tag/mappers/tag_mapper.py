"""Mapper for Tag ORM <-> Domain conversion."""

from postboard.domain.tag.entities.tag import Tag
from postboard.models import Tag as TagORM


class TagMapper:
    def to_domain(self, orm_model: TagORM) -> Tag:
        return Tag.create_with_id(
            id=orm_model.id,
            name=orm_model.name,
            slug=orm_model.slug,
            color=orm_model.color,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Tag, orm_model: TagORM | None = None) -> TagORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.slug = domain_entity.slug
            orm_model.color = domain_entity.color
            return orm_model

        return TagORM(
            id=domain_entity.id,
            name=domain_entity.name,
            slug=domain_entity.slug,
            color=domain_entity.color,
            created_at=domain_entity.created_at,
        )

"""Repository for Tag domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from postboard.domain.common.value_objects import TagId
from postboard.domain.tag.entities.tag import Tag
from postboard.domain.tag.exceptions import TagSlugAlreadyExistsError
from postboard.domain.tag.value_objects import TagSlug
from postboard.infrastructure.tag.mappers.tag_mapper import TagMapper
from postboard.models import Tag as TagORM

logger = logging.getLogger(__name__)


class TagRepository:
    """Repository for Tag domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TagMapper()

    def _find_orm(self, tag_id: TagId) -> TagORM | None:
        stmt = select(TagORM).where(TagORM.id == tag_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, tag_id: TagId) -> Tag | None:
        orm_model = self._find_orm(tag_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_slug(self, slug: TagSlug) -> Tag | None:
        stmt = select(TagORM).where(TagORM.slug == slug)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Tag]:
        """
        Get all tags.

        Returns:
            List of tag entities ordered by name
        """
        stmt = select(TagORM).order_by(TagORM.name, TagORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, tag: Tag) -> None:
        """
        Insert the tag if its id is unknown, otherwise update it.

        Raises:
            TagSlugAlreadyExistsError: If another tag already uses the slug
        """
        orm_model = self._find_orm(tag.id)
        try:
            if orm_model is None:
                self.db.add(self.mapper.to_orm(tag))
            else:
                self.mapper.to_orm(tag, orm_model)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "slug" in str(e.orig):
                raise TagSlugAlreadyExistsError(tag.slug.to_string()) from e
            raise
        logger.info(f"Saved tag {tag.id} ({tag.slug})")

    def delete(self, tag: Tag) -> None:
        orm_model = self._find_orm(tag.id)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        self.db.commit()

"""Mapper for User ORM <-> Domain conversion."""

from postboard.domain.user.entities.user import User
from postboard.models import User as UserORM


class UserMapper:
    """Mapper for User ORM <-> Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=orm_model.id,
            email=orm_model.email,
            password_hash=orm_model.password_hash,
            role=orm_model.role,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.email = domain_entity.email
            orm_model.password_hash = domain_entity.password_hash
            orm_model.role = domain_entity.role
            return orm_model

        return UserORM(
            id=domain_entity.id,
            email=domain_entity.email,
            password_hash=domain_entity.password_hash,
            role=domain_entity.role,
            created_at=domain_entity.created_at,
        )

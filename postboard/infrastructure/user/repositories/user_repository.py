"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from postboard.domain.common.value_objects import Email, UserId
from postboard.domain.user.entities.user import User
from postboard.domain.user.exceptions import EmailAlreadyExistsError
from postboard.infrastructure.user.mappers.user_mapper import UserMapper
from postboard.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def _find_orm(self, user_id: UserId) -> UserORM | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        orm_model = self._find_orm(user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: Email) -> User | None:
        """
        Find a user by email.

        Args:
            email: The validated email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[User]:
        """
        Get all users.

        Returns:
            List of user entities ordered by created_at DESC
        """
        stmt = select(UserORM).order_by(UserORM.created_at.desc(), UserORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, user: User) -> None:
        """
        Insert the user if its id is unknown, otherwise update it.

        Args:
            user: The user entity to save

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        orm_model = self._find_orm(user.id)
        try:
            if orm_model is None:
                self.db.add(self.mapper.to_orm(user))
                self.db.commit()
                logger.info(f"Created user with email: {user.email} (id={user.id})")
                return

            self.mapper.to_orm(user, orm_model)
            self.db.commit()
            logger.info(f"Updated user {user.id}")
        except IntegrityError as e:
            self.db.rollback()
            # Unique constraint violation on email
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email.to_string()) from e
            raise

    def delete(self, user: User) -> None:
        """
        Delete a user.

        Args:
            user: The user entity to delete
        """
        orm_model = self._find_orm(user.id)
        if orm_model is None:
            return

        self.db.delete(orm_model)
        self.db.commit()
        logger.info(f"Deleted user {user.id}")

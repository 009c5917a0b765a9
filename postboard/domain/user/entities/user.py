"""User entity."""

from postboard.domain.common.entity import Entity
from postboard.domain.common.value_objects import Email, Timestamp, UserId
from postboard.domain.user.value_objects import UserRole


class User(Entity[UserId]):
    """
    User entity representing an account that can author posts and comments.

    Business Rules:
    - Email must be unique (enforced by registration and at repository level)
    - Password hashing is an infrastructure concern; the entity only stores
      the opaque hash and never inspects it
    - New users get the plain ``user`` role unless told otherwise
    - Posts and comments reference users by id; users own no collections
    """

    def __init__(
        self,
        id: UserId,
        email: Email,
        password_hash: str,
        role: UserRole,
        created_at: Timestamp,
    ) -> None:
        self._id = id
        self._email = email
        self._password_hash = password_hash
        self._role = role
        self._created_at = created_at

    @property
    def email(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def created_at(self) -> Timestamp:
        return self._created_at

    @property
    def is_admin(self) -> bool:
        return self._role.is_admin

    def change_password(self, password_hash: str) -> None:
        """
        Replace the stored password hash.

        Args:
            password_hash: The new hash (hashing done by infrastructure)
        """
        self._password_hash = password_hash

    def promote_to_admin(self) -> None:
        self._role = UserRole.admin()

    @classmethod
    def create(
        cls,
        id: UserId,
        email: Email,
        password_hash: str,
        role: UserRole | None = None,
    ) -> "User":
        """
        Create a new user.

        Args:
            id: Identifier for the new user
            email: User's email address
            password_hash: Already hashed password
            role: Optional role, defaults to ``user``

        Returns:
            New User instance
        """
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role or UserRole.user(),
            created_at=Timestamp.now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: Email,
        password_hash: str,
        role: UserRole,
        created_at: Timestamp,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
        )

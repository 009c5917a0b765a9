from typing import Protocol

from postboard.domain.common.value_objects import Email, UserId
from postboard.domain.user.entities.user import User


class UserRepositoryProtocol(Protocol):
    def save(self, user: User) -> None: ...

    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_email(self, email: Email) -> User | None: ...

    def find_all(self) -> list[User]: ...

    def delete(self, user: User) -> None: ...

"""Protocol for password hashing."""

from typing import Protocol


class PasswordHasherProtocol(Protocol):
    """Turns a plain password into an opaque hash and checks it later."""

    def hash_password(self, plain_password: str) -> str: ...

    def verify_password(self, plain_password: str, hashed_password: str) -> bool: ...

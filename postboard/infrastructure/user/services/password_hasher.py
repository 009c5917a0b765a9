"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

password_hash = PasswordHash.recommended()


class PasswordHasher:
    """
    pwdlib-backed password hasher.

    A server-side pepper is appended to every password before hashing, so a
    leaked database alone is not enough to brute-force hashes offline.
    """

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper

    def hash_password(self, plain_password: str) -> str:
        """Hash a plain password for storage with pepper."""
        return password_hash.hash(plain_password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a plain password against a stored hash."""
        try:
            return password_hash.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

from .password_hasher import PasswordHasherProtocol

__all__ = ["PasswordHasherProtocol"]

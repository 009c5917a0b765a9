"""User value objects."""

from .user_role import UserRole

__all__ = ["UserRole"]

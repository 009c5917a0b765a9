"""User context schemas."""

from postboard.infrastructure.user.schemas.user_schemas import (
    UserRegisteredResponse,
    UserRegisterRequest,
)

__all__ = ["UserRegisterRequest", "UserRegisteredResponse"]

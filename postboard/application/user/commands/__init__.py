from .promote_user_to_admin import PromoteUserToAdminCommand, PromoteUserToAdminHandler
from .register_user import RegisterUserCommand, RegisterUserHandler

__all__ = [
    "PromoteUserToAdminCommand",
    "PromoteUserToAdminHandler",
    "RegisterUserCommand",
    "RegisterUserHandler",
]

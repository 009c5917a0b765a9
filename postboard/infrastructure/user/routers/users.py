import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from postboard.application.common.dispatcher import Dispatcher
from postboard.application.user.commands import RegisterUserCommand
from postboard.domain.common.exceptions import DomainError
from postboard.infrastructure.common.di import get_dispatcher
from postboard.infrastructure.user.schemas import UserRegisteredResponse, UserRegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=UserRegisteredResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    request: UserRegisterRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UserRegisteredResponse:
    """
    Register a new user account.

    Args:
        request: Email and password

    Returns:
        The new user's id

    Raises:
        HTTPException: 400 if the email is malformed or already registered
    """
    try:
        user_id = dispatcher.dispatch(
            RegisterUserCommand(email=request.email, password=request.password)
        )
        return UserRegisteredResponse(id=user_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

"""FastAPI dependencies for identifying the acting user."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException
from starlette import status


def get_current_user_id(
    x_user_id: Annotated[str | None, Header(description="ID of the acting user")] = None,
) -> str:
    """
    Get the acting user's id from the ``X-User-Id`` header.

    The value is not checked against the user table here; handlers validate
    its format when they turn it into a UserId.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    return x_user_id.strip()


# Type alias for the acting user dependency
CurrentUserId = Annotated[str, Depends(get_current_user_id)]

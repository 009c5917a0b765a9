"""Mappings from domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from postboard.domain.common.exceptions import DomainError, EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: DomainError) -> JSONResponse:
    context = {
        key: value if isinstance(value, str | int | float | bool) else str(value)
        for key, value in exc.details.items()
    }
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "context": context},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers that turn domain exceptions into JSON error responses.

    Starlette picks the handler of the closest class in the exception's MRO,
    so ValidationError and EntityNotFoundError win over the DomainError
    fallback.
    """

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.info(f"Domain rule rejected {request.method} {request.url.path}: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)

"""
Request dispatcher.

Routes a Command or Query to the single handler registered for its type and
returns whatever the handler returns. The mapping is explicit and built once
when the application is wired (see `postboard.core`), so a missing handler is
a detectable configuration state instead of a runtime surprise.

Usage:
    dispatcher = Dispatcher({
        CreatePostCommand: CreatePostHandler(post_repository),
        GetPostQuery: GetPostHandler(post_repository),
    })

    post_id = dispatcher.dispatch(CreatePostCommand(title=..., content=..., author_id=...))
    post = dispatcher.dispatch(GetPostQuery(post_id=post_id))
"""

from collections.abc import Mapping
from typing import Any

import structlog

from .command import Command, CommandHandler
from .exceptions import DuplicateHandlerError, HandlerNotRegisteredError, InvalidRegistrationError
from .query import Query, QueryHandler

logger = structlog.get_logger(__name__)

Request = Command | Query
Handler = CommandHandler[Any, Any] | QueryHandler[Any, Any]


class Dispatcher:
    """
    Synchronous command/query dispatcher.

    - Exactly one handler per request type
    - Resolution is by the exact type of the request (no subclass fallback)
    - The handler runs on the calling thread and its result is returned as is
    - Errors raised by handlers propagate unchanged
    """

    def __init__(self, handlers: Mapping[type[Request], Handler] | None = None) -> None:
        self._handlers: dict[type[Request], Handler] = {}
        for request_type, handler in (handlers or {}).items():
            self.register(request_type, handler)

    def register(self, request_type: type[Request], handler: Handler) -> None:
        """
        Register the handler for a request type.

        Raises:
            InvalidRegistrationError: If the type is not a Command/Query subclass
                or the handler is not a CommandHandler/QueryHandler
            DuplicateHandlerError: If the type already has a handler
        """
        if not isinstance(request_type, type) or not issubclass(request_type, (Command, Query)):
            raise InvalidRegistrationError(f"{request_type!r} is not a Command or Query type")
        if issubclass(request_type, Command) and not isinstance(handler, CommandHandler):
            raise InvalidRegistrationError(
                f"Handler for command {request_type.__name__} must be a CommandHandler"
            )
        if issubclass(request_type, Query) and not isinstance(handler, QueryHandler):
            raise InvalidRegistrationError(
                f"Handler for query {request_type.__name__} must be a QueryHandler"
            )
        if request_type in self._handlers:
            raise DuplicateHandlerError(request_type)
        self._handlers[request_type] = handler

    def handles(self, request_type: type[Request]) -> bool:
        """Check if a handler is registered for the request type."""
        return request_type in self._handlers

    @property
    def registered_types(self) -> frozenset[type[Request]]:
        return frozenset(self._handlers)

    def dispatch(self, request: Request) -> Any:
        """
        Invoke the handler registered for the request's type.

        Raises:
            HandlerNotRegisteredError: If no handler is registered for the type
        """
        request_type = type(request)
        handler = self._handlers.get(request_type)
        if handler is None:
            logger.error("handler_not_registered", request_type=request_type.__name__)
            raise HandlerNotRegisteredError(request_type)

        logger.debug(
            "dispatching_request",
            request_type=request_type.__name__,
            handler=type(handler).__name__,
        )
        return handler.handle(request)

"""
Dispatch configuration errors.

These indicate a wiring defect, not a problem with user input, so they do
not derive from DomainError and are never mapped to a 4xx response.
"""


class DispatchConfigurationError(Exception):
    """Base class for dispatcher wiring errors."""


class HandlerNotRegisteredError(DispatchConfigurationError):
    """Raised when a request is dispatched but no handler is registered for its type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class DuplicateHandlerError(DispatchConfigurationError):
    """Raised when a second handler is registered for the same request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(f"A handler is already registered for {request_type.__name__}")


class InvalidRegistrationError(DispatchConfigurationError):
    """Raised when registering something that is not a request type or not a handler."""

"""
Application common module.

Contains base classes for application layer:
- Command / CommandHandler: write operations
- Query / QueryHandler: read operations
- Dispatcher: routes requests to their single registered handler
"""

from .command import Command, CommandHandler
from .dispatcher import Dispatcher
from .exceptions import (
    DispatchConfigurationError,
    DuplicateHandlerError,
    HandlerNotRegisteredError,
)
from .query import Query, QueryHandler

__all__ = [
    "Command",
    "CommandHandler",
    "DispatchConfigurationError",
    "Dispatcher",
    "DuplicateHandlerError",
    "HandlerNotRegisteredError",
    "Query",
    "QueryHandler",
]

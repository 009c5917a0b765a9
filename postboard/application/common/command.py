"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: CreatePost, PublishPost, etc.

Example:
    @dataclass(frozen=True)
    class PublishPostCommand(Command):
        post_id: str

    class PublishPostHandler(CommandHandler[PublishPostCommand, None]):
        def __init__(self, post_repository: PostRepositoryProtocol) -> None:
            self.post_repository = post_repository

        def handle(self, command: PublishPostCommand) -> None:
            post = self.post_repository.find_by_id(PostId.from_string(command.post_id))
            ...
            post.publish()
            self.post_repository.save(post)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (CreatePost, not PostCreation)
    - Carry the raw primitives needed to execute the operation
    - Represent intentions, not facts

    Handlers turn the primitives into value objects, so a command carrying
    malformed input fails with ValidationError inside its handler.
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Convert input to value objects
    - Change aggregates only through their behaviour methods
    - Persist changes (via repositories)
    - Return the result of the operation (usually the new identifier)

    Each command has exactly one handler, and handlers never call each other.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        Raises:
            ValidationError: When the command carries invalid input
            DomainError: When business rules are violated
        """
        raise NotImplementedError

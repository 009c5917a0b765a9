"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. Every operation available to external actors is expressed as
a request object handled by exactly one handler.

This layer contains:
- Commands: Write operations that change state
- Queries: Read operations that return data
- Handlers: Orchestrate domain logic for one request type each
- Dispatcher: Routes a request to its registered handler
- DTOs: Read models returned by query handlers
"""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from postboard.application.common.dispatcher import Dispatcher
from postboard.core import container
from postboard.database import DatabaseSession

T = TypeVar("T")

# container.db is process-wide; sync dependencies run on FastAPI's threadpool
_override_lock = threading.Lock()


def inject_provider(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The provider is called with container.db overridden by the request's
    session. Factories build their whole object graph inside that call, so
    the result keeps its session after the override is reset. The
    override/provide/reset sequence holds a lock so concurrent requests never
    see each other's session.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency


# Dispatcher bound to the request's database session
get_dispatcher: Callable[[DatabaseSession], Dispatcher] = inject_provider(container.dispatcher)

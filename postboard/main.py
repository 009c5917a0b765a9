"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.config import configure_logging, get_settings
from postboard.core import REQUEST_TYPES
from postboard.database import dispose_engine, get_session_factory, initialize_database
from postboard.infrastructure.comment.routers import router as comments_router
from postboard.infrastructure.common.di import get_dispatcher
from postboard.infrastructure.common.exception_handlers import register_exception_handlers
from postboard.infrastructure.post.routers import router as posts_router
from postboard.infrastructure.tag.routers import router as tags_router
from postboard.infrastructure.user.routers import router as users_router

settings = get_settings()
configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

logger = structlog.get_logger(__name__)


def verify_request_handlers() -> None:
    """
    Check that the dispatcher has a handler for every request type.

    Raises:
        RuntimeError: If a request type has no handler
    """
    with get_session_factory(settings)() as session:
        dispatcher = get_dispatcher(session)

    missing = [
        request_type.__name__
        for request_type in REQUEST_TYPES
        if not dispatcher.handles(request_type)
    ]
    if missing:
        raise RuntimeError(f"No handler registered for: {', '.join(sorted(missing))}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database on startup and release it on shutdown."""
    initialize_database(settings)
    verify_request_handlers()
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

api_router = APIRouter(prefix=settings.API_V1_PREFIX)
api_router.include_router(posts_router)
api_router.include_router(comments_router)
api_router.include_router(users_router)
api_router.include_router(tags_router)
app.include_router(api_router)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}

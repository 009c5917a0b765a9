"""Pytest configuration and fixtures."""

import os

# Settings are read when the app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from postboard import models  # noqa: E402, F401
from postboard.database import Base, build_engine, get_db  # noqa: E402
from postboard.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# One shared connection, so every session and thread sees the same in-memory database
test_engine = build_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

VALID_CONTENT = "This is more than ten characters"

CreatePostFunc = Callable[..., str]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> str:
    """Id of the acting user for API requests."""
    return str(uuid4())


@pytest.fixture
def auth_headers(user_id: str) -> dict[str, str]:
    return {"X-User-Id": user_id}


@pytest.fixture
def create_post_via_api(client: TestClient, auth_headers: dict[str, str]) -> CreatePostFunc:
    """Fixture factory for creating draft posts via the API endpoint."""

    def _create_post(title: str = "Hello World", content: str = VALID_CONTENT) -> str:
        response = client.post(
            "/api/v1/posts", json={"title": title, "content": content}, headers=auth_headers
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create_post

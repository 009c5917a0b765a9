"""Integration tests for user registration."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from postboard import models


class TestRegisterUser:
    def test_register_stores_hashed_password(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "ada@example.com", "password": "correct-horse"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        user = db_session.query(models.User).one()
        assert str(user.id) == response.json()["id"]
        assert str(user.email) == "ada@example.com"
        assert user.password_hash != "correct-horse"
        assert str(user.role) == "user"

    def test_duplicate_email_is_bad_request(self, client: TestClient) -> None:
        payload = {"email": "ada@example.com", "password": "correct-horse"}
        client.post("/api/v1/users/register", json=payload)

        response = client.post("/api/v1/users/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email ada@example.com is already registered"

    def test_malformed_email_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "not-an-email", "password": "correct-horse"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["context"]["field"] == "email"

    def test_short_password_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/register", json={"email": "ada@example.com", "password": "short"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

"""Integration tests for the posts API."""

from collections.abc import Callable
from uuid import uuid4

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from postboard import models

CreatePostFunc = Callable[..., str]


class TestCreatePost:
    def test_create_returns_id_and_stores_draft(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        user_id: str,
        db_session: Session,
    ) -> None:
        response = client.post(
            "/api/v1/posts",
            json={"title": "Hello World", "content": "This is more than ten characters"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        post_id = response.json()["id"]

        post = client.get(f"/api/v1/posts/{post_id}").json()
        assert post["title"] == "Hello World"
        assert post["status"] == "draft"
        assert post["author_id"] == user_id
        assert post["published_at"] is None
        assert db_session.query(models.Post).count() == 1

    def test_missing_user_header_is_unauthorized(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/posts",
            json={"title": "Hello World", "content": "This is more than ten characters"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_short_title_is_bad_request(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/posts",
            json={"title": "ab", "content": "This is more than ten characters"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert "at least 3 characters" in body["detail"]
        assert body["context"]["field"] == "title"

    def test_malformed_user_id_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/posts",
            json={"title": "Hello World", "content": "This is more than ten characters"},
            headers={"X-User-Id": "not-a-uuid"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestPostLifecycle:
    """Test publishing, archiving and editing through the API."""

    def test_publish_then_publish_again(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.post(f"/api/v1/posts/{post_id}/publish", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        published = response.json()
        assert published["status"] == "published"
        assert published["published_at"] is not None

        response = client.post(f"/api/v1/posts/{post_id}/publish", headers=auth_headers)
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Post is already published"

        post = client.get(f"/api/v1/posts/{post_id}").json()
        assert post["status"] == "published"
        assert post["published_at"] == published["published_at"]

    def test_archive_keeps_published_at(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()
        published = client.post(f"/api/v1/posts/{post_id}/publish", headers=auth_headers).json()

        response = client.post(f"/api/v1/posts/{post_id}/archive", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "archived"
        assert response.json()["published_at"] == published["published_at"]

    def test_archive_draft_is_bad_request(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.post(f"/api/v1/posts/{post_id}/archive", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Only published posts can be archived"

    def test_update_draft(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.put(
            f"/api/v1/posts/{post_id}",
            json={"title": "New Title", "content": "Rewritten body text here"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "New Title"
        assert response.json()["content"] == "Rewritten body text here"

    def test_update_published_post_is_bad_request(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()
        client.post(f"/api/v1/posts/{post_id}/publish", headers=auth_headers)

        response = client.put(
            f"/api/v1/posts/{post_id}",
            json={"title": "New Title", "content": "Rewritten body text here"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Cannot update published post"

    def test_only_author_can_modify(
        self, client: TestClient, create_post_via_api: CreatePostFunc
    ) -> None:
        post_id = create_post_via_api()
        stranger = {"X-User-Id": str(uuid4())}

        response = client.post(f"/api/v1/posts/{post_id}/publish", headers=stranger)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert client.get(f"/api/v1/posts/{post_id}").json()["status"] == "draft"


class TestReadAndDelete:
    def test_get_unknown_post_is_not_found(self, client: TestClient) -> None:
        response = client.get(f"/api/v1/posts/{uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_malformed_id_is_bad_request(self, client: TestClient) -> None:
        response = client.get("/api/v1/posts/42")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_list_posts_and_published_filter(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        draft_id = create_post_via_api(title="Draft post")
        published_id = create_post_via_api(title="Published post")
        client.post(f"/api/v1/posts/{published_id}/publish", headers=auth_headers)

        all_ids = {p["id"] for p in client.get("/api/v1/posts").json()["data"]}
        published = client.get("/api/v1/posts", params={"only_published": True}).json()["data"]

        assert all_ids == {draft_id, published_id}
        assert [p["id"] for p in published] == [published_id]

    def test_delete_post(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.delete(f"/api/v1/posts/{post_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/posts/{post_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_unknown_post_is_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.delete(f"/api/v1/posts/{uuid4()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

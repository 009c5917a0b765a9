"""Integration tests for the comments API."""

from collections.abc import Callable
from uuid import uuid4

from fastapi import status
from fastapi.testclient import TestClient

CreatePostFunc = Callable[..., str]


class TestComments:
    def test_comment_on_post(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        user_id: str,
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.post(
            f"/api/v1/posts/{post_id}/comments",
            json={"content": "Nice write-up"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        comment_id = response.json()["id"]

        comments = client.get(f"/api/v1/posts/{post_id}/comments").json()["data"]
        assert len(comments) == 1
        assert comments[0]["id"] == comment_id
        assert comments[0]["content"] == "Nice write-up"
        assert comments[0]["post_id"] == post_id
        assert comments[0]["author_id"] == user_id

    def test_comment_on_unknown_post_is_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            f"/api/v1/posts/{uuid4()}/comments",
            json={"content": "Nice write-up"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_too_short_comment_is_bad_request(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()

        response = client.post(
            f"/api/v1/posts/{post_id}/comments", json={"content": "ok"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["context"]["field"] == "content"

    def test_comments_listed_oldest_first(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        create_post_via_api: CreatePostFunc,
    ) -> None:
        post_id = create_post_via_api()
        other_post_id = create_post_via_api(title="Another post")
        for text in ("First comment", "Second comment"):
            client.post(
                f"/api/v1/posts/{post_id}/comments", json={"content": text}, headers=auth_headers
            )
        client.post(
            f"/api/v1/posts/{other_post_id}/comments",
            json={"content": "Elsewhere"},
            headers=auth_headers,
        )

        comments = client.get(f"/api/v1/posts/{post_id}/comments").json()["data"]

        assert [c["content"] for c in comments] == ["First comment", "Second comment"]

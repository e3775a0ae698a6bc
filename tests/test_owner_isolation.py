"""Tests that every operation is scoped to the authenticated owner."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from mathcards import models


class TestFlashcardIsolation:
    """Owner B must never see or change owner A's flashcards."""

    def test_list_is_scoped(
        self, client: TestClient, create_flashcard, other_owner_headers: dict[str, str]
    ) -> None:
        create_flashcard("A's card", "secret")

        assert client.get("/api/flashcards", headers=other_owner_headers).json() == []
        assert len(client.get("/api/flashcards").json()) == 1

    def test_get_other_owner_flashcard(
        self, client: TestClient, create_flashcard, other_owner_headers: dict[str, str]
    ) -> None:
        flashcard = create_flashcard("A's card", "secret")

        response = client.get(f"/api/flashcards/{flashcard['id']}", headers=other_owner_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_other_owner_flashcard(
        self,
        client: TestClient,
        db_session: Session,
        create_flashcard,
        other_owner_headers: dict[str, str],
    ) -> None:
        flashcard = create_flashcard("A's card", "secret")

        response = client.put(
            f"/api/flashcards/{flashcard['id']}",
            json={"front": "hijacked"},
            headers=other_owner_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.get(models.Flashcard, flashcard["id"]).front == "A's card"

    def test_delete_other_owner_flashcard(
        self, client: TestClient, create_flashcard, other_owner_headers: dict[str, str]
    ) -> None:
        flashcard = create_flashcard("A's card", "secret")

        response = client.delete(f"/api/flashcards/{flashcard['id']}", headers=other_owner_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get(f"/api/flashcards/{flashcard['id']}").status_code == status.HTTP_200_OK

    def test_delete_all_is_scoped(
        self, client: TestClient, create_flashcard, other_owner_headers: dict[str, str]
    ) -> None:
        create_flashcard("A1", "a")
        create_flashcard("A2", "a")
        client.post("/api/flashcards", json={"front": "B1", "back": "b"}, headers=other_owner_headers)

        response = client.delete("/api/flashcards", headers=other_owner_headers)

        assert response.json()["count"] == 1
        assert len(client.get("/api/flashcards").json()) == 2

    def test_search_is_scoped(
        self, client: TestClient, create_flashcard, other_owner_headers: dict[str, str]
    ) -> None:
        create_flashcard("Shared keyword", "a")

        response = client.get(
            "/api/flashcards/search", params={"q": "keyword"}, headers=other_owner_headers
        )

        assert response.json() == []


class TestTagIsolation:
    """Owner B must never see, change or attach owner A's tags."""

    def test_list_is_scoped(
        self, client: TestClient, create_tag, other_owner_headers: dict[str, str]
    ) -> None:
        create_tag("Private")

        assert client.get("/api/tags", headers=other_owner_headers).json() == []

    def test_get_update_delete_other_owner_tag(
        self, client: TestClient, create_tag, other_owner_headers: dict[str, str]
    ) -> None:
        tag = create_tag("Private")
        path = f"/api/tags/{tag['id']}"

        assert client.get(path, headers=other_owner_headers).status_code == 404
        assert (
            client.put(path, json={"name": "Mine"}, headers=other_owner_headers).status_code
            == 404
        )
        assert client.delete(path, headers=other_owner_headers).status_code == 404
        assert client.get(path).json()["name"] == "Private"

    def test_cannot_attach_other_owner_tag(
        self, client: TestClient, create_tag, other_owner_headers: dict[str, str]
    ) -> None:
        """Test that a foreign tag id is reported as not found on create."""
        tag = create_tag("Private")

        response = client.post(
            "/api/flashcards",
            json={"front": "Q", "back": "A", "tagIds": [tag["id"]]},
            headers=other_owner_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/flashcards", headers=other_owner_headers).json() == []

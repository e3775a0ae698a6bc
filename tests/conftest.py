"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from mathcards.database import Base, build_engine, get_db
from mathcards.infrastructure.identity.dependencies import get_identity_verifier
from mathcards.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

OWNER_A = "owner-a"
OWNER_B = "owner-b"
VALID_TOKEN = "valid-token"

# Create test engine (single shared connection, foreign keys on)
test_engine = build_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class FakeIdentityVerifier:
    """Accepts a fixed set of tokens and records every call."""

    def __init__(self, valid_tokens: set[str] | None = None) -> None:
        self.valid_tokens = valid_tokens if valid_tokens is not None else {VALID_TOKEN}
        self.calls: list[str] = []

    async def verify(self, token: str) -> bool:
        self.calls.append(token)
        return token in self.valid_tokens


def auth_headers(owner_id: str, token: str = VALID_TOKEN) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}", "X-Replit-User-Id": owner_id}


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def identity_verifier() -> FakeIdentityVerifier:
    return FakeIdentityVerifier()


@pytest.fixture
def raw_client(
    db_session: Session, identity_verifier: FakeIdentityVerifier
) -> Generator[TestClient, Any, None]:
    """Create a test client without credentials."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_verifier] = lambda: identity_verifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(raw_client: TestClient) -> TestClient:
    """Create a test client authenticated as owner A."""
    raw_client.headers.update(auth_headers(OWNER_A))
    return raw_client


@pytest.fixture
def other_owner_headers() -> dict[str, str]:
    """Headers authenticating as owner B, to pass per request."""
    return auth_headers(OWNER_B)


@pytest.fixture
def create_tag(client: TestClient):  # noqa: ANN201
    """Factory creating a tag for owner A through the API."""

    def _create(name: str, color: str = "#3b82f6", **kwargs: Any) -> dict[str, Any]:
        response = client.post("/api/tags", json={"name": name, "color": color}, **kwargs)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_flashcard(client: TestClient):  # noqa: ANN201
    """Factory creating a flashcard for owner A through the API."""

    def _create(
        front: str, back: str, tag_ids: list[int] | None = None, **kwargs: Any
    ) -> dict[str, Any]:
        response = client.post(
            "/api/flashcards",
            json={"front": front, "back": back, "tagIds": tag_ids or []},
            **kwargs,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create

from datetime import UTC, datetime

import pytest

from mathcards.domain.common.exceptions import DomainError, ValidationError
from mathcards.domain.common.value_objects import FlashcardId, OwnerId
from mathcards.domain.learning.entities import Flashcard


def test_create_flashcard() -> None:
    """Test creating a new flashcard."""
    flashcard = Flashcard.create(
        owner_id=OwnerId("owner-a"),
        front="What is $\\int_0^1 x\\,dx$?",
        back="$\\frac{1}{2}$",
    )

    assert flashcard.id == FlashcardId(0)
    assert not flashcard.id.is_persisted
    assert flashcard.owner_id == OwnerId("owner-a")
    assert flashcard.front == "What is $\\int_0^1 x\\,dx$?"
    assert flashcard.created_at == flashcard.updated_at
    assert flashcard.created_at.tzinfo is not None


def test_create_strips_whitespace() -> None:
    """Test that create factory strips whitespace from both sides."""
    flashcard = Flashcard.create(owner_id=OwnerId("o"), front="  Front  ", back="\nBack\t")

    assert flashcard.front == "Front"
    assert flashcard.back == "Back"


@pytest.mark.parametrize("front", ["", "   ", "\n\t"])
def test_create_rejects_blank_front(front: str) -> None:
    """Test that blank front sides are rejected."""
    with pytest.raises(ValidationError, match="Front side cannot be empty") as exc_info:
        Flashcard.create(owner_id=OwnerId("o"), front=front, back="Back")

    assert exc_info.value.field == "front"


def test_create_rejects_blank_back() -> None:
    """Test that a blank back side is rejected."""
    with pytest.raises(DomainError, match="Back side cannot be empty"):
        Flashcard.create(owner_id=OwnerId("o"), front="Front", back=" ")


def test_update_sides() -> None:
    """Test updating front and back."""
    flashcard = Flashcard.create(owner_id=OwnerId("o"), front="Old", back="Old")

    flashcard.update_front(" New front ")
    flashcard.update_back("New back")

    assert flashcard.front == "New front"
    assert flashcard.back == "New back"


def test_update_rejects_blank_side_and_keeps_value() -> None:
    """Test that a failed update leaves the side unchanged."""
    flashcard = Flashcard.create(owner_id=OwnerId("o"), front="Front", back="Back")

    with pytest.raises(ValidationError):
        flashcard.update_back("")

    assert flashcard.back == "Back"


def test_touch_refreshes_updated_at() -> None:
    """Test that touch moves updated_at forward."""
    past = datetime(2020, 1, 1, tzinfo=UTC)
    flashcard = Flashcard.create_with_id(
        id=FlashcardId(7),
        owner_id=OwnerId("o"),
        front="Q",
        back="A",
        created_at=past,
        updated_at=past,
    )

    flashcard.touch()

    assert flashcard.created_at == past
    assert flashcard.updated_at > past


def test_create_with_id() -> None:
    """Test reconstituting from persistence."""
    now = datetime.now(UTC)
    flashcard = Flashcard.create_with_id(
        id=FlashcardId(42),
        owner_id=OwnerId("o"),
        front="Q",
        back="A",
        created_at=now,
        updated_at=now,
    )

    assert flashcard.id == FlashcardId(42)
    assert flashcard.id.is_persisted
    assert flashcard.created_at == now


def test_negative_id_rejected() -> None:
    """Test that ids cannot be negative."""
    with pytest.raises(ValueError, match="must be non-negative"):
        FlashcardId(-1)


def test_owner_id_required() -> None:
    """Test that an owner id cannot be blank."""
    with pytest.raises(ValueError):
        OwnerId("")

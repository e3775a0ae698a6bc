"""
Flashcard entity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from mathcards.domain.common.entity import Entity
from mathcards.domain.common.exceptions import ValidationError
from mathcards.domain.common.value_objects import FlashcardId, OwnerId


def _require_text(value: str, field: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=field)
    return value.strip()


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Study card with a front and a back side.

    Both sides are free text that may embed inline ($...$) or display
    ($$...$$) math markup; the markup is opaque to the domain.

    Business Rules:
    - Front and back cannot be empty
    - A flashcard belongs to exactly one owner
    """

    id: FlashcardId
    owner_id: OwnerId
    front: str
    back: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_text(self.front, "front", "Front side")
        _require_text(self.back, "back", "Back side")

    def update_front(self, front: str) -> None:
        """
        Update the front side.

        Raises:
            ValidationError: If front is empty
        """
        self.front = _require_text(front, "front", "Front side")

    def update_back(self, back: str) -> None:
        """
        Update the back side.

        Raises:
            ValidationError: If back is empty
        """
        self.back = _require_text(back, "back", "Back side")

    def touch(self) -> None:
        """Refresh the modification timestamp."""
        self.updated_at = datetime.now(UTC)

    @classmethod
    def create(cls, owner_id: OwnerId, front: str, back: str) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        now = datetime.now(UTC)
        return cls(
            id=FlashcardId.generate(),
            owner_id=owner_id,
            front=_require_text(front, "front", "Front side"),
            back=_require_text(back, "back", "Back side"),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        owner_id: OwnerId,
        front: str,
        back: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            front=front,
            back=back,
            created_at=created_at,
            updated_at=updated_at,
        )

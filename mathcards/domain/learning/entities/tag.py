"""Tag entity for categorizing flashcards."""

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from mathcards.domain.common.entity import Entity
from mathcards.domain.common.exceptions import ValidationError
from mathcards.domain.common.value_objects import OwnerId, TagId

MAX_TAG_NAME_LENGTH = 100
HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _validate_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Tag name cannot be empty", field="name")
    name = name.strip()
    if len(name) > MAX_TAG_NAME_LENGTH:
        raise ValidationError(
            f"Tag name cannot be longer than {MAX_TAG_NAME_LENGTH} characters", field="name"
        )
    return name


def _validate_color(color: str) -> str:
    color = (color or "").strip()
    if not color:
        raise ValidationError("Tag color cannot be empty", field="color")
    if not HEX_COLOR_PATTERN.match(color):
        raise ValidationError("Tag color must be a hex color like #3b82f6", field="color", value=color)
    return color


@dataclass(eq=False)
class Tag(Entity[TagId]):
    """
    Tag entity for categorizing flashcards.

    Represents an owner-defined colored label used to organize and
    filter flashcards. Names are unique per owner.
    """

    # Identity
    id: TagId
    owner_id: OwnerId

    # Content
    name: str
    color: str

    # Timestamps
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)
        _validate_color(self.color)

    # Commands
    def rename(self, name: str) -> None:
        self.name = _validate_name(name)
        self.updated_at = datetime.now(UTC)

    def recolor(self, color: str) -> None:
        self.color = _validate_color(color)
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(cls, owner_id: OwnerId, name: str, color: str) -> "Tag":
        """Factory for creating new tag."""
        now = datetime.now(UTC)
        return cls(
            id=TagId.generate(),
            owner_id=owner_id,
            name=_validate_name(name),
            color=_validate_color(color),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: TagId,
        owner_id: OwnerId,
        name: str,
        color: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Tag":
        """Factory for reconstituting tag from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            color=color,
            created_at=created_at,
            updated_at=updated_at,
        )

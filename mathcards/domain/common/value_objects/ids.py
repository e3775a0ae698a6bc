from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int


@dataclass(frozen=True)
class TagId(EntityId):
    """Strongly-typed tag identifier."""

    value: int


@dataclass(frozen=True)
class OwnerId(ValueObject):
    """
    Identity of the owner of flashcards and tags.

    Owner ids come from the identity header of an authenticated request
    and are opaque strings.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("OwnerId cannot be empty")

    def __str__(self) -> str:
        return self.value

"""DTOs for flashcard use cases."""

from dataclasses import dataclass, field

from mathcards.domain.learning.entities import Flashcard, Tag


@dataclass
class FlashcardWithTags:
    """DTO for a flashcard hydrated with its resolved tags."""

    flashcard: Flashcard
    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def from_pair(cls, pair: tuple[Flashcard, list[Tag]]) -> "FlashcardWithTags":
        flashcard, tags = pair
        return cls(flashcard=flashcard, tags=tags)

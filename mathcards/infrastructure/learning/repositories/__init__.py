"""Learning context repositories."""

from mathcards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from mathcards.infrastructure.learning.repositories.tag_repository import TagRepository

__all__ = ["FlashcardRepository", "TagRepository"]

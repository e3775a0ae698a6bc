"""DTOs for learning use cases."""

from mathcards.application.learning.use_cases.dtos.flashcard_dtos import FlashcardWithTags

__all__ = ["FlashcardWithTags"]

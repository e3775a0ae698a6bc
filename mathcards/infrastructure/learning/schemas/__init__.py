"""Learning context schemas."""

from mathcards.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardBase,
    FlashcardBulkDeleteResponse,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
)
from mathcards.infrastructure.learning.schemas.tag_schemas import (
    Tag,
    TagCreateRequest,
    TagUpdateRequest,
)

__all__ = [
    "Flashcard",
    "FlashcardBase",
    "FlashcardBulkDeleteResponse",
    "FlashcardCreateRequest",
    "FlashcardUpdateRequest",
    "Tag",
    "TagCreateRequest",
    "TagUpdateRequest",
]

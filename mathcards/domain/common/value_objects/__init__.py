"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, OwnerId, TagId

__all__ = [
    "FlashcardId",
    "OwnerId",
    "TagId",
]

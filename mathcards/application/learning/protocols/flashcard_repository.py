"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from mathcards.domain.common.value_objects import FlashcardId, OwnerId, TagId
from mathcards.domain.learning.entities import Flashcard, Tag


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check.

        Returns:
            Flashcard entity if found and owned, None otherwise
        """
        ...

    def find_by_id_with_tags(
        self, flashcard_id: FlashcardId, owner_id: OwnerId
    ) -> tuple[Flashcard, list[Tag]] | None:
        """Find a flashcard and its tags, or None if absent or not owned."""
        ...

    def find_all_with_tags(self, owner_id: OwnerId) -> list[tuple[Flashcard, list[Tag]]]:
        """
        Get all flashcards of an owner with their tags.

        Returns:
            Flashcards ordered by created_at DESC
        """
        ...

    def find_ids_by_tags(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[FlashcardId]:
        """
        Resolve the flashcards linked to any of the given tags.

        Returns:
            Distinct flashcard ids (OR across tags)
        """
        ...

    def search_with_tags(
        self,
        owner_id: OwnerId,
        query_text: str,
        flashcard_ids: list[FlashcardId] | None = None,
    ) -> list[tuple[Flashcard, list[Tag]]]:
        """
        Search an owner's flashcards.

        Args:
            owner_id: Owner to scope the search to
            query_text: Case-insensitive substring matched against front or back;
                empty matches everything
            flashcard_ids: Optional id set to intersect with

        Returns:
            Matching flashcards with their tags, ordered by created_at DESC
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Stage a flashcard entity (create or update) in the current transaction.

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def replace_tags(self, flashcard_id: FlashcardId, tag_ids: list[TagId]) -> None:
        """Delete every association of the flashcard, then link the given tags."""
        ...

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard and its associations.

        Returns:
            True if deleted, False if not found
        """
        ...

    def delete_all(self, owner_id: OwnerId) -> int:
        """
        Delete every flashcard of an owner and their associations.

        Returns:
            Number of deleted flashcards
        """
        ...

"""Protocol for Tag repository in learning context."""

from typing import Protocol

from mathcards.domain.common.value_objects import OwnerId, TagId
from mathcards.domain.learning.entities import Tag


class TagRepositoryProtocol(Protocol):
    """Protocol for Tag repository operations in learning context."""

    def find_by_id(self, tag_id: TagId, owner_id: OwnerId) -> Tag | None:
        """Find a tag by ID with ownership check."""
        ...

    def find_by_ids(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[Tag]:
        """Get the tags among the given ids that belong to the owner."""
        ...

    def find_by_name(self, name: str, owner_id: OwnerId) -> Tag | None:
        """Find an owner's tag by exact name."""
        ...

    def find_all(self, owner_id: OwnerId) -> list[Tag]:
        """Get all tags of an owner ordered by name."""
        ...

    def save(self, tag: Tag) -> Tag:
        """Stage a tag entity (create or update) in the current transaction."""
        ...

    def delete(self, tag_id: TagId, owner_id: OwnerId) -> bool:
        """
        Delete a tag and its flashcard associations.

        Returns:
            True if deleted, False if not found
        """
        ...

"""Use case for searching flashcards by text and tags."""

import structlog

from mathcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from mathcards.application.learning.use_cases.dtos import FlashcardWithTags
from mathcards.domain.common.value_objects import OwnerId, TagId

logger = structlog.get_logger(__name__)


class FlashcardSearchUseCase:
    """Use case for composing filtered flashcard queries."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def search_flashcards(
        self,
        owner_id: str,
        query_text: str = "",
        tag_ids: list[int] | None = None,
    ) -> list[FlashcardWithTags]:
        """
        Search an owner's flashcards.

        The text filter keeps flashcards whose front or back contains the
        stripped query_text (case-insensitive). The tag filter keeps flashcards
        linked to at least one of tag_ids. Both filters are intersected.

        Args:
            owner_id: ID of the owner
            query_text: Substring to look for; empty disables the text filter
            tag_ids: Tags to filter by; empty or None disables the tag filter

        Returns:
            Matching flashcards with their tags, newest first
        """
        owner_id_vo = OwnerId(owner_id)
        query_text = (query_text or "").strip()

        flashcard_ids = None
        if tag_ids:
            # Non-positive ids can never match a stored tag
            unique_tag_ids = [TagId(tag_id) for tag_id in dict.fromkeys(tag_ids) if tag_id > 0]
            flashcard_ids = self.flashcard_repository.find_ids_by_tags(unique_tag_ids, owner_id_vo)
            if not flashcard_ids:
                logger.debug("search_no_tagged_flashcards", owner_id=owner_id, tag_ids=tag_ids)
                return []

        pairs = self.flashcard_repository.search_with_tags(
            owner_id_vo, query_text, flashcard_ids
        )
        return [FlashcardWithTags.from_pair(pair) for pair in pairs]

"""Use case for flashcard CRUD operations."""

import structlog

from mathcards.application.common.unit_of_work import UnitOfWork
from mathcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from mathcards.application.learning.protocols.tag_repository import TagRepositoryProtocol
from mathcards.application.learning.use_cases.dtos import FlashcardWithTags
from mathcards.application.learning.use_cases.exceptions import (
    FlashcardNotFoundError,
    TagNotFoundError,
)
from mathcards.domain.common.value_objects import FlashcardId, OwnerId, TagId
from mathcards.domain.learning.entities import Flashcard

logger = structlog.get_logger(__name__)


class FlashcardUseCase:
    """Use case for flashcard CRUD operations, scoped to one owner per call."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.tag_repository = tag_repository
        self.unit_of_work = unit_of_work

    def _resolve_tag_ids(self, tag_ids: list[int], owner_id: OwnerId) -> list[TagId]:
        """
        De-duplicate tag ids and check they all belong to the owner.

        Raises:
            TagNotFoundError: If any tag is absent or owned by someone else
        """
        unique_ids = list(dict.fromkeys(tag_ids))
        if not unique_ids:
            return []

        tag_id_vos = [TagId(tag_id) for tag_id in unique_ids]
        owned = {tag.id.value for tag in self.tag_repository.find_by_ids(tag_id_vos, owner_id)}
        missing = [tag_id for tag_id in unique_ids if tag_id not in owned]
        if missing:
            raise TagNotFoundError(missing)
        return tag_id_vos

    def _load(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> FlashcardWithTags:
        pair = self.flashcard_repository.find_by_id_with_tags(flashcard_id, owner_id)
        if pair is None:
            raise FlashcardNotFoundError(flashcard_id.value)
        return FlashcardWithTags.from_pair(pair)

    def list_flashcards(self, owner_id: str) -> list[FlashcardWithTags]:
        """
        Get all flashcards of an owner, newest first.

        Args:
            owner_id: ID of the owner

        Returns:
            List of FlashcardWithTags DTOs
        """
        pairs = self.flashcard_repository.find_all_with_tags(OwnerId(owner_id))
        return [FlashcardWithTags.from_pair(pair) for pair in pairs]

    def get_flashcard(self, flashcard_id: int, owner_id: str) -> FlashcardWithTags:
        """
        Get a single flashcard with its tags.

        Raises:
            FlashcardNotFoundError: If flashcard is not found or not owned
        """
        return self._load(FlashcardId(flashcard_id), OwnerId(owner_id))

    def create_flashcard(
        self,
        owner_id: str,
        front: str,
        back: str,
        tag_ids: list[int] | None = None,
    ) -> FlashcardWithTags:
        """
        Create a new flashcard and link it to the given tags.

        The flashcard row and its associations are written in one transaction.

        Args:
            owner_id: ID of the owner
            front: Front side text
            back: Back side text
            tag_ids: IDs of the owner's tags to attach

        Returns:
            Created flashcard with its resolved tags

        Raises:
            ValidationError: If front or back is empty
            TagNotFoundError: If a tag does not belong to the owner
        """
        owner_id_vo = OwnerId(owner_id)
        flashcard = Flashcard.create(owner_id=owner_id_vo, front=front, back=back)

        with self.unit_of_work:
            resolved_tag_ids = self._resolve_tag_ids(tag_ids or [], owner_id_vo)
            flashcard = self.flashcard_repository.save(flashcard)
            if resolved_tag_ids:
                self.flashcard_repository.replace_tags(flashcard.id, resolved_tag_ids)
            self.unit_of_work.commit()

        logger.info(
            "created_flashcard",
            flashcard_id=flashcard.id.value,
            owner_id=owner_id,
            tag_count=len(resolved_tag_ids),
        )
        return self._load(flashcard.id, owner_id_vo)

    def update_flashcard(
        self,
        flashcard_id: int,
        owner_id: str,
        front: str | None = None,
        back: str | None = None,
        tag_ids: list[int] | None = None,
    ) -> FlashcardWithTags:
        """
        Partially update a flashcard.

        When tag_ids is given (even empty) the association set is replaced
        entirely; when it is None the existing associations are kept.

        Raises:
            FlashcardNotFoundError: If flashcard is not found or not owned
            ValidationError: If a provided side is empty
            TagNotFoundError: If a tag does not belong to the owner
        """
        flashcard_id_vo = FlashcardId(flashcard_id)
        owner_id_vo = OwnerId(owner_id)

        with self.unit_of_work:
            flashcard = self.flashcard_repository.find_by_id(flashcard_id_vo, owner_id_vo)
            if not flashcard:
                raise FlashcardNotFoundError(flashcard_id)

            if front is not None:
                flashcard.update_front(front)
            if back is not None:
                flashcard.update_back(back)
            flashcard.touch()

            resolved_tag_ids = (
                self._resolve_tag_ids(tag_ids, owner_id_vo) if tag_ids is not None else None
            )

            self.flashcard_repository.save(flashcard)
            if resolved_tag_ids is not None:
                self.flashcard_repository.replace_tags(flashcard_id_vo, resolved_tag_ids)
            self.unit_of_work.commit()

        logger.info(
            "updated_flashcard",
            flashcard_id=flashcard_id,
            tags_replaced=resolved_tag_ids is not None,
        )
        return self._load(flashcard_id_vo, owner_id_vo)

    def delete_flashcard(self, flashcard_id: int, owner_id: str) -> FlashcardWithTags:
        """
        Delete a flashcard.

        Returns:
            Snapshot of the flashcard as it was before deletion

        Raises:
            FlashcardNotFoundError: If flashcard is not found or not owned
        """
        flashcard_id_vo = FlashcardId(flashcard_id)
        owner_id_vo = OwnerId(owner_id)

        with self.unit_of_work:
            snapshot = self.flashcard_repository.find_by_id_with_tags(flashcard_id_vo, owner_id_vo)
            if snapshot is None:
                raise FlashcardNotFoundError(flashcard_id)
            self.flashcard_repository.delete(flashcard_id_vo, owner_id_vo)
            self.unit_of_work.commit()

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
        return FlashcardWithTags.from_pair(snapshot)

    def delete_all_flashcards(self, owner_id: str) -> int:
        """
        Delete every flashcard of an owner.

        Returns:
            Number of deleted flashcards
        """
        with self.unit_of_work:
            count = self.flashcard_repository.delete_all(OwnerId(owner_id))
            self.unit_of_work.commit()

        logger.info("deleted_all_flashcards", owner_id=owner_id, count=count)
        return count

"""Use case for tag management."""

import structlog

from mathcards.application.common.unit_of_work import UnitOfWork
from mathcards.application.learning.protocols.tag_repository import TagRepositoryProtocol
from mathcards.application.learning.use_cases.exceptions import TagNotFoundError
from mathcards.domain.common.value_objects import OwnerId, TagId
from mathcards.domain.learning.entities import Tag
from mathcards.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class TagUseCase:
    """Use case for tag CRUD operations, scoped to one owner per call."""

    def __init__(self, tag_repository: TagRepositoryProtocol, unit_of_work: UnitOfWork) -> None:
        """Initialize use case with repository protocols."""
        self.tag_repository = tag_repository
        self.unit_of_work = unit_of_work

    def _ensure_name_available(
        self, name: str, owner_id: OwnerId, exclude: TagId | None = None
    ) -> None:
        existing = self.tag_repository.find_by_name(name, owner_id)
        if existing is not None and existing.id != exclude:
            raise ValidationError(f"A tag named '{name}' already exists", field="name")

    def list_tags(self, owner_id: str) -> list[Tag]:
        """Get all tags of an owner ordered by name."""
        return self.tag_repository.find_all(OwnerId(owner_id))

    def get_tag(self, tag_id: int, owner_id: str) -> Tag:
        """
        Get a single tag.

        Raises:
            TagNotFoundError: If tag is not found or not owned
        """
        tag = self.tag_repository.find_by_id(TagId(tag_id), OwnerId(owner_id))
        if tag is None:
            raise TagNotFoundError(tag_id)
        return tag

    def create_tag(self, owner_id: str, name: str, color: str) -> Tag:
        """
        Create a new tag.

        Raises:
            ValidationError: If the name is empty, taken, or the color is not hex
        """
        owner_id_vo = OwnerId(owner_id)
        tag = Tag.create(owner_id=owner_id_vo, name=name, color=color)

        with self.unit_of_work:
            self._ensure_name_available(tag.name, owner_id_vo)
            tag = self.tag_repository.save(tag)
            self.unit_of_work.commit()

        logger.info("created_tag", tag_id=tag.id.value, owner_id=owner_id)
        return tag

    def update_tag(
        self,
        tag_id: int,
        owner_id: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Tag:
        """
        Update a tag's name and/or color.

        Raises:
            TagNotFoundError: If tag is not found or not owned
            ValidationError: If the new name is empty or taken, or the color is not hex
        """
        tag_id_vo = TagId(tag_id)
        owner_id_vo = OwnerId(owner_id)

        with self.unit_of_work:
            tag = self.tag_repository.find_by_id(tag_id_vo, owner_id_vo)
            if tag is None:
                raise TagNotFoundError(tag_id)

            if name is not None:
                tag.rename(name)
                self._ensure_name_available(tag.name, owner_id_vo, exclude=tag_id_vo)
            if color is not None:
                tag.recolor(color)

            tag = self.tag_repository.save(tag)
            self.unit_of_work.commit()

        logger.info("updated_tag", tag_id=tag_id)
        return tag

    def delete_tag(self, tag_id: int, owner_id: str) -> Tag:
        """
        Delete a tag and unlink it from every flashcard.

        Returns:
            Snapshot of the tag as it was before deletion

        Raises:
            TagNotFoundError: If tag is not found or not owned
        """
        tag_id_vo = TagId(tag_id)
        owner_id_vo = OwnerId(owner_id)

        with self.unit_of_work:
            tag = self.tag_repository.find_by_id(tag_id_vo, owner_id_vo)
            if tag is None:
                raise TagNotFoundError(tag_id)
            self.tag_repository.delete(tag_id_vo, owner_id_vo)
            self.unit_of_work.commit()

        logger.info("deleted_tag", tag_id=tag_id)
        return tag

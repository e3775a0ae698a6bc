"""Repository for Tag domain entity."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from mathcards.domain.common.value_objects import OwnerId, TagId
from mathcards.domain.learning.entities import Tag
from mathcards.infrastructure.learning.mappers.tag_mapper import TagMapper
from mathcards.models import FlashcardTag as FlashcardTagORM
from mathcards.models import Tag as TagORM


class TagRepository:
    """Repository for Tag domain entity."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TagMapper()

    def find_by_id(self, tag_id: TagId, owner_id: OwnerId) -> Tag | None:
        """
        Find a tag by ID with ownership check.

        Args:
            tag_id: The tag ID
            owner_id: The owner ID for ownership verification

        Returns:
            Tag entity if found and owned, None otherwise
        """
        stmt = select(TagORM).where(
            TagORM.id == tag_id.value,
            TagORM.owner_id == owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[Tag]:
        """
        Get multiple tags by id for a specific owner in a single query.

        Ids that do not exist or belong to another owner are left out.
        """
        if not tag_ids:
            return []

        stmt = select(TagORM).where(
            TagORM.id.in_([tag_id.value for tag_id in tag_ids]),
            TagORM.owner_id == owner_id.value,
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_name(self, name: str, owner_id: OwnerId) -> Tag | None:
        stmt = select(TagORM).where(
            TagORM.name == name,
            TagORM.owner_id == owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, owner_id: OwnerId) -> list[Tag]:
        """Get all tags of an owner ordered by name."""
        stmt = select(TagORM).where(TagORM.owner_id == owner_id.value).order_by(TagORM.name)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, tag: Tag) -> Tag:
        """
        Stage a tag entity (create or update).

        Returns:
            Saved tag entity with database-generated values
        """
        if not tag.id.is_persisted:
            orm_model = self.mapper.to_orm(tag)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(TagORM, tag.id.value)
        if not orm_model:
            raise ValueError(f"Tag {tag.id.value} not found")
        self.mapper.to_orm(tag, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete(self, tag_id: TagId, owner_id: OwnerId) -> bool:
        """
        Delete a tag and its flashcard associations.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(TagORM).where(
            TagORM.id == tag_id.value,
            TagORM.owner_id == owner_id.value,
        )
        tag_orm = self.db.execute(stmt).scalar_one_or_none()

        if not tag_orm:
            return False

        self.db.execute(delete(FlashcardTagORM).where(FlashcardTagORM.tag_id == tag_id.value))
        self.db.delete(tag_orm)
        self.db.flush()
        return True

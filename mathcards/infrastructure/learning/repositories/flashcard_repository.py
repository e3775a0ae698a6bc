"""Repository for Flashcard domain entities."""

from sqlalchemy import Select, delete, or_, select
from sqlalchemy.orm import Session, selectinload

from mathcards.domain.common.value_objects import FlashcardId, OwnerId, TagId
from mathcards.domain.learning.entities import Flashcard, Tag
from mathcards.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from mathcards.infrastructure.learning.mappers.tag_mapper import TagMapper
from mathcards.models import Flashcard as FlashcardORM
from mathcards.models import FlashcardTag as FlashcardTagORM
from mathcards.models import Tag as TagORM


class FlashcardRepository:
    """
    Repository for Flashcard domain entities.

    Every query is filtered by owner. Writes are flushed, never committed:
    the caller's unit of work owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()
        self.tag_mapper = TagMapper()

    def _owned_with_tags(self, owner_id: OwnerId) -> Select[tuple[FlashcardORM]]:
        return (
            select(FlashcardORM)
            .options(selectinload(FlashcardORM.tags))
            .where(FlashcardORM.owner_id == owner_id.value)
            .execution_options(populate_existing=True)
        )

    def _to_pair(self, orm_model: FlashcardORM) -> tuple[Flashcard, list[Tag]]:
        return (
            self.mapper.to_domain(orm_model),
            [self.tag_mapper.to_domain(tag) for tag in orm_model.tags],
        )

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            Flashcard entity if found and owned, None otherwise
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id_with_tags(
        self, flashcard_id: FlashcardId, owner_id: OwnerId
    ) -> tuple[Flashcard, list[Tag]] | None:
        """Find a flashcard and its tags, or None if absent or not owned."""
        stmt = self._owned_with_tags(owner_id).where(FlashcardORM.id == flashcard_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self._to_pair(orm_model) if orm_model else None

    def find_all_with_tags(self, owner_id: OwnerId) -> list[tuple[Flashcard, list[Tag]]]:
        """
        Get all flashcards of an owner with their tags.

        Returns:
            Flashcards ordered by created_at DESC
        """
        return self.search_with_tags(owner_id, "")

    def find_ids_by_tags(self, tag_ids: list[TagId], owner_id: OwnerId) -> list[FlashcardId]:
        """
        Resolve the flashcards linked to any of the given tags.

        Args:
            tag_ids: Tags to look up
            owner_id: Owner of the tags

        Returns:
            Distinct flashcard ids (OR across tags)
        """
        if not tag_ids:
            return []

        stmt = (
            select(FlashcardTagORM.flashcard_id)
            .join(TagORM, TagORM.id == FlashcardTagORM.tag_id)
            .where(
                FlashcardTagORM.tag_id.in_([tag_id.value for tag_id in tag_ids]),
                TagORM.owner_id == owner_id.value,
            )
            .distinct()
        )
        return [FlashcardId(value) for value in self.db.execute(stmt).scalars().all()]

    def search_with_tags(
        self,
        owner_id: OwnerId,
        query_text: str,
        flashcard_ids: list[FlashcardId] | None = None,
    ) -> list[tuple[Flashcard, list[Tag]]]:
        """
        Search an owner's flashcards by substring and optional id set.

        Args:
            owner_id: Owner to scope the search to
            query_text: Case-insensitive substring matched against front or back;
                empty matches everything. LIKE wildcards are matched literally.
            flashcard_ids: Optional id set to intersect with

        Returns:
            Matching flashcards with their tags, ordered by created_at DESC
        """
        stmt = self._owned_with_tags(owner_id)

        if query_text:
            stmt = stmt.where(
                or_(
                    FlashcardORM.front.icontains(query_text, autoescape=True),
                    FlashcardORM.back.icontains(query_text, autoescape=True),
                )
            )

        if flashcard_ids is not None:
            stmt = stmt.where(FlashcardORM.id.in_([fid.value for fid in flashcard_ids]))

        stmt = stmt.order_by(FlashcardORM.created_at.desc(), FlashcardORM.id.desc())
        orm_models = self.db.execute(stmt).scalars().all()
        return [self._to_pair(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Stage a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        if not flashcard.id.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        # Update existing
        orm_model = self.db.get(FlashcardORM, flashcard.id.value)
        if not orm_model:
            raise ValueError(f"Flashcard {flashcard.id.value} not found")
        self.mapper.to_orm(flashcard, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def replace_tags(self, flashcard_id: FlashcardId, tag_ids: list[TagId]) -> None:
        """
        Replace all tags on a flashcard.

        Deletes every existing association, then inserts one row per distinct
        tag id. Ownership of the tags is checked by the caller.
        """
        self.db.execute(
            delete(FlashcardTagORM).where(FlashcardTagORM.flashcard_id == flashcard_id.value)
        )
        self.db.add_all(
            FlashcardTagORM(flashcard_id=flashcard_id.value, tag_id=tag_id.value)
            for tag_id in dict.fromkeys(tag_ids)
        )
        self.db.flush()

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard and its associations.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        flashcard_orm = self.db.execute(stmt).scalar_one_or_none()

        if not flashcard_orm:
            return False

        self.db.execute(
            delete(FlashcardTagORM).where(FlashcardTagORM.flashcard_id == flashcard_id.value)
        )
        self.db.delete(flashcard_orm)
        self.db.flush()
        return True

    def delete_all(self, owner_id: OwnerId) -> int:
        """
        Delete every flashcard of an owner and their associations.

        Returns:
            Number of deleted flashcards
        """
        ids = list(
            self.db.execute(
                select(FlashcardORM.id).where(FlashcardORM.owner_id == owner_id.value)
            )
            .scalars()
            .all()
        )
        if not ids:
            return 0

        self.db.execute(delete(FlashcardTagORM).where(FlashcardTagORM.flashcard_id.in_(ids)))
        self.db.execute(
            delete(FlashcardORM)
            .where(FlashcardORM.id.in_(ids))
            .execution_options(synchronize_session="fetch")
        )
        self.db.flush()
        return len(ids)

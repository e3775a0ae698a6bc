"""Translates flashcard rows into Flashcard entities and back."""

from mathcards.domain.common.value_objects import FlashcardId, OwnerId
from mathcards.domain.learning.entities import Flashcard
from mathcards.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Stateless converter between the flashcards table and the domain entity."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Rebuild the entity from a loaded row."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            front=orm_model.front,
            back=orm_model.back,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Copy entity state onto orm_model, or build a new row when none is given."""
        if orm_model:
            # Update existing
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            owner_id=domain_entity.owner_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )

"""Translates tag rows into Tag entities and back."""

from mathcards.domain.common.value_objects import OwnerId, TagId
from mathcards.domain.learning.entities import Tag
from mathcards.models import Tag as TagORM


class TagMapper:
    """Stateless converter between the tags table and the domain entity."""

    def to_domain(self, orm_model: TagORM) -> Tag:
        return Tag.create_with_id(
            id=TagId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            name=orm_model.name,
            color=orm_model.color,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Tag, orm_model: TagORM | None = None) -> TagORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.color = domain_entity.color
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return TagORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            owner_id=domain_entity.owner_id.value,
            name=domain_entity.name,
            color=domain_entity.color,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )

"""
Identity types shared by the flashcard and tag entities.

An entity keeps its identity while its fields change; two instances with
the same id are the same entity.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """Database-assigned integer id; 0 marks an entity that was never stored."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for a new entity, replaced on first save."""
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base for mutable domain objects compared by id.

    Subclasses are dataclasses declared with eq=False so these identity
    based __eq__ and __hash__ apply.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))

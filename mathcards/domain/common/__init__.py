"""Building blocks shared by the domain model: ids, entities, value objects, errors."""

from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
    "ValueObject",
]

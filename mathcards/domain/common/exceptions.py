"""
Errors raised when a domain invariant is broken.

The HTTP layer turns them into 400 responses.
"""


class DomainError(Exception):
    """Base for every rule violation detected inside the domain model."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """An entity field holds a value its invariants forbid, e.g. a blank flashcard side."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details = {key: val for key, val in (("field", field), ("value", value)) if val is not None}
        super().__init__(message, details)

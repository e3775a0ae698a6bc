"""Custom exception hierarchy for the mathcards application."""


class MathcardsError(Exception):
    """Base exception for all mathcards errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(MathcardsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(MathcardsError):
    """Validation error tied to a request field."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message, offending field and 400 status code."""
        self.field = field
        super().__init__(message, status_code=400)


class AuthenticationError(MathcardsError):
    """Missing or invalid credentials."""

    def __init__(self, message: str = "Not authenticated") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401)


class StoreError(MathcardsError):
    """Underlying persistence failure."""

    def __init__(self, message: str = "Database operation failed") -> None:
        """Initialize with message and 500 status code."""
        super().__init__(message, status_code=500)

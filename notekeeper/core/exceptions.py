"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when user input fails validation."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class EmptyNoteError(ValidationError):
    """Raised when a note has neither a title nor content."""

    def __init__(self, message: str = "Note must have either a title or content") -> None:
        super().__init__(message, details={"missing_fields": ["title", "content"]})


class PersistenceError(ApplicationError):
    """Raised when the durable store cannot complete an operation."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")

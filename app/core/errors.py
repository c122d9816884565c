"""
Error taxonomy for the task service.

The persistence layer raises these; the HTTP handlers catch them per request
and turn them into ``{"error": <message>}`` responses.
"""
from typing import Any, Iterable, Mapping


class TaskServiceError(Exception):
    """
    Base class for all task service errors.

    Args:
        message: raw description, returned to clients as-is
        **context: extra details kept for logging
    """

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        return self.message

    def to_dict(self) -> dict:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class ValidationError(TaskServiceError):
    """Input to a write operation was malformed or rejected."""


class NotFound(TaskServiceError):
    """The referenced task id does not exist."""


class StorageError(TaskServiceError):
    """Connectivity or unexpected database failure."""


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Flatten pydantic-style error dicts into one line."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid data provided"

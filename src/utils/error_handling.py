"""Error hierarchy for the entry endpoints and the response it maps to."""

from typing import Any, Dict

from utils import apigw


class AppError(Exception):
    """Base class for errors that end up as an HTTP status."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(AppError):
    """Raised when the request is missing something we need."""

    def __init__(self, message: str = "Bad request"):
        super().__init__(message, status_code=400)


class StorageError(AppError):
    """Raised when a DynamoDB call fails or returns something unusable."""

    BACKEND = "backend"
    NOT_FOUND = "not_found"

    def __init__(self, message: str, kind: str = BACKEND):
        super().__init__(message, status_code=500)
        self.kind = kind


class EntryNotFoundError(StorageError):
    """Raised when the table holds no item for the requested id."""

    def __init__(self, entry_id: str):
        super().__init__(
            f"No entry with id {entry_id!r}",
            kind=StorageError.NOT_FOUND,
        )
        self.entry_id = entry_id


class ConfigurationError(Exception):
    """Raised at bootstrap when a required environment value is missing."""


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return apigw.respond(error.status_code, str(error))

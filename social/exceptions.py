"""Error taxonomy raised by the service layer and rendered by the API views."""

import logging
from contextlib import contextmanager

from django.db import DatabaseError

logger = logging.getLogger(__name__)


class FoodMediaError(Exception):
    """Base class for errors the service layer reports to its callers."""
    kind = "error"
    status_code = 400

    def __init__(self, message, *, field=None, data=None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.data = data or {}

    def as_dict(self):
        """Structured payload the caller can use to redisplay the input."""
        return {
            "error": self.kind,
            "detail": self.message,
            "field": self.field,
            "data": self.data,
        }


class ValidationError(FoodMediaError):
    """A required field is missing or malformed."""
    kind = "validation"
    status_code = 400


class NotFoundError(FoodMediaError):
    """A referenced entity does not exist."""
    kind = "not_found"
    status_code = 404


class AuthorizationError(FoodMediaError):
    """The actor does not own the resource they are mutating."""
    kind = "forbidden"
    status_code = 403


class ConflictError(FoodMediaError):
    """A uniqueness rule was violated and could not be absorbed."""
    kind = "conflict"
    status_code = 409


class StorageError(FoodMediaError):
    """The persistence layer failed; the request cannot be completed."""
    kind = "storage"
    status_code = 503


@contextmanager
def translate_storage_errors(operation):
    """Re-raise database failures from `operation` as StorageError.

    Usable as a context manager or as a decorator on service methods.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.error("Storage failure during %s: %s", operation, exc)
        raise StorageError(f"Storage failure during {operation}.") from exc

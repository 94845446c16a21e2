"""
Base exception classes for the user directory backend.

Each module should define its own exceptions that inherit from these bases.
Every exception carries an immutable ApiError value, so the HTTP layer and
callers see the same {message, code, details, timestamp} shape.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .models import ApiError, ErrorCode, FieldError


class ServiceError(Exception):
    """
    Base exception for all taxonomy errors.

    Subclasses pin the error code and the HTTP status it maps to.
    """

    code: ErrorCode
    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[Iterable[FieldError]] = None,
    ):
        super().__init__(message)
        self.error = ApiError(
            message=message,
            code=self.code,
            details=tuple(details) if details is not None else None,
            timestamp=datetime.now(timezone.utc),
        )

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def details(self) -> Optional[tuple[FieldError, ...]]:
        return self.error.details

    @property
    def timestamp(self) -> datetime:
        return self.error.timestamp

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return self.error.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationError(ServiceError):
    """Input validation failed."""

    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class NotFoundError(ServiceError):
    """Resource not found."""

    code = ErrorCode.NOT_FOUND
    status_code = 404


class ConflictError(ServiceError):
    """Uniqueness constraint violated."""

    code = ErrorCode.CONFLICT
    status_code = 409


def validation_error(message: str, field_errors: Iterable[FieldError]) -> ValidationError:
    """Build a VALIDATION_ERROR carrying one detail per violated rule."""
    return ValidationError(message, details=list(field_errors))


def not_found_error(message: str) -> NotFoundError:
    """Build a NOT_FOUND error."""
    return NotFoundError(message)


def conflict_error(message: str) -> ConflictError:
    """Build a CONFLICT error."""
    return ConflictError(message)

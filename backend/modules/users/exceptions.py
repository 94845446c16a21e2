"""
Users module exceptions.
"""

from typing import Iterable

from shared.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from shared.models import FieldError


class UserNotFoundError(NotFoundError):
    """Raised when no record has the requested id."""

    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class EmailAlreadyExistsError(ConflictError):
    """Raised when an email is already held by another record."""

    def __init__(self, email: str):
        super().__init__("Email already exists")
        self.email = email


class UserValidationError(ValidationError):
    """Raised when a create or update request breaks field rules."""

    def __init__(self, field_errors: Iterable[FieldError]):
        super().__init__("Validation failed", details=list(field_errors))

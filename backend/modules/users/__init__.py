"""
Users module.

Handles the paginated, searchable user directory.

Public API:
- IUserService: Interface for user operations
- User: A stored user record
- CreateUserRequest / UpdateUserRequest: Request payloads
"""

from .interfaces import IUserService
from .models import (
    User,
    UserRole,
    UserStatus,
    CreateUserRequest,
    UpdateUserRequest,
)
from .exceptions import (
    UserNotFoundError,
    EmailAlreadyExistsError,
    UserValidationError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserRole",
    "UserStatus",
    "CreateUserRequest",
    "UpdateUserRequest",
    # Exceptions
    "UserNotFoundError",
    "EmailAlreadyExistsError",
    "UserValidationError",
]

"""
Shared infrastructure for the user directory backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Error taxonomy base classes and constructors
- models: Wire envelopes and the structured error value
- repository: In-memory repository base

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    ServiceError,
    ValidationError,
    NotFoundError,
    ConflictError,
    validation_error,
    not_found_error,
    conflict_error,
)
from .models import (
    ApiError,
    ApiResponse,
    ErrorCode,
    FieldError,
    PaginatedResponse,
)
from .repository import BaseRepository

__all__ = [
    "Settings",
    "get_settings",
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "validation_error",
    "not_found_error",
    "conflict_error",
    "ApiError",
    "ApiResponse",
    "ErrorCode",
    "FieldError",
    "PaginatedResponse",
    "BaseRepository",
]

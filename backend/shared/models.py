"""
Shared data models used across modules.

These are the wire shapes every module speaks: the success envelope,
the pagination envelope and the structured error value.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class WireModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorCode(str, Enum):
    """Closed set of error codes a service may surface."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


class FieldError(WireModel):
    """A single rule violation on one request field."""

    field: str = Field(..., description="Wire name of the offending field")
    message: str = Field(..., description="Human readable explanation")
    code: str = Field(..., description="Machine readable rule identifier")

    model_config = ConfigDict(frozen=True)


class ApiError(WireModel):
    """
    Structured error value.

    Immutable once built; the timestamp is set by the server when the
    error is raised.
    """

    message: str
    code: ErrorCode
    details: Optional[tuple[FieldError, ...]] = None
    timestamp: datetime

    model_config = ConfigDict(frozen=True)


class ApiResponse(WireModel, Generic[T]):
    """Success envelope wrapping a single payload."""

    data: Optional[T] = None
    message: str
    success: bool = True


class PaginatedResponse(WireModel, Generic[T]):
    """Pagination envelope (1-indexed pages)."""

    items: list[T] = Field(default_factory=list)
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)

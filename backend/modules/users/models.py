"""
Users module data models.

These models define the User record and the request payloads that
create and modify it.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import Field

from shared.models import WireModel


class UserRole(str, Enum):
    """Roles a user may hold."""

    ADMIN = "admin"
    USER = "user"
    MODERATOR = "moderator"


class UserStatus(str, Enum):
    """Account status."""

    ACTIVE = "active"          # Default on creation
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class User(WireModel):
    """
    A user record held by the store.

    The id and created_at are assigned by the store and never change.
    """

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    first_name: str = Field(..., min_length=1, description="Given name")
    last_name: str = Field(..., min_length=1, description="Family name")
    email: str = Field(..., description="Email address, unique across records")
    role: UserRole = Field(..., description="Assigned role")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the record was created",
    )
    last_login: Optional[datetime] = Field(None, description="Last recorded login")


class CreateUserRequest(WireModel):
    """
    Request to create a new user.

    Fields are loosely typed on purpose: rule checking happens in the
    validation module so every violation is reported at once.
    The password is only validated, never stored.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None


class UpdateUserRequest(WireModel):
    """Partial update; only supplied fields change."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None

    def changes(self) -> dict:
        """Fields the caller actually supplied, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)

"""
Field rules for user requests.

Pure functions: each returns the list of violations, empty when the
request is valid. Every field is checked; a failing field never hides
problems on another field.
"""

import re
from typing import Optional

from shared.models import FieldError

from .models import CreateUserRequest, UpdateUserRequest, UserRole, UserStatus


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MIN_PASSWORD_LENGTH = 6

ROLES = frozenset(role.value for role in UserRole)
STATUSES = frozenset(status.value for status in UserStatus)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    """Check the basic local@domain.tld shape."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def _check_name(field: str, label: str, value: Optional[str]) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(field=field, message=f"{label} is required", code="REQUIRED")
    return None


def _check_email(value: Optional[str]) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(field="email", message="Email is required", code="REQUIRED")
    if not is_valid_email(value):
        return FieldError(field="email", message="Invalid email format", code="INVALID_FORMAT")
    return None


def _check_password(value: Optional[str]) -> Optional[FieldError]:
    if _is_blank(value):
        return FieldError(field="password", message="Password is required", code="REQUIRED")
    if len(value) < MIN_PASSWORD_LENGTH:
        return FieldError(
            field="password",
            message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            code="TOO_SHORT",
        )
    return None


def _check_role(value: Optional[str]) -> Optional[FieldError]:
    if value not in ROLES:
        return FieldError(field="role", message="Invalid role", code="INVALID_VALUE")
    return None


def _check_status(value: Optional[str]) -> Optional[FieldError]:
    if value not in STATUSES:
        return FieldError(field="status", message="Invalid status", code="INVALID_VALUE")
    return None


def validate_create_request(request: CreateUserRequest) -> list[FieldError]:
    """
    Validate a creation request.

    Args:
        request: The incoming creation payload

    Returns:
        One FieldError per violated field, in field order
    """
    checks = [
        _check_name("firstName", "First name", request.first_name),
        _check_name("lastName", "Last name", request.last_name),
        _check_email(request.email),
        _check_password(request.password),
        _check_role(request.role),
    ]
    return [error for error in checks if error is not None]


def validate_update_request(request: UpdateUserRequest) -> list[FieldError]:
    """
    Validate a partial update.

    Only supplied fields are checked, against the same rules as creation.
    """
    supplied = request.changes()
    checks = []
    if "first_name" in supplied:
        checks.append(_check_name("firstName", "First name", supplied["first_name"]))
    if "last_name" in supplied:
        checks.append(_check_name("lastName", "Last name", supplied["last_name"]))
    if "email" in supplied:
        checks.append(_check_email(supplied["email"]))
    if "role" in supplied:
        checks.append(_check_role(supplied["role"]))
    if "status" in supplied:
        checks.append(_check_status(supplied["status"]))
    return [error for error in checks if error is not None]

"""
Users service implementation.

Orchestrates the repository, the validation rules and the error taxonomy
into the public user operations. Each operation either applies its
mutation completely or raises before touching the store.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from shared.models import ApiResponse, PaginatedResponse

from .interfaces import IUserService
from .models import User, CreateUserRequest, UpdateUserRequest
from .repository import UserRepository
from .exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserValidationError,
)
from .validation import validate_create_request, validate_update_request

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_MAX_PAGE_SIZE = 100


class UserService(IUserService):
    """
    User service backed by an in-memory repository.

    Implements IUserService. Check-then-act sequences run under the
    repository write lock.
    """

    def __init__(
        self,
        repository: UserRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._repo = repository
        self._max_page_size = max_page_size
        self._default_page_size = default_page_size

    def list_users(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
    ) -> PaginatedResponse[User]:
        """List users with pagination and optional search."""
        if page_size is None:
            page_size = self._default_page_size
        page = max(page, 1)
        page_size = min(max(page_size, 1), self._max_page_size)

        users = self._repo.list(search)
        total = len(users)
        offset = (page - 1) * page_size

        logger.debug(f"Listing users: page={page} page_size={page_size} search={search!r} total={total}")

        return PaginatedResponse[User](
            items=users[offset:offset + page_size],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
        )

    def get_user(self, user_id: int) -> ApiResponse[User]:
        """Get a user by id."""
        user = self._repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return ApiResponse[User](data=user, message="User retrieved successfully")

    def create_user(self, request: CreateUserRequest) -> ApiResponse[User]:
        """Validate, check email uniqueness, then insert."""
        errors = validate_create_request(request)
        if errors:
            logger.info(f"Rejected user creation: {len(errors)} validation error(s)")
            raise UserValidationError(errors)

        with self._repo.write_lock():
            if self._repo.exists_with_email(request.email):
                logger.info("Rejected user creation: email already exists")
                raise EmailAlreadyExistsError(request.email)

            user = self._repo.insert({
                "first_name": request.first_name,
                "last_name": request.last_name,
                "email": request.email,
                "role": request.role,
            })

        logger.info(f"Created user {user.id}")
        return ApiResponse[User](data=user, message="User created successfully")

    def update_user(self, user_id: int, request: UpdateUserRequest) -> ApiResponse[User]:
        """Apply the supplied fields to an existing user."""
        with self._repo.write_lock():
            if self._repo.get(user_id) is None:
                raise UserNotFoundError(user_id)

            errors = validate_update_request(request)
            if errors:
                logger.info(f"Rejected update of user {user_id}: {len(errors)} validation error(s)")
                raise UserValidationError(errors)

            changes = request.changes()
            if "email" in changes and self._repo.exists_with_email(changes["email"], exclude_id=user_id):
                logger.info(f"Rejected update of user {user_id}: email already exists")
                raise EmailAlreadyExistsError(changes["email"])

            user = self._repo.apply_update(user_id, changes)

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return ApiResponse[User](data=user, message="User updated successfully")

    def delete_user(self, user_id: int) -> ApiResponse[None]:
        """Delete a user; a second delete of the same id is NOT_FOUND."""
        with self._repo.write_lock():
            if not self._repo.remove(user_id):
                raise UserNotFoundError(user_id)

        logger.info(f"Deleted user {user_id}")
        return ApiResponse[None](data=None, message="User deleted successfully")

    def record_login(
        self,
        user_id: int,
        at: Optional[datetime] = None,
    ) -> ApiResponse[User]:
        """Stamp the last login time of a user."""
        login_at = at or datetime.now(timezone.utc)
        with self._repo.write_lock():
            user = self._repo.apply_update(user_id, {"last_login": login_at})
            if user is None:
                raise UserNotFoundError(user_id)

        logger.debug(f"Recorded login for user {user_id}")
        return ApiResponse[User](data=user, message="Login recorded successfully")

"""
Users module interface.

The API layer depends on IUserService for all user operations.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from shared.models import ApiResponse, PaginatedResponse

from .models import User, CreateUserRequest, UpdateUserRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    This protocol defines the contract that the users module exposes
    to the API layer. Every failure is one of the three taxonomy errors.
    """

    def list_users(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
    ) -> PaginatedResponse[User]:
        """
        List users in store order.

        Args:
            page: Page number (1-indexed), clamped to at least 1
            page_size: Items per page, the configured default when None,
                clamped to [1, max_page_size]
            search: Optional case-insensitive substring filter

        Returns:
            Pagination envelope; out-of-range pages have no items
        """
        ...

    def get_user(self, user_id: int) -> ApiResponse[User]:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no record has this id
        """
        ...

    def create_user(self, request: CreateUserRequest) -> ApiResponse[User]:
        """
        Create a user.

        Raises:
            UserValidationError: If any field rule is violated
            EmailAlreadyExistsError: If the email is taken
        """
        ...

    def update_user(self, user_id: int, request: UpdateUserRequest) -> ApiResponse[User]:
        """
        Apply a partial update.

        Raises:
            UserNotFoundError: If no record has this id
            UserValidationError: If a supplied field breaks a rule
            EmailAlreadyExistsError: If the new email belongs to another record
        """
        ...

    def delete_user(self, user_id: int) -> ApiResponse[None]:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no record has this id
        """
        ...

    def record_login(
        self,
        user_id: int,
        at: Optional[datetime] = None,
    ) -> ApiResponse[User]:
        """
        Set the last login time of a user (now by default).

        Raises:
            UserNotFoundError: If no record has this id
        """
        ...

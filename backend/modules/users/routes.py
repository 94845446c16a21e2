"""
User API endpoints.

Provides REST endpoints for user CRUD operations. Taxonomy errors raised
by the service are turned into responses by the application's exception
handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service, simulate_latency
from shared.models import ApiResponse, PaginatedResponse

from .interfaces import IUserService
from .models import CreateUserRequest, UpdateUserRequest, User

router = APIRouter(dependencies=[Depends(simulate_latency)])


@router.get("", response_model=PaginatedResponse[User])
def list_users(
    page: int = Query(default=1, description="Page number (1-indexed)"),
    page_size: Optional[int] = Query(default=None, alias="pageSize", description="Items per page"),
    search: Optional[str] = Query(default=None, description="Substring filter"),
    service: IUserService = Depends(get_user_service),
) -> PaginatedResponse[User]:
    """
    List users in insertion order.

    Out-of-range pagination values are clamped, never rejected.
    """
    return service.list_users(page, page_size, search)


@router.get("/{user_id}", response_model=ApiResponse[User])
def get_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """
    Get a specific user.
    """
    return service.get_user(user_id)


@router.post("", response_model=ApiResponse[User], status_code=201)
def create_user(
    request: CreateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """
    Create a new user. The password is checked but never stored.
    """
    return service.create_user(request)


@router.put("/{user_id}", response_model=ApiResponse[User])
def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """
    Update the supplied fields of a user.
    """
    return service.update_user(user_id, request)


@router.delete("/{user_id}", response_model=ApiResponse[None])
def delete_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """
    Delete a user. Deleting an unknown id is a 404.
    """
    return service.delete_user(user_id)


@router.post("/{user_id}/login", response_model=ApiResponse[User])
def record_login(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """
    Stamp the user's last login time with the current time.
    """
    return service.record_login(user_id)

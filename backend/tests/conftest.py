"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone

from api.dependencies import reset_container
from modules.users.models import User, UserRole, CreateUserRequest
from modules.users.repository import UserRepository
from modules.users.service import UserService
from shared.config import get_settings


def make_user(
    user_id: int,
    email: str,
    first_name: str = "Test",
    last_name: str = "User",
    role: UserRole = UserRole.USER,
) -> User:
    """Build a stored user record with a fixed creation time."""
    return User(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        role=role,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def make_create_request(**overrides) -> CreateUserRequest:
    """Build a valid creation request, overriding selected fields."""
    data = {
        "first_name": "New",
        "last_name": "Person",
        "email": "new.person@example.com",
        "role": "user",
        "password": "secret123",
    }
    data.update(overrides)
    return CreateUserRequest(**data)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the settings cache and service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def user_a() -> User:
    return make_user(1, "a@x.com", first_name="Ann", last_name="Archer")


@pytest.fixture
def user_b() -> User:
    return make_user(2, "b@x.com", first_name="Ben", last_name="Baker")


@pytest.fixture
def repository(user_a: User, user_b: User) -> UserRepository:
    """Repository seeded with users A (id 1) and B (id 2)."""
    return UserRepository(seed=[user_a, user_b])


@pytest.fixture
def empty_repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def service(repository: UserRepository) -> UserService:
    return UserService(repository)

"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

import asyncio
from typing import TYPE_CHECKING

from fastapi import Depends

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._user_repository: "UserRepository | None" = None
        self._user_service: "IUserService | None" = None

    @property
    def settings(self) -> Settings:
        """Get the settings the container was built with."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance, seeded if configured."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from modules.users.seed import get_demo_users
            seed = get_demo_users() if self.settings.seed_demo_users else None
            self._user_repository = UserRepository(seed=seed)
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=self.user_repository,
                max_page_size=self.settings.max_page_size,
                default_page_size=self.settings.default_page_size,
            )
        return self._user_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with an empty or re-seeded store.
        """
        self._user_repository = None
        self._user_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_user_repository() -> "UserRepository":
    """FastAPI dependency for user repository."""
    return get_container().user_repository


async def simulate_latency(settings: Settings = Depends(get_settings)) -> None:
    """Sleep for the configured demo latency; a no-op at the default of 0."""
    if settings.simulated_latency_ms > 0:
        await asyncio.sleep(settings.simulated_latency_ms / 1000)

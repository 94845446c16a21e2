"""
Demo records loaded into the store at startup.
"""

from datetime import datetime, timezone

from .models import User, UserRole, UserStatus


def _at(year: int, month: int, day: int, hour: int, minute: int) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def get_demo_users() -> list[User]:
    """Build a fresh list of the five demo users."""
    return [
        User(
            id=1,
            first_name="John",
            last_name="Doe",
            email="john.doe@company.com",
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
            created_at=_at(2024, 1, 15, 10, 30),
            last_login=_at(2024, 1, 20, 14, 15),
        ),
        User(
            id=2,
            first_name="Jane",
            last_name="Smith",
            email="jane.smith@company.com",
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
            created_at=_at(2024, 1, 16, 9, 20),
            last_login=_at(2024, 1, 19, 16, 45),
        ),
        User(
            id=3,
            first_name="Bob",
            last_name="Johnson",
            email="bob.johnson@company.com",
            role=UserRole.MODERATOR,
            status=UserStatus.INACTIVE,
            created_at=_at(2024, 1, 17, 11, 10),
        ),
        User(
            id=4,
            first_name="Alice",
            last_name="Brown",
            email="alice.brown@company.com",
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
            created_at=_at(2024, 1, 18, 13, 25),
            last_login=_at(2024, 1, 21, 10, 30),
        ),
        User(
            id=5,
            first_name="Charlie",
            last_name="Wilson",
            email="charlie.wilson@company.com",
            role=UserRole.USER,
            status=UserStatus.SUSPENDED,
            created_at=_at(2024, 1, 19, 15, 40),
            last_login=_at(2024, 1, 20, 9, 15),
        ),
    ]

"""
Users repository for in-memory storage.

Owns the live collection of User records. Records are kept in insertion
order, which is the default ordering for listing and pagination.

The repository never raises for missing records: absence is reported
as None or False and the service decides what it means.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from shared.repository import BaseRepository

from .models import User, UserStatus

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().casefold()


class UserRepository(BaseRepository[User]):
    """
    In-memory user store.

    Ids come from a high-water mark, so an id is never handed out twice
    in the lifetime of the store, even after the highest record is removed.
    """

    def __init__(self, seed: Optional[Iterable[User]] = None) -> None:
        super().__init__()
        self._last_id = 0
        if seed is not None:
            self.seed(seed)

    # ==================== Reads ====================

    def list(self, filter_text: Optional[str] = None) -> list[User]:
        """
        Return records in store order, optionally narrowed by a search term.

        The term matches first name, last name or email as a
        case-insensitive substring.
        """
        with self._lock:
            records = list(self._records)

        if filter_text is None or not filter_text.strip():
            return [user.model_copy(deep=True) for user in records]

        needle = filter_text.casefold()
        return [
            user.model_copy(deep=True)
            for user in records
            if needle in user.first_name.casefold()
            or needle in user.last_name.casefold()
            or needle in user.email.casefold()
        ]

    def get(self, user_id: int) -> Optional[User]:
        """Get a record by id."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            return self._records[index].model_copy(deep=True)

    def exists_with_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether any record other than exclude_id holds this email.

        Emails compare case-insensitively.
        """
        target = _normalize_email(email)
        with self._lock:
            return any(
                _normalize_email(user.email) == target
                for user in self._records
                if user.id != exclude_id
            )

    # ==================== Writes ====================

    def insert(self, fields: dict[str, Any]) -> User:
        """
        Create a record from user-supplied fields.

        Assigns the id, sets created_at to now and status to active,
        then appends the record to the end of the store order.
        """
        with self._lock:
            user = User.model_validate({
                **fields,
                "id": self._next_id(),
                "status": UserStatus.ACTIVE,
                "created_at": datetime.now(timezone.utc),
            })
            self._records.append(user)
            self._last_id = user.id
            logger.debug(f"Inserted user {user.id}")
            return user.model_copy(deep=True)

    def apply_update(self, user_id: int, changes: dict[str, Any]) -> Optional[User]:
        """
        Merge supplied fields into an existing record.

        The stored record is swapped for a merged copy in one step, so a
        concurrent reader never sees a half-applied update.
        """
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            current = self._records[index]
            merged = User.model_validate({**current.model_dump(), **changes})
            self._records[index] = merged
            return merged.model_copy(deep=True)

    def remove(self, user_id: int) -> bool:
        """Delete a record. Returns whether it existed."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._records[index]
            return True

    def seed(self, users: Iterable[User]) -> None:
        """
        Load fixed records, keeping their ids and timestamps.

        Raises:
            ValueError: If a seeded id is already present
        """
        with self._lock:
            for user in users:
                if self._index_of(user.id) is not None:
                    raise ValueError(f"Duplicate user id in seed data: {user.id}")
                self._records.append(user.model_copy(deep=True))
                self._last_id = max(self._last_id, user.id)
            logger.debug(f"Seeded store, {len(self._records)} users")

    # ==================== Helpers ====================

    def _next_id(self) -> int:
        highest = max((user.id for user in self._records), default=0)
        return max(highest, self._last_id) + 1

    def _index_of(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._records):
            if user.id == user_id:
                return index
        return None

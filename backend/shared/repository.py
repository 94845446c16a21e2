"""
Base repository class for in-memory data access.

Provides a common abstraction layer for all repositories: an owned,
insertion-ordered collection and the lock that serializes access to it.
"""

import threading
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for in-memory storage:
    - The record collection via self._records (insertion order is significant)
    - A re-entrant lock via self._lock
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and must
    hand out copies of records, never the stored instances.

    Example:
        class UserRepository(BaseRepository[User]):
            def get(self, user_id: int) -> Optional[User]:
                with self._lock:
                    for user in self._records:
                        if user.id == user_id:
                            return user.model_copy(deep=True)
                return None
    """

    def __init__(self) -> None:
        """Initialize the repository with an empty collection."""
        self._records: list[T] = []
        self._lock = threading.RLock()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        """
        Hold the repository lock across a multi-step operation.

        Callers doing check-then-act sequences (uniqueness check followed
        by insert, for example) wrap both steps in this context.
        """
        with self._lock:
            yield

    def count(self) -> int:
        """Number of records currently held."""
        with self._lock:
            return len(self._records)

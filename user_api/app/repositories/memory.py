"""
Thread‑safe in‑memory user repository.

Records live in a dict keyed by id.  Identifiers come from an
``AtomicCounter`` that is advanced *before* the write lock is taken, so
``create`` never queues behind readers just to get an id.  Insertion,
update and deletion happen under the exclusive side of a
``ReadWriteLock``; ``get_by_id`` and ``list`` take the shared side.

Between the id being issued and the record being inserted, a
concurrent ``get_by_id`` for that id raises ``NotFoundError``.  No
caller can know the id before ``create`` returns it, so this window is
not observable in practice.

Every record crossing the repository boundary, in either direction,
is a fresh copy.  Ids are never reused, even after ``delete``.
"""

import dataclasses
import logging
from datetime import datetime
from typing import Callable, Dict, List

from ..domain.errors import InvalidArgumentError, NotFoundError
from ..domain.user import User, UserRepository, utcnow
from .locks import AtomicCounter, ReadWriteLock


logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Volatile ``UserRepository`` backed by a dict.

    Parameters
    ----------
    clock : Callable[[], datetime]
        Source of UTC timestamps.  Defaults to ``utcnow``; tests pass a
        fake clock to control ``created_at``/``updated_at``.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._users: Dict[int, User] = {}
        self._ids = AtomicCounter()
        self._lock = ReadWriteLock()
        self._clock = clock

    def create(self, user: User) -> User:
        if not isinstance(user, User):
            raise InvalidArgumentError()
        user_id = self._ids.increment()
        now = self._clock()
        stored = dataclasses.replace(user, id=user_id, created_at=now, updated_at=now)
        with self._lock.write_locked():
            self._users[user_id] = stored
        logger.debug("Stored user %s", user_id)
        return stored.copy()

    def get_by_id(self, user_id: int) -> User:
        with self._lock.read_locked():
            stored = self._users.get(user_id)
            if stored is None:
                raise NotFoundError()
            return stored.copy()

    def list(self) -> List[User]:
        with self._lock.read_locked():
            return [stored.copy() for stored in self._users.values()]

    def update(self, user: User) -> User:
        if not isinstance(user, User):
            raise InvalidArgumentError()
        with self._lock.write_locked():
            stored = self._users.get(user.id)
            if stored is None:
                raise NotFoundError()
            stored.name = user.name
            stored.email = user.email
            # updated_at must not move backwards if the wall clock does
            stored.updated_at = max(self._clock(), stored.updated_at)
            result = stored.copy()
        logger.debug("Updated user %s", user.id)
        return result

    def delete(self, user_id: int) -> None:
        with self._lock.write_locked():
            if user_id not in self._users:
                raise NotFoundError()
            del self._users[user_id]
        logger.debug("Deleted user %s", user_id)

    def count(self) -> int:
        """Number of users currently stored."""
        with self._lock.read_locked():
            return len(self._users)

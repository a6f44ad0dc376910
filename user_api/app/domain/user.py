"""
The ``User`` record and the persistence port for it.

``User`` is a plain dataclass with no behaviour beyond copying.
``UserRepository`` is the abstract port the service layer depends on;
``repositories.memory.InMemoryUserRepository`` is the implementation
used today.  Repositories own the canonical records and only ever hand
out copies.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional


def utcnow() -> datetime:
    """Return the current time as a timezone‑aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class User:
    """A single user record.

    ``id`` is ``0`` until a repository assigns one.  ``created_at`` and
    ``updated_at`` are set by the repository and are always UTC.
    """

    id: int = 0
    name: str = ""
    email: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def copy(self) -> "User":
        # All fields are immutable scalars, so a shallow copy is a full copy.
        return dataclasses.replace(self)


class UserRepository(ABC):
    """Persistence port for users.

    Implementations must be safe to call from many threads at once and
    must never return a reference to their internal records.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """Store a new user and return a copy with ``id`` and timestamps set.

        Any ``id``/timestamps on the input are ignored.  Raises
        ``InvalidArgumentError`` if ``user`` is not a ``User``.
        """

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """Return a copy of the user, or raise ``NotFoundError``."""

    @abstractmethod
    def list(self) -> List[User]:
        """Return copies of all users in no particular order."""

    @abstractmethod
    def update(self, user: User) -> User:
        """Replace name and email of an existing user.

        Refreshes ``updated_at`` and keeps ``id``/``created_at``.  Raises
        ``InvalidArgumentError`` if ``user`` is not a ``User`` and
        ``NotFoundError`` if no user has ``user.id``.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user permanently, or raise ``NotFoundError``."""

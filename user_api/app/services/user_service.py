"""
Business logic for users.

``UserService`` validates input and delegates to a ``UserRepository``.
It knows nothing about HTTP or about how users are stored; the
repository is injected by the composition root in ``main.py``.
Repository errors (``NotFoundError`` and friends) pass through
unchanged.
"""

import logging
from typing import List, Tuple

from ..domain.errors import ValidationError
from ..domain.user import User, UserRepository


logger = logging.getLogger(__name__)


def _clean(name: str, email: str) -> Tuple[str, str]:
    """Trim surrounding whitespace and require both fields."""
    name = (name or "").strip()
    email = (email or "").strip()
    if not name or not email:
        raise ValidationError("name and email are required")
    return name, email


class UserService:
    """Use cases around the ``User`` record."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def create_user(self, name: str, email: str) -> User:
        name, email = _clean(name, email)
        user = self.repository.create(User(name=name, email=email))
        logger.info("Created user %s", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        return self.repository.get_by_id(user_id)

    def list_users(self) -> List[User]:
        return self.repository.list()

    def update_user(self, user_id: int, name: str, email: str) -> User:
        """Replace a user's name and email.

        Validation happens before the repository is consulted, so an
        invalid payload for a missing user reports the validation error.
        """
        name, email = _clean(name, email)
        user = self.repository.update(User(id=user_id, name=name, email=email))
        logger.info("Updated user %s", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        self.repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

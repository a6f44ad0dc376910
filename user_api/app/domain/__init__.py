"""
Domain layer.

Holds the ``User`` record, the ``UserRepository`` port every storage
backend implements, and the error types shared by all layers.
"""

from .errors import InvalidArgumentError, NotFoundError, UserError, ValidationError
from .user import User, UserRepository, utcnow

__all__ = [
    "InvalidArgumentError",
    "NotFoundError",
    "User",
    "UserError",
    "UserRepository",
    "ValidationError",
    "utcnow",
]

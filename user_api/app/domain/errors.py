"""
Error types shared by the repository, service and API layers.

Repositories and services raise these exceptions; only the API layer
translates them into HTTP status codes (see ``api/errors.py``).  Each
error carries a short, client‑safe ``message``.
"""


class UserError(Exception):
    """Base class for all user domain failures."""

    default_message = "user error"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(UserError):
    """Required input is missing or malformed.  Never retried."""

    default_message = "name and email are required"


class NotFoundError(UserError):
    """The referenced user does not exist."""

    default_message = "user not found"


class InvalidArgumentError(UserError):
    """A repository was called with no user record at all.

    The service validates input before calling the repository, so this
    is only reachable by calling a repository directly.
    """

    default_message = "nil user"

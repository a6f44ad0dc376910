"""
Pydantic models for user data.

``UserPayload`` is the body accepted by create and update;
``UserRead`` is what the API returns.  Fields missing from a payload
default to empty strings and are rejected by the service, so a body
such as ``{"name": "Bob"}`` fails with the validation message rather
than a schema error.  Non‑string values are schema errors.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_serializer

from ..domain.user import User


class UserPayload(BaseModel):
    """Schema for creating or updating a user."""

    name: StrictStr = Field("", examples=["Alice"])
    email: StrictStr = Field("", examples=["alice@example.com"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def _rfc3339(self, value: datetime) -> str:
        # RFC 3339 with a ``Z`` suffix, e.g. ``2024-05-01T12:00:00.123456Z``
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls.model_validate(user)

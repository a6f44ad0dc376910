"""
FastAPI dependencies.

The composition root stores the ``UserService`` on ``app.state``;
handlers receive it through ``Depends(get_user_service)`` so they never
construct collaborators themselves.

Path identifiers and request bodies are also decoded here rather than
by FastAPI's own parameter handling: ``path_user_id`` reports
``invalid id`` and ``read_user_payload`` reports ``invalid JSON``.
Routes declare the id before the payload, so a request with both a bad
id and a bad body reports the id.
"""

from fastapi import Request
from pydantic import ValidationError as PayloadError

from ..schemas.user import UserPayload
from ..services.user_service import UserService
from .errors import BadRequestError, parse_user_id


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def path_user_id(user_id: str) -> int:
    return parse_user_id(user_id)


async def read_user_payload(request: Request) -> UserPayload:
    """Decode the body as JSON whatever its content‑type.

    A literal ``null`` decodes to an empty payload, which the service
    then rejects as missing name and email.
    """
    body = await request.body()
    if body.strip() == b"null":
        return UserPayload()
    try:
        return UserPayload.model_validate_json(body)
    except PayloadError:
        raise BadRequestError("invalid JSON") from None

"""
User endpoints for API v1.

Create, read, update and delete users.  Handlers are plain functions,
so FastAPI runs each request on its worker thread pool; the repository
behind the service is thread‑safe.  Path identifiers and bodies are
decoded by the dependencies in ``api/deps.py`` and domain errors are
turned into responses by the handlers in ``api/errors.py``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from user_api.app.api.deps import get_user_service, path_user_id, read_user_payload
from user_api.app.schemas.user import UserPayload, UserRead
from user_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserPayload = Depends(read_user_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user from ``{name, email}``.

    Both fields are trimmed and must be non‑empty.
    """
    user = service.create_user(payload.name, payload.email)
    return UserRead.from_user(user)


@router.get("", response_model=List[UserRead])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user.  Order is not guaranteed."""
    return [UserRead.from_user(user) for user in service.list_users()]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int = Depends(path_user_id),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Retrieve a single user by ID.  Returns 404 if it does not exist."""
    user = service.get_user(user_id)
    return UserRead.from_user(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int = Depends(path_user_id),
    payload: UserPayload = Depends(read_user_payload),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name and email of an existing user.

    Returns 400 for a bad id, a bad body or empty fields, and 404 if the
    user does not exist; a missing user is never created.
    """
    user = service.update_user(user_id, payload.name, payload.email)
    return UserRead.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int = Depends(path_user_id),
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user permanently.  Its ID is never handed out again."""
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

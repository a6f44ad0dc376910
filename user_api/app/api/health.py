"""Liveness probe, mounted outside the versioned API."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/healthz", response_class=PlainTextResponse)
def healthz() -> str:
    """Return ``ok`` while the process is serving requests."""
    return "ok"

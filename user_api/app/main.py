"""
Main entrypoint for the User API.

This module assembles the FastAPI application: it sets up logging,
builds the repository → service chain, installs middleware and error
handlers and includes the versioned routers.  ``create_app`` is the
composition root; the module‑level ``app`` makes the service
discoverable by uvicorn, e.g.::

    uvicorn user_api.app.main:app

Each ``create_app`` call owns a fresh repository unless one is passed
in, so tests and embedded uses never share state.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.health import router as health_router
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import TimeoutMiddleware, log_requests
from .domain.user import UserRepository
from .repositories.memory import InMemoryUserRepository
from .services.user_service import UserService


def create_app(
    repository: Optional[UserRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[UserRepository]
        Storage for users.  Defaults to a new ``InMemoryUserRepository``.
    settings : Optional[Settings]
        Defaults to the process‑wide ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the wiring below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    repository = repository if repository is not None else InMemoryUserRepository()
    app.state.user_service = UserService(repository)
    logging.getLogger(__name__).debug(
        "Using %s for user storage", type(repository).__name__
    )

    register_exception_handlers(app)

    # Middleware added last runs first: access logging wraps the deadline
    # so timed‑out requests are logged with their 503.
    app.add_middleware(TimeoutMiddleware, timeout=settings.request_timeout)
    app.middleware("http")(log_requests)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

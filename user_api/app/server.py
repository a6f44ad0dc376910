"""
Serving the application with uvicorn.

``build_server`` maps ``Settings`` onto a ``uvicorn.Server``: the idle
timeout becomes the keep‑alive timeout and the shutdown timeout is the
grace period in‑flight requests get after SIGINT/SIGTERM.  uvicorn
installs the signal handlers itself and stops accepting connections as
soon as a signal arrives.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from uvicorn import Config, Server

from .core.config import Settings, settings as default_settings


logger = logging.getLogger(__name__)


def build_server(app: FastAPI, settings: Optional[Settings] = None) -> Server:
    """Return a uvicorn ``Server`` for ``app`` configured from ``settings``."""
    settings = settings or default_settings
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_level=settings.log_level.lower(),
        # Logging is configured by ``setup_logging``; keep uvicorn from
        # replacing it.
        log_config=None,
        reload=False,
    )
    return Server(config)


async def serve(app: FastAPI, settings: Optional[Settings] = None) -> None:
    """Serve ``app`` until a shutdown signal is received."""
    settings = settings or default_settings
    server = build_server(app, settings)
    logger.info("HTTP server listening on %s:%s", settings.host, settings.port)
    await server.serve()
    logger.info("server shutdown complete")

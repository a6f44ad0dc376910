"""Entry point for the User API.

Starts the HTTP server on the configured host and port (``0.0.0.0:8080``
by default) and blocks until SIGINT or SIGTERM, after which in‑flight
requests get ``SHUTDOWN_TIMEOUT`` seconds to finish.  Settings are read
from environment variables; see ``user_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from user_api.app.core.config import settings
from user_api.app.main import app
from user_api.app.server import serve


def main() -> None:
    asyncio.run(serve(app, settings))


if __name__ == "__main__":
    main()

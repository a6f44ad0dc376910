"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the fixed values the service has always used: listen on port 8080,
10 second read and write budgets, 60 second keep‑alive idle timeout
and a 10 second graceful‑shutdown grace period.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path for a log file in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Timeouts in seconds.  ``read_timeout`` and ``write_timeout`` are
    # combined into a single per‑request deadline by the timeout
    # middleware; ``idle_timeout`` is uvicorn's keep‑alive timeout.
    read_timeout: float = float(os.getenv("READ_TIMEOUT", "10"))
    write_timeout: float = float(os.getenv("WRITE_TIMEOUT", "10"))
    idle_timeout: int = int(os.getenv("IDLE_TIMEOUT", "60"))
    shutdown_timeout: int = int(os.getenv("SHUTDOWN_TIMEOUT", "10"))

    @property
    def request_timeout(self) -> float:
        """Deadline for reading a request and producing its response."""
        return self.read_timeout + self.write_timeout

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment as it is *now*.

        Field defaults are evaluated once at import time; this reads the
        variables again, which is what tests that patch the environment
        need.
        """
        return cls(
            project_name=os.getenv("PROJECT_NAME", "User API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", ""),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8080")),
            read_timeout=float(os.getenv("READ_TIMEOUT", "10")),
            write_timeout=float(os.getenv("WRITE_TIMEOUT", "10")),
            idle_timeout=int(os.getenv("IDLE_TIMEOUT", "60")),
            shutdown_timeout=int(os.getenv("SHUTDOWN_TIMEOUT", "10")),
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

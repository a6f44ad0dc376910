"""User API client.

A thin wrapper around the REST endpoints of the User API using the
``requests`` library.  Each high‑level method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with keys ``status_code`` and
``message``.  The client never raises for HTTP or network failures,
which keeps calling code (scripts, bots) simple.

* :meth:`create_user` – register a new user.
* :meth:`get_user` – fetch a single user by identifier.
* :meth:`list_users` – return all users.
* :meth:`update_user` – replace a user's name and email.
* :meth:`delete_user` – remove a user.
* :meth:`health` – check that the service is up.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

USERS_PATH = "/api/v1/users"


class UserAPIClient:
    """Client for interacting with the User API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Any object with a
                compatible ``request`` method works, which is how the
                tests drive the client against an in‑process app.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns ``(data, None)`` with the decoded JSON body (``None`` for
        an empty body) or ``(None, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                message = response.json().get("error") or response.text
            except (ValueError, AttributeError):
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if not response.content:
            return None, None
        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            return response.text, None
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("API returned malformed JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "malformed response"}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", USERS_PATH, json_body={"name": name, "email": email})

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{USERS_PATH}/{user_id}")

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.  ``users`` is empty on failure."""
        data, error = self._request("GET", USERS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def update_user(
        self, user_id: Any, name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PUT", f"{USERS_PATH}/{user_id}", json_body={"name": name, "email": email}
        )

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.  Returns ``(success, error)``."""
        _, error = self._request("DELETE", f"{USERS_PATH}/{user_id}")
        return error is None, error

    def health(self) -> bool:
        """Return ``True`` if ``/healthz`` answers ``ok``."""
        data, error = self._request("GET", "/healthz")
        return error is None and data == "ok"

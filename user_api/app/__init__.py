"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is split into the layers of the service:
``domain`` (the user record, its persistence port and error types),
``repositories`` (concrete storage), ``services`` (validation and use
cases), ``schemas`` (request/response bodies) and ``api`` (HTTP
routes).  ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401

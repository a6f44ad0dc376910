"""
Top‑level package for the User API.

This file makes ``user_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``user_api.app.main``.  The HTTP client for the service lives in
``user_api.client``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []

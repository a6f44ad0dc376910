"""
API package containing versioned routes.

This package groups API versions under subpackages such as ``v1``.  A
version subpackage exposes a top‑level ``router`` which includes all
of its domain‑specific endpoints.  Routes that are not versioned (the
health check) live in ``health``; the mapping of domain errors to HTTP
responses lives in ``errors``.
"""

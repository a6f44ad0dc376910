"""
Concrete implementations of the ``UserRepository`` port.

Only an in‑memory repository exists today.  State is volatile and is
lost when the process exits.
"""

from .memory import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]

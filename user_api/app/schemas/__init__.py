"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain dataclasses to decouple the API
representation from the records held by repositories.
"""

"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
depend on a repository port rather than a concrete store, so the
in‑memory repository used today can be replaced by a database‑backed
one without changing API handlers.
"""

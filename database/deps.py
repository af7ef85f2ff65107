"""Dependency helpers that expose read/write DB session generators.

Routers inject ``get_db_write`` on endpoints that insert, update or delete
rows and ``get_db_read`` on listing, lookup and metrics endpoints.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()

"""Database package: ORM models, session helpers and schema lifecycle."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    drop_db,
    dispose_engines,
    get_write_session,
    get_read_session,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "drop_db",
    "dispose_engines",
    "get_write_session",
    "get_read_session",
    "models",
]

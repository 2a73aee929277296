"""Database infrastructure - async engines and sessions for the audit store."""

from infrastructure.database.dependencies import (
    close_database_connections,
    get_read_session,
    get_write_session,
)
from infrastructure.database.models import Base

__all__ = [
    "Base",
    "close_database_connections",
    "get_read_session",
    "get_write_session",
]

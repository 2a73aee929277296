"""SQLAlchemy declarative base and shared model utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import DeclarativeBase


def utc_now() -> datetime:
    """Generate a timezone-aware UTC timestamp.

    Used as the Python-side default for timestamp columns so the value is
    evaluated at INSERT time rather than at import time.
    """
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models.

    Alembic's autogenerate reads ``Base.metadata``; every model module must be
    imported before migrations run.
    """

    type_annotation_map: dict[type, Any] = {}

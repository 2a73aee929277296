"""SQLAlchemy ORM models for the Tenancy bounded context.

These models map to database tables and are used by repository implementations.
"""

from tenancy.infrastructure.models.delete_user_log import DeleteUserLogModel

__all__ = [
    "DeleteUserLogModel",
]

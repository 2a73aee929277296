"""Ports for the Tenancy bounded context."""

from tenancy.ports.exceptions import AuditLogStoreError
from tenancy.ports.repositories import IDeletionLogRepository

__all__ = [
    "AuditLogStoreError",
    "IDeletionLogRepository",
]

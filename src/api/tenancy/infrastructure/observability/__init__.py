"""Domain-Oriented Observability for Tenancy infrastructure."""

from tenancy.infrastructure.observability.deletion_log_repository_probe import (
    DefaultDeletionLogRepositoryProbe,
    DeletionLogRepositoryProbe,
)

__all__ = [
    "DeletionLogRepositoryProbe",
    "DefaultDeletionLogRepositoryProbe",
]

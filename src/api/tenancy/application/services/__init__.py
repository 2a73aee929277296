"""Application services for the Tenancy bounded context.

Read-only lookups that need the membership guard but no multi-step
orchestration.
"""

from tenancy.application.services.tenant_directory_service import (
    TenantDirectoryService,
)

__all__ = [
    "TenantDirectoryService",
]

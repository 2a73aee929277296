"""Port-level exceptions for the Tenancy bounded context.

Raised by repository implementations and handled by the application and
presentation layers.
"""

from __future__ import annotations

from shared_kernel.exceptions import UpstreamServiceError


class AuditLogStoreError(UpstreamServiceError):
    """Raised when the audit log store fails to write or read records.

    The original database error is chained as ``__cause__``.
    """

    pass

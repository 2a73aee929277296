"""Domain layer for the Tenancy bounded context.

Pure value objects and rules (membership guard, attribute coercion) with no
I/O and no framework dependencies.
"""

from tenancy.domain.attribute_coercer import AttributeCoercer
from tenancy.domain.exceptions import (
    AttributeCoercionError,
    AuthenticationRequiredError,
    InvalidRequestError,
    MissingRequiredFieldError,
    NoTenantsError,
    NoUserError,
    TenantAccessError,
    TenantNotBelongedError,
)
from tenancy.domain.membership_guard import (
    MembershipDecision,
    TenantMembershipGuard,
)
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import (
    DeletionLogRecord,
    IdentityContext,
    InvitationRequest,
    TenantMembership,
)

__all__ = [
    "AttributeCoercer",
    "AttributeCoercionError",
    "AuthenticationRequiredError",
    "InvalidRequestError",
    "MissingRequiredFieldError",
    "NoTenantsError",
    "NoUserError",
    "TenantAccessError",
    "TenantNotBelongedError",
    "MembershipDecision",
    "require_fields",
    "TenantMembershipGuard",
    "DeletionLogRecord",
    "IdentityContext",
    "InvitationRequest",
    "TenantMembership",
]

"""Identity service boundary shared across bounded contexts.

This module provides the typed protocol over the external identity and
authorization service (accounts, tenants, memberships, roles, attributes,
invitations) together with its resource types and exceptions.
"""

from shared_kernel.identity_service.exceptions import (
    IdentityServiceConnectionError,
    IdentityServiceError,
)
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import (
    AttributeDefinition,
    AttributeType,
    AttributeValue,
    Credentials,
    EnvRoleAssignment,
    Invitation,
    Role,
    TenantEnv,
    TenantRecord,
    TenantUser,
    UserInfo,
    UserInfoTenant,
)

__all__ = [
    "IdentityServiceProvider",
    "IdentityServiceError",
    "IdentityServiceConnectionError",
    "AttributeDefinition",
    "AttributeType",
    "AttributeValue",
    "Credentials",
    "EnvRoleAssignment",
    "Invitation",
    "Role",
    "TenantEnv",
    "TenantRecord",
    "TenantUser",
    "UserInfo",
    "UserInfoTenant",
]

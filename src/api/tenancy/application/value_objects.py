"""Application-layer value objects for the Tenancy bounded context.

Read-only results returned by the workflows to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.identity_service.types import AttributeValue


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of registering a user into a tenant."""

    tenant_id: str
    user_id: str
    email: str
    role_name: str


@dataclass(frozen=True)
class SignUpResult:
    """Outcome of a self-service tenant sign-up."""

    tenant_id: str
    user_id: str
    role_name: str


@dataclass(frozen=True)
class ProjectedAttribute:
    """A tenant attribute definition joined with the tenant's current value.

    ``value`` is None when the tenant has no value set for the attribute.
    """

    display_name: str
    attribute_type: str
    value: AttributeValue

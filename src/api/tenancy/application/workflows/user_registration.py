"""User registration workflow.

Creates an account, attaches it to one of the caller's tenants and gives the
new member a role.
"""

from __future__ import annotations

from typing import Mapping

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import AttributeValue, Role
from tenancy.application.observability import (
    DefaultUserRegistrationProbe,
    UserRegistrationProbe,
)
from tenancy.application.value_objects import RegistrationResult
from tenancy.domain.attribute_coercer import AttributeCoercer
from tenancy.domain.exceptions import TenantAccessError
from tenancy.domain.membership_guard import TenantMembershipGuard
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import IdentityContext

PREFERRED_ROLE = "user"
FALLBACK_ROLE = "admin"


def choose_member_role(roles: list[Role]) -> str:
    """Pick the role for a newly registered member.

    Returns "user" when the role catalog defines it, otherwise "admin".
    """
    if any(role.role_name == PREFERRED_ROLE for role in roles):
        return PREFERRED_ROLE
    return FALLBACK_ROLE


class UserRegistrationWorkflow:
    """Registers a new user into a tenant the caller belongs to.

    The steps are not atomic: if a later identity service call fails, the
    account and membership created by earlier calls remain.
    """

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        role_env_id: int,
        guard: TenantMembershipGuard | None = None,
        coercer: AttributeCoercer | None = None,
        probe: UserRegistrationProbe | None = None,
    ):
        """Initialize the workflow.

        Args:
            identity_service: Identity service client
            role_env_id: Environment the member's role is assigned in
            guard: Tenant membership guard
            coercer: Attribute coercer for user attributes
            probe: Optional domain probe for observability
        """
        self._identity_service = identity_service
        self._role_env_id = role_env_id
        self._guard = guard or TenantMembershipGuard()
        self._coercer = coercer or AttributeCoercer()
        self._probe = probe or DefaultUserRegistrationProbe()

    async def register(
        self,
        context: IdentityContext | None,
        email: str,
        password: str,
        tenant_id: str,
        user_attribute_values: Mapping[str, AttributeValue] | None = None,
    ) -> RegistrationResult:
        """Register a user into a tenant.

        Args:
            context: Resolved caller identity
            email: Email address of the new user
            password: Initial password of the new user
            tenant_id: Tenant to attach the user to
            user_attribute_values: Optional user attribute values

        Returns:
            RegistrationResult with the new membership and its role

        Raises:
            MissingRequiredFieldError: If email, password or tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            AttributeCoercionError: If a numeric attribute is malformed
            IdentityServiceError: If any identity service call fails
        """
        require_fields({"email": email, "password": password, "tenantId": tenant_id})

        try:
            self._guard.ensure_member(context, tenant_id)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(tenant_id=tenant_id, reason=str(e))
            raise

        try:
            definitions = await self._identity_service.list_user_attributes()
            attributes = self._coercer.coerce(
                dict(user_attribute_values or {}), definitions
            )

            await self._identity_service.create_saas_user(email=email, password=password)
            tenant_user = await self._identity_service.create_tenant_user(
                tenant_id=tenant_id,
                email=email,
                attributes=attributes,
            )

            roles = await self._identity_service.list_roles()
            role_name = choose_member_role(roles)
            await self._identity_service.assign_tenant_user_roles(
                tenant_id=tenant_id,
                user_id=tenant_user.id,
                env_id=self._role_env_id,
                role_names=[role_name],
            )
        except IdentityServiceError as e:
            self._probe.registration_failed(tenant_id=tenant_id, email=email, error=e)
            raise

        self._probe.user_registered(
            tenant_id=tenant_id,
            user_id=tenant_user.id,
            email=email,
            role_name=role_name,
        )
        return RegistrationResult(
            tenant_id=tenant_id,
            user_id=tenant_user.id,
            email=email,
            role_name=role_name,
        )

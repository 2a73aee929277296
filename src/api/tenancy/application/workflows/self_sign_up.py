"""Self-service tenant sign-up workflow.

The caller creates a new tenant and becomes its back-office contact and sole
admin. No membership check applies, since the tenant does not exist yet.
"""

from __future__ import annotations

from typing import Mapping

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import AttributeValue
from tenancy.application.observability import DefaultSelfSignUpProbe, SelfSignUpProbe
from tenancy.application.value_objects import SignUpResult
from tenancy.domain.attribute_coercer import AttributeCoercer
from tenancy.domain.exceptions import NoUserError
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import IdentityContext

ADMIN_ROLE = "admin"


class SelfSignUpWorkflow:
    """Creates a tenant for the caller and makes them its admin.

    The steps are not atomic: if attaching the caller or assigning the role
    fails, the tenant created by the earlier call remains.
    """

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        role_env_id: int,
        coercer: AttributeCoercer | None = None,
        probe: SelfSignUpProbe | None = None,
    ):
        self._identity_service = identity_service
        self._role_env_id = role_env_id
        self._coercer = coercer or AttributeCoercer()
        self._probe = probe or DefaultSelfSignUpProbe()

    async def sign_up(
        self,
        context: IdentityContext | None,
        tenant_name: str,
        tenant_attribute_values: Mapping[str, AttributeValue] | None = None,
        user_attribute_values: Mapping[str, AttributeValue] | None = None,
    ) -> SignUpResult:
        """Create a tenant with the caller as admin.

        Args:
            context: Resolved caller identity; its email becomes the
                back-office contact and the admin membership
            tenant_name: Name of the new tenant
            tenant_attribute_values: Optional tenant attribute values
            user_attribute_values: Optional attribute values for the caller's
                new membership

        Returns:
            SignUpResult with the new tenant and membership

        Raises:
            MissingRequiredFieldError: If the tenant name is empty
            NoUserError: If no caller identity was resolved
            AttributeCoercionError: If a numeric attribute is malformed
            IdentityServiceError: If any identity service call fails
        """
        require_fields({"tenantName": tenant_name})
        if context is None:
            raise NoUserError()

        try:
            tenant_definitions = await self._identity_service.list_tenant_attributes()
            tenant_attributes = self._coercer.coerce(
                dict(tenant_attribute_values or {}), tenant_definitions
            )
            tenant_id = await self._identity_service.create_tenant(
                name=tenant_name,
                attributes=tenant_attributes,
                back_office_staff_email=context.email,
            )

            user_definitions = await self._identity_service.list_user_attributes()
            user_attributes = self._coercer.coerce(
                dict(user_attribute_values or {}), user_definitions
            )
            tenant_user = await self._identity_service.create_tenant_user(
                tenant_id=tenant_id,
                email=context.email,
                attributes=user_attributes,
            )

            await self._identity_service.assign_tenant_user_roles(
                tenant_id=tenant_id,
                user_id=tenant_user.id,
                env_id=self._role_env_id,
                role_names=[ADMIN_ROLE],
            )
        except IdentityServiceError as e:
            self._probe.sign_up_failed(tenant_name=tenant_name, error=e)
            raise

        self._probe.tenant_signed_up(
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            user_id=tenant_user.id,
        )
        return SignUpResult(
            tenant_id=tenant_id,
            user_id=tenant_user.id,
            role_name=ADMIN_ROLE,
        )

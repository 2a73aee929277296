"""Tenant attribute projection workflow.

Joins the tenant attribute definitions with one tenant's current values.
"""

from __future__ import annotations

from typing import Any

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import AttributeDefinition, AttributeValue
from tenancy.application.observability import (
    DefaultTenantAttributeProjectionProbe,
    TenantAttributeProjectionProbe,
)
from tenancy.application.value_objects import ProjectedAttribute
from tenancy.domain.exceptions import TenantAccessError
from tenancy.domain.membership_guard import TenantMembershipGuard
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import IdentityContext


def project_attributes(
    definitions: list[AttributeDefinition],
    values: dict[str, Any],
) -> dict[str, ProjectedAttribute]:
    """Project attribute definitions onto a tenant's attribute values.

    Missing values, None and empty strings project as None. Other falsy
    values such as 0 and False are kept.

    Args:
        definitions: Tenant attribute definitions
        values: The tenant's current attribute values

    Returns:
        Mapping from attribute name to its projection, in definition order
    """
    projection: dict[str, ProjectedAttribute] = {}
    for definition in definitions:
        value: AttributeValue = values.get(definition.attribute_name)
        if value == "":
            value = None
        projection[definition.attribute_name] = ProjectedAttribute(
            display_name=definition.display_name,
            attribute_type=definition.attribute_type,
            value=value,
        )
    return projection


class TenantAttributeProjectionWorkflow:
    """Reads a tenant's attributes together with their definitions."""

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        guard: TenantMembershipGuard | None = None,
        probe: TenantAttributeProjectionProbe | None = None,
    ):
        self._identity_service = identity_service
        self._guard = guard or TenantMembershipGuard()
        self._probe = probe or DefaultTenantAttributeProjectionProbe()

    async def project(
        self, context: IdentityContext | None, tenant_id: str
    ) -> dict[str, ProjectedAttribute]:
        """Project a tenant's attribute values onto their definitions.

        Args:
            context: Resolved caller identity
            tenant_id: Tenant to read

        Returns:
            Mapping from attribute name to display name, type and value

        Raises:
            MissingRequiredFieldError: If tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            IdentityServiceError: If an identity service call fails
        """
        require_fields({"tenant_id": tenant_id})

        try:
            self._guard.ensure_member(context, tenant_id)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(tenant_id=tenant_id, reason=str(e))
            raise

        try:
            definitions = await self._identity_service.list_tenant_attributes()
            tenant = await self._identity_service.get_tenant(tenant_id)
        except IdentityServiceError as e:
            self._probe.projection_failed(tenant_id=tenant_id, error=e)
            raise

        projection = project_attributes(definitions, tenant.attributes)
        self._probe.tenant_attributes_projected(
            tenant_id=tenant_id, attribute_count=len(projection)
        )
        return projection

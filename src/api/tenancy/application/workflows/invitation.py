"""Tenant invitation workflow."""

from __future__ import annotations

from shared_kernel.identity_service.exceptions import IdentityServiceError
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.identity_service.types import EnvRoleAssignment, Invitation
from tenancy.application.observability import DefaultInvitationProbe, InvitationProbe
from tenancy.domain.exceptions import AuthenticationRequiredError, TenantAccessError
from tenancy.domain.membership_guard import TenantMembershipGuard
from tenancy.domain.validation import require_fields
from tenancy.domain.value_objects import IdentityContext, InvitationRequest

INVITED_ROLE = "admin"


class InvitationWorkflow:
    """Issues and lists invitations for tenants the caller belongs to.

    Invitations grant the admin role in a single configured environment.
    """

    def __init__(
        self,
        identity_service: IdentityServiceProvider,
        invitation_env_id: int,
        guard: TenantMembershipGuard | None = None,
        probe: InvitationProbe | None = None,
    ):
        """Initialize the workflow.

        Args:
            identity_service: Identity service client
            invitation_env_id: Environment the invitation grants access to
            guard: Tenant membership guard
            probe: Optional domain probe for observability
        """
        self._identity_service = identity_service
        self._invitation_env_id = invitation_env_id
        self._guard = guard or TenantMembershipGuard()
        self._probe = probe or DefaultInvitationProbe()

    def _ensure_member(self, context: IdentityContext | None, tenant_id: str) -> None:
        try:
            self._guard.ensure_member(context, tenant_id)
        except TenantAccessError as e:
            self._probe.tenant_access_denied(tenant_id=tenant_id, reason=str(e))
            raise

    def build_request(
        self, email: str, tenant_id: str, access_token: str
    ) -> InvitationRequest:
        """Build the invitation submitted to the identity service."""
        return InvitationRequest(
            email=email,
            tenant_id=tenant_id,
            access_token=access_token,
            envs=(
                EnvRoleAssignment(
                    env_id=self._invitation_env_id,
                    role_names=(INVITED_ROLE,),
                ),
            ),
        )

    async def invite(
        self,
        context: IdentityContext | None,
        email: str,
        tenant_id: str,
        access_token: str | None,
    ) -> Invitation:
        """Invite an email address into a tenant.

        Args:
            context: Resolved caller identity
            email: Address to invite
            tenant_id: Tenant to invite into
            access_token: The caller's own access token (X-Access-Token)

        Returns:
            The created Invitation

        Raises:
            MissingRequiredFieldError: If email or tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            AuthenticationRequiredError: If no access token was supplied
            IdentityServiceError: If the identity service rejects the invitation
        """
        require_fields({"email": email, "tenantId": tenant_id})
        self._ensure_member(context, tenant_id)

        if not access_token:
            self._probe.access_token_missing(tenant_id=tenant_id)
            raise AuthenticationRequiredError("X-Access-Token header is required")

        request = self.build_request(
            email=email, tenant_id=tenant_id, access_token=access_token
        )
        try:
            invitation = await self._identity_service.create_tenant_invitation(
                tenant_id=request.tenant_id,
                email=request.email,
                access_token=request.access_token,
                envs=request.envs,
            )
        except IdentityServiceError as e:
            self._probe.invitation_failed(tenant_id=tenant_id, error=e)
            raise

        self._probe.invitation_created(
            tenant_id=tenant_id, invitation_id=invitation.id, email=email
        )
        return invitation

    async def list_invitations(
        self, context: IdentityContext | None, tenant_id: str
    ) -> list[Invitation]:
        """List a tenant's invitations.

        Raises:
            MissingRequiredFieldError: If tenant id is empty
            TenantAccessError: If the caller does not belong to the tenant
            IdentityServiceError: If the identity service call fails
        """
        require_fields({"tenant_id": tenant_id})
        self._ensure_member(context, tenant_id)

        try:
            invitations = await self._identity_service.list_tenant_invitations(
                tenant_id
            )
        except IdentityServiceError as e:
            self._probe.invitation_failed(tenant_id=tenant_id, error=e)
            raise

        self._probe.invitations_listed(tenant_id=tenant_id, count=len(invitations))
        return invitations

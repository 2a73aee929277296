"""HTTP routes for tenant-scoped operations.

Every route requires a bearer ID token; the resolved IdentityContext is
passed explicitly into the workflow or service that serves the request.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, Query

from tenancy.application.services import TenantDirectoryService
from tenancy.application.workflows import (
    InvitationWorkflow,
    SelfSignUpWorkflow,
    TenantAttributeProjectionWorkflow,
    UserDeletionWorkflow,
    UserRegistrationWorkflow,
)
from tenancy.dependencies.identity import get_identity_context
from tenancy.dependencies.workflows import (
    get_invitation_workflow,
    get_self_sign_up_workflow,
    get_tenant_attribute_projection_workflow,
    get_tenant_directory_service,
    get_user_deletion_workflow,
    get_user_registration_workflow,
)
from tenancy.domain.value_objects import IdentityContext
from tenancy.presentation.errors import http_error
from tenancy.presentation.models import (
    AttributeDefinitionResponse,
    DeletionLogResponse,
    InvitationResponse,
    MessageResponse,
    ProjectedAttributeResponse,
    SelfSignUpRequest,
    TenantAttributeDefinitionsResponse,
    TenantUserResponse,
    UserAttributeDefinitionsResponse,
    UserDeleteRequest,
    UserInfoResponse,
    UserInvitationRequest,
    UserRegisterRequest,
)

router = APIRouter(tags=["tenancy"])

Identity = Annotated[IdentityContext, Depends(get_identity_context)]


@router.get("/userinfo")
async def get_userinfo(identity: Identity) -> UserInfoResponse:
    """Return the resolved identity of the caller."""
    return UserInfoResponse.from_domain(identity)


@router.get("/users")
async def list_tenant_users(
    identity: Identity,
    service: Annotated[TenantDirectoryService, Depends(get_tenant_directory_service)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> list[TenantUserResponse]:
    """List the members of a tenant the caller belongs to.

    Raises:
        HTTPException: 400 if tenant_id is missing or not the caller's tenant
        HTTPException: 500 if the identity service fails
    """
    try:
        users = await service.list_tenant_users(identity, tenant_id)
        return [TenantUserResponse.from_domain(u) for u in users]
    except Exception as e:
        raise http_error(e, "Failed to list tenant users") from e


@router.get("/tenant_attributes")
async def get_tenant_attributes(
    identity: Identity,
    workflow: Annotated[
        TenantAttributeProjectionWorkflow,
        Depends(get_tenant_attribute_projection_workflow),
    ],
    tenant_id: Annotated[str | None, Query()] = None,
) -> dict[str, ProjectedAttributeResponse]:
    """Return a tenant's attribute values joined with their definitions.

    Raises:
        HTTPException: 400 if tenant_id is missing or not the caller's tenant
        HTTPException: 500 if the identity service fails
    """
    try:
        projection = await workflow.project(identity, tenant_id)
        return {
            name: ProjectedAttributeResponse.from_domain(attribute)
            for name, attribute in projection.items()
        }
    except Exception as e:
        raise http_error(e, "Failed to get tenant attributes") from e


@router.get("/tenant_attributes_list")
async def list_tenant_attribute_definitions(
    identity: Identity,
    service: Annotated[TenantDirectoryService, Depends(get_tenant_directory_service)],
) -> TenantAttributeDefinitionsResponse:
    """List tenant attribute definitions."""
    try:
        definitions = await service.list_tenant_attribute_definitions()
        return TenantAttributeDefinitionsResponse(
            tenant_attributes=[
                AttributeDefinitionResponse.from_domain(d) for d in definitions
            ]
        )
    except Exception as e:
        raise http_error(e, "Failed to list tenant attributes") from e


@router.get("/user_attributes")
async def list_user_attribute_definitions(
    identity: Identity,
    service: Annotated[TenantDirectoryService, Depends(get_tenant_directory_service)],
) -> UserAttributeDefinitionsResponse:
    """List user attribute definitions."""
    try:
        definitions = await service.list_user_attribute_definitions()
        return UserAttributeDefinitionsResponse(
            user_attributes=[
                AttributeDefinitionResponse.from_domain(d) for d in definitions
            ]
        )
    except Exception as e:
        raise http_error(e, "Failed to list user attributes") from e


@router.post("/user_register")
async def register_user(
    request: UserRegisterRequest,
    identity: Identity,
    workflow: Annotated[
        UserRegistrationWorkflow, Depends(get_user_registration_workflow)
    ],
) -> MessageResponse:
    """Register a user into one of the caller's tenants.

    Args:
        request: email, password, tenantId and optional userAttributeValues
        identity: Resolved caller identity
        workflow: User registration workflow

    Returns:
        MessageResponse acknowledging the registration

    Raises:
        HTTPException: 400 for missing fields, malformed attributes or a
            tenant the caller does not belong to
        HTTPException: 500 if the identity service fails
    """
    try:
        await workflow.register(
            identity,
            email=request.email,
            password=request.password,
            tenant_id=request.tenant_id,
            user_attribute_values=request.user_attribute_values,
        )
        return MessageResponse(message="User registered successfully")
    except Exception as e:
        raise http_error(e, "Failed to register user") from e


@router.delete("/user_delete")
async def delete_user(
    request: UserDeleteRequest,
    identity: Identity,
    workflow: Annotated[UserDeletionWorkflow, Depends(get_user_deletion_workflow)],
) -> MessageResponse:
    """Delete a user from one of the caller's tenants and audit the deletion.

    Raises:
        HTTPException: 400 for missing fields or a tenant the caller does
            not belong to
        HTTPException: 500 if the identity service or the audit store fails
    """
    try:
        await workflow.delete_user(
            identity,
            tenant_id=request.tenant_id,
            user_id=request.user_id,
        )
        return MessageResponse(message="User delete successfully")
    except Exception as e:
        raise http_error(e, "Failed to delete user") from e


@router.get("/delete_user_log")
async def list_deletion_logs(
    identity: Identity,
    service: Annotated[TenantDirectoryService, Depends(get_tenant_directory_service)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> list[DeletionLogResponse]:
    """List the deletion audit records of one of the caller's tenants."""
    try:
        records = await service.list_deletion_logs(identity, tenant_id)
        return [DeletionLogResponse.from_domain(r) for r in records]
    except Exception as e:
        raise http_error(e, "Failed to list deletion logs") from e


@router.get("/pricing_plan")
async def get_pricing_plan(
    identity: Identity,
    service: Annotated[TenantDirectoryService, Depends(get_tenant_directory_service)],
    plan_id: Annotated[str | None, Query()] = None,
) -> dict[str, Any]:
    """Return a billing plan as the pricing API describes it."""
    try:
        return await service.get_pricing_plan(identity, plan_id)
    except Exception as e:
        raise http_error(e, "Failed to get pricing plan") from e


@router.post("/self_sign_up")
async def self_sign_up(
    request: SelfSignUpRequest,
    identity: Identity,
    workflow: Annotated[SelfSignUpWorkflow, Depends(get_self_sign_up_workflow)],
) -> MessageResponse:
    """Create a tenant with the caller as its admin.

    Raises:
        HTTPException: 400 if tenantName is missing or attributes are malformed
        HTTPException: 500 if the identity service fails
    """
    try:
        await workflow.sign_up(
            identity,
            tenant_name=request.tenant_name,
            tenant_attribute_values=request.tenant_attribute_values,
            user_attribute_values=request.user_attribute_values,
        )
        return MessageResponse(message="User successfully signed up to the tenant")
    except Exception as e:
        raise http_error(e, "Failed to sign up") from e


@router.get("/invitations")
async def list_invitations(
    identity: Identity,
    workflow: Annotated[InvitationWorkflow, Depends(get_invitation_workflow)],
    tenant_id: Annotated[str | None, Query()] = None,
) -> list[InvitationResponse]:
    """List the invitations of one of the caller's tenants."""
    try:
        invitations = await workflow.list_invitations(identity, tenant_id)
        return [InvitationResponse.from_domain(i) for i in invitations]
    except Exception as e:
        raise http_error(e, "Failed to list invitations") from e


@router.post("/user_invitation")
async def create_invitation(
    request: UserInvitationRequest,
    identity: Identity,
    workflow: Annotated[InvitationWorkflow, Depends(get_invitation_workflow)],
    access_token: Annotated[str | None, Header(alias="X-Access-Token")] = None,
) -> MessageResponse:
    """Invite an email address into one of the caller's tenants.

    Raises:
        HTTPException: 400 for missing fields or a tenant the caller does
            not belong to
        HTTPException: 401 if the X-Access-Token header is missing
        HTTPException: 500 if the identity service fails
    """
    try:
        await workflow.invite(
            identity,
            email=request.email,
            tenant_id=request.tenant_id,
            access_token=access_token,
        )
        return MessageResponse(message="Create tenant user invitation successfully")
    except Exception as e:
        raise http_error(e, "Failed to create invitation") from e

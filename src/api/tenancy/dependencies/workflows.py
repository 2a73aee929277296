"""Workflow and service providers for the Tenancy bounded context."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.dependencies import get_read_session, get_write_session
from infrastructure.identity_service_dependencies import get_identity_service
from infrastructure.settings import IdentityServiceSettings, get_identity_service_settings
from shared_kernel.identity_service.protocols import IdentityServiceProvider
from shared_kernel.observability_context import ObservationContext
from tenancy.application.observability import (
    DefaultInvitationProbe,
    DefaultSelfSignUpProbe,
    DefaultTenantAttributeProjectionProbe,
    DefaultTenantDirectoryProbe,
    DefaultUserDeletionProbe,
    DefaultUserRegistrationProbe,
)
from tenancy.application.services import TenantDirectoryService
from tenancy.application.workflows import (
    InvitationWorkflow,
    SelfSignUpWorkflow,
    TenantAttributeProjectionWorkflow,
    UserDeletionWorkflow,
    UserRegistrationWorkflow,
)
from tenancy.dependencies.identity import get_observation_context
from tenancy.infrastructure.deletion_log_repository import DeletionLogRepository


def get_identity_settings_dep() -> IdentityServiceSettings:
    """Dependency for identity service settings."""
    return get_identity_service_settings()


def get_deletion_log_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> DeletionLogRepository:
    """Get DeletionLogRepository bound to a write session.

    Args:
        session: Async database session

    Returns:
        DeletionLogRepository instance
    """
    return DeletionLogRepository(session=session)


def get_read_deletion_log_repository(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> DeletionLogRepository:
    """Get DeletionLogRepository bound to a read-only session."""
    return DeletionLogRepository(session=session)


def get_user_registration_workflow(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    settings: Annotated[IdentityServiceSettings, Depends(get_identity_settings_dep)],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserRegistrationWorkflow:
    """Get UserRegistrationWorkflow instance.

    Args:
        identity_service: Identity service client
        settings: Identity service settings (role environment)
        observation: Observation context bound to the workflow's probe

    Returns:
        UserRegistrationWorkflow instance
    """
    return UserRegistrationWorkflow(
        identity_service=identity_service,
        role_env_id=settings.role_env_id,
        probe=DefaultUserRegistrationProbe().with_context(observation),
    )


def get_self_sign_up_workflow(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    settings: Annotated[IdentityServiceSettings, Depends(get_identity_settings_dep)],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> SelfSignUpWorkflow:
    """Get SelfSignUpWorkflow instance."""
    return SelfSignUpWorkflow(
        identity_service=identity_service,
        role_env_id=settings.role_env_id,
        probe=DefaultSelfSignUpProbe().with_context(observation),
    )


def get_user_deletion_workflow(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    repository: Annotated[DeletionLogRepository, Depends(get_deletion_log_repository)],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserDeletionWorkflow:
    """Get UserDeletionWorkflow instance.

    Args:
        identity_service: Identity service client
        repository: Audit store on a write session
        observation: Observation context bound to the workflow's probe

    Returns:
        UserDeletionWorkflow instance
    """
    return UserDeletionWorkflow(
        identity_service=identity_service,
        deletion_log_repository=repository,
        probe=DefaultUserDeletionProbe().with_context(observation),
    )


def get_invitation_workflow(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    settings: Annotated[IdentityServiceSettings, Depends(get_identity_settings_dep)],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> InvitationWorkflow:
    """Get InvitationWorkflow instance."""
    return InvitationWorkflow(
        identity_service=identity_service,
        invitation_env_id=settings.invitation_env_id,
        probe=DefaultInvitationProbe().with_context(observation),
    )


def get_tenant_attribute_projection_workflow(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> TenantAttributeProjectionWorkflow:
    """Get TenantAttributeProjectionWorkflow instance."""
    return TenantAttributeProjectionWorkflow(
        identity_service=identity_service,
        probe=DefaultTenantAttributeProjectionProbe().with_context(observation),
    )


def get_tenant_directory_service(
    identity_service: Annotated[
        IdentityServiceProvider, Depends(get_identity_service)
    ],
    repository: Annotated[
        DeletionLogRepository, Depends(get_read_deletion_log_repository)
    ],
    observation: Annotated[ObservationContext, Depends(get_observation_context)],
) -> TenantDirectoryService:
    """Get TenantDirectoryService instance.

    Args:
        identity_service: Identity service client
        repository: Audit store on a read-only session
        observation: Observation context bound to the service's probe

    Returns:
        TenantDirectoryService instance
    """
    return TenantDirectoryService(
        identity_service=identity_service,
        deletion_log_repository=repository,
        probe=DefaultTenantDirectoryProbe().with_context(observation),
    )

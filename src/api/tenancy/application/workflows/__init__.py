"""Tenant-scoped orchestration workflows.

Each workflow composes the membership guard, attribute coercion, the
identity service and (for deletion) the audit store into one externally
observable operation. Steps run strictly in order; a failure part-way
through does not undo earlier steps.
"""

from tenancy.application.workflows.invitation import InvitationWorkflow
from tenancy.application.workflows.self_sign_up import SelfSignUpWorkflow
from tenancy.application.workflows.tenant_attribute_projection import (
    TenantAttributeProjectionWorkflow,
)
from tenancy.application.workflows.user_deletion import UserDeletionWorkflow
from tenancy.application.workflows.user_registration import UserRegistrationWorkflow

__all__ = [
    "InvitationWorkflow",
    "SelfSignUpWorkflow",
    "TenantAttributeProjectionWorkflow",
    "UserDeletionWorkflow",
    "UserRegistrationWorkflow",
]

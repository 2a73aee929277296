"""Domain-Oriented Observability for the Tenancy application layer.

Probes for workflow operations following Domain-Oriented Observability patterns.
"""

from tenancy.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from tenancy.application.observability.invitation_probe import (
    DefaultInvitationProbe,
    InvitationProbe,
)
from tenancy.application.observability.self_sign_up_probe import (
    DefaultSelfSignUpProbe,
    SelfSignUpProbe,
)
from tenancy.application.observability.tenant_attribute_projection_probe import (
    DefaultTenantAttributeProjectionProbe,
    TenantAttributeProjectionProbe,
)
from tenancy.application.observability.tenant_directory_probe import (
    DefaultTenantDirectoryProbe,
    TenantDirectoryProbe,
)
from tenancy.application.observability.user_deletion_probe import (
    DefaultUserDeletionProbe,
    UserDeletionProbe,
)
from tenancy.application.observability.user_registration_probe import (
    DefaultUserRegistrationProbe,
    UserRegistrationProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
    "InvitationProbe",
    "DefaultInvitationProbe",
    "SelfSignUpProbe",
    "DefaultSelfSignUpProbe",
    "TenantAttributeProjectionProbe",
    "DefaultTenantAttributeProjectionProbe",
    "TenantDirectoryProbe",
    "DefaultTenantDirectoryProbe",
    "UserDeletionProbe",
    "DefaultUserDeletionProbe",
    "UserRegistrationProbe",
    "DefaultUserRegistrationProbe",
]

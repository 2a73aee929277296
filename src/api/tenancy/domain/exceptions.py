"""Domain exceptions for the Tenancy bounded context.

Two families are raised from the domain: request validation failures
(``InvalidRequestError``) and tenant access failures (``TenantAccessError``).
The presentation layer maps both to HTTP 400 with the exception message as
the detail.
"""

from __future__ import annotations

from typing import Iterable


class InvalidRequestError(Exception):
    """Raised when a request is missing data or carries malformed data."""

    pass


class MissingRequiredFieldError(InvalidRequestError):
    """Raised when one or more required fields are absent or empty.

    Attributes:
        field_names: Names of the missing fields, as the client sent them
    """

    def __init__(self, field_names: Iterable[str]):
        self.field_names = tuple(field_names)
        super().__init__(f"Missing required fields: {', '.join(self.field_names)}")


class AttributeCoercionError(InvalidRequestError):
    """Raised when an attribute declared as a number cannot be parsed.

    Attributes:
        attribute_name: Name of the offending attribute
        value: The value that failed to parse
    """

    def __init__(self, attribute_name: str, value: object):
        self.attribute_name = attribute_name
        self.value = value
        super().__init__(
            f"Attribute '{attribute_name}' must be an integer, got {value!r}"
        )


class TenantAccessError(Exception):
    """Raised when the caller may not act on the requested tenant."""

    pass


class NoUserError(TenantAccessError):
    """Raised when no caller identity was resolved for the request."""

    def __init__(self) -> None:
        super().__init__("No user")


class NoTenantsError(TenantAccessError):
    """Raised when the caller belongs to no tenant at all."""

    def __init__(self) -> None:
        super().__init__("No tenants found for the user")


class TenantNotBelongedError(TenantAccessError):
    """Raised when the caller has memberships, but not in the target tenant.

    Attributes:
        tenant_id: The tenant the caller tried to act on
    """

    def __init__(self, tenant_id: str):
        self.tenant_id = tenant_id
        super().__init__("Tenant that does not belong")


class AuthenticationRequiredError(Exception):
    """Raised when a credential the operation needs was not supplied.

    Used for the issuer access token on invitations; maps to HTTP 401.
    """

    pass

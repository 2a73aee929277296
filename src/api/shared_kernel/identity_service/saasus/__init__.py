"""SaaSus Platform client implementation of the identity service.

This module provides the SaaSus client that implements the
IdentityServiceProvider protocol over the SaaSus Auth and Pricing APIs.
"""

from shared_kernel.identity_service.saasus.client import SaaSusIdentityClient
from shared_kernel.identity_service.saasus.signature import (
    SaaSusSignatureAuth,
    compute_signature,
)

__all__ = [
    "SaaSusIdentityClient",
    "SaaSusSignatureAuth",
    "compute_signature",
]

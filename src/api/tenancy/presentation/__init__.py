"""Tenancy presentation layer.

All tenancy endpoints sit at the application root, so the router carries no
prefix. Auth is enforced per-endpoint through the identity dependency.
"""

from tenancy.presentation.routes import router

__all__ = ["router"]

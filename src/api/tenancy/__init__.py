"""Tenancy bounded context.

Tenant-scoped orchestration in front of the identity service: user
registration, self-service sign-up, user deletion with an audit trail,
invitation issuance and tenant attribute projection.
"""

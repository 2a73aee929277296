"""Typed views of identity service resources.

The identity service speaks loosely-typed JSON. These frozen dataclasses give
the rest of the gateway a stable, typed boundary; each ``from_api`` classmethod
tolerates missing optional keys the way the service omits them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Mapping

AttributeValue = str | int | float | bool | None
"""A single tenant or user attribute value as exchanged with the service."""


class AttributeType(StrEnum):
    """Attribute types the identity service declares.

    Only ``NUMBER`` carries a coercion rule; the service may introduce other
    types, which are kept as plain strings on ``AttributeDefinition``.
    """

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    DATE = "date"


@dataclass(frozen=True)
class AttributeDefinition:
    """Schema metadata for a custom tenant or user attribute."""

    attribute_name: str
    display_name: str
    attribute_type: str

    @property
    def is_numeric(self) -> bool:
        return self.attribute_type == AttributeType.NUMBER

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> AttributeDefinition:
        return cls(
            attribute_name=data["attribute_name"],
            display_name=data.get("display_name", ""),
            attribute_type=data.get("attribute_type", AttributeType.STRING.value),
        )


@dataclass(frozen=True)
class Role:
    """A role defined in the identity service's role catalog."""

    role_name: str
    display_name: str = ""

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Role:
        return cls(
            role_name=data["role_name"],
            display_name=data.get("display_name", ""),
        )


@dataclass(frozen=True)
class TenantEnv:
    """A tenant environment together with the roles held in it."""

    id: int
    name: str
    display_name: str
    roles: tuple[Role, ...] = ()

    @property
    def role_names(self) -> tuple[str, ...]:
        return tuple(role.role_name for role in self.roles)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> TenantEnv:
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            display_name=data.get("display_name", ""),
            roles=tuple(Role.from_api(r) for r in data.get("roles") or []),
        )


@dataclass(frozen=True)
class TenantUser:
    """A user's membership in a tenant."""

    id: str
    tenant_id: str
    email: str
    attributes: dict[str, Any] = field(default_factory=dict)
    envs: tuple[TenantEnv, ...] = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> TenantUser:
        return cls(
            id=data["id"],
            tenant_id=data.get("tenant_id", ""),
            email=data["email"],
            attributes=dict(data.get("attributes") or {}),
            envs=tuple(TenantEnv.from_api(e) for e in data.get("envs") or []),
        )


@dataclass(frozen=True)
class TenantRecord:
    """A tenant as stored by the identity service."""

    id: str
    name: str
    attributes: dict[str, Any] = field(default_factory=dict)
    back_office_staff_email: str | None = None
    plan_id: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> TenantRecord:
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            attributes=dict(data.get("attributes") or {}),
            back_office_staff_email=data.get("back_office_staff_email"),
            plan_id=data.get("plan_id"),
        )


@dataclass(frozen=True)
class EnvRoleAssignment:
    """Roles to grant within one tenant environment."""

    env_id: int
    role_names: tuple[str, ...]

    def to_api(self) -> dict[str, Any]:
        return {"id": self.env_id, "role_names": list(self.role_names)}


@dataclass(frozen=True)
class Invitation:
    """A pending or processed tenant invitation."""

    id: str
    email: str
    status: str | None = None
    invitation_url: str | None = None
    expired_at: int | None = None
    envs: tuple[EnvRoleAssignment, ...] = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Invitation:
        envs = tuple(
            EnvRoleAssignment(
                env_id=env["id"],
                role_names=tuple(env.get("role_names") or ()),
            )
            for env in data.get("envs") or []
        )
        return cls(
            id=data["id"],
            email=data["email"],
            status=data.get("status"),
            invitation_url=data.get("invitation_url"),
            expired_at=data.get("expired_at"),
            envs=envs,
        )


@dataclass(frozen=True)
class UserInfoTenant:
    """A tenant the authenticated user belongs to, as reported by userinfo."""

    id: str
    name: str
    envs: tuple[TenantEnv, ...] = ()
    plan_id: str | None = None
    completed_sign_up: bool = True

    @property
    def role_names(self) -> tuple[str, ...]:
        """Distinct role names across all environments, in first-seen order."""
        names: list[str] = []
        for env in self.envs:
            for role_name in env.role_names:
                if role_name not in names:
                    names.append(role_name)
        return tuple(names)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> UserInfoTenant:
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            envs=tuple(TenantEnv.from_api(e) for e in data.get("envs") or []),
            plan_id=data.get("plan_id"),
            completed_sign_up=bool(data.get("completed_sign_up", True)),
        )


@dataclass(frozen=True)
class UserInfo:
    """The authenticated user behind an ID token."""

    id: str
    email: str
    tenants: tuple[UserInfoTenant, ...] = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> UserInfo:
        return cls(
            id=data["id"],
            email=data["email"],
            tenants=tuple(UserInfoTenant.from_api(t) for t in data.get("tenants") or []),
        )


@dataclass(frozen=True)
class Credentials:
    """Tokens issued by the identity service at login or refresh."""

    id_token: str
    access_token: str
    refresh_token: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Credentials:
        return cls(
            id_token=data["id_token"],
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
        )

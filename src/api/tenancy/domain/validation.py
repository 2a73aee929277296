"""Required-field checks shared by the tenant workflows."""

from __future__ import annotations

from typing import Mapping

from tenancy.domain.exceptions import MissingRequiredFieldError


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(fields: Mapping[str, object]) -> None:
    """Ensure every named field carries a non-empty value.

    Args:
        fields: Field values keyed by the name the client used for them

    Raises:
        MissingRequiredFieldError: Naming every field that is None, empty or whitespace
    """
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise MissingRequiredFieldError(missing)

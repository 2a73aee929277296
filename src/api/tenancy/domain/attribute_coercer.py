"""Attribute normalization against identity service attribute definitions.

Clients send attribute values loosely typed (numbers often arrive as form
strings). Before forwarding, values of attributes declared as ``number`` are
parsed as base-10 integers; everything else passes through untouched.
"""

from __future__ import annotations

import re
from typing import Iterable

from shared_kernel.identity_service.types import AttributeDefinition, AttributeValue
from tenancy.domain.exceptions import AttributeCoercionError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_integer(attribute_name: str, value: AttributeValue) -> int:
    # bool is a subclass of int and must not be read as 1
    if isinstance(value, bool):
        raise AttributeCoercionError(attribute_name, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise AttributeCoercionError(attribute_name, value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text, 10)
            except ValueError as e:
                # beyond the interpreter's integer string conversion limit
                raise AttributeCoercionError(attribute_name, value) from e
    raise AttributeCoercionError(attribute_name, value)


class AttributeCoercer:
    """Coerces attribute value maps to their declared types."""

    def coerce(
        self,
        values: dict[str, AttributeValue],
        definitions: Iterable[AttributeDefinition],
    ) -> dict[str, AttributeValue]:
        """Coerce numeric attributes in place.

        For each definition declared as a number whose name is present with a
        truthy value, the value is replaced by its integer parse. Attributes
        without a definition, and attributes of any other type, are left
        unchanged. Coercing an already coerced map is a no-op.

        Args:
            values: Attribute values supplied by the client (mutated)
            definitions: Attribute definitions fetched from the identity service

        Returns:
            The same mapping, coerced

        Raises:
            AttributeCoercionError: If a numeric attribute is not an integer
        """
        for definition in definitions:
            if not definition.is_numeric:
                continue
            name = definition.attribute_name
            value = values.get(name)
            if not value:
                continue
            values[name] = _parse_integer(name, value)
        return values

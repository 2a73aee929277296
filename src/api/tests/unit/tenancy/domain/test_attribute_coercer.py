"""Unit tests for attribute coercion against attribute definitions."""

import pytest

from shared_kernel.identity_service.types import AttributeDefinition
from tenancy.domain.attribute_coercer import AttributeCoercer
from tenancy.domain.exceptions import AttributeCoercionError, InvalidRequestError


@pytest.fixture
def coercer() -> AttributeCoercer:
    return AttributeCoercer()


@pytest.fixture
def definitions() -> list[AttributeDefinition]:
    return [
        AttributeDefinition(
            attribute_name="age", display_name="Age", attribute_type="number"
        ),
        AttributeDefinition(
            attribute_name="nickname", display_name="Nickname", attribute_type="string"
        ),
        AttributeDefinition(
            attribute_name="active", display_name="Active", attribute_type="bool"
        ),
    ]


class TestNumericCoercion:
    """Tests for number-typed attributes."""

    def test_parses_decimal_string(self, coercer, definitions):
        result = coercer.coerce({"age": "30"}, definitions)
        assert result == {"age": 30}
        assert isinstance(result["age"], int)

    def test_mutates_and_returns_same_mapping(self, coercer, definitions):
        values = {"age": "7"}
        result = coercer.coerce(values, definitions)
        assert result is values
        assert values["age"] == 7

    def test_accepts_surrounding_whitespace_and_sign(self, coercer, definitions):
        assert coercer.coerce({"age": " 42 "}, definitions) == {"age": 42}
        assert coercer.coerce({"age": "-3"}, definitions) == {"age": -3}
        assert coercer.coerce({"age": "+5"}, definitions) == {"age": 5}

    def test_keeps_integers(self, coercer, definitions):
        assert coercer.coerce({"age": 12}, definitions) == {"age": 12}

    def test_integral_float_becomes_int(self, coercer, definitions):
        result = coercer.coerce({"age": 30.0}, definitions)
        assert result == {"age": 30}
        assert isinstance(result["age"], int)

    def test_coercion_is_idempotent(self, coercer, definitions):
        once = coercer.coerce({"age": "30", "nickname": "al"}, definitions)
        twice = coercer.coerce(dict(once), definitions)
        assert once == twice

    def test_falsy_values_are_left_untouched(self, coercer, definitions):
        """Empty strings, zero and None are forwarded as-is."""
        assert coercer.coerce({"age": ""}, definitions) == {"age": ""}
        assert coercer.coerce({"age": 0}, definitions) == {"age": 0}
        assert coercer.coerce({"age": None}, definitions) == {"age": None}

    @pytest.mark.parametrize("value", ["abc", "3.5", "1e3", "0x10", "١٢"])
    def test_rejects_non_integer_strings(self, coercer, definitions, value):
        with pytest.raises(AttributeCoercionError) as exc_info:
            coercer.coerce({"age": value}, definitions)

        assert exc_info.value.attribute_name == "age"
        assert exc_info.value.value == value
        assert "age" in str(exc_info.value)

    def test_rejects_fractional_float(self, coercer, definitions):
        with pytest.raises(AttributeCoercionError):
            coercer.coerce({"age": 2.5}, definitions)

    def test_rejects_boolean(self, coercer, definitions):
        with pytest.raises(AttributeCoercionError):
            coercer.coerce({"age": True}, definitions)

    def test_rejects_digit_string_beyond_conversion_limit(self, coercer, definitions):
        with pytest.raises(AttributeCoercionError) as exc_info:
            coercer.coerce({"age": "1" * 5000}, definitions)

        assert exc_info.value.attribute_name == "age"

    def test_coercion_error_is_invalid_request(self, coercer, definitions):
        with pytest.raises(InvalidRequestError):
            coercer.coerce({"age": "abc"}, definitions)


class TestNonNumericAttributes:
    """Tests for attributes that carry no coercion rule."""

    def test_string_and_bool_attributes_pass_through(self, coercer, definitions):
        values = {"nickname": "007", "active": "yes"}
        assert coercer.coerce(values, definitions) == {
            "nickname": "007",
            "active": "yes",
        }

    def test_undefined_attributes_pass_through(self, coercer, definitions):
        assert coercer.coerce({"shoe_size": "44"}, definitions) == {"shoe_size": "44"}

    def test_no_definitions_means_no_change(self, coercer):
        assert coercer.coerce({"age": "30"}, []) == {"age": "30"}

    def test_definition_without_value_adds_nothing(self, coercer, definitions):
        assert coercer.coerce({}, definitions) == {}

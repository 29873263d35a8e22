"""Tests for tagged JSON values."""

import pytest

from openrouter_response.exceptions import JSONValueError
from openrouter_response.json_value import (
    ArrayValue,
    BoolValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    parse_json_object,
    to_json_value,
    untyped_dict,
)


class TestToJSONValue:
    """Tests for converting plain Python data to tagged values."""

    def test_scalars(self):
        assert to_json_value(None) == NullValue()
        assert to_json_value(True) == BoolValue(value=True)
        assert to_json_value("x") == StringValue(value="x")

    def test_bool_is_not_a_number(self):
        assert to_json_value(False).kind == "bool"

    def test_numbers_keep_their_type(self):
        assert isinstance(to_json_value(3).untyped(), int)
        assert isinstance(to_json_value(2.5).untyped(), float)

    def test_containers(self):
        value = to_json_value({"a": [1, None], "b": {"c": "d"}})
        assert isinstance(value, ObjectValue)
        assert isinstance(value.members["a"], ArrayValue)
        assert value.members["a"].items[1] == NullValue()
        assert value.members["b"].members["c"] == StringValue(value="d")

    def test_containers_are_immutable(self):
        value = to_json_value({"a": [1]})
        assert isinstance(value.members["a"].items, tuple)
        with pytest.raises(TypeError):
            value.members["b"] = NullValue()

    def test_unsupported_type(self):
        with pytest.raises(JSONValueError, match="set"):
            to_json_value({1, 2})


class TestParseJSONObject:
    """Tests for parsing text into a mapping of tagged values."""

    def test_parse_object(self):
        members = parse_json_object('{"city":"Paris","days":3,"metric":true}')
        assert members["city"] == StringValue(value="Paris")
        assert members["days"] == NumberValue(value=3)
        assert members["metric"] == BoolValue(value=True)

    def test_parse_bytes(self):
        assert parse_json_object(b"{}") == {}

    def test_round_trip_to_untyped(self):
        members = parse_json_object('{"a":[1,{"b":null}],"c":1.5}')
        assert untyped_dict(members) == {"a": [1, {"b": None}], "c": 1.5}

    def test_invalid_json(self):
        with pytest.raises(JSONValueError, match="Invalid JSON"):
            parse_json_object("{city: Paris}")

    @pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
    def test_non_finite_numbers_are_invalid(self, text):
        with pytest.raises(JSONValueError, match="Invalid JSON"):
            parse_json_object(text)

    @pytest.mark.parametrize("text", ["[]", '"s"', "1", "null"])
    def test_non_object(self, text):
        with pytest.raises(JSONValueError, match="Expected a JSON object"):
            parse_json_object(text)

    def test_tagged_values_validate_from_dicts(self):
        """Serialized tagged values load back through the discriminator."""
        value = ObjectValue.model_validate(
            {"members": {"x": {"kind": "array", "items": [{"kind": "number", "value": 1}]}}}
        )
        assert value.untyped() == {"x": [1]}

"""Tagged JSON value types and a generic JSON object parser.

Public API (the "studs"):
    JSONValue: Discriminated union of the six JSON value kinds
    NullValue, BoolValue, NumberValue, StringValue, ArrayValue, ObjectValue
    to_json_value: Convert plain Python data into a JSONValue
    parse_json_object: Parse text into a mapping of JSONValue
    JSONMembers: Read-only mapping of member names to JSONValue
    untyped_dict: Convert a JSONValue mapping back to plain Python
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, WrapSerializer
from pydantic_core import from_json

from openrouter_response.exceptions import JSONValueError


class NullValue(BaseModel):
    """JSON ``null``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["null"] = "null"

    def untyped(self) -> None:
        """Return the plain Python value."""
        return None


class BoolValue(BaseModel):
    """JSON ``true`` / ``false``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bool"] = "bool"
    value: bool

    def untyped(self) -> bool:
        """Return the plain Python value."""
        return self.value


class NumberValue(BaseModel):
    """JSON number. Integers stay ``int``, everything else is ``float``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int | float

    def untyped(self) -> int | float:
        """Return the plain Python value."""
        return self.value


class StringValue(BaseModel):
    """JSON string."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str

    def untyped(self) -> str:
        """Return the plain Python value."""
        return self.value


class ArrayValue(BaseModel):
    """JSON array."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: tuple["JSONValue", ...] = ()

    def untyped(self) -> list[Any]:
        """Return the items as a plain Python list."""
        return [item.untyped() for item in self.items]


class ObjectValue(BaseModel):
    """JSON object."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    members: "JSONMembers" = Field(default_factory=dict, validate_default=True)

    def untyped(self) -> dict[str, Any]:
        """Return the members as a plain Python dict."""
        return untyped_dict(self.members)


JSONValue = Annotated[
    Union[NullValue, BoolValue, NumberValue, StringValue, ArrayValue, ObjectValue],
    Field(discriminator="kind"),
]


def _freeze(members: dict[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(members)


def _thaw(members: Mapping[str, Any], handler: Any) -> Any:
    return handler(dict(members))


# Validated as a dict, stored read-only
JSONMembers = Annotated[
    dict[str, JSONValue], AfterValidator(_freeze), WrapSerializer(_thaw)
]

ArrayValue.model_rebuild()
ObjectValue.model_rebuild()


def to_json_value(data: Any) -> JSONValue:
    """Convert already-parsed Python data into a tagged JSON value.

    Args:
        data: Output of a JSON parser (None, bool, int, float, str, list, dict)

    Returns:
        The matching JSONValue variant

    Raises:
        JSONValueError: If data contains a type JSON cannot represent
    """
    if data is None:
        return NullValue()
    # bool is a subclass of int, check it first
    if isinstance(data, bool):
        return BoolValue(value=data)
    if isinstance(data, (int, float)):
        return NumberValue(value=data)
    if isinstance(data, str):
        return StringValue(value=data)
    if isinstance(data, list):
        return ArrayValue(items=[to_json_value(item) for item in data])
    if isinstance(data, dict):
        return ObjectValue(members={str(k): to_json_value(v) for k, v in data.items()})
    raise JSONValueError(f"Unsupported JSON value type: {type(data).__name__}")


def parse_json_object(text: str | bytes) -> dict[str, JSONValue]:
    """Parse text as a JSON object.

    Args:
        text: JSON document whose top level must be an object

    Returns:
        Mapping of member names to tagged JSON values

    Raises:
        JSONValueError: If text is not valid JSON or not an object
    """
    try:
        data = from_json(text, allow_inf_nan=False)
    except ValueError as e:
        raise JSONValueError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise JSONValueError(f"Expected a JSON object, got {type(data).__name__}")

    return {key: to_json_value(value) for key, value in data.items()}


def untyped_dict(members: Mapping[str, JSONValue]) -> dict[str, Any]:
    """Convert a mapping of tagged values back to plain Python data."""
    return {key: value.untyped() for key, value in members.items()}


__all__ = [
    "JSONValue",
    "NullValue",
    "BoolValue",
    "NumberValue",
    "StringValue",
    "ArrayValue",
    "ObjectValue",
    "JSONMembers",
    "to_json_value",
    "parse_json_object",
    "untyped_dict",
]

"""Decoder for OpenRouter chat-completion response bodies.

Public API (the "studs"):
    decode_response: Decode a raw response body into a Response
    read_arguments_string: First stage of Function.arguments decoding
    parse_arguments: Second stage of Function.arguments decoding

Required fields (``choices``, ``choices[i].message`` and
``...function.name``) raise StructuralDecodeError when missing or mistyped.
Every other field degrades to None on absence or type mismatch, without
affecting its siblings.
"""

import logging
from typing import Any

from pydantic_core import from_json

from openrouter_response.config import DecoderConfig
from openrouter_response.exceptions import (
    ArgumentsDecodeError,
    JSONValueError,
    MalformedPayloadError,
    StructuralDecodeError,
)
from openrouter_response.json_value import JSONValue, parse_json_object
from openrouter_response.types import Choice, Function, Message, Response, ToolCall, Usage

_logger = logging.getLogger(__name__)

_ROOT = "<root>"


def _join(path: str, key: str) -> str:
    return key if path == _ROOT else f"{path}.{key}"


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _optional(wire: dict[str, Any], key: str, kind: type, path: str) -> Any:
    """Read an optional field, returning None when absent or of the wrong type."""
    value = wire.get(key)
    if value is None:
        return None
    # JSON booleans must not satisfy int fields
    if isinstance(value, kind) and not (kind is int and isinstance(value, bool)):
        return value
    _logger.debug(
        "Ignoring %s: expected %s, got %s", _join(path, key), kind.__name__, _type_name(value)
    )
    return None


def _required_object(wire: dict[str, Any], key: str, path: str) -> dict[str, Any]:
    value = wire.get(key)
    if not isinstance(value, dict):
        raise StructuralDecodeError(
            _join(path, key), "object", "missing" if value is None else f"got {_type_name(value)}"
        )
    return value


def read_arguments_string(wire_function: dict[str, Any]) -> str | None:
    """Read the wire ``arguments`` field as a plain string.

    Args:
        wire_function: The wire ``function`` object of a tool call

    Returns:
        The arguments string verbatim, or None when the field is missing,
        null, or not a string
    """
    arguments = wire_function.get("arguments")
    return arguments if isinstance(arguments, str) else None


def parse_arguments(arguments_raw: str, path: str = "arguments") -> dict[str, JSONValue]:
    """Re-parse an arguments string into a mapping.

    Args:
        arguments_raw: JSON-encoded arguments, e.g. '{"city": "Paris"}'
        path: Field path reported on failure

    Returns:
        Mapping of argument names to tagged JSON values

    Raises:
        ArgumentsDecodeError: If the string is not a JSON object
    """
    try:
        members = parse_json_object(arguments_raw)
    except JSONValueError as e:
        raise ArgumentsDecodeError(path, "JSON object string", str(e)) from e
    return members


def _decode_function(wire: dict[str, Any], path: str, config: DecoderConfig) -> Function:
    name = wire.get("name")
    if not isinstance(name, str):
        raise StructuralDecodeError(
            _join(path, "name"), "string", "missing" if name is None else f"got {_type_name(name)}"
        )

    arguments_raw = read_arguments_string(wire)
    arguments = None
    if arguments_raw is not None:
        arguments_path = _join(path, "arguments")
        try:
            arguments = parse_arguments(arguments_raw, arguments_path)
        except ArgumentsDecodeError:
            if config.invalid_arguments == "raise":
                raise
            _logger.warning("Unparseable tool call arguments at %s, omitting", arguments_path)
    elif wire.get("arguments") is not None:
        _logger.debug(
            "Ignoring %s: expected str, got %s",
            _join(path, "arguments"),
            _type_name(wire["arguments"]),
        )

    return Function(name=name, arguments_raw=arguments_raw, arguments=arguments)


def _decode_tool_call(wire: dict[str, Any], path: str, config: DecoderConfig) -> ToolCall:
    wire_function = _optional(wire, "function", dict, path)
    return ToolCall(
        id=_optional(wire, "id", str, path),
        index=_optional(wire, "index", int, path),
        type=_optional(wire, "type", str, path),
        function=(
            _decode_function(wire_function, _join(path, "function"), config)
            if wire_function is not None
            else None
        ),
    )


def _decode_message(wire: dict[str, Any], path: str, config: DecoderConfig) -> Message:
    tool_calls = None
    wire_tool_calls = _optional(wire, "tool_calls", list, path)
    if wire_tool_calls is not None:
        tool_calls = []
        for j, item in enumerate(wire_tool_calls):
            item_path = f"{_join(path, 'tool_calls')}[{j}]"
            if not isinstance(item, dict):
                _logger.debug("Ignoring %s: expected dict, got %s", item_path, _type_name(item))
                continue
            tool_calls.append(_decode_tool_call(item, item_path, config))

    return Message(
        content=_optional(wire, "content", str, path),
        reasoning=_optional(wire, "reasoning", str, path),
        role=_optional(wire, "role", str, path),
        tool_calls=tuple(tool_calls) if tool_calls is not None else None,
    )


def _decode_choice(wire: dict[str, Any], path: str, config: DecoderConfig) -> Choice:
    message = _required_object(wire, "message", path)
    return Choice(
        finish_reason=_optional(wire, "finish_reason", str, path),
        native_finish_reason=_optional(wire, "native_finish_reason", str, path),
        message=_decode_message(message, _join(path, "message"), config),
    )


def _decode_usage(wire: dict[str, Any], path: str) -> Usage:
    return Usage(
        completion_tokens=_optional(wire, "completion_tokens", int, path),
        prompt_tokens=_optional(wire, "prompt_tokens", int, path),
        total_tokens=_optional(wire, "total_tokens", int, path),
    )


def decode_response(payload: bytes | str, config: DecoderConfig | None = None) -> Response:
    """Decode a chat-completion response body.

    Args:
        payload: Raw HTTP response body
        config: Decoding policy, defaults to DecoderConfig()

    Returns:
        Response with all recognised fields populated

    Raises:
        MalformedPayloadError: If payload is not valid JSON
        StructuralDecodeError: If a required field is missing or mistyped
        ArgumentsDecodeError: If a tool call's arguments string is not a
            JSON object and config.invalid_arguments is "raise"

    Example:
        >>> response = decode_response(b'{"choices": [{"message": {"content": "hi"}}]}')
        >>> response.choices[0].message.content
        'hi'
    """
    config = config or DecoderConfig()

    try:
        wire = from_json(payload, allow_inf_nan=False)
    except ValueError as e:
        raise MalformedPayloadError(f"Response body is not valid JSON: {e}") from e

    if not isinstance(wire, dict):
        raise StructuralDecodeError(_ROOT, "object", f"got {_type_name(wire)}")

    wire_choices = wire.get("choices")
    if not isinstance(wire_choices, list):
        raise StructuralDecodeError(
            "choices",
            "array",
            "missing" if wire_choices is None else f"got {_type_name(wire_choices)}",
        )

    choices = []
    for i, item in enumerate(wire_choices):
        item_path = f"choices[{i}]"
        if not isinstance(item, dict):
            raise StructuralDecodeError(item_path, "object", f"got {_type_name(item)}")
        choices.append(_decode_choice(item, item_path, config))

    wire_usage = _optional(wire, "usage", dict, _ROOT)

    return Response(
        choices=tuple(choices),
        created=_optional(wire, "created", int, _ROOT),
        id=_optional(wire, "id", str, _ROOT),
        model=_optional(wire, "model", str, _ROOT),
        provider=_optional(wire, "provider", str, _ROOT),
        usage=_decode_usage(wire_usage, "usage") if wire_usage is not None else None,
    )


__all__ = ["decode_response", "read_arguments_string", "parse_arguments"]

"""Typed decoding for OpenRouter chat-completion responses.

This package turns a raw (non-streaming) chat-completion response body into
immutable pydantic models: response metadata, choices, messages, tool calls
and token usage.

Public API (the "studs"):
    decode_response: Decode a raw response body into a Response
    read_arguments_string, parse_arguments: Two-stage arguments decoding
    DecoderConfig: Decoding policy options
    Response, Usage, Choice, Message, ToolCall, Function: Decoded types
    parse_json_object, JSONValue: Generic tagged JSON values
    DecodeError and subclasses: Decoding failures

Example:
    >>> from openrouter_response import decode_response
    >>>
    >>> response = decode_response(http_response.content)
    >>> choice = response.choices[0]
    >>> print(choice.message.content)
    >>>
    >>> for call in choice.message.tool_calls or []:
    ...     print(call.function.name, call.function.arguments)
"""

from openrouter_response.config import DecoderConfig
from openrouter_response.decoder import decode_response, parse_arguments, read_arguments_string
from openrouter_response.exceptions import (
    ArgumentsDecodeError,
    DecodeError,
    JSONValueError,
    MalformedPayloadError,
    StructuralDecodeError,
)
from openrouter_response.json_value import JSONValue, parse_json_object
from openrouter_response.types import Choice, Function, Message, Response, ToolCall, Usage

__version__ = "0.1.0"

__all__ = [
    # Decoder
    "decode_response",
    "read_arguments_string",
    "parse_arguments",
    # Config
    "DecoderConfig",
    # Types
    "Response",
    "Usage",
    "Choice",
    "Message",
    "ToolCall",
    "Function",
    # JSON values
    "JSONValue",
    "parse_json_object",
    # Exceptions
    "DecodeError",
    "MalformedPayloadError",
    "StructuralDecodeError",
    "ArgumentsDecodeError",
    "JSONValueError",
    "__version__",
]

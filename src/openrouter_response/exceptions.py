"""Exceptions for the response decoder.

Public API (the "studs"):
    DecodeError: Base exception for all decoding errors
    MalformedPayloadError: Payload is not valid JSON
    StructuralDecodeError: Required field missing or of the wrong type
    ArgumentsDecodeError: Tool-call arguments string is not a JSON object
    JSONValueError: Generic JSON value parsing failed
"""


class DecodeError(Exception):
    """Base exception for all decoding errors."""

    pass


class MalformedPayloadError(DecodeError):
    """Response body is not valid JSON."""

    pass


class StructuralDecodeError(DecodeError):
    """A required field is missing or has the wrong type.

    Attributes:
        path: Dotted field path, e.g. ``choices[0].message``
        expected: Human-readable description of the expected shape
    """

    def __init__(self, path: str, expected: str, detail: str | None = None) -> None:
        self.path = path
        self.expected = expected
        message = f"{path}: expected {expected}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ArgumentsDecodeError(StructuralDecodeError):
    """Function arguments string was present but is not a JSON object."""

    pass


class JSONValueError(DecodeError):
    """Text could not be parsed into a JSON value of the requested kind."""

    pass


__all__ = [
    "DecodeError",
    "MalformedPayloadError",
    "StructuralDecodeError",
    "ArgumentsDecodeError",
    "JSONValueError",
]

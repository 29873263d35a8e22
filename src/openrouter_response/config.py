"""Configuration model for the response decoder.

Public API (the "studs"):
    DecoderConfig: Decoding policy options
"""

import os
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

InvalidArgumentsPolicy = Literal["raise", "omit"]

_INVALID_ARGUMENTS_ENV = "OPENROUTER_INVALID_ARGUMENTS"


class DecoderConfig(BaseModel):
    """Decoding policy options.

    Attributes:
        invalid_arguments: What to do when a tool call's arguments string is
            present but is not a JSON object. "raise" fails the decode with
            ArgumentsDecodeError; "omit" keeps arguments_raw and leaves
            arguments unset.
    """

    model_config = ConfigDict(frozen=True)

    invalid_arguments: InvalidArgumentsPolicy = Field(
        "raise", description="Policy for unparseable tool-call arguments"
    )

    @classmethod
    def from_env(cls) -> "DecoderConfig":
        """Create DecoderConfig from environment variables.

        Environment variables:
            OPENROUTER_INVALID_ARGUMENTS: "raise" (default) or "omit"

        Returns:
            DecoderConfig instance

        Raises:
            ValueError: If a variable holds an unknown value
        """
        policy = os.environ.get(_INVALID_ARGUMENTS_ENV, "raise").strip().lower()
        allowed = get_args(InvalidArgumentsPolicy)
        if policy not in allowed:
            raise ValueError(
                f"{_INVALID_ARGUMENTS_ENV} must be one of {', '.join(allowed)}: {policy!r}"
            )
        return cls(invalid_arguments=policy)


__all__ = ["DecoderConfig"]

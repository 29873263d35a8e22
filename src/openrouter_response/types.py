"""Type definitions for a decoded chat-completion response.

Public API (the "studs"):
    Response: Top-level chat-completion response
    Usage: Token usage statistics
    Choice: One completion candidate
    Message: Message generated by the model
    ToolCall: Tool invocation requested by the model
    Function: Function name and arguments of a tool call
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from openrouter_response.json_value import JSONMembers, untyped_dict


class Usage(BaseModel):
    """Usage statistics for the completion request.

    Attributes:
        completion_tokens: Number of tokens in the generated completion
        prompt_tokens: Number of tokens in the prompt
        total_tokens: Total tokens used (prompt + completion)
    """

    model_config = ConfigDict(frozen=True)

    completion_tokens: int | None = Field(None, description="Tokens in the completion")
    prompt_tokens: int | None = Field(None, description="Tokens in the prompt")
    total_tokens: int | None = Field(None, description="Prompt + completion tokens")


class Function(BaseModel):
    """The function the model instructs the caller to invoke.

    ``arguments_raw`` is the untouched wire string. Feed it back to the
    model verbatim on follow-up requests; ``arguments`` is only the parsed
    view of it.

    Attributes:
        name: Name of the function to call
        arguments_raw: Arguments as the JSON-encoded wire string
        arguments: Arguments parsed into a read-only mapping of tagged
            JSON values
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the function to call")
    arguments_raw: str | None = Field(None, description="Raw JSON-encoded arguments")
    arguments: JSONMembers | None = Field(None, description="Parsed arguments")

    def untyped_arguments(self) -> dict[str, Any] | None:
        """Return the parsed arguments as plain Python data, or None."""
        if self.arguments is None:
            return None
        return untyped_dict(self.arguments)


class ToolCall(BaseModel):
    """A tool call generated by the model.

    Attributes:
        id: Tool call identifier
        index: Position of the call, used to correlate streaming deltas
        type: Tool type, currently only "function"
        function: Function to call
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(None, description="Tool call identifier")
    index: int | None = Field(None, description="Tool call index")
    type: str | None = Field(None, description="Tool type")
    function: Function | None = Field(None, description="Function to call")


class Message(BaseModel):
    """A chat completion message generated by the model.

    Attributes:
        content: Message text
        reasoning: Reasoning text, populated by reasoning models
        role: Role of the message author
        tool_calls: Tool calls requested by the model
    """

    model_config = ConfigDict(frozen=True)

    content: str | None = Field(None, description="Message text")
    reasoning: str | None = Field(None, description="Reasoning used to arrive at content")
    role: str | None = Field(None, description="Role of the message author")
    tool_calls: tuple[ToolCall, ...] | None = Field(None, description="Requested tool calls")

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


class Choice(BaseModel):
    """One completion candidate.

    ``finish_reason`` is kept as an open string since providers vary. Common
    values are "stop", "length", "content_filter", "tool_calls" and
    "function_call".

    Attributes:
        finish_reason: Normalized reason generation stopped
        native_finish_reason: Provider-specific raw finish reason
        message: Message generated by the model
    """

    model_config = ConfigDict(frozen=True)

    finish_reason: str | None = Field(None, description="Why generation stopped")
    native_finish_reason: str | None = Field(None, description="Provider finish reason")
    message: Message = Field(..., description="Generated message")


class Response(BaseModel):
    """A decoded chat-completion response.

    Attributes:
        choices: Completion choices, more than one when ``n`` > 1
        created: Unix timestamp (seconds) of creation
        id: Response identifier
        model: Model used for the completion
        provider: Provider that fulfilled the request
        usage: Token usage statistics
    """

    model_config = ConfigDict(frozen=True)

    choices: tuple[Choice, ...] = Field(..., description="Completion choices")
    created: int | None = Field(None, description="Unix timestamp of creation")
    id: str | None = Field(None, description="Response identifier")
    model: str | None = Field(None, description="Model used for the completion")
    provider: str | None = Field(None, description="Provider used for the completion")
    usage: Usage | None = Field(None, description="Token usage statistics")

    @property
    def first_choice(self) -> Choice | None:
        return self.choices[0] if self.choices else None


__all__ = ["Response", "Usage", "Choice", "Message", "ToolCall", "Function"]

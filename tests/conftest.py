"""Shared test fixtures."""

import json

import pytest


@pytest.fixture
def tool_call_payload() -> dict:
    """A full response body in which the model requested one tool call."""
    return {
        "id": "gen-1735600000-abc123",
        "provider": "OpenAI",
        "model": "openai/gpt-4o",
        "created": 1735600000,
        "choices": [
            {
                "finish_reason": "tool_calls",
                "native_finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "index": 0,
                            "id": "call_weather_1",
                            "type": "function",
                            "function": {
                                "name": "get_weather",
                                "arguments": "{\"city\":\"Paris\",\"unit\":\"celsius\"}",
                            },
                        }
                    ],
                },
            }
        ],
        "usage": {"prompt_tokens": 82, "completion_tokens": 18, "total_tokens": 100},
    }


@pytest.fixture
def encode():
    """Serialize a payload dict into a response body."""

    def _encode(payload: dict) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _encode

"""Tool descriptors advertised to the MCP host."""

from __future__ import annotations

from typing import get_args

from mcp import types

from openai_mcp.tools.schemas import SupportedModel

OPENAI_CHAT_TOOL = "openai_chat"

SUPPORTED_MODELS: tuple[str, ...] = get_args(SupportedModel)
DEFAULT_MODEL = "gpt-4o"

_MODEL_LIST = ", ".join(SUPPORTED_MODELS)

OPENAI_CHAT_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "messages": {
            "type": "array",
            "description": "Array of messages to send to the API",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "role": {
                        "type": "string",
                        "enum": ["system", "user", "assistant"],
                        "description": "Role of the message sender",
                    },
                    "content": {
                        "type": "string",
                        "description": "Content of the message",
                    },
                },
                "required": ["role", "content"],
                "additionalProperties": False,
            },
        },
        "model": {
            "type": "string",
            "enum": list(SUPPORTED_MODELS),
            "description": f"Model to use for completion ({_MODEL_LIST})",
            "default": DEFAULT_MODEL,
        },
    },
    "required": ["messages"],
    "additionalProperties": False,
}

TOOLS: tuple[types.Tool, ...] = (
    types.Tool(
        name=OPENAI_CHAT_TOOL,
        description=(
            "Use this tool when a user specifically requests to use one of OpenAI's "
            f"models ({_MODEL_LIST}). This tool sends messages to OpenAI's chat "
            "completion API using the specified model."
        ),
        inputSchema=OPENAI_CHAT_INPUT_SCHEMA,
    ),
)


def list_tools() -> list[types.Tool]:
    # Deep copies keep the module-level descriptors untouched by callers.
    return [tool.model_copy(deep=True) for tool in TOOLS]


def is_supported_model(model: object) -> bool:
    return isinstance(model, str) and model in SUPPORTED_MODELS

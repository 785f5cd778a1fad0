"""Tooling layer for schema-validated OpenAI chat invocation."""

from openai_mcp.tools.gateway import ToolGateway
from openai_mcp.tools.llm import (
    ChatCompletionError,
    ChatCompletionsClient,
    MissingCredentialError,
    OpenAIChatCompletionsClient,
)
from openai_mcp.tools.registry import (
    DEFAULT_MODEL,
    OPENAI_CHAT_TOOL,
    SUPPORTED_MODELS,
    TOOLS,
    list_tools,
)

__all__ = [
    "ChatCompletionError",
    "ChatCompletionsClient",
    "DEFAULT_MODEL",
    "MissingCredentialError",
    "OPENAI_CHAT_TOOL",
    "OpenAIChatCompletionsClient",
    "SUPPORTED_MODELS",
    "TOOLS",
    "ToolGateway",
    "list_tools",
]
